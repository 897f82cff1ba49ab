"""Decorators and markers that declare a class as a documented module.

    @request_mapping("/helloworld")
    class HelloworldController:
        @get_mapping("/simple/chat", name="simpleChat")
        def simple_chat(self, query: str) -> str: ...

Decorators only attach metadata; ``parser.introspect`` reads it back.
"""

from typing import NewType

from api_schema_doc.parser.base import HttpMethod

BASE_PATHS_ATTR = "__request_mapping__"
MAPPING_ATTR = "__http_mapping__"

# Wide integers and single-precision floats have no distinct Python type.
Long = NewType("Long", int)
Float = NewType("Float", float)


class Nullable:
    """Marks a parameter optional when used as ``Annotated[T, Nullable()]``."""

    def __repr__(self):
        return "Nullable()"


class Param:
    """Plain descriptive marker; carries no optionality."""

    def __init__(self, description: str = ""):
        self.description = description


def request_mapping(*paths: str):
    """Declare the base path(s) of a module class. The first one is used."""

    def decorator(cls):
        setattr(cls, BASE_PATHS_ATTR, tuple(paths))
        return cls

    return decorator


def _mapping(method: HttpMethod):
    def factory(path: str = "", name: str | None = None, description: str = ""):
        def decorator(func):
            setattr(func, MAPPING_ATTR, {
                "http_method": method,
                "path": path,
                "name": name,
                "description": description,
            })
            return func

        return decorator

    factory.__name__ = f"{method.value.lower()}_mapping"
    return factory


get_mapping = _mapping(HttpMethod.GET)
post_mapping = _mapping(HttpMethod.POST)
put_mapping = _mapping(HttpMethod.PUT)
delete_mapping = _mapping(HttpMethod.DELETE)
