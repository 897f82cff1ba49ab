"""Unified data models for discovered operations.

All discovery collaborators (Python class scanning, descriptor tables)
convert their input into these standard models for downstream processing.
The generators only ever read them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TypeTag(str, Enum):
    """Closed classification of a parameter or return type."""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    ARRAY = "array"
    MAP = "map"
    OBJECT = "object"
    VOID = "void"  # return types only


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def is_optional_from_markers(markers: list[str]) -> bool:
    """Decide optionality from a parameter's marker class names.

    Only the first marker is inspected: a later ``Nullable`` after some
    other marker leaves the parameter required.
    """
    return bool(markers) and "Nullable" in markers[0]


class ParameterDescriptor(BaseModel):
    """A single operation parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_tag: TypeTag
    type_name: str = ""  # source-level simple type name, e.g. "str" or "Long"
    is_optional: bool = False


class OperationDescriptor(BaseModel):
    """A single documented callable with its HTTP metadata."""

    model_config = ConfigDict(frozen=True)

    name: str
    http_method: HttpMethod | None = None  # None: no mapping metadata
    path: str | None = None
    parameters: list[ParameterDescriptor] = []
    return_type_tag: TypeTag = TypeTag.OBJECT
    description: str = ""


class ModuleDescriptor(BaseModel):
    """A named grouping of operations, documented as one API document."""

    model_config = ConfigDict(frozen=True)

    name: str  # HelloworldController
    namespace: str  # api_schema_doc.controllers.HelloworldController
    base_paths: list[str] = []  # declared base-path values, in order
    description: str = ""
    operations: list[OperationDescriptor] = []
