"""Discover operations by scanning decorated Python classes.

This is the only place where Python type annotations are inspected. The
generators receive the resulting descriptors as plain data.
"""

import importlib
import inspect
import logging
import types
import typing
from collections.abc import Mapping, Sequence, Set

from api_schema_doc.errors import NamespaceNotFoundError
from api_schema_doc.parser.annotations import BASE_PATHS_ATTR, MAPPING_ATTR, Float, Long
from api_schema_doc.parser.base import (
    ModuleDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
    TypeTag,
    is_optional_from_markers,
)

logger = logging.getLogger(__name__)

# Checked by identity: bool is a subclass of int.
_SCALAR_TAGS = {
    str: TypeTag.STRING,
    bool: TypeTag.BOOLEAN,
    int: TypeTag.INTEGER,
    float: TypeTag.DOUBLE,
    Long: TypeTag.LONG,
    Float: TypeTag.FLOAT,
}

_ARRAY_TYPES = (list, tuple, set, frozenset)


def _type_name(annotation) -> str:
    name = getattr(annotation, "__name__", None)
    if name is None:
        name = getattr(typing.get_origin(annotation), "__name__", None)
    return name or repr(annotation)


def _split_annotated(annotation) -> tuple[object, list[str]]:
    """Return the bare type and the class names of its Annotated markers."""
    if typing.get_origin(annotation) is not typing.Annotated:
        return annotation, []
    base, *metadata = typing.get_args(annotation)
    markers = [m.__name__ if isinstance(m, type) else type(m).__name__ for m in metadata]
    return base, markers


def _unwrap_optional(annotation):
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def classify(annotation) -> tuple[TypeTag, str]:
    """Classify an annotation into a TypeTag and a display type name.

    ``Optional[T]`` classifies as ``T``: only a Nullable marker makes a
    parameter optional. Anything unrecognised is an object.
    """
    annotation, _ = _split_annotated(annotation)
    annotation, _ = _split_annotated(_unwrap_optional(annotation))

    if annotation is inspect.Parameter.empty:
        return TypeTag.OBJECT, "object"
    if annotation is None or annotation is type(None):
        return TypeTag.VOID, "None"

    for known, tag in _SCALAR_TAGS.items():
        if annotation is known:
            return tag, _type_name(annotation)

    origin = typing.get_origin(annotation) or annotation
    if isinstance(origin, type):
        if issubclass(origin, _ARRAY_TYPES) or (
            issubclass(origin, (Sequence, Set)) and not issubclass(origin, (str, bytes))
        ):
            return TypeTag.ARRAY, _type_name(annotation)
        if issubclass(origin, Mapping):
            return TypeTag.MAP, _type_name(annotation)
    return TypeTag.OBJECT, _type_name(annotation)


def describe_parameter(name: str, annotation) -> ParameterDescriptor:
    # Python 3.10 get_type_hints wraps a None default as Optional[Annotated[...]].
    base, markers = _split_annotated(_unwrap_optional(annotation))
    tag, type_name = classify(base)
    return ParameterDescriptor(
        name=name,
        type_tag=tag,
        type_name=type_name,
        is_optional=is_optional_from_markers(markers),
    )


def describe_function(func, bound: bool = True) -> OperationDescriptor:
    """Build the descriptor of one function. ``bound`` skips the first parameter."""
    signature = inspect.signature(func)
    hints = typing.get_type_hints(func, include_extras=True)
    mapping = getattr(func, MAPPING_ATTR, {})

    params = list(signature.parameters.values())
    if bound and params:
        params = params[1:]

    parameters = [
        describe_parameter(p.name, hints.get(p.name, p.annotation))
        for p in params
        if p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    ]
    return_tag, _ = classify(hints.get("return", signature.return_annotation))

    return OperationDescriptor(
        name=mapping.get("name") or func.__name__,
        http_method=mapping.get("http_method"),
        path=mapping.get("path"),
        parameters=parameters,
        return_type_tag=return_tag,
        description=mapping.get("description", ""),
    )


def scan_class(cls) -> ModuleDescriptor:
    """Describe every public function declared directly on ``cls``.

    Declaration order is kept. Inherited members and base paths are not
    considered.
    """
    operations = []
    for attr, member in vars(cls).items():
        if attr.startswith("_"):
            continue
        if isinstance(member, staticmethod):
            operations.append(describe_function(member.__func__, bound=False))
        elif isinstance(member, classmethod):
            operations.append(describe_function(member.__func__))
        elif inspect.isfunction(member):
            operations.append(describe_function(member))

    doc = inspect.getdoc(cls) or ""
    module = ModuleDescriptor(
        name=cls.__name__,
        namespace=f"{cls.__module__}.{cls.__qualname__}",
        base_paths=list(vars(cls).get(BASE_PATHS_ATTR, ())),
        description=doc.split("\n")[0],
        operations=operations,
    )
    logger.debug("Scanned %s: %d operations", module.namespace, len(operations))
    return module


def load_namespace(namespace: str) -> ModuleDescriptor:
    """Import ``package.module.ClassName`` and scan the class."""
    module_name, _, class_name = namespace.rpartition(".")
    if not module_name or not class_name:
        raise NamespaceNotFoundError(namespace)
    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError):
        raise NamespaceNotFoundError(namespace) from None

    cls = getattr(module, class_name, None)
    if not inspect.isclass(cls):
        raise NamespaceNotFoundError(namespace)
    return scan_class(cls)
