"""Operation table parser.

Parses a statically declared YAML or JSON descriptor table into
ModuleDescriptor models:

    modules:
      - name: HelloworldController
        namespace: demo.HelloworldController
        base_path: /helloworld          # optional, string or list
        operations:
          - name: simpleChat
            method: GET
            path: /simple/chat
            returns: string
            parameters:
              - name: query
                type: string
                markers: [Nullable]     # or optional: true
"""

from pathlib import Path

import yaml

from .base import (
    HttpMethod,
    ModuleDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
    TypeTag,
    is_optional_from_markers,
)

# Source-language spellings accepted besides the tag values themselves.
TYPE_ALIASES = {
    "str": TypeTag.STRING,
    "String": TypeTag.STRING,
    "int": TypeTag.INTEGER,
    "Integer": TypeTag.INTEGER,
    "Long": TypeTag.LONG,
    "Float": TypeTag.FLOAT,
    "Double": TypeTag.DOUBLE,
    "bool": TypeTag.BOOLEAN,
    "Boolean": TypeTag.BOOLEAN,
    "list": TypeTag.ARRAY,
    "tuple": TypeTag.ARRAY,
    "dict": TypeTag.MAP,
    "Map": TypeTag.MAP,
    "None": TypeTag.VOID,
}


def parse_table(file_path: Path) -> list[ModuleDescriptor]:
    """Parse a YAML/JSON operation table file into a list of ModuleDescriptor."""
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text) or {}
    return parse_table_data(doc)


def parse_table_data(doc: dict) -> list[ModuleDescriptor]:
    return [_parse_module(m) for m in doc.get("modules", [])]


def type_tag_for(type_name) -> TypeTag:
    """Map a declared type name to a TypeTag; unknown names are objects."""
    if not type_name:
        return TypeTag.OBJECT
    type_name = str(type_name)
    if type_name in TYPE_ALIASES:
        return TYPE_ALIASES[type_name]
    try:
        return TypeTag(type_name.lower())
    except ValueError:
        return TypeTag.OBJECT


def _parse_module(data: dict) -> ModuleDescriptor:
    base_paths = data.get("base_path", [])
    if isinstance(base_paths, str):
        base_paths = [base_paths]

    name = data["name"]
    return ModuleDescriptor(
        name=name,
        namespace=data.get("namespace", name),
        base_paths=base_paths,
        description=data.get("description", ""),
        operations=[_parse_operation(op) for op in data.get("operations", [])],
    )


def _parse_method(method) -> HttpMethod | None:
    """Unrecognized methods (PATCH, HEAD, ...) count as no mapping metadata."""
    if not method:
        return None
    try:
        return HttpMethod(str(method).upper())
    except ValueError:
        return None


def _parse_operation(data: dict) -> OperationDescriptor:
    return OperationDescriptor(
        name=data["name"],
        http_method=_parse_method(data.get("method")),
        path=data.get("path"),
        parameters=[_parse_parameter(p) for p in data.get("parameters", [])],
        return_type_tag=type_tag_for(data.get("returns")),
        description=data.get("description", ""),
    )


def _parse_parameter(data: dict) -> ParameterDescriptor:
    declared = data.get("type", "object")
    if "optional" in data:
        optional = bool(data["optional"])
    else:
        optional = is_optional_from_markers(data.get("markers", []))

    return ParameterDescriptor(
        name=data["name"],
        type_tag=type_tag_for(declared),
        type_name=str(data.get("type_name", declared)),
        is_optional=optional,
    )
