"""Type tag -> JSON-Schema property mapping.

Bounds follow the numeric widths of the source types: 32-bit and 64-bit
signed integers, and the double-precision constants for both float and
double parameters.
"""

from api_schema_doc.errors import MappingError
from api_schema_doc.generator.documents import PropertySchema
from api_schema_doc.parser.base import TypeTag

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
DOUBLE_MIN = 5e-324  # smallest positive subnormal double
DOUBLE_MAX = 1.7976931348623157e308

_JSON_TYPES = {
    TypeTag.STRING: "string",
    TypeTag.INTEGER: "integer",
    TypeTag.LONG: "integer",
    TypeTag.FLOAT: "number",
    TypeTag.DOUBLE: "number",
    TypeTag.BOOLEAN: "boolean",
    TypeTag.ARRAY: "array",
    TypeTag.MAP: "object",
}

_BOUNDS = {
    TypeTag.STRING: {"min_length": 0},
    TypeTag.INTEGER: {"minimum": INT_MIN, "maximum": INT_MAX},
    TypeTag.LONG: {"minimum": LONG_MIN, "maximum": LONG_MAX},
    TypeTag.FLOAT: {"minimum": DOUBLE_MIN, "maximum": DOUBLE_MAX},
    TypeTag.DOUBLE: {"minimum": DOUBLE_MIN, "maximum": DOUBLE_MAX},
}


def coerce_tag(value) -> TypeTag:
    """Accept a TypeTag or its string value; anything else is a MappingError."""
    if isinstance(value, TypeTag):
        return value
    try:
        return TypeTag(value)
    except ValueError:
        raise MappingError(value) from None


def json_type(type_tag) -> str:
    """JSON-Schema type name for a tag. Unlisted tags fall back to object."""
    return _JSON_TYPES.get(coerce_tag(type_tag), "object")


def map_type(type_tag, name: str, type_name: str | None = None) -> PropertySchema:
    """Build the property schema for one parameter."""
    tag = coerce_tag(type_tag)
    return PropertySchema(
        type=json_type(tag),
        description=f"parameter: {name} ({type_name or tag.value})",
        **_BOUNDS.get(tag, {}),
    )
