"""Canonical example values per type tag.

Values are fixed constants, never generated from names or randomized.
"""

from api_schema_doc.generator.mapper import coerce_tag
from api_schema_doc.parser.base import TypeTag

EXAMPLE_STRING = "example string"

_SCALARS = {
    TypeTag.STRING: EXAMPLE_STRING,
    TypeTag.INTEGER: 123,
    TypeTag.LONG: 123,
    TypeTag.DOUBLE: 123.45,
    TypeTag.FLOAT: 123.45,
    TypeTag.BOOLEAN: True,
}


def example_for(type_tag):
    """Return the example literal for a tag.

    Containers are built per call so callers may mutate them freely.
    """
    tag = coerce_tag(type_tag)
    if tag in _SCALARS:
        return _SCALARS[tag]
    if tag == TypeTag.ARRAY:
        return []
    return {}
