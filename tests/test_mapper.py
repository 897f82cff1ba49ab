import pytest

from api_schema_doc.errors import MappingError
from api_schema_doc.generator.example import EXAMPLE_STRING, example_for
from api_schema_doc.generator.mapper import json_type, map_type
from api_schema_doc.parser.base import TypeTag


class TestMapType:
    def test_string(self):
        schema = map_type(TypeTag.STRING, "query", "str").to_dict()
        assert schema == {
            "type": "string",
            "description": "parameter: query (str)",
            "minLength": 0,
        }

    def test_integer_uses_32_bit_range(self):
        schema = map_type(TypeTag.INTEGER, "page").to_dict()
        assert schema["type"] == "integer"
        assert schema["minimum"] == -2147483648
        assert schema["maximum"] == 2147483647

    def test_long_uses_64_bit_range(self):
        schema = map_type(TypeTag.LONG, "id").to_dict()
        assert schema["type"] == "integer"
        assert schema["minimum"] == -9223372036854775808
        assert schema["maximum"] == 9223372036854775807

    @pytest.mark.parametrize("tag", [TypeTag.FLOAT, TypeTag.DOUBLE])
    def test_floating_point_uses_double_constants(self, tag):
        schema = map_type(tag, "price").to_dict()
        assert schema["type"] == "number"
        assert schema["minimum"] == 5e-324
        assert schema["maximum"] == 1.7976931348623157e308

    @pytest.mark.parametrize("tag,expected", [
        (TypeTag.BOOLEAN, "boolean"),
        (TypeTag.ARRAY, "array"),
        (TypeTag.MAP, "object"),
        (TypeTag.OBJECT, "object"),
        (TypeTag.VOID, "object"),
    ])
    def test_types_without_bounds(self, tag, expected):
        schema = map_type(tag, "value").to_dict()
        assert schema["type"] == expected
        assert "minimum" not in schema
        assert "maximum" not in schema
        assert "minLength" not in schema

    def test_description_defaults_to_tag(self):
        schema = map_type(TypeTag.ARRAY, "tags")
        assert schema.description == "parameter: tags (array)"

    def test_accepts_tag_value_string(self):
        assert map_type("boolean", "flag").type == "boolean"

    def test_unknown_tag_raises(self):
        with pytest.raises(MappingError, match="Unsupported type tag"):
            map_type("decimal", "amount")

    def test_deterministic(self):
        assert map_type(TypeTag.LONG, "id").to_json() == map_type(TypeTag.LONG, "id").to_json()


class TestJsonType:
    def test_every_tag_is_mapped(self):
        for tag in TypeTag:
            assert json_type(tag) in {"string", "integer", "number", "boolean", "array", "object"}


class TestExampleFor:
    @pytest.mark.parametrize("tag,expected", [
        (TypeTag.STRING, EXAMPLE_STRING),
        (TypeTag.INTEGER, 123),
        (TypeTag.LONG, 123),
        (TypeTag.DOUBLE, 123.45),
        (TypeTag.FLOAT, 123.45),
        (TypeTag.BOOLEAN, True),
        (TypeTag.ARRAY, []),
        (TypeTag.MAP, {}),
        (TypeTag.OBJECT, {}),
    ])
    def test_canonical_values(self, tag, expected):
        assert example_for(tag) == expected

    def test_string_placeholder_is_constant(self):
        assert example_for(TypeTag.STRING) == "example string"
        assert example_for("string") == example_for(TypeTag.STRING)

    def test_containers_are_fresh(self):
        first = example_for(TypeTag.ARRAY)
        first.append(1)
        assert example_for(TypeTag.ARRAY) == []
        assert example_for(TypeTag.MAP) is not example_for(TypeTag.MAP)

    def test_unknown_tag_raises(self):
        with pytest.raises(MappingError):
            example_for("decimal")
