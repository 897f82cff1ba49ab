import pytest
from pydantic import ValidationError

from api_schema_doc.parser.base import (
    HttpMethod,
    ModuleDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
    TypeTag,
    is_optional_from_markers,
)


class TestParameterDescriptor:
    def test_create_required_param(self):
        p = ParameterDescriptor(name="query", type_tag=TypeTag.STRING)
        assert p.name == "query"
        assert p.is_optional is False
        assert p.type_name == ""

    def test_type_tag_from_string(self):
        p = ParameterDescriptor(name="n", type_tag="long")
        assert p.type_tag is TypeTag.LONG

    def test_unknown_type_tag_rejected(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="n", type_tag="decimal")

    def test_descriptor_is_immutable(self):
        p = ParameterDescriptor(name="n", type_tag=TypeTag.INTEGER)
        with pytest.raises(ValidationError):
            p.name = "m"


class TestOptionalMarkers:
    def test_no_markers_means_required(self):
        assert is_optional_from_markers([]) is False

    def test_first_marker_nullable(self):
        assert is_optional_from_markers(["Nullable"]) is True

    def test_marker_name_containing_nullable(self):
        assert is_optional_from_markers(["JsonNullable", "Param"]) is True

    def test_only_first_marker_counts(self):
        assert is_optional_from_markers(["Param", "Nullable"]) is False


class TestOperationDescriptor:
    def test_create_minimal_operation(self):
        op = OperationDescriptor(name="ping")
        assert op.http_method is None
        assert op.path is None
        assert op.parameters == []
        assert op.return_type_tag is TypeTag.OBJECT

    def test_serialization_roundtrip(self):
        op = OperationDescriptor(
            name="simpleChat",
            http_method=HttpMethod.GET,
            path="/simple/chat",
            parameters=[ParameterDescriptor(name="query", type_tag=TypeTag.STRING)],
            return_type_tag=TypeTag.STRING,
        )
        op2 = OperationDescriptor(**op.model_dump())
        assert op2 == op
        assert op2.parameters[0].name == "query"


class TestModuleDescriptor:
    def test_defaults(self):
        module = ModuleDescriptor(name="HelloworldController", namespace="demo.HelloworldController")
        assert module.base_paths == []
        assert module.operations == []
