"""Document models produced by the generators.

Every document is built fresh per call and serialized once. Field names are
snake_case in Python and camelCase on the wire.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

JSON_SCHEMA_DRAFT_07 = "http://json-schema.org/draft-07/schema#"


def render_json(data: Any) -> str:
    """Pretty-print a JSON-compatible value with 2-space indentation."""
    return json.dumps(data, indent=2, ensure_ascii=False)


class Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return render_json(self.to_dict())


class PropertySchema(Document):
    """Schema of one property: a JSON type name plus type-specific bounds."""

    type: str
    format: str | None = None
    description: str | None = None
    min_length: int | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    example: Any = None


class SchemaDocument(Document):
    """A flat JSON-Schema object description."""

    schema_: str = Field(default=JSON_SCHEMA_DRAFT_07, alias="$schema")
    type: str = "object"
    title: str
    description: str | None = None
    properties: dict[str, PropertySchema] = {}
    required: list[str] | None = None  # omitted, never empty


class EndpointDocument(Document):
    method_name: str
    http_method: str
    path: str
    description: str
    request_schema: SchemaDocument | None = None
    request_example: dict[str, Any] | None = None
    response_schema: SchemaDocument
    response_example: dict[str, Any]


class ApiDocument(Document):
    schema_: str = Field(default=JSON_SCHEMA_DRAFT_07, alias="$schema")
    type: str = "object"
    title: str
    description: str
    version: str
    base_path: str
    endpoints: list[EndpointDocument] = []


class IndexEndpoint(Document):
    name: str
    method: str
    path: str
    description: str


class IndexModule(Document):
    name: str
    description: str
    base_path: str
    doc_url: str
    endpoints: list[IndexEndpoint] = []


class IndexDocument(Document):
    schema_: str = Field(default=JSON_SCHEMA_DRAFT_07, alias="$schema")
    type: str = "object"
    title: str
    description: str
    version: str
    base_url: str
    controllers: list[IndexModule] = []
