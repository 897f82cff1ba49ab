"""Assembles one API document per module."""

import logging

from api_schema_doc.config import Settings
from api_schema_doc.generator.documents import (
    ApiDocument,
    EndpointDocument,
    PropertySchema,
    SchemaDocument,
)
from api_schema_doc.generator.schema import generate_example, generate_schema
from api_schema_doc.parser.base import ModuleDescriptor, OperationDescriptor, TypeTag

logger = logging.getLogger(__name__)

CHAT_REPLY_EXAMPLE = "Hello! I am a chat assistant, happy to help!"
SUCCESS_MESSAGE_EXAMPLE = "Operation succeeded"
TIMESTAMP_EXAMPLE = "2024-01-01T12:00:00Z"


def derive_base_path(module: ModuleDescriptor) -> str:
    """First declared base path, else ``/<name>`` lowercased minus "controller"."""
    if module.base_paths:
        return module.base_paths[0]
    return "/" + module.name.lower().replace("controller", "")


def response_schema(operation: OperationDescriptor) -> SchemaDocument:
    """Wrap the return type in the fixed success/timestamp envelope."""
    properties = {}
    if operation.return_type_tag == TypeTag.STRING:
        properties["data"] = PropertySchema(
            type="string",
            description="Chat response content",
            example=CHAT_REPLY_EXAMPLE,
        )
    elif operation.return_type_tag == TypeTag.VOID:
        properties["message"] = PropertySchema(
            type="string",
            description="Operation result message",
            example=SUCCESS_MESSAGE_EXAMPLE,
        )
    else:
        properties["data"] = PropertySchema(type="object", description="Response data object")

    properties["success"] = PropertySchema(
        type="boolean",
        description="Whether the request succeeded",
        example=True,
    )
    properties["timestamp"] = PropertySchema(
        type="string",
        format="date-time",
        description="Response timestamp",
        example=TIMESTAMP_EXAMPLE,
    )

    required = ["success", "timestamp"]
    if operation.return_type_tag == TypeTag.STRING:
        required.append("data")

    return SchemaDocument(
        title=f"{operation.name} response",
        properties=properties,
        required=required,
    )


def response_example(operation: OperationDescriptor) -> dict:
    example = {}
    if operation.return_type_tag == TypeTag.STRING:
        example["data"] = CHAT_REPLY_EXAMPLE
    elif operation.return_type_tag == TypeTag.VOID:
        example["message"] = SUCCESS_MESSAGE_EXAMPLE
    else:
        example["data"] = {"id": "123", "name": "example data"}
    example["success"] = True
    example["timestamp"] = TIMESTAMP_EXAMPLE
    return example


class ApiDocumentGenerator:
    """Builds the composite API document of a module's operations."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def generate(self, module: ModuleDescriptor) -> ApiDocument:
        """Document every operation that carries HTTP mapping metadata.

        Operations without a recognized HTTP method are skipped, not given
        a default.
        """
        base_path = derive_base_path(module)
        endpoints = [
            self._generate_endpoint(op, base_path)
            for op in module.operations
            if op.http_method is not None
        ]
        logger.debug(
            "Assembled %s: %d of %d operations documented",
            module.name, len(endpoints), len(module.operations),
        )
        return ApiDocument(
            title=f"{module.name} API Documentation",
            description="JSON Schema based API documentation",
            version=self.settings.version,
            base_path=base_path,
            endpoints=endpoints,
        )

    def _generate_endpoint(self, operation: OperationDescriptor, base_path: str) -> EndpointDocument:
        request_schema = None
        request_example = None
        if operation.parameters:
            request_schema = generate_schema(operation)
            request_example = generate_example(operation)

        return EndpointDocument(
            method_name=operation.name,
            http_method=operation.http_method.value,
            path=base_path + (operation.path or "/" + operation.name),
            description=operation.description or f"{operation.name} endpoint",
            request_schema=request_schema,
            request_example=request_example,
            response_schema=response_schema(operation),
            response_example=response_example(operation),
        )
