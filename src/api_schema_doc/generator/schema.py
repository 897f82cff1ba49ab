"""Parameter schema and example generation for a single operation."""

import logging

from api_schema_doc.errors import OperationNotFoundError
from api_schema_doc.generator.documents import SchemaDocument
from api_schema_doc.generator.example import example_for
from api_schema_doc.generator.mapper import map_type
from api_schema_doc.parser.base import ModuleDescriptor, OperationDescriptor
from api_schema_doc.parser.catalog import Catalog

logger = logging.getLogger(__name__)


def generate_schema(operation: OperationDescriptor) -> SchemaDocument:
    """Build the JSON-Schema document of an operation's parameters.

    ``properties`` follow parameter order. ``required`` lists the
    non-optional names in the same order and is left out entirely when
    there are none.
    """
    properties = {}
    required = []
    for param in operation.parameters:
        properties[param.name] = map_type(param.type_tag, param.name, param.type_name or None)
        if not param.is_optional:
            required.append(param.name)

    return SchemaDocument(
        title=f"{operation.name} parameter schema",
        description=f"Generated JSON Schema for the parameters of {operation.name}",
        properties=properties,
        required=required or None,
    )


def generate_example(operation: OperationDescriptor) -> dict:
    """Build an example request payload, one canonical value per parameter."""
    return {param.name: example_for(param.type_tag) for param in operation.parameters}


def resolve(module: ModuleDescriptor, operation_name: str) -> OperationDescriptor:
    """Find an operation by name. With overloads the first declared one wins."""
    for operation in module.operations:
        if operation.name == operation_name:
            return operation
    raise OperationNotFoundError(operation_name, module.namespace)


def resolve_operation(namespace: str, operation_name: str, catalog: Catalog | None = None) -> OperationDescriptor:
    catalog = catalog or Catalog()
    module = catalog.find_module(namespace)
    operation = resolve(module, operation_name)
    logger.debug("Resolved %s.%s", module.namespace, operation.name)
    return operation


def describe_operation(namespace: str, operation_name: str, catalog: Catalog | None = None) -> dict:
    """Schema and example of one operation in a single document."""
    operation = resolve_operation(namespace, operation_name, catalog)
    return {
        "methodName": operation_name,
        "className": namespace,
        "schema": generate_schema(operation).to_dict(),
        "example": generate_example(operation),
    }
