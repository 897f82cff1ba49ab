"""Public entry points. Every function returns a string.

On success the string is a pretty-printed JSON document; on failure it is
a diagnostic ``"<label>: <message>"``. Errors never propagate to callers.
"""

import logging

from api_schema_doc.config import Settings
from api_schema_doc.errors import ApiDocError, NamespaceNotFoundError
from api_schema_doc.generator.document import ApiDocumentGenerator
from api_schema_doc.generator.documents import render_json
from api_schema_doc.generator.index import build_index
from api_schema_doc.generator.schema import (
    describe_operation,
    generate_example,
    generate_schema,
    resolve_operation,
)
from api_schema_doc.parser.catalog import Catalog

logger = logging.getLogger(__name__)

SCHEMA_FAILURE = "Failed to generate schema"
EXAMPLE_FAILURE = "Failed to generate example"
COMPLETE_FAILURE = "Failed to get operation info"
API_DOC_FAILURE = "Failed to generate API document"
INDEX_FAILURE = "Failed to generate API document index"
MODULE_NOT_FOUND = "Module not found"


def diagnostic(label: str, exc: Exception) -> str:
    """Log ``exc`` and turn it into a diagnostic string. Call from an except block."""
    if isinstance(exc, ApiDocError):
        logger.warning("%s: %s", label, exc)
    else:
        logger.exception(label)
    return f"{label}: {exc}"


def schema_json(namespace: str, operation_name: str, catalog: Catalog | None = None,
                label: str = SCHEMA_FAILURE) -> str:
    try:
        operation = resolve_operation(namespace, operation_name, catalog)
        return generate_schema(operation).to_json()
    except Exception as e:
        return diagnostic(label, e)


def example_json(namespace: str, operation_name: str, catalog: Catalog | None = None,
                 label: str = EXAMPLE_FAILURE) -> str:
    try:
        operation = resolve_operation(namespace, operation_name, catalog)
        return render_json(generate_example(operation))
    except Exception as e:
        return diagnostic(label, e)


def complete_json(namespace: str, operation_name: str, catalog: Catalog | None = None) -> str:
    try:
        return render_json(describe_operation(namespace, operation_name, catalog))
    except Exception as e:
        return diagnostic(COMPLETE_FAILURE, e)


def api_doc_json(namespace: str, catalog: Catalog | None = None, settings: Settings | None = None,
                 name: str | None = None) -> str:
    """Document the module at ``namespace``. ``name`` is what a not-found message reports."""
    catalog = catalog or Catalog()
    try:
        module = catalog.find_module(namespace)
    except NamespaceNotFoundError as e:
        logger.warning("%s", e)
        return f"{MODULE_NOT_FOUND}: {name or namespace}"
    except Exception as e:
        return diagnostic(API_DOC_FAILURE, e)

    try:
        return ApiDocumentGenerator(settings or Settings.from_env()).generate(module).to_json()
    except Exception as e:
        return diagnostic(API_DOC_FAILURE, e)


def module_doc_json(class_name: str, catalog: Catalog | None = None, settings: Settings | None = None) -> str:
    """Document a module given by simple name under the configured namespace prefix."""
    settings = settings or Settings.from_env()
    return api_doc_json(settings.namespace_prefix + class_name, catalog, settings, name=class_name)


def index_json(settings: Settings | None = None) -> str:
    try:
        return build_index(settings or Settings.from_env()).to_json()
    except Exception as e:
        return diagnostic(INDEX_FAILURE, e)
