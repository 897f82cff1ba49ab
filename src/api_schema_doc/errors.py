"""Error taxonomy for schema and document generation.

None of these cross the public entry points in ``service``: they are
caught there and turned into diagnostic strings.
"""


class ApiDocError(Exception):
    """Base class for all generation errors."""


class NamespaceNotFoundError(ApiDocError):
    """A namespace (module identifier) could not be resolved."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"Namespace not found: {namespace}")


class OperationNotFoundError(ApiDocError):
    """No operation with the given name exists in a resolved namespace."""

    def __init__(self, operation_name: str, namespace: str):
        self.operation_name = operation_name
        self.namespace = namespace
        super().__init__(f"Operation not found: {operation_name} in {namespace}")


NotFoundError = OperationNotFoundError


class MappingError(ApiDocError):
    """An unsupported type tag reached a mapper."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported type tag: {value!r}")
