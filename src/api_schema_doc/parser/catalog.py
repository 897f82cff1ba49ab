"""Namespace -> ModuleDescriptor lookup."""

import logging

from api_schema_doc.errors import NamespaceNotFoundError
from api_schema_doc.parser.base import ModuleDescriptor
from api_schema_doc.parser.introspect import load_namespace

logger = logging.getLogger(__name__)


class Catalog:
    """Registered modules, found by full namespace or simple name.

    Namespaces that were not registered are imported and scanned when
    ``discover`` is enabled. Registered descriptors are never modified.
    """

    def __init__(self, modules: list[ModuleDescriptor] | None = None, discover: bool = True):
        self.discover = discover
        self._modules: dict[str, ModuleDescriptor] = {}
        for module in modules or []:
            self.register(module)

    def register(self, module: ModuleDescriptor) -> None:
        self._modules[module.namespace] = module

    @property
    def modules(self) -> list[ModuleDescriptor]:
        return list(self._modules.values())

    def find_module(self, namespace: str) -> ModuleDescriptor:
        if namespace in self._modules:
            return self._modules[namespace]
        for module in self._modules.values():
            if module.name == namespace:
                return module
        if not self.discover:
            raise NamespaceNotFoundError(namespace)
        logger.debug("Discovering %s by import", namespace)
        return load_namespace(namespace)
