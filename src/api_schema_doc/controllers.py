"""Demo modules, declared with the mapping decorators.

The schema and document controllers delegate to ``service`` and can
document themselves like any other module.
"""

from typing import Annotated

from api_schema_doc import service
from api_schema_doc.config import Settings
from api_schema_doc.llm import LlmClient
from api_schema_doc.parser.annotations import Param, get_mapping, request_mapping
from api_schema_doc.parser.catalog import Catalog
from api_schema_doc.tools import CHAT_TOOLS

HELLOWORLD_NAMESPACE = f"{__name__}.HelloworldController"
SIMPLE_CHAT = "simpleChat"

CHAT_SYSTEM_PROMPT = """You are a friendly chat assistant. Answer briefly.
Call a tool when the answer depends on the current date or time."""


@request_mapping("/helloworld")
class HelloworldController:
    """Chat controller."""

    def __init__(self, client: LlmClient | None = None, settings: Settings | None = None):
        settings = settings or Settings.from_env()
        self.client = client or LlmClient(model=settings.model)

    @get_mapping("/simple/chat", name=SIMPLE_CHAT, description="Simple chat endpoint")
    def simple_chat(self, query: Annotated[str, Param("User query")]) -> str:
        return self.client.call(system=CHAT_SYSTEM_PROMPT, user=query, tools=CHAT_TOOLS)


@request_mapping("/schema")
class SchemaController:
    """JSON Schema generation controller."""

    def __init__(self, catalog: Catalog | None = None):
        self.catalog = catalog or Catalog()

    @get_mapping("/generate", name="generateSchema")
    def generate(self, class_name: str, method_name: str) -> str:
        return service.schema_json(class_name, method_name, self.catalog)

    @get_mapping("/simplechat", name="generateSimpleChatSchema")
    def simple_chat_schema(self) -> str:
        return service.schema_json(
            HELLOWORLD_NAMESPACE, SIMPLE_CHAT, self.catalog,
            label="Failed to generate simpleChat schema",
        )

    @get_mapping("/simplechat/example", name="generateSimpleChatExample")
    def simple_chat_example(self) -> str:
        return service.example_json(
            HELLOWORLD_NAMESPACE, SIMPLE_CHAT, self.catalog,
            label="Failed to generate simpleChat example",
        )

    @get_mapping("/complete", name="getCompleteMethodInfo")
    def complete(self, class_name: str, method_name: str) -> str:
        return service.complete_json(class_name, method_name, self.catalog)


@request_mapping("/api-docs")
class ApiDocController:
    """API documentation controller."""

    def __init__(self, catalog: Catalog | None = None, settings: Settings | None = None):
        self.catalog = catalog or Catalog()
        self.settings = settings or Settings.from_env()

    @get_mapping("/helloworld", name="generateHelloworldApiDoc")
    def helloworld(self) -> str:
        return service.api_doc_json(HELLOWORLD_NAMESPACE, self.catalog, self.settings)

    @get_mapping("/controller/{className}", name="generateControllerApiDoc")
    def controller(self, class_name: str) -> str:
        return service.module_doc_json(class_name, self.catalog, self.settings)

    @get_mapping("/index", name="generateApiDocIndex")
    def index(self) -> str:
        return service.index_json(self.settings)
