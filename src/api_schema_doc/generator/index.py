"""Static index of the documented modules.

The index is a fixed reference listing; it is not derived from scanning
the modules it names.
"""

from api_schema_doc.config import Settings
from api_schema_doc.generator.documents import IndexDocument, IndexEndpoint, IndexModule

INDEX_MODULES = [
    IndexModule(
        name="HelloworldController",
        description="Chat controller",
        base_path="/helloworld",
        doc_url="/api-docs/helloworld",
        endpoints=[
            IndexEndpoint(
                name="simpleChat",
                method="GET",
                path="/helloworld/simple/chat",
                description="Simple chat endpoint",
            ),
        ],
    ),
    IndexModule(
        name="SchemaController",
        description="JSON Schema generation controller",
        base_path="/schema",
        doc_url="/api-docs/schema",
        endpoints=[
            IndexEndpoint(
                name="generateSimpleChatSchema",
                method="GET",
                path="/schema/simplechat",
                description="Generate the JSON Schema of simpleChat",
            ),
            IndexEndpoint(
                name="generateSimpleChatExample",
                method="GET",
                path="/schema/simplechat/example",
                description="Generate an example request for simpleChat",
            ),
        ],
    ),
    IndexModule(
        name="ApiDocController",
        description="API documentation controller",
        base_path="/api-docs",
        doc_url="/api-docs/api-docs",
        endpoints=[
            IndexEndpoint(
                name="generateHelloworldApiDoc",
                method="GET",
                path="/api-docs/helloworld",
                description="Generate the API document of HelloworldController",
            ),
            IndexEndpoint(
                name="generateApiDocIndex",
                method="GET",
                path="/api-docs/index",
                description="Generate the API document index",
            ),
        ],
    ),
]


def build_index(settings: Settings | None = None) -> IndexDocument:
    settings = settings or Settings()
    return IndexDocument(
        title="API Documentation Index",
        description="Index of the documented API modules",
        version=settings.version,
        base_url=settings.base_url,
        controllers=[m.model_copy(deep=True) for m in INDEX_MODULES],
    )
