"""Runtime settings, read from the environment."""

import os

from pydantic import BaseModel

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class Settings(BaseModel):
    version: str = "1.0.0"
    base_url: str = "http://localhost:8080"
    namespace_prefix: str = "api_schema_doc.controllers."
    model: str = DEFAULT_MODEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            version=os.getenv("APIDOC_VERSION", "1.0.0"),
            base_url=os.getenv("APIDOC_BASE_URL", "http://localhost:8080"),
            namespace_prefix=os.getenv("APIDOC_NAMESPACE_PREFIX", "api_schema_doc.controllers."),
            model=os.getenv("APIDOC_MODEL", DEFAULT_MODEL),
        )
