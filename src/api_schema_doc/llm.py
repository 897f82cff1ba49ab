"""Chat completions through litellm, with optional function calling.

Backs the demo chat operation; schema and document generation never call it.
"""

import logging

from litellm import completion

from api_schema_doc.config import DEFAULT_MODEL
from api_schema_doc.tools import run_tool_call, tool_definition

logger = logging.getLogger(__name__)

MAX_TOOL_ROUNDS = 5


def _assistant_message(message) -> dict:
    return {
        "role": "assistant",
        "content": message.content,
        "tool_calls": [
            {
                "id": call.id,
                "type": "function",
                "function": {"name": call.function.name, "arguments": call.function.arguments},
            }
            for call in message.tool_calls
        ],
    }


class LlmClient:
    """Chat model client.

    ``call`` sends one system and one user message. When tools are given,
    the model may call them; each tool result is fed back until the model
    answers in plain text or ``MAX_TOOL_ROUNDS`` is reached, after which one
    last request is made without tools.
    """

    def __init__(self, model: str | None = None):
        self.model = model or DEFAULT_MODEL

    def call(self, system: str, user: str, tools: list | None = None) -> str:
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        if not tools:
            return self._complete(messages).content

        registry = {func.__name__: func for func in tools}
        definitions = [tool_definition(func) for func in tools]
        for _ in range(MAX_TOOL_ROUNDS):
            message = self._complete(messages, tools=definitions)
            if not message.tool_calls:
                return message.content
            messages.append(_assistant_message(message))
            messages.extend(run_tool_call(registry, call) for call in message.tool_calls)

        logger.warning("Model still calling tools after %d rounds", MAX_TOOL_ROUNDS)
        return self._complete(messages).content

    def _complete(self, messages: list[dict], **kwargs):
        response = completion(model=self.model, messages=messages, **kwargs)
        return response.choices[0].message
