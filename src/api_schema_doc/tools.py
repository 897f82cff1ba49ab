"""Functions the chat model may call, and their function-calling definitions.

Parameters are described with the same type mapping as operation schemas.
"""

import inspect
import json
import logging
from datetime import datetime

from api_schema_doc.generator.mapper import map_type
from api_schema_doc.parser.introspect import describe_function

logger = logging.getLogger(__name__)


def current_date_time() -> str:
    """Get the current local date and time."""
    return datetime.now().astimezone().isoformat()


CHAT_TOOLS = [current_date_time]


def tool_definition(func) -> dict:
    """Build the OpenAI-style ``tools`` entry litellm expects for ``func``."""
    operation = describe_function(func, bound=False)
    properties = {}
    required = []
    for param in operation.parameters:
        properties[param.name] = map_type(param.type_tag, param.name, param.type_name or None).to_dict()
        if not param.is_optional:
            required.append(param.name)

    doc = inspect.getdoc(func) or ""
    return {
        "type": "function",
        "function": {
            "name": func.__name__,
            "description": doc.split("\n")[0],
            "parameters": {"type": "object", "properties": properties, "required": required},
        },
    }


def run_tool_call(tools: dict, tool_call) -> dict:
    """Execute one tool call from a model reply and build the ``tool`` message.

    Unknown tools and bad arguments are reported back to the model as the
    message content.
    """
    name = tool_call.function.name
    func = tools.get(name)
    if func is None:
        content = f"Unknown tool: {name}"
    else:
        try:
            arguments = json.loads(tool_call.function.arguments or "{}")
            content = str(func(**arguments))
        except (ValueError, TypeError) as e:
            content = f"Invalid arguments for {name}: {e}"
    logger.debug("Tool %s -> %s", name, content)
    return {"role": "tool", "tool_call_id": tool_call.id, "name": name, "content": content}
