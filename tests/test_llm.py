from datetime import datetime
from types import SimpleNamespace
from unittest.mock import patch

from api_schema_doc.config import DEFAULT_MODEL
from api_schema_doc.llm import MAX_TOOL_ROUNDS, LlmClient
from api_schema_doc.tools import current_date_time, tool_definition


def _reply(content=None, tool_calls=None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _tool_call(name, arguments="{}", call_id="call_1"):
    return SimpleNamespace(id=call_id, function=SimpleNamespace(name=name, arguments=arguments))


def add(a: int, b: int) -> int:
    """Add two integers."""
    return a + b


class TestLlmClient:
    def test_model_defaults_to_configured(self):
        assert LlmClient().model == DEFAULT_MODEL
        assert LlmClient(model="gpt-4o").model == "gpt-4o"

    @patch("api_schema_doc.llm.completion")
    def test_plain_chat_sends_no_tools(self, mock_completion):
        mock_completion.return_value = _reply("pong")

        assert LlmClient(model="gpt-4o").call(system="sys", user="ping") == "pong"
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
        assert "tools" not in kwargs


class TestToolDefinition:
    def test_no_argument_tool(self):
        definition = tool_definition(current_date_time)
        assert definition["type"] == "function"
        function = definition["function"]
        assert function["name"] == "current_date_time"
        assert function["description"] == "Get the current local date and time."
        assert function["parameters"] == {"type": "object", "properties": {}, "required": []}

    def test_parameters_use_type_mapping(self):
        parameters = tool_definition(add)["function"]["parameters"]
        assert parameters["required"] == ["a", "b"]
        assert parameters["properties"]["a"]["type"] == "integer"
        assert parameters["properties"]["a"]["description"] == "parameter: a (int)"


class TestToolCalls:
    @patch("api_schema_doc.llm.completion")
    def test_date_time_exchange(self, mock_completion):
        mock_completion.side_effect = [
            _reply(tool_calls=[_tool_call("current_date_time")]),
            _reply("It is almost noon."),
        ]

        answer = LlmClient().call(system="sys", user="What time is it?", tools=[current_date_time])

        assert answer == "It is almost noon."
        assert mock_completion.call_count == 2
        first, second = mock_completion.call_args_list
        assert first.kwargs["tools"] == [tool_definition(current_date_time)]

        messages = second.kwargs["messages"]
        assert [m["role"] for m in messages] == ["system", "user", "assistant", "tool"]
        assert messages[2]["tool_calls"][0]["id"] == "call_1"
        assert messages[2]["tool_calls"][0]["function"]["name"] == "current_date_time"
        assert messages[3]["tool_call_id"] == "call_1"
        assert datetime.fromisoformat(messages[3]["content"]).tzinfo is not None

    @patch("api_schema_doc.llm.completion")
    def test_arguments_are_passed(self, mock_completion):
        mock_completion.side_effect = [
            _reply(tool_calls=[_tool_call("add", '{"a": 2, "b": 3}')]),
            _reply("5"),
        ]

        LlmClient().call(system="sys", user="2+3?", tools=[add])
        assert mock_completion.call_args.kwargs["messages"][-1]["content"] == "5"

    @patch("api_schema_doc.llm.completion")
    def test_unknown_tool_reported_to_model(self, mock_completion):
        mock_completion.side_effect = [
            _reply(tool_calls=[_tool_call("launch_rocket")]),
            _reply("I cannot do that."),
        ]

        LlmClient().call(system="sys", user="go", tools=[add])
        assert mock_completion.call_args.kwargs["messages"][-1]["content"] == "Unknown tool: launch_rocket"

    @patch("api_schema_doc.llm.completion")
    def test_malformed_arguments_reported_to_model(self, mock_completion):
        mock_completion.side_effect = [
            _reply(tool_calls=[_tool_call("add", "{not json")]),
            _reply("Sorry."),
        ]

        LlmClient().call(system="sys", user="add", tools=[add])
        content = mock_completion.call_args.kwargs["messages"][-1]["content"]
        assert content.startswith("Invalid arguments for add")

    @patch("api_schema_doc.llm.completion")
    def test_tool_rounds_are_bounded(self, mock_completion):
        looping = [_reply(tool_calls=[_tool_call("add", '{"a": 1, "b": 1}')]) for _ in range(MAX_TOOL_ROUNDS)]
        mock_completion.side_effect = looping + [_reply("gave up")]

        assert LlmClient().call(system="sys", user="loop", tools=[add]) == "gave up"
        assert mock_completion.call_count == MAX_TOOL_ROUNDS + 1
        assert "tools" not in mock_completion.call_args.kwargs

    @patch("api_schema_doc.llm.completion")
    def test_simple_chat_offers_date_time_tool(self, mock_completion):
        from api_schema_doc.controllers import HelloworldController

        mock_completion.return_value = _reply("Hello!")

        assert HelloworldController().simple_chat("hi") == "Hello!"
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["messages"][1]["content"] == "hi"
        assert kwargs["tools"][0]["function"]["name"] == "current_date_time"
