"""Tests for the chat completions client."""

import json
import logging

import pytest

from conftest import make_response, sent_json, sent_url
from openai_tools.chat.request import ChatCompletion, ChatCompletionRequest
from openai_tools.common.errors import MissingConfigurationError, RemoteError, ResponseShapeError
from openai_tools.common.message import Message
from openai_tools.common.models import ChatModel
from openai_tools.common.parameters import ParameterProperty, Parameters
from openai_tools.common.role import Role
from openai_tools.common.structured_output import Schema
from openai_tools.common.tool import function_tool

COMPLETION = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4o-mini",
    "choices": [{
        "index": 0,
        "message": {"role": "assistant", "content": "Hello! How can I help?"},
        "finish_reason": "stop",
    }],
    "usage": {"prompt_tokens": 9, "completion_tokens": 6, "total_tokens": 15},
    "some_future_field": {"ignored": True},
}


def user(text):
    return Message.from_string(Role.USER, text)


def test_plain_chat(api_key, mock_request):
    mock_request.return_value = make_response(COMPLETION)

    response = ChatCompletion().chat(ChatCompletionRequest(
        model=ChatModel.GPT_4O_MINI,
        messages=[user("Hi")],
        temperature=0.2,
    ))

    assert sent_url(mock_request) == "https://api.openai.com/v1/chat/completions"
    assert sent_json(mock_request) == {
        "model": "gpt-4o-mini",
        "messages": [{"role": "user", "content": "Hi"}],
        "temperature": 0.2,
    }
    assert response.first_content() == "Hello! How can I help?"
    assert response.usage.total_tokens == 15


def test_empty_messages_rejected_locally(api_key, mock_request):
    with pytest.raises(MissingConfigurationError):
        ChatCompletion().chat(ChatCompletionRequest())
    mock_request.assert_not_called()


def test_custom_model_id(api_key, mock_request):
    mock_request.return_value = make_response(COMPLETION)
    ChatCompletion().chat(ChatCompletionRequest(model="ft:gpt-4o-mini:acme::1", messages=[user("x")]))
    assert sent_json(mock_request)["model"] == "ft:gpt-4o-mini:acme::1"


def test_reasoning_model_drops_sampling_parameters(api_key, mock_request, caplog):
    mock_request.return_value = make_response(COMPLETION)
    with caplog.at_level(logging.WARNING, logger="openai_tools"):
        ChatCompletion().chat(ChatCompletionRequest(
            model=ChatModel.O3_MINI,
            messages=[user("x")],
            temperature=0.5,
            max_completion_tokens=100,
        ))
    payload = sent_json(mock_request)
    assert "temperature" not in payload
    assert payload["max_completion_tokens"] == 100
    assert "temperature" in caplog.text


def test_structured_output_and_tools(api_key, mock_request):
    mock_request.return_value = make_response(COMPLETION)
    schema = Schema.chat_json_schema("answer").add_property("city", "string")
    tool = function_tool("lookup", "Look up a city",
                         Parameters.new([("name", ParameterProperty.from_string())]))

    ChatCompletion().chat(ChatCompletionRequest(
        messages=[user("x")], response_format=schema, tools=[tool],
    ))

    payload = sent_json(mock_request)
    assert payload["response_format"]["type"] == "json_schema"
    assert payload["response_format"]["json_schema"]["name"] == "answer"
    assert payload["tools"][0]["type"] == "function"
    assert payload["tools"][0]["function"]["name"] == "lookup"


def test_tool_call_response(api_key, mock_request):
    body = json.loads(json.dumps(COMPLETION))
    body["choices"][0]["message"] = {
        "role": "assistant",
        "content": None,
        "tool_calls": [{
            "id": "call_1",
            "type": "function",
            "function": {"name": "lookup", "arguments": '{"name": "Paris"}'},
        }],
    }
    body["choices"][0]["finish_reason"] = "tool_calls"
    mock_request.return_value = make_response(body)

    response = ChatCompletion().chat(ChatCompletionRequest(messages=[user("x")]))

    call = response.choices[0].message.tool_calls[0]
    assert call.function.arguments == {"name": "Paris"}
    assert response.first_content() is None


def test_remote_error(api_key, mock_request):
    mock_request.return_value = make_response(
        {"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}},
        status=429,
    )
    with pytest.raises(RemoteError) as exc_info:
        ChatCompletion().chat(ChatCompletionRequest(messages=[user("x")]))
    assert exc_info.value.status == 429


def test_malformed_body(api_key, mock_request):
    mock_request.return_value = make_response({"id": "x"})
    with pytest.raises(ResponseShapeError):
        ChatCompletion().chat(ChatCompletionRequest(messages=[user("x")]))
