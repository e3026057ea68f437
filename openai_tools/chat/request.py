"""
Chat completions request model and client.

Usage:
```python
chat = ChatCompletion()
request = ChatCompletionRequest(
    model=ChatModel.GPT_4O_MINI,
    messages=[Message.from_string(Role.USER, "Hello")],
)
response = chat.chat(request)
print(response.choices[0].message.content)
```
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from openai_tools.chat.response import ChatCompletionResponse
from openai_tools.common.client import ApiResource
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.common.message import Message
from openai_tools.common.models import ChatModel, ParameterSupport, model_id
from openai_tools.common.structured_output import Schema
from openai_tools.common.tool import Tool
from openai_tools.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

CHAT_COMPLETIONS_PATH = "chat/completions"

# Parameters reasoning models reject, in request field order
SAMPLING_PARAMETERS = (
    "frequency_penalty",
    "logit_bias",
    "logprobs",
    "top_logprobs",
    "n",
    "presence_penalty",
    "temperature",
)


class ChatCompletionRequest(BaseModel):
    """
    Request descriptor for ``POST /chat/completions``.

    ``model`` accepts a ChatModel member or any custom model id string.
    """
    model: str = ChatModel.GPT_4O_MINI.value
    messages: List[Message] = Field(default_factory=list)
    store: Optional[bool] = None
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: Optional[Dict[str, int]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)
    max_completion_tokens: Optional[int] = None
    n: Optional[int] = Field(default=None, ge=1)
    modalities: Optional[List[str]] = None
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    response_format: Optional[Schema] = None
    tools: Optional[List[Tool]] = None
    user: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v) if v is not None else v

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON body, omitting unset fields.

        Raises:
            MissingConfigurationError: If the model or the messages are missing
            InvalidArgumentError: If a message has no content
        """
        if not self.model:
            raise MissingConfigurationError("Chat completion request has no model")
        if not self.messages:
            raise MissingConfigurationError("Chat completion request has no messages")

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        support = ParameterSupport(self.model)
        scalar_fields = self.model_dump(
            exclude_none=True,
            exclude={"model", "messages", "response_format", "tools"},
        )
        for name, value in scalar_fields.items():
            if name in SAMPLING_PARAMETERS and not support.supports(name):
                logger.warning(f"Model {self.model} does not support '{name}'; dropping it")
                continue
            payload[name] = value
        if self.response_format is not None:
            payload["response_format"] = self.response_format.to_chat_response_format()
        if self.tools:
            payload["tools"] = [tool.to_chat_dict() for tool in self.tools]
        return payload


class ChatCompletion(ApiResource):
    """Client for the chat completions endpoint."""

    def chat(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        payload = request.to_payload()
        logger.info(f"Creating chat completion with model {request.model} "
                    f"({len(request.messages)} messages)")
        response = self.http.post(CHAT_COMPLETIONS_PATH, json=payload)
        return parse_model(ChatCompletionResponse, response.text)
