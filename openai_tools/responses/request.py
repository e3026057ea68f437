"""
Request model and client for the responses endpoint.

Usage:
```python
schema = Schema.responses_json_schema("capital")
schema.add_property("capital", "string", "Capital city")

request = ResponsesRequest(input="What is the capital of France?", text=schema)
response = Responses().create(request)
print(response.output_text())
```
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.common.message import Message
from openai_tools.common.models import ChatModel, ParameterSupport, model_id
from openai_tools.common.structured_output import Schema
from openai_tools.common.tool import Tool
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.responses.response import DeleteResponseResult, Response

logger = logging.getLogger(LOGGER_NAME)

RESPONSES_PATH = "responses"


class Include(str, Enum):
    """Extra output the service can attach to a response."""
    WEB_SEARCH_CALL_RESULTS = "web_search_call.results"
    CODE_INTERPRETER_CALL_OUTPUTS = "code_interpreter_call.outputs"
    COMPUTER_CALL_OUTPUT_IMAGE_URL = "computer_call_output.output.image_url"
    FILE_SEARCH_CALL_RESULTS = "file_search_call.results"
    MESSAGE_INPUT_IMAGE_URL = "message.input_image.image_url"
    MESSAGE_OUTPUT_TEXT_LOGPROBS = "message.output_text.logprobs"
    REASONING_ENCRYPTED_CONTENT = "reasoning.encrypted_content"


class ReasoningEffort(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    XHIGH = "xhigh"


class ReasoningSummary(str, Enum):
    AUTO = "auto"
    CONCISE = "concise"
    DETAILED = "detailed"


class TextVerbosity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Truncation(str, Enum):
    AUTO = "auto"
    DISABLED = "disabled"


class Reasoning(BaseModel):
    effort: Optional[ReasoningEffort] = None
    summary: Optional[ReasoningSummary] = None


class ResponsesRequest(BaseModel):
    """
    Request descriptor for ``POST /responses``.

    ``input`` is either a plain prompt string or a list of messages, whose
    content parts may include inline images.
    """
    model: str = ChatModel.GPT_4O_MINI.value
    input: Optional[Union[str, List[Message]]] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    text: Optional[Schema] = None
    text_verbosity: Optional[TextVerbosity] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)
    max_output_tokens: Optional[int] = None
    max_tool_calls: Optional[int] = None
    metadata: Optional[Dict[str, str]] = None
    parallel_tool_calls: Optional[bool] = None
    include: Optional[List[Include]] = None
    background: Optional[bool] = None
    conversation: Optional[str] = None
    previous_response_id: Optional[str] = None
    reasoning: Optional[Reasoning] = None
    safety_identifier: Optional[str] = None
    service_tier: Optional[str] = None
    store: Optional[bool] = None
    truncation: Optional[Truncation] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v) if v is not None else v

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON body, omitting unset fields.

        Raises:
            MissingConfigurationError: If the model or the input is missing
        """
        if not self.model:
            raise MissingConfigurationError("Responses request has no model")
        if self.input is None or (isinstance(self.input, list) and not self.input):
            raise MissingConfigurationError("Responses request has no input")

        payload: Dict[str, Any] = {"model": self.model}
        if isinstance(self.input, str):
            payload["input"] = self.input
        else:
            payload["input"] = [message.to_dict() for message in self.input]

        support = ParameterSupport(self.model)
        scalar_fields = self.model_dump(
            mode="json",
            exclude_none=True,
            exclude={"model", "input", "tools", "text", "text_verbosity"},
        )
        for name, value in scalar_fields.items():
            if name in ("temperature", "top_p", "top_logprobs") and not support.supports(name):
                logger.warning(f"Model {self.model} does not support '{name}'; dropping it")
                continue
            payload[name] = value

        if self.tools:
            payload["tools"] = [tool.to_responses_dict() for tool in self.tools]
        text: Dict[str, Any] = {}
        if self.text is not None:
            text.update(self.text.to_responses_text_format())
        if self.text_verbosity is not None:
            text["verbosity"] = self.text_verbosity.value
        if text:
            payload["text"] = text
        return payload


class Responses(ApiResource):
    """Client for the responses endpoint."""

    def create(self, request: ResponsesRequest) -> Response:
        payload = request.to_payload()
        logger.info(f"Creating response with model {request.model}")
        response = self.http.post(RESPONSES_PATH, json=payload)
        return parse_model(Response, response.text)

    def retrieve(self, response_id: str) -> Response:
        response = self.http.get(f"{RESPONSES_PATH}/{response_id}")
        return parse_model(Response, response.text)

    def delete(self, response_id: str) -> DeleteResponseResult:
        response = self.http.delete(f"{RESPONSES_PATH}/{response_id}")
        return parse_model(DeleteResponseResult, response.text)

    def cancel(self, response_id: str) -> Response:
        """Cancel a response created with ``background=True``."""
        response = self.http.post(f"{RESPONSES_PATH}/{response_id}/cancel")
        return parse_model(Response, response.text)
