"""
Response models for the responses endpoint.

The ``output`` list mixes item kinds: assistant messages holding content
blocks, function-call records, reasoning summaries and built-in tool calls.
``OutputItem`` keeps the common fields typed and tolerates the rest.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from openai_tools.common.usage import Usage


class OutputContent(BaseModel):
    """A content block of an output message (``output_text`` or ``refusal``)."""
    type: str
    text: Optional[str] = None
    refusal: Optional[str] = None
    annotations: Optional[List[Any]] = None
    logprobs: Optional[List[Any]] = None


class OutputItem(BaseModel):
    """One entry of a response's ``output``."""
    id: Optional[str] = None
    type: str
    role: Optional[str] = None
    status: Optional[str] = None
    content: Optional[List[OutputContent]] = None
    call_id: Optional[str] = None
    name: Optional[str] = None
    arguments: Optional[str] = None
    output: Optional[Any] = None
    summary: Optional[List[Any]] = None
    server_label: Optional[str] = None

    def parsed_arguments(self) -> Dict[str, Any]:
        """Decode a function call's JSON argument string."""
        if not self.arguments:
            return {}
        return json.loads(self.arguments)


class ReasoningInfo(BaseModel):
    effort: Optional[str] = None
    summary: Optional[str] = None


class IncompleteDetails(BaseModel):
    reason: Optional[str] = None


class ResponseError(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None


class Response(BaseModel):
    """Parsed body returned by ``POST /responses``."""
    id: str
    object: str = "response"
    created_at: int
    status: Optional[str] = None
    model: Optional[str] = None
    output: List[OutputItem] = []
    usage: Optional[Usage] = None
    error: Optional[ResponseError] = None
    incomplete_details: Optional[IncompleteDetails] = None
    instructions: Optional[Any] = None
    max_output_tokens: Optional[int] = None
    max_tool_calls: Optional[int] = None
    metadata: Optional[Dict[str, str]] = None
    parallel_tool_calls: Optional[bool] = None
    previous_response_id: Optional[str] = None
    reasoning: Optional[ReasoningInfo] = None
    service_tier: Optional[str] = None
    store: Optional[bool] = None
    temperature: Optional[float] = None
    text: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Any] = None
    tools: Optional[List[Dict[str, Any]]] = None
    top_logprobs: Optional[int] = None
    top_p: Optional[float] = None
    truncation: Optional[str] = None
    user: Optional[str] = None

    def output_text(self) -> Optional[str]:
        """Text of the first ``output_text`` block of the first message item."""
        for item in self.output:
            if item.type != "message":
                continue
            for content in item.content or []:
                if content.type == "output_text":
                    return content.text
            return None
        return None

    def function_calls(self) -> List[OutputItem]:
        return [item for item in self.output if item.type == "function_call"]


class DeleteResponseResult(BaseModel):
    id: str
    object: str
    deleted: bool
