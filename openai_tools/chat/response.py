"""Response models for chat completions."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from openai_tools.common.function import ToolCall
from openai_tools.common.role import Role
from openai_tools.common.usage import Usage


class ChatCompletionMessage(BaseModel):
    """Message generated by the model. ``content`` is null for pure tool calls."""
    role: Role
    content: Optional[str] = None
    refusal: Optional[str] = None
    annotations: Optional[List[Any]] = None
    tool_calls: Optional[List[ToolCall]] = None


class Choice(BaseModel):
    index: int
    message: ChatCompletionMessage
    logprobs: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    """Parsed body of a chat completion."""
    id: str
    object: str
    created: int
    model: str
    system_fingerprint: Optional[str] = None
    service_tier: Optional[str] = None
    choices: List[Choice]
    usage: Optional[Usage] = None

    def first_content(self) -> Optional[str]:
        """Text of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content
