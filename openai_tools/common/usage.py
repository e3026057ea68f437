"""Token usage statistics shared by the chat, responses and embedding endpoints."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class PromptTokensDetails(BaseModel):
    cached_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None


class CompletionTokensDetails(BaseModel):
    reasoning_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None
    accepted_prediction_tokens: Optional[int] = None
    rejected_prediction_tokens: Optional[int] = None


class Usage(BaseModel):
    """
    Token counts. Chat completions report prompt/completion tokens, the
    responses endpoint reports input/output tokens; every field is optional.
    """
    input_tokens: Optional[int] = None
    input_tokens_details: Optional[Dict[str, Any]] = None
    output_tokens: Optional[int] = None
    output_tokens_details: Optional[Dict[str, Any]] = None
    prompt_tokens: Optional[int] = None
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens: Optional[int] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None
    total_tokens: Optional[int] = None
