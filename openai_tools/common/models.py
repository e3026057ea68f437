"""
Model identifiers and per-model parameter support.

Each family is a ``str, Enum`` whose value is the vendor's model id. Request
builders accept either an enum member or any custom id string, so models
released after this library keep working; ``model_id`` normalises both.
"""

from enum import Enum
from typing import Union


def model_id(model: Union[str, Enum]) -> str:
    """Return the wire string for an enum member or a custom id."""
    if isinstance(model, Enum):
        return model.value
    return str(model)


class ChatModel(str, Enum):
    """Models usable with chat completions and responses. Default: gpt-4o-mini."""
    GPT_5_2 = "gpt-5.2"
    GPT_5_2_CHAT_LATEST = "gpt-5.2-chat-latest"
    GPT_5_2_PRO = "gpt-5.2-pro"
    GPT_5_1 = "gpt-5.1"
    GPT_5_1_CHAT_LATEST = "gpt-5.1-chat-latest"
    GPT_5_1_CODEX_MAX = "gpt-5.1-codex-max"
    GPT_5_MINI = "gpt-5-mini"
    GPT_4_1 = "gpt-4.1"
    GPT_4_1_MINI = "gpt-4.1-mini"
    GPT_4_1_NANO = "gpt-4.1-nano"
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4O_AUDIO_PREVIEW = "gpt-4o-audio-preview"
    GPT_4_TURBO = "gpt-4-turbo"
    GPT_4 = "gpt-4"
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    O1 = "o1"
    O1_PRO = "o1-pro"
    O3 = "o3"
    O3_MINI = "o3-mini"
    O4_MINI = "o4-mini"

    @classmethod
    def default(cls) -> "ChatModel":
        return cls.GPT_4O_MINI


REASONING_MODEL_PREFIXES = ("gpt-5", "o1", "o3", "o4")


def is_reasoning_model(model: Union[str, Enum]) -> bool:
    """Reasoning families fix sampling parameters server side."""
    return model_id(model).startswith(REASONING_MODEL_PREFIXES)


class ParameterSupport:
    """
    Which optional generation parameters a model accepts.

    Reasoning models only accept the default temperature, top_p and
    penalties and reject logprobs, top_logprobs, logit_bias and n > 1.
    """

    def __init__(self, model: Union[str, Enum]):
        self.model = model_id(model)
        reasoning = is_reasoning_model(model)
        self.temperature = not reasoning
        self.top_p = not reasoning
        self.frequency_penalty = not reasoning
        self.presence_penalty = not reasoning
        self.logprobs = not reasoning
        self.top_logprobs = not reasoning
        self.logit_bias = not reasoning
        self.n = not reasoning

    def supports(self, parameter: str) -> bool:
        return getattr(self, parameter, True)


class EmbeddingModel(str, Enum):
    """Embedding models. Default: text-embedding-3-small."""
    TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
    TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
    TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

    @classmethod
    def default(cls) -> "EmbeddingModel":
        return cls.TEXT_EMBEDDING_3_SMALL

    @property
    def dimensions(self) -> int:
        if self is EmbeddingModel.TEXT_EMBEDDING_3_LARGE:
            return 3072
        return 1536


class RealtimeModel(str, Enum):
    """Realtime session models. Default: gpt-4o-realtime-preview."""
    GPT_4O_REALTIME_PREVIEW = "gpt-4o-realtime-preview"
    GPT_4O_MINI_REALTIME_PREVIEW = "gpt-4o-mini-realtime-preview"

    @classmethod
    def default(cls) -> "RealtimeModel":
        return cls.GPT_4O_REALTIME_PREVIEW


class FineTuningModel(str, Enum):
    """Base models that can be fine-tuned. Default: gpt-4o-mini-2024-07-18."""
    GPT_4_1_2025_04_14 = "gpt-4.1-2025-04-14"
    GPT_4_1_MINI_2025_04_14 = "gpt-4.1-mini-2025-04-14"
    GPT_4_1_NANO_2025_04_14 = "gpt-4.1-nano-2025-04-14"
    GPT_4O_MINI_2024_07_18 = "gpt-4o-mini-2024-07-18"
    GPT_4O_2024_08_06 = "gpt-4o-2024-08-06"
    GPT_4_0613 = "gpt-4-0613"
    GPT_3_5_TURBO_0125 = "gpt-3.5-turbo-0125"
    GPT_3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_3_5_TURBO_0613 = "gpt-3.5-turbo-0613"

    @classmethod
    def default(cls) -> "FineTuningModel":
        return cls.GPT_4O_MINI_2024_07_18
