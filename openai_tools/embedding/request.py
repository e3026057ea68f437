"""
Embeddings request model and client.

Usage:
```python
response = Embedding().embed(EmbeddingRequest(input="Hello, world!"))
vector = response.as_1d()  # numpy array of 1536 floats
```
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, field_validator

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import InvalidArgumentError, MissingConfigurationError, parse_model
from openai_tools.common.models import EmbeddingModel, model_id
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.embedding.response import EmbeddingResponse

logger = logging.getLogger(LOGGER_NAME)

EMBEDDINGS_PATH = "embeddings"


class EncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


def encoding_format(value: Union[str, EncodingFormat]) -> EncodingFormat:
    """Validate an encoding format, raising InvalidArgumentError otherwise."""
    try:
        return EncodingFormat(value)
    except ValueError:
        raise InvalidArgumentError(
            f"encoding_format must be 'float' or 'base64', got '{value}'"
        ) from None


class EmbeddingRequest(BaseModel):
    """Request descriptor for ``POST /embeddings``."""
    model: str = EmbeddingModel.TEXT_EMBEDDING_3_SMALL.value
    input: Optional[Union[str, List[str]]] = None
    encoding_format: Optional[EncodingFormat] = None
    dimensions: Optional[int] = None
    user: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v) if v is not None else v

    @field_validator("encoding_format", mode="before")
    @classmethod
    def check_encoding_format(cls, v):
        return encoding_format(v) if v is not None else v

    def to_payload(self) -> Dict[str, Any]:
        if not self.model:
            raise MissingConfigurationError("Embedding request has no model")
        if self.input is None or (isinstance(self.input, list) and not self.input):
            raise MissingConfigurationError("Embedding request has no input")
        return self.model_dump(mode="json", exclude_none=True)


class Embedding(ApiResource):
    """Client for the embeddings endpoint."""

    def embed(self, request: EmbeddingRequest) -> EmbeddingResponse:
        payload = request.to_payload()
        count = 1 if isinstance(request.input, str) else len(request.input)
        logger.info(f"Embedding {count} input(s) with model {request.model}")
        response = self.http.post(EMBEDDINGS_PATH, json=payload)
        return parse_model(EmbeddingResponse, response.text)
