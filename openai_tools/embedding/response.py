"""
Response models for the embeddings endpoint, with numpy views.

Vectors arrive either as float lists or, with ``encoding_format=base64``, as
base64 strings of little-endian float32 values. ``vector()`` decodes both
forms into a numpy array.
"""

import base64
from typing import List, Optional, Union

import numpy as np
from pydantic import BaseModel

from openai_tools.common.errors import InvalidArgumentError


class EmbeddingUsage(BaseModel):
    prompt_tokens: int
    total_tokens: int


class EmbeddingData(BaseModel):
    object: str = "embedding"
    embedding: Union[List[float], List[List[float]], List[List[List[float]]], str]
    index: int

    def vector(self) -> np.ndarray:
        """The embedding as a float array (1-D for ordinary embeddings)."""
        if isinstance(self.embedding, str):
            raw = base64.b64decode(self.embedding)
            return np.frombuffer(raw, dtype="<f4").astype(np.float32)
        return np.asarray(self.embedding, dtype=np.float32)

    @property
    def dimensions(self) -> int:
        return int(self.vector().shape[-1])


class EmbeddingResponse(BaseModel):
    """Parsed body of ``POST /embeddings``; ``data`` follows input order."""
    object: str = "list"
    data: List[EmbeddingData]
    model: str
    usage: Optional[EmbeddingUsage] = None

    def _ordered(self) -> List[EmbeddingData]:
        return sorted(self.data, key=lambda item: item.index)

    def as_1d(self) -> np.ndarray:
        """The single embedding of a one-input request."""
        if len(self.data) != 1:
            raise InvalidArgumentError(f"as_1d needs exactly one embedding, got {len(self.data)}")
        return self.data[0].vector().reshape(-1)

    def as_2d(self) -> np.ndarray:
        """All embeddings stacked as (inputs, dimensions)."""
        return np.stack([item.vector().reshape(-1) for item in self._ordered()])

    def as_3d(self, group_size: int) -> np.ndarray:
        """Embeddings grouped as (groups, group_size, dimensions)."""
        matrix = self.as_2d()
        if group_size <= 0 or matrix.shape[0] % group_size:
            raise InvalidArgumentError(
                f"Cannot split {matrix.shape[0]} embeddings into groups of {group_size}"
            )
        return matrix.reshape(-1, group_size, matrix.shape[1])
