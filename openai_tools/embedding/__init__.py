"""Embeddings (``POST /embeddings``) with numpy views of the vectors."""

from openai_tools.embedding.request import Embedding, EmbeddingRequest, EncodingFormat
from openai_tools.embedding.response import EmbeddingResponse

__all__ = ["Embedding", "EmbeddingRequest", "EmbeddingResponse", "EncodingFormat"]
