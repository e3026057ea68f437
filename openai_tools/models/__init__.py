"""Model listing, lookup and deletion of fine-tuned models."""

from openai_tools.models.request import Models
from openai_tools.models.response import Model

__all__ = ["Model", "Models"]
