"""Content moderation."""

from openai_tools.moderations.request import ModerationModel, Moderations
from openai_tools.moderations.response import ModerationResponse

__all__ = ["ModerationModel", "ModerationResponse", "Moderations"]
