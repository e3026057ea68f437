"""Image generation, editing and variations."""

from openai_tools.images.request import EditOptions, GenerateOptions, Images
from openai_tools.images.response import ImageResponse

__all__ = ["EditOptions", "GenerateOptions", "ImageResponse", "Images"]
