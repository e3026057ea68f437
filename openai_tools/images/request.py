"""
Image generation, editing and variation.

Edits and variations upload images as multipart form data; generation posts
JSON.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import InvalidArgumentError, MissingConfigurationError, parse_model
from openai_tools.common.models import model_id
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.images.response import ImageResponse

logger = logging.getLogger(LOGGER_NAME)

GENERATIONS_PATH = "images/generations"
EDITS_PATH = "images/edits"
VARIATIONS_PATH = "images/variations"

ImageInput = Union[str, Path, Tuple[str, bytes]]


class ImageModel(str, Enum):
    """Image models. Default: dall-e-3."""
    DALL_E_2 = "dall-e-2"
    DALL_E_3 = "dall-e-3"
    GPT_IMAGE_1 = "gpt-image-1"


class ImageSize(str, Enum):
    SIZE_256X256 = "256x256"
    SIZE_512X512 = "512x512"
    SIZE_1024X1024 = "1024x1024"
    SIZE_1792X1024 = "1792x1024"
    SIZE_1024X1792 = "1024x1792"


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


class GenerateOptions(BaseModel):
    """Options for ``Images.generate``; unset values use the service defaults."""
    model: str = ImageModel.DALL_E_3.value
    n: Optional[int] = Field(default=None, ge=1, le=10)
    quality: Optional[ImageQuality] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[ImageSize] = None
    style: Optional[ImageStyle] = None
    user: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v)


class EditOptions(BaseModel):
    """Options for ``Images.edit`` and ``Images.variation``."""
    model: Optional[str] = None
    n: Optional[int] = Field(default=None, ge=1, le=10)
    size: Optional[ImageSize] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v) if v is not None else v

    def form_fields(self) -> List[Tuple[str, str]]:
        dumped = self.model_dump(mode="json", exclude_none=True)
        return [(name, str(value)) for name, value in dumped.items()]


def _image_file(field: str, image: ImageInput) -> Tuple[str, Tuple[str, bytes, str]]:
    if isinstance(image, tuple):
        filename, data = image
    else:
        path = Path(image)
        filename, data = path.name, path.read_bytes()
    extension = Path(filename).suffix.lstrip(".").lower()
    mime = {"png": "image/png", "jpg": "image/jpeg", "jpeg": "image/jpeg",
            "webp": "image/webp"}.get(extension)
    if mime is None:
        raise InvalidArgumentError(f"Unsupported image file '{filename}' for upload")
    return field, (filename, data, mime)


class Images(ApiResource):
    """Client for the images endpoints."""

    def generate(self, prompt: str, options: Optional[GenerateOptions] = None) -> ImageResponse:
        if not prompt:
            raise MissingConfigurationError("Image generation needs a prompt")
        options = options or GenerateOptions()
        payload: Dict[str, Any] = {"prompt": prompt, **options.model_dump(mode="json", exclude_none=True)}
        logger.info(f"Generating image with {options.model}")
        response = self.http.post(GENERATIONS_PATH, json=payload)
        return parse_model(ImageResponse, response.text)

    def edit(self, images: List[ImageInput], prompt: str, mask: Optional[ImageInput] = None,
             options: Optional[EditOptions] = None) -> ImageResponse:
        """
        Edit one or more images according to ``prompt``.

        Images are file paths or ``(filename, bytes)`` pairs. Several images
        are sent as ``image[]`` parts.
        """
        if not images:
            raise MissingConfigurationError("Image edit needs at least one input image")
        if not prompt:
            raise MissingConfigurationError("Image edit needs a prompt")
        options = options or EditOptions()

        field = "image" if len(images) == 1 else "image[]"
        files = [_image_file(field, image) for image in images]
        if mask is not None:
            files.append(_image_file("mask", mask))
        data = [("prompt", prompt)] + options.form_fields()

        logger.info(f"Editing {len(images)} image(s)")
        response = self.http.post(EDITS_PATH, data=data, files=files)
        return parse_model(ImageResponse, response.text)

    def variation(self, image: ImageInput, options: Optional[EditOptions] = None) -> ImageResponse:
        if image is None:
            raise MissingConfigurationError("Image variation needs an input image")
        options = options or EditOptions()
        files = [_image_file("image", image)]
        logger.info("Creating image variation")
        response = self.http.post(VARIATIONS_PATH, data=options.form_fields(), files=files)
        return parse_model(ImageResponse, response.text)
