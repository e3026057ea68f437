"""
Conversation messages and their content parts.

A message carries either a single text body or an ordered list of content
parts, held in one ``content`` field so that having both is impossible.
Serializing a message without content fails with InvalidArgumentError.
"""

import base64
import io
import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import tiktoken
from PIL import Image
from pydantic import BaseModel, Field

from openai_tools.common.errors import InvalidArgumentError
from openai_tools.common.function import ToolCall
from openai_tools.common.role import Role
from openai_tools.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

TOKEN_ENCODING = "o200k_base"

# extension -> (MIME type, Pillow format name)
IMAGE_FORMATS = {
    "png": ("image/png", "PNG"),
    "jpg": ("image/jpeg", "JPEG"),
    "jpeg": ("image/jpeg", "JPEG"),
    "gif": ("image/gif", "GIF"),
}


class InputTextPart(BaseModel):
    """Text content part."""
    type: Literal["input_text"] = "input_text"
    text: str


class InputImagePart(BaseModel):
    """Image content part, given as a URL or a data URL."""
    type: Literal["input_image"] = "input_image"
    image_url: str


ContentPart = Annotated[Union[InputTextPart, InputImagePart], Field(discriminator="type")]


def encode_image_file(path: Union[str, Path]) -> str:
    """
    Read a local image and return it as a base64 data URL.

    The image is decoded and re-encoded in its own format before encoding, so
    the bytes sent are Pillow's output rather than the file's exact bytes.

    Raises:
        InvalidArgumentError: For extensions other than png, jpg, jpeg and gif
    """
    path = Path(path)
    extension = path.suffix.lstrip(".").lower()
    if extension not in IMAGE_FORMATS:
        raise InvalidArgumentError(
            f"Unsupported image extension '{extension}' for {path.name}; "
            f"expected one of {sorted(IMAGE_FORMATS)}"
        )
    mime, pil_format = IMAGE_FORMATS[extension]

    try:
        with Image.open(path) as image:
            buffer = io.BytesIO()
            image.save(buffer, format=pil_format)
    except OSError as e:
        raise InvalidArgumentError(f"Could not read image {path}: {e}") from e

    payload = base64.b64encode(buffer.getvalue()).decode("ascii")
    logger.debug(f"Encoded {path.name} as {mime} ({len(payload)} base64 chars)")
    return f"data:{mime};base64,{payload}"


def text_part(text: str) -> InputTextPart:
    return InputTextPart(text=text)


def image_url_part(url: str) -> InputImagePart:
    return InputImagePart(image_url=url)


def image_file_part(path: Union[str, Path]) -> InputImagePart:
    return InputImagePart(image_url=encode_image_file(path))


@lru_cache(maxsize=1)
def _encoding():
    return tiktoken.get_encoding(TOKEN_ENCODING)


class Message(BaseModel):
    """A single conversation message."""
    role: Role
    content: Optional[Union[str, List[ContentPart]]] = None
    tool_call_id: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    refusal: Optional[str] = None
    annotations: Optional[List[Any]] = None

    @classmethod
    def from_string(cls, role: Role, text: str) -> "Message":
        return cls(role=role, content=text)

    @classmethod
    def from_message_array(cls, role: Role, parts: List[Union[InputTextPart, InputImagePart]]) -> "Message":
        return cls(role=role, content=list(parts))

    @classmethod
    def from_tool_call_response(cls, content: str, tool_call_id: str) -> "Message":
        """A tool result answering the call with ``tool_call_id``."""
        return cls(role=Role.TOOL, content=content, tool_call_id=tool_call_id)

    @property
    def text(self) -> Optional[str]:
        """The text body, or the text parts joined with newlines."""
        if isinstance(self.content, str):
            return self.content
        if self.content:
            texts = [part.text for part in self.content if isinstance(part, InputTextPart)]
            return "\n".join(texts) if texts else None
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for a request body.

        Raises:
            InvalidArgumentError: If the message has no content
        """
        if self.content is None:
            raise InvalidArgumentError(
                f"Message with role '{self.role.value}' has neither text nor content parts"
            )
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def get_input_token_count(self) -> int:
        """Estimate the prompt tokens of this message's text with o200k_base."""
        text = self.text
        if not text:
            return 0
        return len(_encoding().encode(text))
