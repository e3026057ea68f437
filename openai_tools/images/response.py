"""Response models for the images endpoints."""

import base64
from typing import List, Optional

from pydantic import BaseModel

from openai_tools.common.errors import InvalidArgumentError


class ImageData(BaseModel):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None

    def as_bytes(self) -> bytes:
        """Decode ``b64_json``; only available with the b64_json response format."""
        if self.b64_json is None:
            raise InvalidArgumentError("Image has no b64_json payload; request response_format=b64_json")
        return base64.b64decode(self.b64_json)


class ImageResponse(BaseModel):
    created: int
    data: List[ImageData]
