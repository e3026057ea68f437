"""
File upload and management.

Usage:
```python
files = Files()
uploaded = files.upload("training.jsonl", FilePurpose.FINE_TUNE)
listing = files.list(purpose=FilePurpose.FINE_TUNE)
```
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from openai_tools.common.client import ApiResource
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.files.response import DeleteResponse, File, FileListResponse

logger = logging.getLogger(LOGGER_NAME)

FILES_PATH = "files"


class FilePurpose(str, Enum):
    """Intended use of an uploaded file."""
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"
    BATCH_OUTPUT = "batch_output"
    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    VISION = "vision"
    USER_DATA = "user_data"

    def __str__(self) -> str:
        return self.value


class Files(ApiResource):
    """Client for the files endpoints."""

    def upload(self, path: Union[str, Path], purpose: FilePurpose) -> File:
        path = Path(path)
        return self.upload_bytes(path.read_bytes(), path.name, purpose)

    def upload_bytes(self, content: bytes, filename: str, purpose: FilePurpose) -> File:
        if not filename:
            raise MissingConfigurationError("File upload needs a filename")
        purpose = FilePurpose(purpose)
        logger.info(f"Uploading {filename} ({len(content)} bytes) for {purpose.value}")
        response = self.http.post(
            FILES_PATH,
            data={"purpose": purpose.value},
            files={"file": (filename, content, "application/octet-stream")},
        )
        return parse_model(File, response.text)

    def list(self, purpose: Optional[FilePurpose] = None) -> FileListResponse:
        params = {"purpose": FilePurpose(purpose).value} if purpose is not None else None
        response = self.http.get(FILES_PATH, params=params)
        return parse_model(FileListResponse, response.text)

    def retrieve(self, file_id: str) -> File:
        response = self.http.get(f"{FILES_PATH}/{file_id}")
        return parse_model(File, response.text)

    def delete(self, file_id: str) -> DeleteResponse:
        logger.info(f"Deleting file {file_id}")
        response = self.http.delete(f"{FILES_PATH}/{file_id}")
        return parse_model(DeleteResponse, response.text)

    def content(self, file_id: str) -> bytes:
        """Download a file's raw content."""
        response = self.http.get(f"{FILES_PATH}/{file_id}/content")
        return response.content
