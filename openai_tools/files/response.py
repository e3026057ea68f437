"""Response models for the files endpoints."""

from typing import List, Optional

from pydantic import BaseModel


class File(BaseModel):
    """An uploaded file."""
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: Optional[str] = None
    status_details: Optional[str] = None
    expires_at: Optional[int] = None


class FileListResponse(BaseModel):
    object: str
    data: List[File]
    has_more: Optional[bool] = None
    first_id: Optional[str] = None
    last_id: Optional[str] = None


class DeleteResponse(BaseModel):
    id: str
    object: str
    deleted: bool
