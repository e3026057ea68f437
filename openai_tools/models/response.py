"""Response models for the models endpoints."""

from typing import List

from pydantic import BaseModel


class Model(BaseModel):
    id: str
    object: str
    created: int
    owned_by: str


class ModelsListResponse(BaseModel):
    object: str
    data: List[Model]


class DeleteResponse(BaseModel):
    id: str
    object: str
    deleted: bool
