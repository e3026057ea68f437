"""Models for server-side conversations and their items."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Conversation(BaseModel):
    id: str
    object: str
    created_at: int
    metadata: Optional[Dict[str, str]] = None


class ConversationListResponse(BaseModel):
    object: str
    data: List[Conversation]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


class ConversationItem(BaseModel):
    """A stored item; content stays loosely typed since item kinds vary."""
    id: str
    object: Optional[str] = None
    type: str
    role: Optional[str] = None
    content: Optional[Any] = None
    status: Optional[str] = None


class ConversationItemListResponse(BaseModel):
    object: str
    data: List[ConversationItem]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


class DeleteConversationResponse(BaseModel):
    id: str
    object: str
    deleted: bool


class InputItem(BaseModel):
    """An item to add to a conversation."""
    type: str = "message"
    role: Optional[str] = None
    content: Optional[Any] = None

    @classmethod
    def message(cls, role: str, content: str) -> "InputItem":
        return cls(type="message", role=role, content=content)

    @classmethod
    def user_message(cls, content: str) -> "InputItem":
        return cls.message("user", content)

    @classmethod
    def assistant_message(cls, content: str) -> "InputItem":
        return cls.message("assistant", content)
