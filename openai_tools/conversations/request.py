"""
Persistent conversations.

A conversation stores items server side so that later responses can refer
to it by id instead of resending history.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from openai_tools.common.client import ApiResource, page_params
from openai_tools.common.errors import MissingConfigurationError, parse_model
from openai_tools.config.constants import LOGGER_NAME
from openai_tools.conversations.response import (
    Conversation,
    ConversationItem,
    ConversationItemListResponse,
    ConversationListResponse,
    DeleteConversationResponse,
    InputItem,
)

logger = logging.getLogger(LOGGER_NAME)

CONVERSATIONS_PATH = "conversations"


class ConversationInclude(str, Enum):
    """Extra data to include when listing items."""
    WEB_SEARCH_CALL_SOURCES = "web_search_call.action.sources"
    CODE_INTERPRETER_CALL_OUTPUTS = "code_interpreter_call.outputs"
    FILE_SEARCH_CALL_RESULTS = "file_search_call.results"
    MESSAGE_INPUT_IMAGE_URL = "message.input_image.image_url"
    REASONING_ENCRYPTED_CONTENT = "reasoning.encrypted_content"


def _items_payload(items: List[InputItem]) -> List[Dict[str, Any]]:
    return [item.model_dump(exclude_none=True) for item in items]


class Conversations(ApiResource):
    """Client for the conversations endpoints."""

    def create(self, metadata: Optional[Dict[str, str]] = None,
               items: Optional[List[InputItem]] = None) -> Conversation:
        payload: Dict[str, Any] = {}
        if metadata is not None:
            payload["metadata"] = metadata
        if items is not None:
            payload["items"] = _items_payload(items)
        response = self.http.post(CONVERSATIONS_PATH, json=payload)
        conversation = parse_model(Conversation, response.text)
        logger.info(f"Created conversation {conversation.id}")
        return conversation

    def retrieve(self, conversation_id: str) -> Conversation:
        response = self.http.get(f"{CONVERSATIONS_PATH}/{conversation_id}")
        return parse_model(Conversation, response.text)

    def update(self, conversation_id: str, metadata: Dict[str, str]) -> Conversation:
        response = self.http.post(f"{CONVERSATIONS_PATH}/{conversation_id}",
                                  json={"metadata": metadata})
        return parse_model(Conversation, response.text)

    def delete(self, conversation_id: str) -> DeleteConversationResponse:
        logger.info(f"Deleting conversation {conversation_id}")
        response = self.http.delete(f"{CONVERSATIONS_PATH}/{conversation_id}")
        return parse_model(DeleteConversationResponse, response.text)

    def list(self, limit: Optional[int] = None, after: Optional[str] = None) -> ConversationListResponse:
        response = self.http.get(CONVERSATIONS_PATH, params=page_params(limit, after))
        return parse_model(ConversationListResponse, response.text)

    def create_items(self, conversation_id: str, items: List[InputItem]) -> ConversationItemListResponse:
        if not items:
            raise MissingConfigurationError("create_items needs at least one item")
        response = self.http.post(f"{CONVERSATIONS_PATH}/{conversation_id}/items",
                                  json={"items": _items_payload(items)})
        return parse_model(ConversationItemListResponse, response.text)

    def list_items(self, conversation_id: str, limit: Optional[int] = None,
                   after: Optional[str] = None, order: Optional[str] = None,
                   include: Optional[List[ConversationInclude]] = None) -> ConversationItemListResponse:
        params = page_params(limit, after, order=order) or {}
        if include:
            params["include[]"] = [ConversationInclude(value).value for value in include]
        response = self.http.get(f"{CONVERSATIONS_PATH}/{conversation_id}/items",
                                 params=params or None)
        return parse_model(ConversationItemListResponse, response.text)

    def retrieve_item(self, conversation_id: str, item_id: str) -> ConversationItem:
        response = self.http.get(f"{CONVERSATIONS_PATH}/{conversation_id}/items/{item_id}")
        return parse_model(ConversationItem, response.text)

    def delete_item(self, conversation_id: str, item_id: str) -> Conversation:
        response = self.http.delete(f"{CONVERSATIONS_PATH}/{conversation_id}/items/{item_id}")
        return parse_model(Conversation, response.text)
