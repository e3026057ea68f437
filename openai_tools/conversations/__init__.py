"""Server side conversations used with the responses API, and their items."""

from openai_tools.conversations.request import ConversationInclude, Conversations
from openai_tools.conversations.response import Conversation, InputItem

__all__ = ["Conversation", "ConversationInclude", "Conversations", "InputItem"]
