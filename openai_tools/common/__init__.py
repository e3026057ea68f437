"""
Shared building blocks used by every endpoint client.

Key components:
- auth: OpenAI and Azure authentication providers
- client: the requests based HTTP client and the ApiResource base class
- errors: the exception hierarchy and response parsing helpers
- models: model identifiers and per-model parameter support
- message, role, usage: chat messages, roles and token usage
- structured_output: JSON schema builder for structured outputs
- function, parameters, tool: function tool declarations and tool calls
"""

from openai_tools.common.auth import AuthProvider, AzureAuth, OpenAIAuth
from openai_tools.common.errors import (
    InvalidArgumentError,
    MissingConfigurationError,
    OpenAIToolError,
    RemoteError,
    ResponseShapeError,
    SchemaShapeMismatchError,
    TransportError,
)
from openai_tools.common.message import Message
from openai_tools.common.models import ChatModel, EmbeddingModel, FineTuningModel, RealtimeModel
from openai_tools.common.parameters import ParameterProperty, Parameters
from openai_tools.common.role import Role
from openai_tools.common.structured_output import Schema
from openai_tools.common.tool import FunctionTool, McpTool, function_tool, mcp_tool

__all__ = [
    "AuthProvider",
    "AzureAuth",
    "ChatModel",
    "EmbeddingModel",
    "FineTuningModel",
    "FunctionTool",
    "InvalidArgumentError",
    "McpTool",
    "Message",
    "MissingConfigurationError",
    "OpenAIAuth",
    "OpenAIToolError",
    "ParameterProperty",
    "Parameters",
    "RealtimeModel",
    "RemoteError",
    "ResponseShapeError",
    "Role",
    "Schema",
    "SchemaShapeMismatchError",
    "TransportError",
    "function_tool",
    "mcp_tool",
]
