"""
Tool declarations.

Two kinds of tool exist, told apart by ``type``: a local ``function`` the
model may ask the caller to run, and an ``mcp`` remote tool server the
service calls itself. Chat completions nest the function descriptor under a
``function`` key; the responses endpoint and realtime sessions use a flat
object. Each tool can emit both shapes.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from openai_tools.common.function import Function
from openai_tools.common.parameters import Parameters


class FunctionTool(BaseModel):
    """A function the model can call."""
    type: Literal["function"] = "function"
    function: Function

    @property
    def name(self) -> str:
        return self.function.name

    def to_chat_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_responses_dict(self) -> Dict[str, Any]:
        data = {"type": "function", "name": self.function.name}
        if self.function.description is not None:
            data["description"] = self.function.description
        if self.function.parameters is not None:
            data["parameters"] = self.function.parameters.to_dict()
        if self.function.strict is not None:
            data["strict"] = self.function.strict
        return data


class McpTool(BaseModel):
    """A remote MCP tool server."""
    type: Literal["mcp"] = "mcp"
    server_label: str
    server_url: str
    require_approval: Optional[Union[str, Dict[str, Any]]] = None
    allowed_tools: Optional[List[str]] = None
    parameters: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> str:
        return self.server_label

    def to_chat_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_responses_dict(self) -> Dict[str, Any]:
        return self.to_chat_dict()


Tool = Annotated[Union[FunctionTool, McpTool], Field(discriminator="type")]


def function_tool(name: str, description: str, parameters: Parameters,
                  strict: bool = False) -> FunctionTool:
    """Declare a function tool."""
    return FunctionTool(function=Function.declare(name, description, parameters, strict))


def mcp_tool(server_label: str, server_url: str,
             require_approval: Optional[Union[str, Dict[str, Any]]] = None,
             allowed_tools: Optional[List[str]] = None,
             parameters: Optional[Dict[str, Any]] = None) -> McpTool:
    """Declare a remote MCP tool server."""
    return McpTool(
        server_label=server_label,
        server_url=server_url,
        require_approval=require_approval,
        allowed_tools=allowed_tools,
        parameters=parameters,
    )
