"""
Echo Tool
Returns the provided text. Useful for checking connectivity.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Echo back the provided text"


def echo(text: Annotated[str, Field(description="Text to echo back")]) -> str:
    if not text:
        raise ValueError("Text cannot be empty")
    return text


def register(server: FastMCP) -> None:
    server.tool(name="echo", description=DESCRIPTION)(echo)


MODULE = RegisterableModule(
    type=ModuleType.TOOL,
    name="echo",
    description=DESCRIPTION,
    register=register,
)
