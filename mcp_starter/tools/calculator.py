"""
Calculator Tool
Basic arithmetic on two operands.
"""

from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Perform basic arithmetic operations"

Operation = Literal["add", "subtract", "multiply", "divide"]


def calculate(
    operation: Annotated[Operation, Field(description="The operation to perform")],
    a: Annotated[float, Field(description="First operand")],
    b: Annotated[float, Field(description="Second operand")],
) -> str:
    if operation == "add":
        result = a + b
    elif operation == "subtract":
        result = a - b
    elif operation == "multiply":
        result = a * b
    elif operation == "divide":
        if b == 0:
            raise ValueError("Division by zero is not allowed")
        result = a / b
    else:
        raise ValueError(f"Unknown operation: {operation}")

    return f"{a:g} {operation} {b:g} = {result:g}"


def register(server: FastMCP) -> None:
    server.tool(name="calculator", description=DESCRIPTION)(calculate)


MODULE = RegisterableModule(
    type=ModuleType.TOOL,
    name="calculator",
    description=DESCRIPTION,
    register=register,
)
