"""
Registry Types
The contract every discovered module must satisfy, and the parser that checks it.

A module file exposes its descriptor as the module-level ``MODULE`` attribute:

    def register(server: FastMCP) -> None:
        server.tool(name="my-tool", description="Does something useful")(my_tool)

    MODULE = RegisterableModule(
        type=ModuleType.TOOL,
        name="my-tool",
        description="Does something useful",
        register=register,
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


class ModuleType(Enum):
    """Kinds of modules that can be registered with the MCP server."""
    TOOL = "tool"
    RESOURCE = "resource"
    PROMPT = "prompt"


RegisterFunction = Callable[[FastMCP], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class RegisterableModule:
    """
    Descriptor for a tool, resource or prompt that can be auto-loaded.

    ``register`` receives the shared FastMCP host and may be a plain function
    or a coroutine function; its return value is only awaited, never inspected.
    """
    type: ModuleType
    name: str
    register: RegisterFunction
    description: Optional[str] = None


@dataclass(frozen=True)
class ModuleParseResult:
    """Outcome of checking a loaded value against the RegisterableModule shape."""
    valid: bool
    module: Optional[RegisterableModule] = None
    reason: Optional[str] = None


class _ModuleSchema(BaseModel):
    """Field rules for a loaded MODULE value, read from a mapping or attributes."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    type: ModuleType
    name: StrictStr = Field(min_length=1)
    register_fn: Callable[..., Any] = Field(alias="register")
    description: Any = None


_SCALARS = (str, bytes, bytearray, int, float, complex, bool)

_FIELD_REASONS = {
    "type": "'type' must be one of: " + ", ".join(t.value for t in ModuleType),
    "name": "'name' must be a non-empty string",
    "register": "'register' must be callable",
}


def _reason(error: ValidationError) -> str:
    # Errors come back in field order, so the first one names the earliest bad field
    first = error.errors()[0]
    field = str(first["loc"][0])
    if first["type"] == "missing":
        return f"missing '{field}'"
    return _FIELD_REASONS.get(field, first["msg"])


def _invalid(reason: str) -> ModuleParseResult:
    return ModuleParseResult(valid=False, reason=reason)


def parse_registerable_module(value: Any) -> ModuleParseResult:
    """
    Parse an arbitrary loaded value into a RegisterableModule.

    Validation is structural: mappings and plain objects are both read,
    extra fields are ignored and ``description`` is carried through
    unchecked. The input is never modified.
    """
    if value is None or isinstance(value, _SCALARS):
        return _invalid(f"expected an object, got {type(value).__name__}")

    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)

    try:
        parsed = _ModuleSchema.model_validate(value, from_attributes=True)
    except ValidationError as error:
        return _invalid(_reason(error))

    if isinstance(value, RegisterableModule) and value.type is parsed.type:
        return ModuleParseResult(valid=True, module=value)

    description = parsed.description if isinstance(parsed.description, str) else None
    return ModuleParseResult(
        valid=True,
        module=RegisterableModule(
            type=parsed.type,
            name=parsed.name,
            register=parsed.register_fn,
            description=description,
        ),
    )


def is_registerable_module(value: Any) -> bool:
    """Check if a loaded value is a valid RegisterableModule."""
    return parse_registerable_module(value).valid
