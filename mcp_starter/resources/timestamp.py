"""
Timestamp Resource
Current time in ISO 8601, Unix or human-readable format.

    timestamp://iso       2024-01-15T10:30:00.000Z
    timestamp://unix      1705315800
    timestamp://readable  locale-dependent, e.g. 01/15/24, 10:30:00
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from mcp.server.fastmcp import FastMCP

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Get current timestamp in various formats"
MIME_TYPE_PLAIN = "text/plain"

FORMATS: Dict[str, str] = {
    "iso": "ISO 8601 format",
    "unix": "Unix timestamp",
    "readable": "Human-readable format",
}


def format_timestamp(fmt: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)

    if fmt == "iso":
        return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    if fmt == "unix":
        return str(int(now.timestamp()))
    if fmt == "readable":
        return now.astimezone().strftime("%x, %X")

    return f"Unknown format: {fmt}. Use 'iso', 'unix', or 'readable'"


def _reader(fmt: str):
    # Concrete resources must take no parameters
    def read() -> str:
        return format_timestamp(fmt)
    return read


def register(server: FastMCP) -> None:
    for fmt, label in FORMATS.items():
        server.resource(
            f"timestamp://{fmt}",
            name=label,
            description=DESCRIPTION,
            mime_type=MIME_TYPE_PLAIN,
        )(_reader(fmt))

    # Anything else gets a readable error instead of "resource not found"
    @server.resource(
        "timestamp://{format}",
        name="timestamp",
        description=DESCRIPTION,
        mime_type=MIME_TYPE_PLAIN,
    )
    def read_format(format: str) -> str:
        return format_timestamp(format)


MODULE = RegisterableModule(
    type=ModuleType.RESOURCE,
    name="timestamp",
    description=DESCRIPTION,
    register=register,
)
