"""
System Info Resource
Basic information about the machine the server runs on.
"""

import json
import os
import platform
import sys
import time
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Get basic system information about the server"
URI = "system://info"

_STARTED_AT = time.monotonic()


def _memory() -> Dict[str, Optional[int]]:
    # sysconf is POSIX-only
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        return {
            "totalMemory": page_size * os.sysconf("SC_PHYS_PAGES"),
            "freeMemory": page_size * os.sysconf("SC_AVPHYS_PAGES"),
        }
    except (AttributeError, ValueError, OSError):
        return {"totalMemory": None, "freeMemory": None}


def get_system_info() -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "platform": sys.platform,
        "architecture": platform.machine(),
        "pythonVersion": platform.python_version(),
        "cpuCount": os.cpu_count(),
        "processUptime": round(time.monotonic() - _STARTED_AT, 3),
    }
    info.update(_memory())
    return info


def register(server: FastMCP) -> None:
    @server.resource(URI, name="System Information", description=DESCRIPTION, mime_type="application/json")
    def system_info() -> str:
        return json.dumps(get_system_info(), indent=2)


MODULE = RegisterableModule(
    type=ModuleType.RESOURCE,
    name="system-info",
    description=DESCRIPTION,
    register=register,
)
