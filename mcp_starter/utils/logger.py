"""
Logger
Operator-facing diagnostics for the MCP Server Starter.

Everything goes to stderr: in stdio mode stdout carries the JSON-RPC stream,
so a stray print would corrupt the protocol.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _parse_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.DEBUG)


class Logger:
    """Logger wrapper injected into every component that reports progress."""

    def __init__(self, name: str = "mcp-server-starter", level: str = "DEBUG"):
        self.name = name
        self.logger = logging.getLogger(name)
        self.setLevel(level)

        # Child loggers propagate to the root handler; only the root gets one
        if not self.logger.handlers and "." not in name:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def setLevel(self, level: str) -> None:
        self.logger.setLevel(_parse_level(level))

    def getChild(self, suffix: str) -> "Logger":
        """Logger for a sub-component, e.g. ``mcp-server-starter.registry``."""
        child = Logger(f"{self.name}.{suffix}", level=logging.getLevelName(self.logger.level))
        return child

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None, exc_info: bool = False):
        self.logger.error(message, extra=extra, exc_info=exc_info)

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
