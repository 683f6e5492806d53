"""
Settings
Configuration management for the MCP Server Starter.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file
load_dotenv()


TRANSPORTS = ("stdio", "http")


def get_transport() -> str:
    """
    Get the transport mode.
    
    STARTER_TRANSPORT selects between stdio (default, for local MCP clients)
    and http (streamable HTTP for remote clients).
    """
    transport = os.getenv("STARTER_TRANSPORT", "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(
            f"Unknown transport '{transport}'. Use one of: {', '.join(TRANSPORTS)}"
        )
    return transport


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    transport: str = "stdio"
    http_host: str = "0.0.0.0"
    http_port: int = 3000
    cors_origin: str = "*"
    modules_root: Optional[str] = None  # None = the mcp_starter package directory
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"
    
    @property
    def is_http(self) -> bool:
        return self.transport == "http"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    async def load(self) -> None:
        """Load configuration from environment."""
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            transport=get_transport(),
            http_host=os.getenv("HOST", "0.0.0.0"),
            http_port=int(os.getenv("PORT", "3000")),
            cors_origin=os.getenv("CORS_ORIGIN", "*"),
            modules_root=os.getenv("MODULES_ROOT") or None,
        )
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
    
    def override(self, **changes) -> Config:
        """Apply explicit overrides (e.g. CLI flags) on top of the loaded config."""
        config = self.get()
        for key, value in changes.items():
            if value is None:
                continue
            if not hasattr(config, key):
                raise AttributeError(f"Unknown config field: {key}")
            setattr(config, key, value)
        return config
