#!/usr/bin/env python3
"""
MCP Server Starter
Creates the FastMCP host, auto-registers every discovered module and serves
it over stdio or streamable HTTP.
"""

import argparse
import asyncio
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from mcp_starter import __version__, __package_name__
from mcp_starter.config import ConfigManager
from mcp_starter.registry import DiscoveryRun, auto_register_modules
from mcp_starter.utils import Logger


class StarterMCPServer:
    """Main MCP Server for the starter."""
    
    def __init__(self, config_manager: Optional[ConfigManager] = None):
        # Initialize configuration
        self.config = config_manager or ConfigManager()
        config = self.config.get()
        
        # Initialize logger
        self.logger = Logger(name=__package_name__, level=config.log_level)
        
        # Host that every discovered module registers itself against
        self.server = FastMCP(__package_name__)
        
        # Result of the one discovery pass, set by register_modules()
        self.discovery: Optional[DiscoveryRun] = None
    
    async def register_modules(self) -> DiscoveryRun:
        """Discover and register tools, resources and prompts (once)."""
        if self.discovery is None:
            config = self.config.get()
            self.discovery = await auto_register_modules(
                self.server,
                root_dir=config.modules_root,
                logger=self.logger.getChild("registry"),
            )
        return self.discovery
    
    async def start(self, transport: Optional[str] = None, port: Optional[int] = None):
        """Start the MCP server. CLI arguments override the environment."""
        try:
            # Load configuration
            await self.config.load()
            config = self.config.override(transport=transport, http_port=port)
            self.logger.setLevel(config.log_level)
            
            await self.register_modules()
            
            if config.is_http:
                from mcp_starter.server_http import serve
                await serve(self)
                return
            
            self.logger.info(f"{__package_name__} v{__version__} running on stdio")
            await self.server.run_stdio_async()
        
        except Exception as e:
            self.logger.error(f"Failed to start server: {e}")
            raise


def main():
    parser = argparse.ArgumentParser(description="MCP Server Starter")
    parser.add_argument("--stdio", action="store_true", help="Run in stdio mode")
    parser.add_argument("--http", action="store_true", help="Run in HTTP mode")
    parser.add_argument("--port", type=int, default=None, help="HTTP port (default: $PORT or 3000)")
    args = parser.parse_args()
    
    transport = "http" if args.http else "stdio" if args.stdio else None
    
    server = StarterMCPServer()
    try:
        asyncio.run(server.start(transport=transport, port=args.port))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        server.logger.error(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
