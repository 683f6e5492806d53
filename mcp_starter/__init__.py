"""
MCP Server Starter
Convention-over-configuration MCP server with filesystem module discovery.
"""

__version__ = "1.0.0"
__package_name__ = "mcp-server-starter"
