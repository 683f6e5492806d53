"""
Resources
Read-only data exposed to MCP clients, discovered automatically.
"""
