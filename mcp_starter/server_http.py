#!/usr/bin/env python3
"""
MCP Server Starter - HTTP Transport
Serves the FastMCP host over the MCP Streamable HTTP protocol.

Endpoints:
- /mcp    - MCP protocol (GET for SSE, POST for JSON-RPC, DELETE for cleanup)
- /health - Deployment health check
"""

from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from mcp_starter import __version__, __package_name__


def create_app(starter) -> Starlette:
    """Build the Starlette app for an already-initialized StarterMCPServer."""
    config = starter.config.get()
    
    async def health_check(request):
        """Health check endpoint."""
        run = starter.discovery
        registered = run.successful if run else 0
        failed = run.failed if run else 0
        return PlainTextResponse(
            f"{__package_name__} (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Modules: {registered} registered, {failed} failed\n"
            f"MCP endpoint: /mcp\n"
        )
    
    app = starter.server.streamable_http_app()
    app.router.routes.append(Route("/health", endpoint=health_check))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS", "DELETE"],
        allow_headers=["Content-Type", "mcp-session-id", "mcp-protocol-version"],
        expose_headers=["mcp-session-id"],
    )
    return app


async def serve(starter):
    """Run the HTTP server until interrupted."""
    import uvicorn
    
    config = starter.config.get()
    app = create_app(starter)
    server = uvicorn.Server(uvicorn.Config(
        app,
        host=config.http_host,
        port=config.http_port,
        log_level="info",
    ))
    
    base = f"http://{config.http_host}:{config.http_port}"
    starter.logger.info(f"{__package_name__} (HTTP) listening on {base}/mcp")
    starter.logger.info(f"SSE endpoint: GET {base}/mcp")
    starter.logger.info(f"JSON-RPC endpoint: POST {base}/mcp")
    starter.logger.info(f"CORS origin: {config.cors_origin}")
    
    await server.serve()
