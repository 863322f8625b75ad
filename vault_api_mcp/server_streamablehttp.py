import contextlib
import logging
import os
import sys
from collections.abc import AsyncIterator

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from vault_api_mcp.catalog import build_endpoint_manager
from vault_api_mcp.config import VaultConnection
from vault_api_mcp.dynamic import VaultMCPServer

logging.basicConfig(stream=sys.stderr, level=logging.INFO, format='[%(levelname)s] %(message)s')

endpoint_manager = build_endpoint_manager(VaultConnection.from_env())
vault_server = VaultMCPServer("vault-api-mcp", endpoint_manager)


async def list_endpoints_handler(request: Request) -> JSONResponse:
    """HTTP endpoint to list all configured endpoints

    Args:
        request: Starlette request object

    Returns:
        JSON response with list of endpoints
    """
    endpoints = endpoint_manager.list_endpoints()
    return JSONResponse({
        "success": True,
        "endpoints": endpoints,
        "count": len(endpoints)
    })


async def get_endpoint_handler(request: Request) -> JSONResponse:
    """HTTP endpoint to describe a single endpoint

    Args:
        request: Starlette request with endpoint name in path parameters

    Returns:
        JSON response with the endpoint description, 404 if unknown
    """
    endpoint_name = request.path_params.get("name")
    endpoint = endpoint_manager.get_endpoint(endpoint_name)
    if endpoint is None:
        logging.warning(f"[VaultHTTP] Endpoint '{endpoint_name}' not found")
        return JSONResponse({
            "success": False,
            "message": f"Endpoint '{endpoint_name}' not found"
        }, status_code=404)
    return JSONResponse({"success": True, "endpoint": endpoint.describe()})


async def health_handler(request: Request) -> JSONResponse:
    """Health check endpoint

    Reports whether a Vault connection is configured; it never calls Vault.
    """
    missing = endpoint_manager.connection.missing_fields()
    return JSONResponse({
        "status": "healthy",
        "server": "vault-api-mcp",
        "endpoints_count": len(endpoint_manager.endpoints),
        "tools_count": len(endpoint_manager.tools),
        "connection_configured": not missing,
        "missing_settings": missing,
    })


def create_app(session_manager: StreamableHTTPSessionManager) -> Starlette:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8080))

    async def handle_streamable_http(scope: Scope, receive: Receive, send: Send) -> None:
        """Handle MCP protocol requests via streamable HTTP"""
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        """Context manager for session manager lifecycle."""
        async with session_manager.run():
            logging.info(f"[VaultHTTP] Vault API MCP Server started on {host}:{port}")
            logging.info("[VaultHTTP] Available endpoints:")
            logging.info(f"[VaultHTTP]   - POST http://{host}:{port}/ (MCP protocol)")
            logging.info(f"[VaultHTTP]   - GET http://{host}:{port}/api/endpoints (List endpoints)")
            logging.info(f"[VaultHTTP]   - GET http://{host}:{port}/api/endpoints/{{name}} (Describe endpoint)")
            logging.info(f"[VaultHTTP]   - GET http://{host}:{port}/health (Health check)")
            logging.info(f"[VaultHTTP] {len(endpoint_manager.tools)} tools ready")

            missing = endpoint_manager.connection.missing_fields()
            if missing:
                logging.warning(f"[VaultHTTP] Vault connection incomplete, tool calls will fail until set: {missing}")
            try:
                yield
            finally:
                logging.info("[VaultHTTP] Vault API MCP Server shutting down...")

    return Starlette(
        debug=False,
        routes=[
            Route("/api/endpoints", list_endpoints_handler, methods=["GET"]),
            Route("/api/endpoints/{name}", get_endpoint_handler, methods=["GET"]),
            Route("/health", health_handler, methods=["GET"]),
            Mount("/", app=handle_streamable_http),
        ],
        lifespan=lifespan,
    )


def main() -> None:
    """Main function to start the Vault API MCP HTTP server"""
    port = int(os.getenv("PORT", 8080))
    host = os.getenv("HOST", "0.0.0.0")

    session_manager = StreamableHTTPSessionManager(
        app=vault_server.get_server(),
        event_store=None,
        json_response=True,
        stateless=True,
    )
    starlette_app = create_app(session_manager)

    import uvicorn
    uvicorn.run(starlette_app, host=host, port=port)


if __name__ == "__main__":
    main()

__all__ = [
    "list_endpoints_handler",
    "get_endpoint_handler",
    "health_handler",
    "create_app",
    "main",
]
