"""Vault endpoint invoker and MCP server package.

This package turns declarative Vault API endpoint descriptors into HTTP
requests, agent tools and MCP tools.
"""

from .core import VaultMCPServer, format_tool_result
from .endpoint_manager import EndpointManager, prepare_request
from .exceptions import RequestValidationError
from .models import (
    APIEndpoint,
    APIParameter,
    BodyEncoding,
    FilePart,
    HTTPMethod,
    ParamLocation,
    PreparedRequest,
    ResponseType,
)

__all__ = [
    "VaultMCPServer",
    "EndpointManager",
    "prepare_request",
    "format_tool_result",
    "RequestValidationError",
    "APIEndpoint",
    "APIParameter",
    "BodyEncoding",
    "FilePart",
    "HTTPMethod",
    "ParamLocation",
    "PreparedRequest",
    "ResponseType",
]
