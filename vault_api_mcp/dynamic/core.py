"""Core MCP server implementation for Vault API endpoints.

This module provides the VaultMCPServer class which serves as the main
MCP server that handles tool listing and execution using an EndpointManager.
"""

import base64
import json
import logging
import sys
from typing import List, Union

from google.adk.tools.mcp_tool.conversion_utils import adk_to_mcp_tool_type
from mcp import types as mcp_types
from mcp.server.lowlevel import Server

from .endpoint_manager import EndpointManager

logging.basicConfig(stream=sys.stderr, level=logging.INFO, format='[%(levelname)s] %(message)s')

ToolContent = Union[mcp_types.TextContent, mcp_types.EmbeddedResource]


def format_tool_result(name: str, result) -> List[ToolContent]:
    """Render an invocation result as MCP content

    Binary payloads are attached as a base64 blob resource next to a short
    text summary; everything else is rendered as text.
    """
    if not isinstance(result, dict):
        return [mcp_types.TextContent(type="text", text=str(result))]

    if not result.get("success"):
        message = result.get("message") or result.get("error") or "Unknown error occurred"
        return [mcp_types.TextContent(type="text", text=message)]

    data = result.get("data")
    message = result.get("message", "Success")
    if isinstance(data, (bytes, bytearray)):
        blob = mcp_types.BlobResourceContents(
            uri=f"vault://{name}",
            mimeType="application/octet-stream",
            blob=base64.b64encode(bytes(data)).decode("ascii"),
        )
        return [
            mcp_types.TextContent(type="text", text=message),
            mcp_types.EmbeddedResource(type="resource", resource=blob),
        ]
    if data:
        if isinstance(data, str):
            formatted_message = f"{message}\n\nResponse Data:\n{data}"
        else:
            formatted_message = f"{message}\n\nResponse Data:\n{json.dumps(data, indent=2)}"
        return [mcp_types.TextContent(type="text", text=formatted_message)]
    return [mcp_types.TextContent(type="text", text=message)]


class VaultMCPServer:
    """MCP Server that serves Vault endpoint tools from an EndpointManager

    This server focuses solely on MCP protocol handling (list_tools, call_tool)
    and delegates all endpoint management to an EndpointManager instance.

    Args:
        server_name: Name for the MCP server instance
        endpoint_manager: EndpointManager instance to get tools from
    """

    def __init__(self, server_name: str = "vault-api-mcp", endpoint_manager: EndpointManager = None):
        self.server_name = server_name
        self.server = Server(server_name)
        self.endpoint_manager = endpoint_manager or EndpointManager()
        self._setup_server()
        logging.info(f"[VaultMCP] Initialized MCP server '{server_name}'")

    def _setup_server(self) -> None:
        """Setup the MCP server with list_tools and call_tool handlers"""

        @self.server.list_tools()
        async def list_tools():
            tool_list = []
            for tool in self.endpoint_manager.tools.values():
                try:
                    tool_list.append(adk_to_mcp_tool_type(tool))
                except Exception as e:
                    logging.error(f"[VaultMCP] Error converting tool {tool.name} to MCP type: {e}")
            logging.info(f"[VaultMCP] Returning {len(tool_list)} tools to MCP client")
            return tool_list

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict):
            logging.info(f"[VaultMCP] Tool call: {name} with args: {sorted(arguments or {})}")
            if name not in self.endpoint_manager.tools:
                logging.warning(f"[VaultMCP] Tool '{name}' not found")
                return [mcp_types.TextContent(type="text", text=f"Tool '{name}' not found")]

            tool = self.endpoint_manager.tools[name]
            try:
                result = await tool.run_async(args=arguments or {}, tool_context=None)
            except Exception as e:
                logging.exception(f"[VaultMCP] Error executing tool '{name}': {e}")
                return [mcp_types.TextContent(type="text", text=f"Error executing tool: {str(e)}")]

            logging.info(f"[VaultMCP] Tool '{name}' success={result.get('success') if isinstance(result, dict) else None}")
            return format_tool_result(name, result)

    def get_server(self) -> Server:
        """Get the configured MCP server instance

        Returns:
            The underlying MCP Server instance
        """
        return self.server


__all__ = [
    "VaultMCPServer",
    "format_tool_result",
]
