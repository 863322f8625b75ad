"""MCP tools for the Veeva Vault REST API."""

from .catalog import ALL_ENDPOINTS, build_endpoint_manager
from .config import VaultConnection

__all__ = ["ALL_ENDPOINTS", "build_endpoint_manager", "VaultConnection"]
