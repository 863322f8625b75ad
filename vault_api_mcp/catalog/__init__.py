"""Declarative table of the Vault API v25.2 endpoints exposed as tools."""

from typing import Optional

from ..config import VaultConnection
from ..dynamic.endpoint_manager import EndpointManager
from . import audit, components, debug, objects, picklists, queues, sandbox, scim

ALL_ENDPOINTS = (
    picklists.ENDPOINTS
    + sandbox.ENDPOINTS
    + debug.ENDPOINTS
    + queues.ENDPOINTS
    + scim.ENDPOINTS
    + audit.ENDPOINTS
    + components.ENDPOINTS
    + objects.ENDPOINTS
)


def build_endpoint_manager(connection: Optional[VaultConnection] = None) -> EndpointManager:
    """Create an EndpointManager with every catalog endpoint registered"""
    manager = EndpointManager(connection)
    manager.add_endpoints(ALL_ENDPOINTS)
    return manager


__all__ = ["ALL_ENDPOINTS", "build_endpoint_manager"]
