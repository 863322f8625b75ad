"""Data models for Vault API endpoints and their parameters.

This module contains the immutable descriptors that the EndpointManager turns
into HTTP requests and agent tools, plus the transient PreparedRequest that
request building produces for a single call.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple


class HTTPMethod(Enum):
    """Supported HTTP methods for API endpoints"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class BodyEncoding(Enum):
    """How the request body of an endpoint is serialized"""
    NONE = "none"
    FORM = "form"
    MULTIPART = "multipart"
    JSON = "json"


class ResponseType(Enum):
    """How a successful response body is returned to the caller"""
    JSON = "json"
    BINARY = "binary"
    CONFIRMATION = "confirmation"


class ParamLocation(Enum):
    """Where a parameter value ends up in the outgoing request"""
    PATH = "path"
    QUERY = "query"
    BODY = "body"


@dataclass(frozen=True)
class APIParameter:
    """Configuration for an API endpoint parameter

    Args:
        name: Parameter name
        type: Parameter type ("string", "integer", "number", "boolean", "object", "array")
        description: Parameter description for tool documentation
        required: Whether parameter is required (default: True)
        default: Default value for optional parameters
        location: Where the value is sent; inferred from the endpoint when None
        items: Item type for "array" parameters
    """
    name: str
    type: str
    description: str
    required: bool = True
    default: Optional[Any] = None
    location: Optional[ParamLocation] = None
    items: Optional[str] = None


@dataclass(frozen=True)
class FilePart:
    """A file field of a multipart body

    The file is read from path when the request is sent, not when it is built.
    """
    filename: str
    path: Path
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class APIEndpoint:
    """Configuration for a single Vault API endpoint

    Args:
        name: Unique endpoint name (becomes tool name)
        path: Path template below the API root (supports templating like /users/{id})
        method: HTTP method to use
        description: Endpoint description for tool documentation
        action: Phrase used in failure messages ("retrieving picklist values")
        parameters: List of endpoint parameters
        body_encoding: Serialization of the request body
        response_type: How a successful response is returned
        accept: Accept header value
        content_type: Content-Type override for JSON bodies
        versioned: Whether the path sits below /api/{version} or directly below /api
        body_builder: Optional hook turning body arguments into the wire payload
        confirmation_message: Message returned by CONFIRMATION endpoints
        timeout: Request timeout in seconds (default: transport default)
    """
    name: str
    path: str
    method: HTTPMethod
    description: str
    action: str
    parameters: List[APIParameter] = field(default_factory=list)
    body_encoding: BodyEncoding = BodyEncoding.NONE
    response_type: ResponseType = ResponseType.JSON
    accept: str = "application/json"
    content_type: Optional[str] = None
    versioned: bool = True
    body_builder: Optional[Callable[[Dict[str, Any]], Any]] = None
    confirmation_message: Optional[str] = None
    timeout: Optional[float] = None

    def location_of(self, param: APIParameter) -> ParamLocation:
        if param.location is not None:
            return param.location
        if f"{{{param.name}}}" in self.path:
            return ParamLocation.PATH
        if self.method in (HTTPMethod.GET, HTTPMethod.DELETE):
            return ParamLocation.QUERY
        return ParamLocation.BODY

    def describe(self) -> Dict[str, Any]:
        """JSON-serializable view of the descriptor"""
        return {
            "name": self.name,
            "method": self.method.value,
            "path": self.path,
            "versioned": self.versioned,
            "description": self.description,
            "body_encoding": self.body_encoding.value,
            "response_type": self.response_type.value,
            "accept": self.accept,
            "parameters": [
                {
                    "name": param.name,
                    "type": param.type,
                    "description": param.description,
                    "required": param.required,
                    "default": param.default,
                    "location": self.location_of(param).value,
                }
                for param in self.parameters
            ],
        }


@dataclass
class PreparedRequest:
    """A fully resolved request for one invocation, built before any I/O"""
    method: HTTPMethod
    url: str
    headers: Dict[str, str]
    params: List[Tuple[str, str]] = field(default_factory=list)
    body: Any = None
    body_encoding: BodyEncoding = BodyEncoding.NONE

    @property
    def path(self) -> str:
        return "/" + self.url.split("://", 1)[-1].split("/", 1)[-1]


__all__ = [
    "HTTPMethod",
    "BodyEncoding",
    "ResponseType",
    "ParamLocation",
    "APIParameter",
    "FilePart",
    "APIEndpoint",
    "PreparedRequest",
]
