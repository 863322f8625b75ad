"""Endpoint management for Vault API endpoints.

This module provides the EndpointManager class which registers endpoint
descriptors, converts them to agent tools and invokes them. Request
construction is kept in prepare_request so that a call can be fully resolved
and inspected before any network I/O happens.
"""

import asyncio
import inspect
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import aiohttp
from google.adk.tools.function_tool import FunctionTool

from ..config import CLIENT_ID_HEADER, VaultConnection
from .exceptions import RequestValidationError
from .models import (
    APIEndpoint,
    APIParameter,
    BodyEncoding,
    FilePart,
    ParamLocation,
    PreparedRequest,
    ResponseType,
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

_PARAM_TYPES = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "object": dict,
}


def _annotation_for(param: APIParameter) -> Any:
    if param.type == "array":
        annotation = List[_PARAM_TYPES.get(param.items or "string", str)]
    else:
        annotation = _PARAM_TYPES.get(param.type, Any)
    if not param.required and param.default is None and annotation is not Any:
        annotation = Optional[annotation]
    return annotation


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _is_unset_flag(param: APIParameter, value: Any) -> bool:
    # a false flag with no declared default means "not requested"
    return value is False and not param.required and param.default is None


def _resolve_upload(part: FilePart, connection: VaultConnection) -> FilePart:
    if not connection.upload_dir:
        raise RequestValidationError("File uploads are disabled: no upload directory is configured")
    root = Path(connection.upload_dir).expanduser().resolve()
    path = (root / part.path).resolve()
    if path != root and root not in path.parents:
        raise RequestValidationError(f"File '{part.path}' is outside the upload directory")
    if not path.is_file():
        raise RequestValidationError(f"File '{part.path}' does not exist in the upload directory")
    return replace(part, path=path)


def prepare_request(endpoint: APIEndpoint, arguments: Dict[str, Any],
                    connection: VaultConnection) -> PreparedRequest:
    """Resolve an invocation into a PreparedRequest

    Args:
        endpoint: Descriptor of the endpoint to call
        arguments: Caller-supplied argument values keyed by parameter name
        connection: Host and credentials to use

    Returns:
        The request that would be sent

    Raises:
        RequestValidationError: If a required argument or connection setting
            is missing, or the body builder rejects the arguments
    """
    missing = [
        param.name for param in endpoint.parameters
        if param.required and _is_absent(arguments.get(param.name))
    ]
    if missing:
        raise RequestValidationError(f"Missing required parameter: {', '.join(missing)}", missing)

    missing_settings = connection.missing_fields()
    if missing_settings:
        raise RequestValidationError(
            f"Missing Vault connection setting: {', '.join(missing_settings)}", missing_settings
        )

    path = endpoint.path
    params = []
    body_args: Dict[str, Any] = {}
    for param in endpoint.parameters:
        value = arguments.get(param.name)
        if value is None:
            value = param.default
        if _is_absent(value) or _is_unset_flag(param, value):
            continue

        location = endpoint.location_of(param)
        if location is ParamLocation.PATH:
            path = path.replace(f"{{{param.name}}}", _stringify(value))
        elif location is ParamLocation.QUERY:
            params.append((param.name, _stringify(value)))
        else:
            body_args[param.name] = value

    headers = {
        "Authorization": connection.session_id,
        "Accept": endpoint.accept,
        CLIENT_ID_HEADER: connection.client_id,
    }

    body = None
    if endpoint.body_encoding is not BodyEncoding.NONE:
        if endpoint.body_builder is not None:
            try:
                body = endpoint.body_builder(body_args)
            except (KeyError, TypeError, ValueError) as e:
                raise RequestValidationError(f"Invalid request body for '{endpoint.name}': {e}") from e
        elif endpoint.body_encoding is BodyEncoding.JSON:
            body = body_args
        else:
            body = [(name, _stringify(value)) for name, value in body_args.items()]

        if endpoint.body_encoding is BodyEncoding.MULTIPART:
            body = [
                (name, _resolve_upload(value, connection) if isinstance(value, FilePart) else value)
                for name, value in body
            ]

        if endpoint.body_encoding is BodyEncoding.FORM:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        elif endpoint.body_encoding is BodyEncoding.JSON:
            headers["Content-Type"] = endpoint.content_type or JSON_CONTENT_TYPE

    return PreparedRequest(
        method=endpoint.method,
        url=connection.api_root(endpoint.versioned) + path,
        headers=headers,
        params=params,
        body=body,
        body_encoding=endpoint.body_encoding,
    )


async def _multipart_body(fields: Iterable) -> aiohttp.MultipartWriter:
    writer = aiohttp.MultipartWriter("form-data")
    for name, value in fields:
        if isinstance(value, FilePart):
            content = await asyncio.to_thread(value.path.read_bytes)
            part = writer.append(content, {"Content-Type": value.content_type})
            part.set_content_disposition("form-data", name=name, filename=value.filename)
        else:
            part = writer.append(_stringify(value))
            part.set_content_disposition("form-data", name=name)
    return writer


async def _request_kwargs(request: PreparedRequest) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"headers": request.headers}
    if request.params:
        kwargs["params"] = request.params
    if request.body is None:
        return kwargs

    if request.body_encoding is BodyEncoding.JSON:
        kwargs["data"] = json.dumps(request.body)
    elif request.body_encoding is BodyEncoding.MULTIPART:
        kwargs["data"] = await _multipart_body(request.body)
    elif request.body:
        kwargs["data"] = request.body
    return kwargs


def _failure(error_type: str, message: str, **extra: Any) -> dict:
    return {"success": False, "error_type": error_type, "message": message, **extra}


class EndpointManager:
    """Manages Vault API endpoints and their conversion to agent tools

    This class handles registering endpoint descriptors, maintaining the mapping
    between endpoints and their corresponding FunctionTools, and invoking
    endpoints against a VaultConnection.

    Args:
        connection: Default connection used when a call does not bring its own
    """

    def __init__(self, connection: Optional[VaultConnection] = None):
        self.connection = connection or VaultConnection()
        self.endpoints: Dict[str, APIEndpoint] = {}
        self.tools: Dict[str, FunctionTool] = {}
        logging.info(f"[EndpointManager] Initialized endpoint manager for {self.connection!r}")

    def add_endpoint(self, endpoint: APIEndpoint) -> None:
        """Register an endpoint and create a corresponding tool

        Args:
            endpoint: APIEndpoint configuration to add

        Raises:
            ValueError: If endpoint name already exists
        """
        if endpoint.name in self.endpoints:
            raise ValueError(f"Endpoint '{endpoint.name}' already exists")
        self.endpoints[endpoint.name] = endpoint

        sig_params = []
        annotations = {}
        for param in endpoint.parameters:
            param_type = _annotation_for(param)
            annotations[param.name] = param_type

            if param.required:
                sig_params.append(
                    inspect.Parameter(
                        param.name,
                        inspect.Parameter.KEYWORD_ONLY,
                        annotation=param_type
                    )
                )
            else:
                sig_params.append(
                    inspect.Parameter(
                        param.name,
                        inspect.Parameter.KEYWORD_ONLY,
                        default=param.default,
                        annotation=param_type
                    )
                )

        sig = inspect.Signature(sig_params, return_annotation=dict)
        endpoint_name = endpoint.name

        async def endpoint_function(*args, **kwargs):
            bound = sig.bind_partial(*args, **kwargs)
            bound.apply_defaults()
            return await self.invoke(endpoint_name, dict(bound.arguments))

        endpoint_function.__name__ = endpoint_name
        endpoint_function.__doc__ = endpoint.description
        endpoint_function.__signature__ = sig
        endpoint_function.__annotations__ = {**annotations, 'return': dict}

        self.tools[endpoint.name] = FunctionTool(endpoint_function)

        logging.info(f"[EndpointManager] Added endpoint '{endpoint.name}' as tool ({endpoint.method.value} {endpoint.path})")

    def add_endpoints(self, endpoints: Iterable[APIEndpoint]) -> None:
        for endpoint in endpoints:
            self.add_endpoint(endpoint)

    def prepare(self, endpoint_name: str, arguments: Dict[str, Any],
                connection: Optional[VaultConnection] = None) -> PreparedRequest:
        """Build the request for an endpoint without sending it

        Raises:
            KeyError: If the endpoint is not registered
            RequestValidationError: If the arguments do not make a valid request
        """
        return prepare_request(self.endpoints[endpoint_name], arguments, connection or self.connection)

    async def invoke(self, endpoint_name: str, arguments: Dict[str, Any],
                     connection: Optional[VaultConnection] = None) -> dict:
        """Call a Vault endpoint with the provided arguments

        Exactly one HTTP request is sent when the arguments are valid. Errors
        never propagate: validation, transport and remote failures are all
        returned in the same result shape.

        Args:
            endpoint_name: Name of the endpoint to call
            arguments: Arguments for the endpoint
            connection: Connection override for this call only

        Returns:
            Dict containing success status, data, and message
        """
        if endpoint_name not in self.endpoints:
            logging.error(f"[EndpointManager] Endpoint '{endpoint_name}' not found")
            return _failure("validation", f"Endpoint '{endpoint_name}' not found")

        endpoint = self.endpoints[endpoint_name]
        try:
            request = prepare_request(endpoint, arguments, connection or self.connection)
        except RequestValidationError as e:
            logging.warning(f"[EndpointManager] Rejected call to '{endpoint_name}': {e}")
            return _failure("validation", f"An error occurred while {endpoint.action}: {e}", missing=e.missing)

        logging.info(f"[EndpointManager] Calling {request.method.value} {request.path} with args: {sorted(arguments)}")

        try:
            request_kwargs = await _request_kwargs(request)
        except OSError as e:
            logging.warning(f"[EndpointManager] Could not read upload for '{endpoint_name}': {e}")
            return _failure("validation", f"An error occurred while {endpoint.action}: {e}")

        session_kwargs = {}
        if endpoint.timeout:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=endpoint.timeout)
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.request(request.method.value, request.url, **request_kwargs) as response:
                    return await self._process_response(response, endpoint)

        except asyncio.TimeoutError:
            error_msg = f"Request to {request.path} timed out"
            logging.error(f"[EndpointManager] {error_msg}")
            return _failure("transport", f"An error occurred while {endpoint.action}: {error_msg}")
        except (aiohttp.ClientError, ValueError) as e:
            logging.exception(f"[EndpointManager] Error calling endpoint '{endpoint_name}': {e}")
            return _failure("transport", f"An error occurred while {endpoint.action}: {e}")

    async def _process_response(self, response: aiohttp.ClientResponse, endpoint: APIEndpoint) -> dict:
        """Turn the HTTP response into a standardized result

        Args:
            response: HTTP response object
            endpoint: Endpoint that was called

        Returns:
            Dict containing success status, data, and message
        """
        if not 200 <= response.status < 300:
            body_text = await response.text(errors="replace")
            logging.warning(f"[EndpointManager] API call failed: {endpoint.name} returned {response.status}")
            try:
                data = json.loads(body_text)
            except ValueError:
                data = body_text
            return _failure(
                "remote",
                f"An error occurred while {endpoint.action}: {body_text}",
                status_code=response.status,
                data=data,
            )

        if endpoint.response_type is ResponseType.BINARY:
            data = await response.read()
            message = f"Downloaded {len(data)} bytes from {endpoint.name}"
        elif endpoint.response_type is ResponseType.CONFIRMATION:
            await response.read()
            data = None
            message = endpoint.confirmation_message or f"Successfully called {endpoint.name}"
        elif response.content_type and 'json' in response.content_type:
            data = await response.json(content_type=None)
            message = f"Successfully called {endpoint.name}"
        else:
            data = await response.text(errors="replace")
            message = f"Successfully called {endpoint.name}"

        logging.info(f"[EndpointManager] API call successful: {endpoint.name} returned {response.status}")
        return {
            "success": True,
            "status_code": response.status,
            "data": data,
            "message": message,
        }

    def get_endpoint(self, endpoint_name: str) -> Optional[APIEndpoint]:
        return self.endpoints.get(endpoint_name)

    def get_tools(self) -> Dict[str, FunctionTool]:
        """Get all registered tools

        Returns:
            Dictionary of tool name to FunctionTool mappings
        """
        return self.tools

    def list_endpoints(self) -> List[dict]:
        """List all configured endpoints

        Returns:
            List of endpoint configurations as dictionaries
        """
        return [endpoint.describe() for endpoint in self.endpoints.values()]


__all__ = [
    "EndpointManager",
    "prepare_request",
]
