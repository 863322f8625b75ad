"""A local stand-in for a Vault host, served by aiohttp's test server."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from aiohttp import web
from aiohttp.test_utils import TestServer

from vault_api_mcp.config import VaultConnection

SESSION_ID = "test-session-id"
CLIENT_ID = "vault-api-mcp-tests"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: List[Tuple[str, str]]
    headers: Dict[str, str]
    text: str = ""
    form: List[Tuple[str, Any]] = field(default_factory=list)

    def json(self):
        return json.loads(self.text)


class VaultStub:
    """Records every request and answers with canned responses keyed by (method, path)"""

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._responses: Dict[Tuple[str, str], Tuple[int, bytes, str]] = {}
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        self.server = TestServer(app)

    async def start(self) -> None:
        await self.server.start_server()

    async def close(self) -> None:
        await self.server.close()

    def connection(self, **overrides) -> VaultConnection:
        settings = dict(
            vault_dns=f"{self.server.host}:{self.server.port}",
            session_id=SESSION_ID,
            client_id=CLIENT_ID,
            scheme="http",
        )
        settings.update(overrides)
        return VaultConnection(**settings)

    def respond(self, method: str, path: str, *, status: int = 200, json_body: Any = None,
                body: Optional[bytes] = None, content_type: str = "application/json") -> None:
        if json_body is not None:
            body = json.dumps(json_body).encode()
        self._responses[(method, path)] = (status, body or b"", content_type)

    async def _handle(self, request: web.Request) -> web.Response:
        record = RecordedRequest(
            method=request.method,
            path=request.path,
            query=list(request.query.items()),
            headers=dict(request.headers),
        )
        if request.content_type in ("multipart/form-data", "application/x-www-form-urlencoded"):
            posted = await request.post()
            for name, value in posted.items():
                if isinstance(value, web.FileField):
                    record.form.append((name, (value.filename, value.file.read())))
                else:
                    record.form.append((name, value))
        else:
            record.text = await request.text()
        self.requests.append(record)

        status, body, content_type = self._responses.get(
            (request.method, request.path),
            (404, b'{"responseStatus": "FAILURE", "errors": [{"type": "NOT_FOUND"}]}', "application/json"),
        )
        return web.Response(status=status, body=body, content_type=content_type)
