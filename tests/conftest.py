import socket
import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from urllib.parse import parse_qs

import pytest
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response

from readycash import Account, MemoryCredentialStore
from readycash.common.config import Config

CONFIG = Config()


@dataclass
class RecordedCall:
    method: str
    path: str
    query: dict[str, str]
    headers: dict[str, str]
    body: bytes

    @property
    def form(self) -> dict[str, str]:
        return {k: v[0] for k, v in parse_qs(self.body.decode()).items()}


@dataclass
class StubGateway:
    """In-process gateway that records calls and replays canned responses."""

    token: str = "Bearer Token"
    session_id: str = "1234"
    login_status: int = 200
    login_body: bytes = b'{"first_time": false}'
    url: str = ""
    calls: list[RecordedCall] = field(default_factory=list)
    routes: dict[str, list[tuple[int, bytes]]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}", self.handle, methods=["GET", "POST"]
        )

    def respond(self, path: str, *responses: tuple[int, bytes]) -> None:
        """Queue responses for a path; the last one repeats."""
        self.routes[path] = list(responses)

    def calls_to(self, path: str) -> list[RecordedCall]:
        return [c for c in self.calls if c.path == path]

    async def handle(self, request: Request) -> Response:
        call = RecordedCall(
            method=request.method,
            path=request.url.path,
            query=dict(request.query_params),
            headers={k.lower(): v for k, v in request.headers.items()},
            body=await request.body(),
        )
        self.calls.append(call)

        if call.path == CONFIG.LOGIN_PATH:
            headers = {}
            if self.login_status == 200:
                headers = {
                    "Authorization": self.token,
                    "X-SessionID": self.session_id,
                }
            return Response(
                content=self.login_body,
                status_code=self.login_status,
                headers=headers,
                media_type="application/json",
            )

        queue = self.routes.get(call.path)
        if not queue:
            return Response(content=b"OK", status_code=400)
        status, content = queue.pop(0) if len(queue) > 1 else queue[0]
        return Response(
            content=content, status_code=status, media_type="application/json"
        )


@pytest.fixture
def gateway() -> Iterator[StubGateway]:
    """Run a stub gateway on a free local port."""
    stub = StubGateway()

    host = "127.0.0.1"
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        port = s.getsockname()[1]

    server = uvicorn.Server(
        uvicorn.Config(stub.app, host=host, port=port, log_level="warning")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            msg = "stub gateway did not start"
            raise RuntimeError(msg)
        time.sleep(0.01)

    stub.url = f"http://{host}:{port}"
    yield stub

    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture
def account() -> Account:
    return Account(
        user_name="sample", password="password", pin="1234", session_length=3600
    )


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()
