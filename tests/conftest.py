"""
Pytest configuration for the subcl test suite.

Puts src/ on the import path and provides a Subsonic server double built on
httpx.MockTransport, so no test touches the network.
"""
import sys
from pathlib import Path
from typing import Callable, Dict, List, Union

import httpx
import pytest

project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from subcl.api import SubsonicAPI  # noqa: E402
from subcl.config import SubclConfig  # noqa: E402

NAMESPACE = "http://subsonic.org/restapi"


def subsonic_xml(body: str = "", status: str = "ok") -> str:
    """Wrap ``body`` in a subsonic-response document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<subsonic-response xmlns="{NAMESPACE}" status="{status}" version="1.9.0">'
        f"{body}</subsonic-response>"
    )


def error_xml(code: int, message: str) -> str:
    return subsonic_xml(f'<error code="{code}" message="{message}"/>', status="failed")


Route = Union[str, Callable[[httpx.Request], httpx.Response]]


class FakeSubsonicServer:
    """Routes requests by endpoint name and records every request made."""

    def __init__(self):
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def route(self, endpoint: str, body: str, status_code: int = 200) -> None:
        self.routes[endpoint] = lambda request: httpx.Response(status_code, text=body)

    def route_by_id(self, endpoint: str, bodies: Dict[str, str]) -> None:
        self.routes[endpoint] = lambda request: httpx.Response(
            200, text=bodies[request.url.params["id"]]
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        if endpoint not in self.routes:
            return httpx.Response(404, text="not found")
        return self.routes[endpoint](request)

    def endpoints(self) -> List[str]:
        return [request.url.path.rsplit("/", 1)[-1] for request in self.requests]


@pytest.fixture
def config() -> SubclConfig:
    return SubclConfig.from_mapping(
        {
            "server": "https://music.example.com",
            "username": "testuser",
            "password": "testpass",
        }
    )


@pytest.fixture
def server() -> FakeSubsonicServer:
    return FakeSubsonicServer()


@pytest.fixture
def http_client(server: FakeSubsonicServer) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(server.handler))


@pytest.fixture
def api(config: SubclConfig, http_client: httpx.Client) -> SubsonicAPI:
    with SubsonicAPI(config, http_client=http_client) as subsonic_api:
        yield subsonic_api
