"""Shared pytest fixtures: a scripted fake device behind httpx.MockTransport."""

from typing import Any

import httpx
import pytest

from vyrest.client import Client
from vyrest.config import ClientConfig


class FakeDevice:
    """
    Answers requests from per-(method, path) scripts.

    Each script is a list of canned responses consumed in order; the last one
    keeps answering once the rest are used up. Unscripted requests get 404.
    Paths are matched in their encoded form.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._scripts: dict[tuple[str, str], list[Any]] = {}

    def script(self, method: str, path: str, *responses: Any) -> None:
        self._scripts[(method.upper(), path)] = list(responses)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method.upper() and r.url.raw_path.decode() == path
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        script = self._scripts.get((request.method, request.url.raw_path.decode()))
        if not script:
            return httpx.Response(404)
        canned = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(canned, Exception):
            raise canned
        if callable(canned):
            return canned(request)
        return httpx.Response(**canned)


def reply(status: int = 200, **kwargs: Any) -> dict[str, Any]:
    """Canned response for ``FakeDevice.script`` (json=, text=, headers=)."""
    return {"status_code": status, **kwargs}


@pytest.fixture
def device():
    return FakeDevice()


@pytest.fixture
def config():
    return ClientConfig(host="router.test", username="vyatta", password="secret")


@pytest.fixture
def client(config, device):
    c = Client(config, http_transport=httpx.MockTransport(device))
    yield c
    c.close()


SESSIONS = {
    "message": "",
    "session": [
        {"id": "S1", "username": "vyatta", "description": "mine"},
        {"id": "S2", "username": "admin", "description": "theirs"},
        {"id": "S3", "username": "vyatta", "description": "also mine"},
    ],
}

PROCESSES = {
    "process": [
        {"id": "P1", "username": "vyatta", "command": "show version"},
        {"id": "P2", "username": "admin", "command": "ping 192.0.2.1"},
        {"id": "P3", "username": "vyatta", "command": "monitor interfaces"},
    ]
}
