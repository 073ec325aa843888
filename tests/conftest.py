"""Pytest fixtures: a recorded fake gateway and a configured Intouch client."""

import json

import httpx
import pytest

from intouch import Intouch, IntouchConfig


class FakeGateway:
    """Records every request and answers with the queued (status, body) pairs."""

    def __init__(self):
        self.requests = []
        self._responses = []

    def reply(self, body, status_code: int = 200):
        self._responses.append((status_code, body))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self._responses.pop(0) if self._responses else (200, {"status": "SUCCESSFUL"})
        if isinstance(body, (str, bytes)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def config():
    return IntouchConfig(
        agent_code="AGT001",
        partner_id="CI8724",
        partner_name="Acme Shop",
        login_api="0708517414",
        password_api="XXXX",
        username="api-user",
        password="api-secret",
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def intouch(config, gateway):
    return Intouch(config, transport=gateway.transport)
