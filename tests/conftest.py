"""Shared fixtures: a fake raffle platform served through httpx.MockTransport."""
from __future__ import annotations

from typing import Any

import httpx
import pytest

from raffle_agent.integrations.moltraffle import MoltraffleClient

BASE_URL = "https://raffles.test"
ADDRESS = "0x" + "ab" * 20
TARGET = "0x" + "cd" * 20


class FakePlatform:
    """Routes requests by path and records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, httpx.Response | str] = {}

    def respond(self, path: str, json: Any = None, status_code: int = 200, content: bytes | None = None):
        if content is not None:
            self.routes[path] = httpx.Response(status_code, content=content)
        else:
            self.routes[path] = httpx.Response(status_code, json=json)

    def fail(self, path: str, message: str):
        """Make requests to the path fail at the transport level."""
        self.routes[path] = message

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        if isinstance(route, str):
            raise httpx.ConnectError(route, request=request)
        return route


def make_raffle(**overrides) -> dict[str, Any]:
    raffle = {
        "title": "Community Raffle",
        "address": ADDRESS,
        "status": 0,
        "statusLabel": "ACTIVE",
        "entryFee": "1000000",
        "entryFeeFormatted": "1.0",
        "prizePool": "5000000",
        "prizePoolFormatted": "5.0",
        "currentParticipants": 5,
        "maxParticipants": 100,
        "deadline": 1750000000,
        "deadlineISO": "2025-06-15T15:06:40.000Z",
        "creator": TARGET,
        "winner": None,
        "description": "Monthly community raffle",
        "actions": {
            "join": {
                "available": True,
                "to": ADDRESS,
                "function": "joinRaffle(uint256)",
                "calldata_example": "0xjoin0001",
            },
            "draw": {
                "available": False,
                "reason": "deadline not passed",
            },
        },
    }
    raffle.update(overrides)
    return raffle


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def moltraffle_client(platform: FakePlatform) -> MoltraffleClient:
    return MoltraffleClient(base_url=BASE_URL, transport=httpx.MockTransport(platform.handler))
