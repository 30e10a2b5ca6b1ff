"""Tests for the HTTP surface exposing the commands."""
# pylint: disable=redefined-outer-name

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from raffle_agent.main import app
from raffle_agent.presentation.routers import raffles
from raffle_agent.services.raffle import RafflePlugin
from tests.conftest import ADDRESS, make_raffle


@pytest.fixture
def client(moltraffle_client) -> Iterator[TestClient]:
    raffles.set_plugin(RafflePlugin(moltraffle_client))
    yield TestClient(app)
    raffles.set_plugin(None)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["platform"].startswith("http")


def test_list_commands(client):
    resp = client.get("/api/raffle-agent/commands")

    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()["commands"]][0] == "LIST_RAFFLES"


def test_applicable_commands(client):
    resp = client.get("/api/raffle-agent/commands/applicable", params={"text": f"draw {ADDRESS}"})

    assert resp.status_code == 200
    assert "DRAW_WINNER" in resp.json()["commands"]
    assert "CREATE_RAFFLE" not in resp.json()["commands"]


def test_run_command_success(client, platform):
    platform.respond("/api/raffles", json={"raffles": []})

    resp = client.post("/api/raffle-agent/commands/show_raffles", json={"text": "what's on?"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["text"] == "No active raffles found on moltraffle.fun right now."
    assert body["intent"] is None


def test_run_command_failure_is_not_http_error(client, platform):
    platform.respond(f"/api/raffle/{ADDRESS}", json=make_raffle())

    resp = client.post("/api/raffle-agent/commands/DRAW_WINNER", json={"text": f"draw {ADDRESS}"})

    assert resp.status_code == 200
    assert resp.json()["success"] is False
    assert "deadline not passed" in resp.json()["text"]


def test_run_command_returns_intent(client, platform):
    platform.respond(f"/api/raffle/{ADDRESS}", json=make_raffle())

    resp = client.post("/api/raffle-agent/commands/JOIN_RAFFLE", json={"text": f"join {ADDRESS} 2 tickets"})

    intent = resp.json()["intent"]
    assert intent == {"to": ADDRESS, "value": "2000000", "calldata": "0xjoin0001", "label": "joinRaffle(uint256)"}


def test_run_unknown_command(client):
    resp = client.post("/api/raffle-agent/commands/CLAIM_PRIZE", json={"text": "claim"})

    assert resp.status_code == 404


def test_run_command_with_out_of_range_deadline(client, platform):
    platform.respond(f"/api/raffle/{ADDRESS}", json=make_raffle(deadline=10 ** 12, deadlineISO=None))

    resp = client.post("/api/raffle-agent/commands/GET_RAFFLE", json={"text": f"info {ADDRESS}"})

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert "Deadline: 1000000000000" in resp.json()["text"]
