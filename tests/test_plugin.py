"""Tests for the command registry."""

import asyncio

import pytest

from raffle_agent.core.exceptions import CommandNotFoundError
from raffle_agent.services.raffle import RafflePlugin
from tests.conftest import ADDRESS, make_raffle


@pytest.fixture
def plugin(moltraffle_client) -> RafflePlugin:
    return RafflePlugin(moltraffle_client)


def test_commands_are_ordered(plugin):
    assert [command.name for command in plugin.commands] == [
        "LIST_RAFFLES",
        "GET_RAFFLE",
        "JOIN_RAFFLE",
        "CREATE_RAFFLE",
        "DRAW_WINNER",
    ]


def test_commands_share_the_client(plugin, moltraffle_client):
    assert all(command.client is moltraffle_client for command in plugin.commands)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("JOIN_RAFFLE", "JOIN_RAFFLE"),
        ("buy_ticket", "JOIN_RAFFLE"),
        (" pick_winner ", "DRAW_WINNER"),
        ("ACTIVE_RAFFLES", "LIST_RAFFLES"),
        ("inspect_raffle", "GET_RAFFLE"),
        ("launch_raffle", "CREATE_RAFFLE"),
    ],
)
def test_get_command_by_name_or_simile(plugin, name, expected):
    assert plugin.get_command(name).name == expected


def test_get_command_unknown(plugin):
    with pytest.raises(CommandNotFoundError):
        plugin.get_command("CLAIM_PRIZE")


def test_applicable_without_address(plugin):
    names = [command.name for command in plugin.applicable("create a raffle")]
    assert names == ["LIST_RAFFLES", "CREATE_RAFFLE"]


def test_applicable_with_address(plugin):
    names = [command.name for command in plugin.applicable(f"status of {ADDRESS}")]
    assert names == ["LIST_RAFFLES", "GET_RAFFLE", "JOIN_RAFFLE", "DRAW_WINNER"]


def test_run_dispatches_to_command(plugin, platform):
    platform.respond(f"/api/raffle/{ADDRESS}", json=make_raffle())

    result = asyncio.run(plugin.run("RAFFLE_INFO", f"info {ADDRESS}"))

    assert result.success is True
    assert result.action == "GET_RAFFLE"


def test_describe_lists_metadata(plugin):
    description = plugin.describe()

    assert description["name"] == "moltraffle"
    assert len(description["commands"]) == 5
    join = description["commands"][2]
    assert join["name"] == "JOIN_RAFFLE"
    assert "BUY_TICKET" in join["similes"]
    assert join["examples"][0]["user"].startswith("Join raffle")
