from raffle_agent.core.config import app_config
from raffle_agent.core.exceptions import MoltraffleAPIError
from raffle_agent.services.raffle.commands.base import BaseRaffleCommand
from raffle_agent.services.raffle.result import CommandResult


class ListRafflesCommand(BaseRaffleCommand):
    """Lists active raffles on the platform."""

    name = "LIST_RAFFLES"
    similes = ["SHOW_RAFFLES", "GET_RAFFLES", "FIND_RAFFLES", "BROWSE_RAFFLES", "ACTIVE_RAFFLES"]
    description = (
        "Lists active raffles on moltraffle.fun. Returns raffle addresses, titles, entry fees, "
        "prize pools, participant counts, and deadlines."
    )
    examples = [
        ("Show me active raffles on moltraffle",
         "Found 3 active raffle(s) on moltraffle.fun:\n\n1. **Community Raffle**\n   Address: 0x..."),
        ("What raffles can I join right now?",
         "Found 2 active raffle(s) on moltraffle.fun:..."),
    ]

    async def _execute(self, text: str) -> CommandResult:
        response = await self.client.list_raffles(
            status=app_config.RAFFLES_STATUS,
            limit=app_config.RAFFLES_PAGE_SIZE,
        )
        return CommandResult.ok(
            self.formatter.format_raffle_list(response.raffles),
            action=self.name,
        )

    def _failure_message(self, error: MoltraffleAPIError, text: str) -> str:
        return f"Failed to fetch raffles: {error}"
