from raffle_agent.services.raffle.commands.base import AddressCommand
from raffle_agent.services.raffle.result import CommandResult


class GetRaffleCommand(AddressCommand):
    """Shows the full state of one raffle."""

    name = "GET_RAFFLE"
    similes = ["RAFFLE_DETAILS", "RAFFLE_INFO", "CHECK_RAFFLE", "INSPECT_RAFFLE"]
    description = (
        "Gets full details of a specific raffle on moltraffle.fun given its contract address. "
        "Returns status, prize pool, participants, deadline, and available actions."
    )
    examples = [
        ("Get details for raffle 0xabc123...",
         "**Community Raffle**\nAddress: 0xabc123...\nStatus: ACTIVE..."),
    ]

    missing_address_prompt = "Please provide a raffle contract address (0x...)."
    failure_prefix = "Failed to fetch raffle"

    async def _execute_for(self, address: str, text: str) -> CommandResult:
        raffle = await self.client.get_raffle(address)
        return CommandResult.ok(
            self.formatter.format_raffle_details(raffle),
            action=self.name,
            data=raffle.model_dump(),
        )
