from raffle_agent.core.exceptions import MoltraffleAPIError
from raffle_agent.services.raffle.commands.base import AddressCommand
from raffle_agent.services.raffle.extraction import extract_ticket_count
from raffle_agent.services.raffle.result import CommandResult


class JoinRaffleCommand(AddressCommand):
    """Prepares the transaction for buying tickets in a raffle."""

    name = "JOIN_RAFFLE"
    similes = ["ENTER_RAFFLE", "BUY_TICKET", "PARTICIPATE_RAFFLE", "JOIN_MOLTRAFFLE"]
    description = (
        "Returns the calldata needed to join a moltraffle raffle. Provide the raffle address and "
        "optionally a ticket count. The agent's wallet provider must sign and send the transaction."
    )
    examples = [
        ("Join raffle 0xabc... with 2 tickets",
         "Ready to join **Community Raffle** with 2 ticket(s).\n\nTransaction details:\n  to: 0xabc..."),
    ]

    missing_address_prompt = "Please provide a raffle contract address (0x...) to join."
    failure_prefix = "Failed to get join calldata for"

    async def _execute_for(self, address: str, text: str) -> CommandResult:
        ticket_count = extract_ticket_count(text)
        raffle = await self.client.get_raffle(address)

        join_action = raffle.actions.get("join")
        if join_action is None or not join_action.available:
            reason = join_action.reason if join_action and join_action.reason else "join not available"
            return CommandResult.fail(f"Cannot join raffle {address}: {reason}")

        try:
            # entryFee is in base units and may exceed 2**53
            total_value = str(int(raffle.entryFee) * ticket_count)
        except ValueError as e:
            raise MoltraffleAPIError(f"Invalid entry fee: {raffle.entryFee}") from e
        calldata = join_action.calldata_example or join_action.calldata
        intent = self._intent(join_action.to, total_value, calldata, join_action.function)

        return CommandResult.ok(
            self.formatter.format_join(raffle, join_action, ticket_count, total_value, calldata),
            action=self.name,
            intent=intent,
            data={
                "to": join_action.to,
                "value": total_value,
                "calldata": calldata,
                "ticketCount": ticket_count,
                "raffle": {"address": address, "title": raffle.title, "entryFee": raffle.entryFee},
            },
        )
