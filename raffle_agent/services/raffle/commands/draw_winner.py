from raffle_agent.services.raffle.commands.base import AddressCommand
from raffle_agent.services.raffle.result import CommandResult


class DrawWinnerCommand(AddressCommand):
    """Prepares the permissionless drawWinner transaction."""

    name = "DRAW_WINNER"
    similes = ["PICK_WINNER", "SELECT_WINNER", "TRIGGER_DRAW", "FINALIZE_RAFFLE"]
    description = (
        "Returns calldata to trigger winner selection (drawWinner) for a moltraffle raffle. "
        "This is permissionless: anyone can call it after the deadline. "
        "Chainlink VRF then selects the winner."
    )
    examples = [
        ("Draw the winner for raffle 0xabc...",
         "Ready to draw winner for **Community Raffle**.\n\nTransaction details:..."),
    ]

    missing_address_prompt = "Please provide the raffle contract address (0x...) to draw a winner."
    failure_prefix = "Failed to get draw calldata for"

    async def _execute_for(self, address: str, text: str) -> CommandResult:
        raffle = await self.client.get_raffle(address)

        draw_action = raffle.actions.get("draw")
        if draw_action is None or not draw_action.available:
            reason = draw_action.reason if draw_action and draw_action.reason else "draw not available yet"
            return CommandResult.fail(f"Cannot draw winner for {address}: {reason}")

        intent = self._intent(draw_action.to, "0", draw_action.calldata, draw_action.function)
        return CommandResult.ok(
            self.formatter.format_draw(raffle, draw_action),
            action=self.name,
            intent=intent,
            data={"to": draw_action.to, "calldata": draw_action.calldata, "raffleAddress": address},
        )
