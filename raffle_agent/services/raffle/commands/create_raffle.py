import re

from raffle_agent.core.exceptions import MoltraffleAPIError, MoltraffleValidationError
from raffle_agent.integrations.moltraffle import CreateRaffleParams
from raffle_agent.services.raffle.commands.base import BaseRaffleCommand
from raffle_agent.services.raffle.extraction import (
    COMMISSION_KEYS,
    DESCRIPTION_KEYS,
    ENTRY_FEE_KEYS,
    MAX_PARTICIPANTS_KEYS,
    PRIZE_DESCRIPTION_KEYS,
    TITLE_KEYS,
    extract_deadline,
    extract_param,
)
from raffle_agent.services.raffle.formatter import CREATE_USAGE
from raffle_agent.services.raffle.result import CommandResult


def extract_create_params(text: str) -> CreateRaffleParams | None:
    """
    Pull create-raffle fields out of a message.

    Returns:
        Parameters, or None if title, description, entry fee or deadline is missing
    """
    title = extract_param(text, TITLE_KEYS)
    description = extract_param(text, DESCRIPTION_KEYS)
    entry_fee = extract_param(text, ENTRY_FEE_KEYS)
    deadline = extract_deadline(text)

    if not title or not description or not entry_fee or deadline is None:
        return None

    return CreateRaffleParams(
        title=title,
        description=description,
        entryFee=entry_fee,
        deadline=deadline,
        maxParticipants=extract_param(text, MAX_PARTICIPANTS_KEYS) or '0',
        prizeDescription=extract_param(text, PRIZE_DESCRIPTION_KEYS) or '',
        creatorCommissionBps=extract_param(text, COMMISSION_KEYS) or '0',
    )


class CreateRaffleCommand(BaseRaffleCommand):
    """Prepares the factory transaction for a new raffle."""

    name = "CREATE_RAFFLE"
    similes = ["NEW_RAFFLE", "MAKE_RAFFLE", "LAUNCH_RAFFLE", "START_RAFFLE"]
    description = (
        "Returns calldata to create a new raffle on moltraffle.fun. Requires title, description, "
        "entry fee (USDC), deadline (unix timestamp or ISO date), and max participants "
        "(0 = unlimited). Agent's wallet must sign and send."
    )
    examples = [
        ("Create a raffle with title: 'Weekend Raffle', description: 'Win big this weekend', "
         "entry fee: 2, deadline: 1750000000, max participants: 50",
         "Ready to create raffle **Weekend Raffle**.\n\nTransaction details:..."),
    ]

    applicability_pattern = re.compile(r'title|raffle|entry.?fee|create', re.IGNORECASE)

    async def _execute(self, text: str) -> CommandResult:
        params = extract_create_params(text)
        if params is None:
            return CommandResult.fail(CREATE_USAGE)

        try:
            calldata = await self.client.get_create_calldata(params)
        except MoltraffleValidationError as e:
            return CommandResult.fail(self.formatter.format_validation_failure(e.lines()))

        return CommandResult.ok(
            self.formatter.format_create(params.title, calldata),
            action=self.name,
            intent=self._intent(calldata.to, calldata.value, calldata.calldata, calldata.function),
            data=calldata.model_dump(),
        )

    def _failure_message(self, error: MoltraffleAPIError, text: str) -> str:
        return f"Failed to get create calldata: {error}"
