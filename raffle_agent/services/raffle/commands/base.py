import re
from abc import ABC, abstractmethod

from raffle_agent.core.exceptions import MoltraffleAPIError
from raffle_agent.core.logger import get_logger
from raffle_agent.integrations.moltraffle import MoltraffleClient
from raffle_agent.services.raffle.extraction import ADDRESS_RE, extract_address
from raffle_agent.services.raffle.formatter import RaffleFormatter
from raffle_agent.services.raffle.result import CommandResult, TransactionIntent

logger = get_logger(__name__)


class BaseRaffleCommand(ABC):
    """
    Base class for raffle commands.
    Each command decides whether it applies to a message and turns the
    message into a single platform call plus formatted output.
    """

    name: str = ""
    similes: list[str] = []
    description: str = ""
    examples: list[tuple[str, str]] = []

    # None means the command applies to any message
    applicability_pattern: re.Pattern | None = None

    def __init__(self, client: MoltraffleClient):
        """
        Initialize command.

        Args:
            client: Client for the raffle platform, already bound to its base URL
        """
        self.client = client
        self.formatter = RaffleFormatter()

        if not self.name:
            raise ValueError(f"name must be set on {self.__class__.__name__}")

    def validate(self, text: str) -> bool:
        """Cheap check whether this command applies to the message."""
        if self.applicability_pattern is None:
            return True
        return self.applicability_pattern.search(text) is not None

    def matches_name(self, name: str) -> bool:
        name = name.strip().upper()
        return name == self.name or name in self.similes

    @abstractmethod
    async def _execute(self, text: str) -> CommandResult:
        """
        Run the command.
        Must be implemented in subclasses; platform errors may propagate.
        """
        pass

    def _failure_message(self, error: MoltraffleAPIError, text: str) -> str:
        return f"Failed to run {self.name}: {error}"

    @staticmethod
    def _intent(to: str | None, value: str, calldata: str | None, label: str | None) -> TransactionIntent:
        """Build a transaction intent, rejecting actions without transaction data."""
        if not to or not calldata:
            raise MoltraffleAPIError("Action is missing transaction data")
        return TransactionIntent(to=to, value=value, calldata=calldata, label=label)

    async def handle(self, text: str) -> CommandResult:
        """
        Run the command for a message.

        Args:
            text: Free-form message text

        Returns:
            Result carrying the text for the user; platform failures are
            reported as an unsuccessful result, never raised
        """
        logger.info(f"Running {self.name} for message (length: {len(text)})")
        try:
            result = await self._execute(text)
        except MoltraffleAPIError as e:
            logger.warning(f"{self.name} failed: {e}")
            return CommandResult.fail(self._failure_message(e, text))

        if not result.success:
            logger.info(f"{self.name} declined: {result.text.splitlines()[0]}")
        return result


class AddressCommand(BaseRaffleCommand, ABC):
    """Command that targets one raffle by its contract address."""

    applicability_pattern = ADDRESS_RE
    missing_address_prompt: str = "Please provide a raffle contract address (0x...)."
    failure_prefix: str = "Failed to fetch raffle"

    async def _execute(self, text: str) -> CommandResult:
        address = extract_address(text)
        if address is None:
            return CommandResult.fail(self.missing_address_prompt)
        return await self._execute_for(address, text)

    @abstractmethod
    async def _execute_for(self, address: str, text: str) -> CommandResult:
        pass

    def _failure_message(self, error: MoltraffleAPIError, text: str) -> str:
        return f"{self.failure_prefix} {extract_address(text)}: {error}"
