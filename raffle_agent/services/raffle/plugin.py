"""Registry bundling the raffle commands for a host runtime."""

from typing import Any

from raffle_agent.core.exceptions import CommandNotFoundError
from raffle_agent.core.logger import get_logger
from raffle_agent.integrations.moltraffle import MoltraffleClient
from raffle_agent.services.raffle.commands import (
    BaseRaffleCommand,
    CreateRaffleCommand,
    DrawWinnerCommand,
    GetRaffleCommand,
    JoinRaffleCommand,
    ListRafflesCommand,
)
from raffle_agent.services.raffle.result import CommandResult

logger = get_logger(__name__)

COMMAND_CLASSES: list[type[BaseRaffleCommand]] = [
    ListRafflesCommand,
    GetRaffleCommand,
    JoinRaffleCommand,
    CreateRaffleCommand,
    DrawWinnerCommand,
]


class RafflePlugin:
    """Set of raffle commands sharing one platform client."""

    name = 'moltraffle'
    description = (
        'Interact with moltraffle.fun: permissionless on-chain raffles on Base mainnet. '
        'Create raffles, join raffles, draw winners, and claim prizes. All actions return '
        "transaction calldata for the agent's wallet provider to sign and send."
    )

    def __init__(self, client: MoltraffleClient):
        """
        Initialize plugin.

        Args:
            client: Client for the raffle platform
        """
        self.client = client
        self.commands: list[BaseRaffleCommand] = [cls(client) for cls in COMMAND_CLASSES]

    def get_command(self, name: str) -> BaseRaffleCommand:
        """
        Find a command by its name or one of its similes.

        Raises:
            CommandNotFoundError: if nothing is registered under the name
        """
        for command in self.commands:
            if command.matches_name(name):
                return command
        raise CommandNotFoundError(f'Unknown command: {name}')

    def applicable(self, text: str) -> list[BaseRaffleCommand]:
        return [command for command in self.commands if command.validate(text)]

    async def run(self, name: str, text: str) -> CommandResult:
        command = self.get_command(name)
        logger.debug(f'Dispatching message to {command.name}')
        return await command.handle(text)

    def describe(self) -> dict[str, Any]:
        """Plugin metadata for hosts."""
        return {
            'name': self.name,
            'description': self.description,
            'commands': [
                {
                    'name': command.name,
                    'similes': list(command.similes),
                    'description': command.description,
                    'examples': [
                        {'user': user, 'agent': agent} for user, agent in command.examples
                    ],
                }
                for command in self.commands
            ],
        }
