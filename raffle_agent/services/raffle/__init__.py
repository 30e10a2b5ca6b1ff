"""Text-triggered raffle commands."""

from raffle_agent.services.raffle.formatter import RaffleFormatter
from raffle_agent.services.raffle.plugin import RafflePlugin
from raffle_agent.services.raffle.result import CommandResult, TransactionIntent

__all__ = [
    'CommandResult',
    'RaffleFormatter',
    'RafflePlugin',
    'TransactionIntent',
]
