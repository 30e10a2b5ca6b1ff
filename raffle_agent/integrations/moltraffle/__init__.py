from raffle_agent.integrations.moltraffle.client import MoltraffleClient
from raffle_agent.integrations.moltraffle.models import (
    CreateRaffleParams,
    FactoryCalldata,
    Raffle,
    RaffleAction,
    RafflesResponse,
)

__all__ = [
    "CreateRaffleParams",
    "FactoryCalldata",
    "MoltraffleClient",
    "Raffle",
    "RaffleAction",
    "RafflesResponse",
]
