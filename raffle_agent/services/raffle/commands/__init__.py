from raffle_agent.services.raffle.commands.base import AddressCommand, BaseRaffleCommand
from raffle_agent.services.raffle.commands.create_raffle import CreateRaffleCommand
from raffle_agent.services.raffle.commands.draw_winner import DrawWinnerCommand
from raffle_agent.services.raffle.commands.get_raffle import GetRaffleCommand
from raffle_agent.services.raffle.commands.join_raffle import JoinRaffleCommand
from raffle_agent.services.raffle.commands.list_raffles import ListRafflesCommand

__all__ = [
    "AddressCommand",
    "BaseRaffleCommand",
    "CreateRaffleCommand",
    "DrawWinnerCommand",
    "GetRaffleCommand",
    "JoinRaffleCommand",
    "ListRafflesCommand",
]
