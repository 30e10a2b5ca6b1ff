"""Rendering of platform responses into chat text."""

from raffle_agent.integrations.moltraffle.models import FactoryCalldata, Raffle, RaffleAction

NO_ACTIVE_RAFFLES = 'No active raffles found on moltraffle.fun right now.'

CREATE_USAGE = '\n'.join([
    'To create a raffle I need: title, description, entry fee (USDC), and deadline.',
    "Example: Create a raffle with title: 'My Raffle', description: 'A fun raffle', "
    'entry fee: 1, deadline: 1750000000, max participants: 100',
])


class RaffleFormatter:
    """Formats raffle data and transaction details as human-readable text."""

    @staticmethod
    def format_raffle_list(raffles: list[Raffle]) -> str:
        """
        Numbered list of raffles.

        Args:
            raffles: Raffles returned by the listing endpoint

        Returns:
            Text for the user; a fixed notice if the list is empty
        """
        if not raffles:
            return NO_ACTIVE_RAFFLES

        entries = []
        for i, raffle in enumerate(raffles, 1):
            entries.append('\n'.join([
                f'{i}. **{raffle.title}**',
                f'   Address: {raffle.address}',
                f'   Entry: {raffle.entryFeeFormatted} USDC',
                f'   Prize Pool: {raffle.prizePoolFormatted} USDC',
                f'   Participants: {raffle.participants_display()}',
                f'   Deadline: {raffle.deadline_display()}',
            ]))

        header = f'Found {len(raffles)} active raffle(s) on moltraffle.fun:'
        return f'{header}\n\n' + '\n\n'.join(entries)

    @staticmethod
    def format_raffle_details(raffle: Raffle) -> str:
        available = ', '.join(raffle.available_actions()) or 'none'
        lines = [
            f'**{raffle.title}**',
            f'Address: {raffle.address}',
            f'Status: {raffle.statusLabel}',
            f'Entry Fee: {raffle.entryFeeFormatted} USDC',
            f'Prize Pool: {raffle.prizePoolFormatted} USDC',
            f'Participants: {raffle.participants_display()}',
            f'Deadline: {raffle.deadline_display()}',
            f'Creator: {raffle.creator}',
            f'Winner: {raffle.winner or "Not drawn yet"}',
            f'Available Actions: {available}',
        ]
        if raffle.description:
            lines.append(f'\nDescription: {raffle.description}')
        return '\n'.join(lines)

    @staticmethod
    def format_join(
        raffle: Raffle,
        action: RaffleAction,
        ticket_count: int,
        total_value: str,
        calldata: str,
    ) -> str:
        return '\n'.join([
            f'Ready to join **{raffle.title}** with {ticket_count} ticket(s).',
            '',
            'Transaction details:',
            f'  to: {action.to}',
            f'  value: {total_value} ({raffle.entryFeeFormatted} USDC × {ticket_count})',
            f'  calldata: {calldata}',
            f'  function: {action.function}',
            '',
            f'Note: Adjust calldata ticketCount arg to {ticket_count} if different from example.',
            'Sign and send this transaction with your wallet provider to enter the raffle.',
        ])

    @staticmethod
    def format_create(title: str, calldata: FactoryCalldata) -> str:
        return '\n'.join([
            f'Ready to create raffle **{title}**.',
            '',
            'Transaction details:',
            f'  to: {calldata.to}',
            f'  value: {calldata.valueFormatted}',
            f'  calldata: {calldata.calldata}',
            f'  function: {calldata.function}',
            '',
            f'Creation fee: {calldata.valueFormatted}',
            'Sign and send this transaction with your wallet provider.',
        ])

    @staticmethod
    def format_validation_failure(lines: list[str]) -> str:
        details = '\n'.join(f'  - {line}' for line in lines)
        return f'Validation failed:\n{details}'

    @staticmethod
    def format_draw(raffle: Raffle, action: RaffleAction) -> str:
        return '\n'.join([
            f'Ready to draw winner for **{raffle.title}**.',
            '',
            'Transaction details:',
            f'  to: {action.to}',
            '  value: 0',
            f'  calldata: {action.calldata}',
            f'  function: {action.function}',
            '',
            'This is permissionless: any wallet can send this transaction.',
            'Chainlink VRF will fulfil the request in ~30 seconds and select the winner.',
        ])
