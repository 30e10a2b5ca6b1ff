from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class RaffleAction(BaseModel):
    """Named operation on a raffle (join, draw, claim...)."""
    model_config = ConfigDict(extra='ignore')

    available: bool = False
    reason: str | None = None
    to: str | None = None
    function: str | None = None
    calldata: str | None = None
    calldata_example: str | None = None


class Raffle(BaseModel):
    """Raffle as returned by the platform API."""
    model_config = ConfigDict(extra='ignore')

    title: str = ''
    address: str | None = None
    status: str | int | None = None
    statusLabel: str | None = None
    entryFee: str = '0'
    entryFeeFormatted: str | None = None
    prizePool: str | None = None
    prizePoolFormatted: str | None = None
    currentParticipants: int = 0
    maxParticipants: int | None = None
    deadline: int | None = None
    deadlineISO: str | None = None
    creator: str | None = None
    winner: str | None = None
    description: str | None = None
    actions: dict[str, RaffleAction] = {}

    @field_validator('entryFee', 'prizePool', 'entryFeeFormatted', 'prizePoolFormatted', mode='before')
    @classmethod
    def _amount_to_str(cls, value, info: ValidationInfo):
        # Base-unit amounts may arrive as JSON numbers or strings
        if value is None:
            return '0' if info.field_name == 'entryFee' else None
        return value if isinstance(value, str) else str(value)

    @field_validator('actions', 'currentParticipants', mode='before')
    @classmethod
    def _null_to_empty(cls, value, info: ValidationInfo):
        if value is None:
            return {} if info.field_name == 'actions' else 0
        return value

    def available_actions(self) -> list[str]:
        """Names of the actions the platform currently allows."""
        return [name for name, action in self.actions.items() if action.available]

    def deadline_display(self) -> str:
        """Deadline as an ISO string, preferring the pre-formatted one."""
        if self.deadlineISO:
            return self.deadlineISO
        if self.deadline is None:
            return 'unknown'
        try:
            moment = datetime.fromtimestamp(self.deadline, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return str(self.deadline)
        return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    def participants_display(self) -> str:
        if self.maxParticipants:
            return f'{self.currentParticipants}/{self.maxParticipants}'
        return str(self.currentParticipants)


class RafflesResponse(BaseModel):
    """Response with raffle list."""
    model_config = ConfigDict(extra='ignore')

    raffles: list[Raffle] = []


class FactoryCalldata(BaseModel):
    """Transaction data for creating a raffle through the factory."""
    model_config = ConfigDict(extra='ignore')

    to: str
    value: str = '0'
    valueFormatted: str | None = None
    calldata: str
    function: str | None = None

    @field_validator('value', mode='before')
    @classmethod
    def _value_to_str(cls, value):
        if value is None:
            return '0'
        return value if isinstance(value, str) else str(value)


class CreateRaffleParams(BaseModel):
    """Fields needed by the factory calldata endpoint."""

    title: str
    description: str
    entryFee: str
    deadline: int
    maxParticipants: str = '0'
    prizeDescription: str = ''
    creatorCommissionBps: str = '0'

    def to_query_params(self) -> dict[str, str]:
        params = {
            'title': self.title,
            'description': self.description,
            'entryFee': self.entryFee,
            'deadline': str(self.deadline),
            'maxParticipants': self.maxParticipants,
        }
        if self.prizeDescription:
            params['prizeDescription'] = self.prizeDescription
        if self.creatorCommissionBps:
            params['creatorCommissionBps'] = self.creatorCommissionBps
        return params
