from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class TransactionIntent(BaseModel):
    """Unsigned transaction handed to the caller's wallet."""

    to: str
    value: str = '0'
    calldata: str
    label: str | None = None


class CommandResult(BaseModel):
    """Outcome of a single command run."""

    success: bool
    text: str
    action: str | None = None
    intent: TransactionIntent | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def ok(
        cls,
        text: str,
        action: str | None = None,
        intent: TransactionIntent | None = None,
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        return cls(success=True, text=text, action=action, intent=intent, data=data)

    @classmethod
    def fail(cls, text: str) -> CommandResult:
        return cls(success=False, text=text)
