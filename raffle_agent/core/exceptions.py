class MoltraffleError(Exception):
    """Base error for the raffle platform integration."""


class MoltraffleAPIError(MoltraffleError):
    """Transport failure or unexpected response from the raffle platform."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MoltraffleValidationError(MoltraffleAPIError):
    """The platform rejected the request and explained why."""

    def __init__(self, error: str | None, details: list[str], status_code: int | None = None):
        super().__init__(error or 'Validation failed', status_code)
        self.error = error
        self.details = details

    def lines(self) -> list[str]:
        """Detail lines, falling back to the top-level error."""
        if self.details:
            return list(self.details)
        return [self.error] if self.error else []


class CommandNotFoundError(MoltraffleError):
    """No command is registered under the requested name."""
