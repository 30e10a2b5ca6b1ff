from typing import Any

import httpx
from pydantic import ValidationError

from raffle_agent.core.config import app_config
from raffle_agent.core.exceptions import MoltraffleAPIError, MoltraffleValidationError
from raffle_agent.core.logger import get_logger
from raffle_agent.integrations.moltraffle.models import (
    CreateRaffleParams,
    FactoryCalldata,
    Raffle,
    RafflesResponse,
)

logger = get_logger(__name__)


class MoltraffleClient:
    """
    Client for the moltraffle.fun backend.
    Every call is a single unauthenticated GET; nothing is retried or cached.
    """

    DEFAULT_HEADERS = {
        'Accept': 'application/json',
        'User-Agent': 'moltraffle-agent/0.1',
    }

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Origin of the raffle platform, e.g. https://moltraffle.fun
            timeout: Network timeout in seconds, enforced by httpx
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.DEFAULT_HEADERS,
                transport=self._transport,
            )
        return self._client

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """
        Execute GET request against the platform.

        Args:
            path: Path relative to the base URL
            params: Query parameters

        Returns:
            httpx Response object with a success status
        """
        client = await self._get_client()

        try:
            logger.debug(f'Executing request: GET {path} {params or ""}')
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f'Request error to {path}: {e}')
            raise MoltraffleAPIError(str(e) or e.__class__.__name__) from e

        if response.is_success:
            return response

        logger.error(f'HTTP error for request {path}: {response.status_code}')
        error, details = self._error_body(response)
        if error is not None or details:
            raise MoltraffleValidationError(error, details, response.status_code)
        raise MoltraffleAPIError(f'API error: {response.status_code}', response.status_code)

    @staticmethod
    def _error_body(response: httpx.Response) -> tuple[str | None, list[str]]:
        """Extract structured error information from a failed response."""
        try:
            data = response.json()
        except ValueError:
            return None, []
        if not isinstance(data, dict):
            return None, []

        error = data.get('error')
        details = data.get('details') or []
        if not isinstance(details, list):
            details = [details]
        return (str(error) if error is not None else None), [str(d) for d in details]

    @staticmethod
    def _parse(response: httpx.Response, model):
        """Validate a JSON response body against a model."""
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f'Unexpected response from {response.request.url}: {e}')
            raise MoltraffleAPIError(f'Unexpected response format from {response.request.url.path}') from e

    async def list_raffles(
        self,
        status: str = app_config.RAFFLES_STATUS,
        limit: int = app_config.RAFFLES_PAGE_SIZE,
    ) -> RafflesResponse:
        """Fetch raffles filtered by status."""
        response = await self.get('/api/raffles', params={'status': status, 'limit': limit})
        return self._parse(response, RafflesResponse)

    async def get_raffle(self, address: str) -> Raffle:
        """Fetch a single raffle with its actions map."""
        response = await self.get(f'/api/raffle/{address}')
        return self._parse(response, Raffle)

    async def get_create_calldata(self, params: CreateRaffleParams) -> FactoryCalldata:
        """Ask the factory endpoint to build calldata for a new raffle."""
        response = await self.get('/api/factory/calldata', params=params.to_query_params())
        return self._parse(response, FactoryCalldata)

    async def close(self):
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """Async context manager support."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager support."""
        await self.close()
