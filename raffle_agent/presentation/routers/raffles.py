from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from raffle_agent.core.config import env_config
from raffle_agent.core.exceptions import CommandNotFoundError
from raffle_agent.core.logger import get_logger
from raffle_agent.integrations.moltraffle import MoltraffleClient
from raffle_agent.services.raffle import CommandResult, RafflePlugin

logger = get_logger(__name__)

router = APIRouter(prefix='/api/raffle-agent', tags=['raffle-agent'])

_moltraffle_client: MoltraffleClient | None = None
_plugin: RafflePlugin | None = None


class CommandRequest(BaseModel):
    text: str


def get_moltraffle_client() -> MoltraffleClient:
    """Dependency for getting MoltraffleClient."""
    global _moltraffle_client # noqa
    if _moltraffle_client is None:
        _moltraffle_client = MoltraffleClient(
            base_url=env_config.MOLTRAFFLE_BASE_URL,
            timeout=env_config.MOLTRAFFLE_TIMEOUT,
        )
    return _moltraffle_client


def get_plugin() -> RafflePlugin:
    """Dependency for getting RafflePlugin."""
    global _plugin # noqa
    if _plugin is None:
        _plugin = RafflePlugin(get_moltraffle_client())
        logger.info(f'Plugin {_plugin.name} initialized with {len(_plugin.commands)} commands')
    return _plugin


def set_plugin(plugin: RafflePlugin | None):
    """Replace the plugin instance (used to point the router at another backend)."""
    global _plugin # noqa
    _plugin = plugin


async def close_clients():
    """Close clients on application shutdown."""
    global _moltraffle_client, _plugin # noqa
    if _moltraffle_client:
        await _moltraffle_client.close()
        _moltraffle_client = None
        logger.info('Clients closed')
    _plugin = None


@router.get('/commands')
async def list_commands():
    """
    Get plugin metadata: command names, similes, descriptions and examples.
    """
    return get_plugin().describe()


@router.get('/commands/applicable')
async def get_applicable_commands(text: str = Query(..., description='Message text')):
    """
    Get names of commands whose validator accepts the message.

    - **text**: Free-form message
    """
    plugin = get_plugin()
    return {'commands': [command.name for command in plugin.applicable(text)]}


@router.post('/commands/{name}', response_model=CommandResult)
async def run_command(name: str, payload: CommandRequest):
    """
    Run a command for a message.

    - **name**: Command name or simile, e.g. JOIN_RAFFLE or BUY_TICKET
    - **text**: Free-form message the parameters are extracted from

    Failures of the command itself are returned with success=false, not as HTTP errors.
    """
    plugin = get_plugin()
    try:
        return await plugin.run(name, payload.text)
    except CommandNotFoundError as e:
        raise HTTPException(404, str(e))
