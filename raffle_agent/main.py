from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from raffle_agent.core.config import env_config, app_config
from raffle_agent.core.logger import get_logger
from raffle_agent.presentation.middlewares.logging import RequestLoggingMiddleware
from raffle_agent.presentation.routers import raffles

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(
    _app: FastAPI,
) -> AsyncGenerator[None, None]:
    base_url: str = f'http://{env_config.APP_HOST}:{env_config.APP_PORT}'
    logger.info(f'Raffle agent listening on {base_url}, forwarding to {env_config.MOLTRAFFLE_BASE_URL}')
    logger.info(f'Commands: {base_url}{raffles.router.prefix}/commands (docs at {base_url}/docs)')
    yield
    logger.warning('Stopping raffle agent, closing platform client...')
    await raffles.close_clients()


def create_app() -> FastAPI:
    """Build the application exposing the raffle commands."""
    application = FastAPI(title=env_config.APP_NAME, debug=env_config.DEBUG, lifespan=lifespan)
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.CORS_ORIGINS,
        allow_methods=['GET', 'POST'],
        allow_headers=['*'],
    )
    application.include_router(raffles.router)

    @application.get('/health')
    async def health():
        return {'status': 'ok', 'platform': env_config.MOLTRAFFLE_BASE_URL}

    return application


app = create_app()


if __name__ == '__main__':
    import uvicorn

    uvicorn.run(app, host=env_config.APP_HOST, port=env_config.APP_PORT, log_level=50)
