from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvConfig(BaseSettings):
    """Settings sourced from environment variables and an optional .env file."""
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    APP_NAME: str = Field(default='moltraffle-agent')
    APP_HOST: str = Field(default='0.0.0.0')
    APP_PORT: int = Field(default=8000)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default='INFO')

    # Raffle platform backend
    MOLTRAFFLE_BASE_URL: str = Field(default='https://moltraffle.fun')
    MOLTRAFFLE_TIMEOUT: float = Field(default=30.0)


class AppConfig:
    """Static application settings."""

    CORS_ORIGINS: list[str] = ['*']

    RAFFLES_STATUS: str = 'active'
    RAFFLES_PAGE_SIZE: int = 20


env_config = EnvConfig()
app_config = AppConfig()
