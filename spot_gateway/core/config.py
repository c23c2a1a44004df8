"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the names of the
credential headers and the exchange endpoint.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: Port the server listens on.
        binance_base_url: Binance Spot REST endpoint every scoped client uses.
        api_key_header: Request header carrying the caller's API key.
        secret_key_header: Request header carrying the caller's secret key.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Spot Gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000

    binance_base_url: str = "https://testnet.binance.vision"
    api_key_header: str = "apiKey"
    secret_key_header: str = "secretKey"


settings = Settings()
