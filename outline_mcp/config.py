"""Configuration for the Outline MCP Server.

Settings are read from environment variables (and an optional .env file).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OUTLINE_API_URL = "https://app.getoutline.com/api"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Outline backend
    outline_api_key: str | None = Field(
        default=None,
        description="Fallback API key used when a request carries no credential header",
    )
    outline_api_url: str = Field(default=DEFAULT_OUTLINE_API_URL)
    request_timeout: float = Field(default=30.0, gt=0, description="Outbound timeout (seconds)")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "outline-mcp-server"

    # CORS
    cors_allowed_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Comma-separated CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
