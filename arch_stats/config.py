"""Configuration management for the ArchStats report renderer."""

from dataclasses import dataclass
from enum import Enum

from decouple import Choices
from decouple import config


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


def default_log_format(environment: Environment) -> str:
    """Console logs for local development, JSON everywhere else."""
    if environment == Environment.DEVELOPMENT:
        return "text"
    return "json"


@dataclass
class Config:
    """Configuration for the ArchStats report renderer."""

    # Required fields
    api_base: str
    api_key: str

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Stats API configuration
    api_timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 120.0
    leaderboard_page_size: int = 10

    # Skin lookup configuration
    mojang_api_url: str = "https://api.mojang.com"
    session_server_url: str = "https://sessionserver.mojang.com"
    skin_timeout_seconds: float = 5.0

    # Assets
    font_path: str = "./Minecraft.ttf"
    background_path: str = "./background.png"
    fallback_skin_path: str = "./steve.jpg"
    footer_credit: str = "Made by KessudMC"

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        # Helper function to simplify config calls
        def get_config(key: str, default=None, cast=None):
            if default is not None:
                if cast is not None:
                    return config(key, default=default, cast=cast)
                else:
                    return config(key, default=default)
            else:
                return config(key)

        env = Environment(
            get_config("ENVIRONMENT", "development", Choices(["development", "CI", "production"]))
        )

        return cls(
            # Required
            api_base=get_config("API_BASE").rstrip("/"),
            api_key=get_config("API_KEY"),
            # Environment
            environment=env,
            # Stats API
            api_timeout_seconds=get_config("API_TIMEOUT_SECONDS", 10.0, float),
            cache_ttl_seconds=get_config("CACHE_TTL_SECONDS", 120.0, float),
            leaderboard_page_size=get_config("LEADERBOARD_PAGE_SIZE", 10, int),
            # Skin lookup
            mojang_api_url=get_config("MOJANG_API_URL", "https://api.mojang.com").rstrip("/"),
            session_server_url=get_config(
                "SESSION_SERVER_URL", "https://sessionserver.mojang.com"
            ).rstrip("/"),
            skin_timeout_seconds=get_config("SKIN_TIMEOUT_SECONDS", 5.0, float),
            # Assets
            font_path=get_config("FONT_PATH", "./Minecraft.ttf"),
            background_path=get_config("BACKGROUND_PATH", "./background.png"),
            fallback_skin_path=get_config("FALLBACK_SKIN_PATH", "./steve.jpg"),
            footer_credit=get_config("FOOTER_CREDIT", "Made by KessudMC"),
            # Logging
            log_level=get_config("LOG_LEVEL", "INFO"),
            log_format=get_config(
                "LOG_FORMAT", default_log_format(env), Choices(["json", "text"])
            ),
        )
