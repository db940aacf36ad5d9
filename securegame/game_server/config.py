"""Service configuration read from the environment."""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list, dropping blanks and surrounding whitespace."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    api_key: str = "dev-api-key-changeme"
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.environ.get("SECUREGAME_API_KEY", cls.api_key),
            log_level=os.environ.get("SECUREGAME_LOG_LEVEL", cls.log_level).upper(),
            allowed_origins=parse_origins(os.environ.get("SECUREGAME_ALLOWED_ORIGINS", "*")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
