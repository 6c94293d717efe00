import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Controls logging and how much diagnostic detail error envelopes expose.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    EXPOSE_TECHNICAL_MESSAGES: bool = _env_flag(
        "EXPOSE_TECHNICAL_MESSAGES", os.getenv("ENVIRONMENT", "production") == "development"
    )

    @classmethod
    def expose_technical_messages(cls) -> bool:
        return cls.EXPOSE_TECHNICAL_MESSAGES

    @classmethod
    def log_level(cls) -> int:
        level = logging.getLevelName(cls.LOG_LEVEL.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {cls.LOG_LEVEL!r}")
        return level

    @classmethod
    def validate(cls) -> None:
        if not cls.ENVIRONMENT:
            raise ValueError("ENVIRONMENT environment variable must not be empty")
        cls.log_level()
