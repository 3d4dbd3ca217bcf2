import logging
import os

from pydantic import BaseModel, field_validator

__all__ = ["Settings", "settings"]

ENV_PREFIX = "OBJECTITER_"


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``OBJECTITER_*`` environment variables."""
        overrides = {
            field: os.environ[ENV_PREFIX + field]
            for field in cls.model_fields
            if ENV_PREFIX + field in os.environ
        }
        return cls(**overrides)


settings = Settings.load()
