# app/config.py
import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from rich.logging import RichHandler

DEFAULT_API_KEY = "your-secret-api-key"

class Settings(BaseModel):
    """Process settings, read once from the environment."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 3000
    api_key: str = DEFAULT_API_KEY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        for field, env_name in (("host", "HOST"), ("port", "PORT"), ("api_key", "API_KEY"), ("log_level", "LOG_LEVEL")):
            raw = (os.getenv(env_name) or "").strip()
            if raw:
                values[field] = raw
        return cls(**values)

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

def configure_logging(level: str = "INFO") -> None:
    # console sink for the whole process; uvicorn's loggers propagate into it
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
