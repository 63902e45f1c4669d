import logging
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Outbound HTTP
    verify_ssl: bool = True
    timeout: float = 15

    # Log intended posts instead of sending them, regardless of the host's mode
    dry_run: bool = False

    log_level: str = "INFO"

    model_config = {"env_prefix": "SLACKISTRANO_", "env_file": ".env", "extra": "ignore"}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the package logger for standalone runs."""
    logger = logging.getLogger("slackistrano")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel((level or settings.log_level).upper())
