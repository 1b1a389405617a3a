import sys
import logging
from typing import Any, Set

from loguru import logger

from trmnl_nfl.config.settings import settings

# Values that must never appear verbatim in log output (e.g. webhook plugin IDs)
_secrets: Set[str] = set()


def register_secret(value: str) -> None:
    """Registers a value to be masked in every subsequent log record."""
    if value:
        _secrets.add(value)


def mask_value(value: str) -> str:
    """Masks a secret, keeping a short prefix/suffix when it is long enough."""
    if len(value) > 8:
        return value[:4] + "****" + value[-4:]
    return "********"


def sensitive_data_filter(record: dict[str, Any]) -> bool:
    """Filter function to mask registered secrets in log records."""
    for secret in _secrets:
        if secret in record["message"]:
            record["message"] = record["message"].replace(secret, mask_value(secret))

    # Also mask secrets passed through logger.bind()/extra
    extra = record.get("extra")
    if isinstance(extra, dict):
        for key, value in extra.items():
            if isinstance(value, str):
                for secret in _secrets:
                    if secret in value:
                        value = value.replace(secret, mask_value(secret))
                extra[key] = value

    return True  # Keep the record after filtering/masking


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """Configures Loguru logger based on application settings.

    Everything goes to stderr; stdout is reserved for the command's own output.
    """
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=False,  # Locals may hold the plugin ID
        filter=sensitive_data_filter,
    )

    # Intercept standard logging messages
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug(f"Logging initialized with level: {settings.log_level}")
