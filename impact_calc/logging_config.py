import logging
import sys
from environs import Env
from .log_filters import RedactingFilter

# Loggers that may print request URLs carrying the NeoWs api_key
HTTP_LOGGERS = ("httpx", "impact_calc.infrastructure.api.clients")


def resolve_log_level(env: Env) -> int:
    """LOGGING_LEVEL as a logging constant; DEBUG=true forces DEBUG."""
    if env.bool("DEBUG", default=False):
        return logging.DEBUG

    level_name = env.str("LOGGING_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")
    return level


def configure_http_loggers(level: int, max_length: int = 200) -> None:
    for name in HTTP_LOGGERS:
        http_logger = logging.getLogger(name)
        http_logger.setLevel(level)
        if not any(isinstance(f, RedactingFilter) for f in http_logger.filters):
            http_logger.addFilter(RedactingFilter(max_length=max_length))

    # Connection-level chatter from httpcore stays at INFO or above
    logging.getLogger("httpcore").setLevel(max(level, logging.INFO))


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Already configured by the host application
        return

    level = resolve_log_level(env)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    configure_http_loggers(level)

    for logger_name in list(logging.Logger.manager.loggerDict):
        if logger_name.startswith("impact_calc"):
            existing = logging.getLogger(logger_name)
            if existing.level == logging.NOTSET:
                existing.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
