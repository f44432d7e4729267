"""
Logging configuration for the job tracker.

Application loggers live under "jobtracker." (see get_logger). The MCP gateway
logger can run at its own level (GATEWAY_LOG_LEVEL) so outbound search calls can
be traced without turning on DEBUG everywhere. Per-request access lines and SQL
echo are kept at WARNING.
"""
import logging
import sys

from jobtracker.app.core.config import settings

GATEWAY_LOGGER = "jobtracker.services.mcp_client"
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "python_multipart", "multipart")


def _to_level(name: str | None, default: int) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def setup_logging(level: str | None = None, gateway_level: str | None = None) -> logging.Logger:
    """Configure application logging. Returns the jobtracker logger."""
    app_level = _to_level(level or settings.log_level, logging.INFO)
    logging.basicConfig(
        level=app_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # NOTSET makes the gateway logger follow the jobtracker level
    logging.getLogger(GATEWAY_LOGGER).setLevel(
        _to_level(gateway_level or settings.gateway_log_level, logging.NOTSET)
    )

    app_logger = logging.getLogger("jobtracker")
    app_logger.setLevel(app_level)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"jobtracker.{name}")
