"""
Chart Pruner - structlog setup.

Output goes to stdout through the standard library root logger, rendered as
console lines or JSON depending on LoggingSettings.log_format. Modules log
with ``structlog.get_logger(__name__)`` and snake_case event names.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

from chart_pruner.config.settings import LoggingSettings

APP_NAME = "chart-pruner"


def add_app_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = APP_NAME
    return event_dict


def _renderer(settings: LoggingSettings):
    if settings.json_format:
        return structlog.processors.JSONRenderer()
    # Colours only when a human is watching
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(settings: LoggingSettings) -> None:
    """
    Route structlog events to stdout at the configured level.

    Args:
        settings: Level and format resolved by load_logging_settings()
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            add_app_context,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Module loggers are created at import; caching would pin them to
        # whatever configuration was active on their first call
        cache_logger_on_first_use=False,
    )
