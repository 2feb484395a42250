"""structlog setup for the loaders, the container, the API and the CLI.

Events render as coloured key/value lines on the console, or as one JSON
object per line when ``log_format`` is ``json``. JSON events also carry the
application name and environment of the settings they were configured with.
The rate graph and the transaction aggregator never log.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars
from structlog.types import EventDict, Processor

from international_business.config import Settings, get_settings

# Loggers that are chatty at DEBUG while serving or testing the API
_QUIET_LOGGERS = ("httpcore", "httpx", "uvicorn.access")

log_context = bound_contextvars


def app_context_processor(settings: Settings) -> Processor:
    """Build a processor stamping ``app`` and ``environment`` on every event."""
    app_name = settings.app_name
    environment = settings.environment.value

    def add_app_context(
        logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_app_context


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain for the configured log format, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors += [
            app_context_processor(settings),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging on stderr.

    Stdout stays free for CLI output. Call once at startup.
    """
    if settings is None:
        settings = get_settings()
    level = getattr(logging, settings.log_level.value)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    if settings.log_file:
        _add_file_handler(settings.log_file, level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def _add_file_handler(log_file: Path, level: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s"))
    logging.getLogger().addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind request-scoped values onto every following event."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
