"""structlog setup for the scoring pipeline.

Chains, modules and scorers log snake_case events (``chain_executed``,
``scorer_failed``) with keyword context. During routing the router binds
the event id as ``correlation_id`` so every line written while an event
is processed can be joined back to it. Output is one JSON object per
line for log shipping, or colored console lines while developing.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

APP_NAME = "contribution_scoring"


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every entry with ``app=contribution_scoring``."""
    event_dict["app"] = APP_NAME
    return event_dict


def _renderers(json_logs: bool) -> list[Processor]:
    if json_logs:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """Route structlog through stdlib logging on stdout.

    Called once at startup, usually through
    ``pipeline.factory.initialize_logging`` with the ``log_level`` and
    ``json_logs`` settings. Unknown level names fall back to INFO.

    Args:
        log_level: Level name for the root logger
        json_logs: Render JSON lines instead of console output

    Example:
        >>> setup_logging(log_level="DEBUG", json_logs=True)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    # merge_contextvars precedes the renderers
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        *_renderers(json_logs),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module-level logger, e.g. ``logger = get_logger(__name__)``."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def bind_context(**kwargs: Any) -> None:
    """Attach keys to every entry logged from the current task.

    Example:
        >>> bind_context(correlation_id="evt-1", event_type="com.github.issues.opened")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
