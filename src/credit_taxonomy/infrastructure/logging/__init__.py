"""Logging for applications that embed the CRediT taxonomy.

The library modules only call ``structlog.get_logger(__name__)``; nothing is
configured on import.  Host applications call :func:`setup_logging` (or
:func:`setup_logging_from_settings`) once at start-up.

Registry events (``role_lookup_miss``, ``catalog_integrity_violation``, ...)
are tagged with the taxonomy standard they refer to, and the verbosity of the
``credit_taxonomy`` logger tree can be set apart from the host's root level so
that per-lookup debug events stay quiet in a debug-level application.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

TAXONOMY_LOGGER = "credit_taxonomy"
TAXONOMY_STANDARD = "ANSI/NISO Z39.104-2022"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def tag_taxonomy_events(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor adding ``taxonomy_standard`` to library events."""
    name = event_dict.get("logger", "")
    if name == TAXONOMY_LOGGER or name.startswith(TAXONOMY_LOGGER + "."):
        event_dict.setdefault("taxonomy_standard", TAXONOMY_STANDARD)
    return event_dict


def setup_logging(
    level: str = "info",
    json_output: bool = False,
    library_level: str | None = None,
) -> None:
    """Route structlog and stdlib logging through one renderer.

    Args:
        level: Root log level (``debug``, ``info``, ``warning``, ...).
        json_output: Render single-line JSON instead of console output.
        library_level: Level for the ``credit_taxonomy`` loggers; defaults
            to *level*.
    """
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        tag_taxonomy_events,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer: Any = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=pre_chain,
    ))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_level(level))
    logging.getLogger(TAXONOMY_LOGGER).setLevel(_level(library_level or level))

    structlog.get_logger(__name__).info(
        "logging_configured",
        level=level,
        library_level=library_level or level,
        json_output=json_output,
    )


def setup_logging_from_settings() -> None:
    """Configure logging from :mod:`credit_taxonomy.config` settings."""
    from credit_taxonomy.config import get_settings

    current = get_settings()
    setup_logging(
        level=current.log_level,
        json_output=current.log_json,
        library_level=current.library_log_level,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog bound logger."""
    return structlog.get_logger(name)


__all__ = [
    "TAXONOMY_LOGGER",
    "TAXONOMY_STANDARD",
    "get_logger",
    "setup_logging",
    "setup_logging_from_settings",
    "tag_taxonomy_events",
]
