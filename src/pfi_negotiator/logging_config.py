"""structlog setup for the PFI negotiator.

The output format follows the deployment: colored console lines while
developing, one JSON object per line anywhere else. Every event carries the
service name and environment, plus the request_id the API middleware binds
through structlog context vars.

Credential JWTs and bearer tokens pass through this service, so any event key
that could hold one is masked before rendering.

Usage:
    from pfi_negotiator.logging_config import setup_logging, get_logger
    setup_logging(get_settings())
    logger = get_logger(__name__)
    logger.info("offerings.fetched", pfi_did="did:dht:abc", count=3)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from pfi_negotiator import __version__

if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger

    from pfi_negotiator.config import Settings

SERVICE_NAME = "pfi-negotiator"
REDACTED = "***"

SENSITIVE_KEYS = frozenset({"authorization", "credential", "credentials", "token", "claims"})

# httpx logs every request line at INFO
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def redact_secrets(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Mask values logged under a key that may carry a token."""
    for key in event_dict.keys() & SENSITIVE_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def _service_context(settings: Settings) -> Processor:
    def add_service_context(
        _: WrappedLogger, __: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("version", __version__)
        event_dict.setdefault("env", settings.app_env)
        return event_dict

    return add_service_context


def resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one configured handler."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _service_context(settings),
        redact_secrets,
    ]

    renderer: Processor
    if settings.is_development:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain gives uvicorn's stdlib records the same fields
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolve_level(settings.app_log_level))

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally pre-bound with `initial_values`."""
    return structlog.get_logger(name, **initial_values)
