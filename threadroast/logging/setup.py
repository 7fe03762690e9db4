"""Structlog configuration for threadroast."""

import logging
import sys

import structlog

from threadroast.config import RoastConfig, LogFormat


def configure_logging(config: RoastConfig | None = None) -> None:
    """
    Configure structlog processors and renderer from settings.

    Provider SDK loggers (httpx, openai, apify_client) go through the
    standard library at the same level so their warnings share the stream.

    Args:
        config: RoastConfig instance, uses defaults if None
    """
    if config is None:
        config = RoastConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structlog logger bound to a component name.

    Args:
        name: Optional component name, bound as ``logger_name``

    Returns:
        BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
