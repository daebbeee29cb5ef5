"""Log routing for the mintcompat CLI.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until :func:`configure_logging` runs. The CLI calls it once; it hangs a
single structlog-formatted stderr handler on the ``mintcompat`` logger
tree and leaves the root logger alone, so a host process that embeds the
library keeps its own logging setup.

Values bound with ``structlog.contextvars`` (the transform service binds
``document``) are merged into every record, stdlib or structlog.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "mintcompat"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderers(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Handler:
    """Route ``mintcompat.*`` records to stderr through structlog.

    Calling it again replaces the previous handler. Returns the installed
    handler.

    Args:
        verbose: DEBUG for the ``mintcompat`` tree; WARNING otherwise.
        log_json: One JSON object per line instead of console rendering.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(log_json),
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return handler
