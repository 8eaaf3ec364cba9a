"""structlog output for the demo.

The package itself only emits stdlib records.  This routes them through
structlog's ``ProcessorFormatter`` on stderr so stdout stays reserved for the
JSON report:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (``DATE_AND_TIME_LOG_JSON``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from .schema import DemoSettings

PACKAGE_LOGGER = "date_and_time"


def configure_logging(settings: DemoSettings) -> logging.Handler:
    """Install a single stderr handler on the root logger and return it.

    ``settings.verbose`` lowers the package logger to DEBUG; everything else
    stays at WARNING.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    return handler
