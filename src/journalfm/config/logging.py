"""structlog configuration for journalfm.

Log lines always go to stderr so they never mix with command output:

- human (default): ``structlog.dev.ConsoleRenderer``, colored on a TTY
- ``--log-json``: one JSON object per line

The codec modules log through ``logging.getLogger(__name__)`` and stay
silent below WARNING unless ``--verbose`` is given; ProcessorFormatter
renders those stdlib records with the same processors as structlog's own.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "journalfm"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Lower the ``journalfm`` logger to DEBUG.
        log_json: Render JSON lines instead of console text.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
