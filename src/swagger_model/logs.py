"""structlog setup.

Library modules log through ``get_logger``: structlog on top of a stdlib
logger under ``swagger_model``, which carries a NullHandler, so nothing is
emitted until the host (or the CLI, via ``configure_logging``) opts in.
"""

import logging
import sys

import structlog

from swagger_model.config import Settings

PACKAGE_LOGGER = "swagger_model"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str):
    return structlog.wrap_logger(logging.getLogger(name))


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time (e.g. under CliRunner)."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if settings.LOG_FORMAT == "json"
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    if not any(isinstance(h, _StderrHandler) for h in package_logger.handlers):
        package_logger.addHandler(_StderrHandler())
