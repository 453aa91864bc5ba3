"""structlog setup.

Logs go to stderr: stdout belongs to the answer, which the orchestrator reads
verbatim. Loggers are wrapped with their own processors instead of going
through `structlog.configure`, so a solution's own structlog setup is left
untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog

from esb_fireplace.core.config import FireplaceSettings

_settings: FireplaceSettings | None = None


def setup_logging(settings: FireplaceSettings | None = None) -> None:
    """Select the settings used by loggers returned from `get_logger`."""

    global _settings
    _settings = settings or FireplaceSettings()


def get_logger(name: str):
    settings = _settings
    if settings is None:
        setup_logging()
        settings = _settings

    numeric_level = getattr(logging, settings.log_level, logging.WARNING)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    # sys.stderr is looked up per logger so a swapped stream (test runners) is honoured.
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
        logger_name=name,
    )
