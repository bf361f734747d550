"""Logging utilities built on structlog.

Events are rendered as ``key=value`` lines and handed to the standard library
logger of the same name, so the host application decides what gets emitted.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["get_logger"]
