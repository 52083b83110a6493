"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and the Rich handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import SegmentRichHandler

__all__ = [
    "LOGGER_NAME",
    "SegmentRichHandler",
    "logger",
    "setup_logger",
]
