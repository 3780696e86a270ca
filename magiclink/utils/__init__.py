"""Utility helpers for encoding and time operations."""

from .encoding import b64decode, b64encode
from .time import timestamp, to_unix, utc_now

__all__ = ["b64encode", "b64decode", "utc_now", "timestamp", "to_unix"]
