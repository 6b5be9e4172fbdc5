"""Disk usage collectors."""

from __future__ import annotations

from typing import Any

from .base import BaseCollector, default_scheme
from .disk import DiskUsageCollector
from .psutil_disk import PsutilDiskCollector

__all__ = [
    "BaseCollector",
    "DiskUsageCollector",
    "PsutilDiskCollector",
    "default_scheme",
    "get_collector",
]

SOURCES = ("df", "psutil")


def get_collector(source: str, scheme: str | None = None, **kwargs: Any) -> BaseCollector:
    """Get collector by source name."""
    if source == "df":
        return DiskUsageCollector(scheme, **kwargs)
    if source == "psutil":
        kwargs.pop("command", None)
        kwargs.pop("timeout", None)
        return PsutilDiskCollector(scheme, **kwargs)

    raise ValueError(f"Unknown source: {source}. Available: {', '.join(SOURCES)}")
