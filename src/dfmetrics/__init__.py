"""
dfmetrics

Disk-space metrics reporter for periodic checks.

Parses `df -PT` output, keeps device-backed filesystems and emits
graphite-style `<scheme>.<device>.<suffix>.<unit>` metrics.
"""

from __future__ import annotations

from .core import collect
from .models import CollectionReport, CollectionStatus, MetricTuple

__all__ = ["CollectionReport", "CollectionStatus", "MetricTuple", "__version__", "collect"]

__version__ = "0.1.0"
