"""Graphite plaintext formatter."""

from __future__ import annotations

from ..models import CollectionReport
from .base import BaseFormatter


class GraphiteFormatter(BaseFormatter):
    """One `<name> <value> <timestamp>` line per metric."""

    def format(self, report: CollectionReport) -> str:
        return "\n".join(
            f"{metric.name} {metric.value} {report.timestamp}" for metric in report.metrics
        )
