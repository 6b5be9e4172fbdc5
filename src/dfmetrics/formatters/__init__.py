"""Output formatters."""

from __future__ import annotations

from .base import BaseFormatter
from .graphite import GraphiteFormatter
from .json_fmt import JsonFormatter
from .prometheus import PrometheusFormatter
from .table import TableFormatter

__all__ = [
    "BaseFormatter",
    "FORMATS",
    "GraphiteFormatter",
    "JsonFormatter",
    "PrometheusFormatter",
    "TableFormatter",
    "get_formatter",
]

FORMATS: dict[str, type[BaseFormatter]] = {
    "graphite": GraphiteFormatter,
    "json": JsonFormatter,
    "prometheus": PrometheusFormatter,
    "table": TableFormatter,
}


def get_formatter(fmt: str) -> BaseFormatter:
    """Get formatter by name."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt}. Available: {', '.join(FORMATS.keys())}")

    return FORMATS[fmt]()
