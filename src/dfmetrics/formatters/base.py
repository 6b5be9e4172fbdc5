"""Base formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import CollectionReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, report: CollectionReport) -> str:
        """Format a collection report to string."""
        ...
