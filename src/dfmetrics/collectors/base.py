"""Base collector interface."""

from __future__ import annotations

import logging
import socket
import time
from abc import ABC, abstractmethod
from collections.abc import Collection

from ..models import CollectionReport, FilesystemUsageRecord, ParseFailure

log = logging.getLogger(__name__)


def default_scheme() -> str:
    """Metric prefix used when the caller supplies none."""
    return f"{socket.gethostname()}.disk"


class BaseCollector(ABC):
    """Abstract base class for disk usage collectors.

    Subclasses only enumerate records; turning them into metric tuples
    and a report is shared.
    """

    def __init__(
        self,
        scheme: str | None = None,
        *,
        fs_types: Collection[str] | None = None,
    ) -> None:
        if scheme is None:
            scheme = default_scheme()
        if not scheme:
            raise ValueError("scheme must be a non-empty string")
        self.scheme = scheme
        self.fs_types = frozenset(fs_types) if fs_types else None

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name reported alongside the metrics."""
        ...

    @abstractmethod
    def read_records(self) -> tuple[list[FilesystemUsageRecord], list[ParseFailure]]:
        """Enumerate device-backed filesystems.

        Raises CommandFailure when the underlying source is unavailable.
        """
        ...

    def collect(self) -> CollectionReport:
        """Run one collection pass."""
        timestamp = int(time.time())
        records, failures = self.read_records()

        report = CollectionReport(scheme=self.scheme, timestamp=timestamp, source=self.name)
        for record in records:
            report.add_record(record)
        report.failures.extend(failures)

        for failure in failures:
            log.warning(
                "malformed_line",
                extra={
                    "source": self.name,
                    "line_number": failure.line_number,
                    "line": failure.line,
                    "code": failure.kind.value,
                },
            )

        log.info(
            "collection_complete",
            extra={
                "scheme": self.scheme,
                "source": self.name,
                "status": report.status.value,
                "metrics": len(report.metrics),
                "failures": len(report.failures),
            },
        )
        return report
