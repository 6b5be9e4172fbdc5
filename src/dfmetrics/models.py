"""Data carried through a single collection pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from .errors import EXIT_OK, EXIT_PARTIAL, ErrorKind

KIB = 1024

# (suffix, unit) pairs in emission order
METRIC_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("used", "bytes"),
    ("available", "bytes"),
    ("capacity", "percent"),
)


class MetricTuple(NamedTuple):
    name: str
    value: int


@dataclass(frozen=True, slots=True)
class FilesystemUsageRecord:
    """One device-backed mount line, figures as reported (KiB)."""

    device: str
    used_kib: int
    available_kib: int
    capacity_percent: int
    fstype: str = ""
    total_kib: int | None = None
    mountpoint: str = ""
    filesystem: str = ""

    @property
    def used_bytes(self) -> int:
        return self.used_kib * KIB

    @property
    def available_bytes(self) -> int:
        return self.available_kib * KIB


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A single input line that could not be decomposed."""

    line_number: int
    line: str
    reason: str
    kind: ErrorKind = ErrorKind.PARSE_FAILURE


class CollectionStatus(str, Enum):
    OK = "ok"
    PARTIAL = "partial"

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self is CollectionStatus.OK else EXIT_PARTIAL


def metric_tuples(record: FilesystemUsageRecord, scheme: str) -> list[MetricTuple]:
    """Build the three metric tuples for *record*, in emission order."""
    values = (record.used_bytes, record.available_bytes, record.capacity_percent)
    return [
        MetricTuple(f"{scheme}.{record.device}.{suffix}.{unit}", value)
        for (suffix, unit), value in zip(METRIC_SUFFIXES, values)
    ]


@dataclass
class CollectionReport:
    """Result of one collection pass.

    Failures never remove successfully parsed metrics; they only downgrade
    the status to PARTIAL.
    """

    scheme: str
    timestamp: int
    source: str = "df"
    records: list[FilesystemUsageRecord] = field(default_factory=list)
    metrics: list[MetricTuple] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)

    @property
    def status(self) -> CollectionStatus:
        return CollectionStatus.PARTIAL if self.failures else CollectionStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is CollectionStatus.OK

    def add_record(self, record: FilesystemUsageRecord) -> None:
        self.records.append(record)
        self.metrics.extend(metric_tuples(record, self.scheme))

    def as_mapping(self) -> dict[str, int]:
        """Metric name to value; a repeated name keeps its last value."""
        return {m.name: m.value for m in self.metrics}
