"""Prometheus metrics formatter."""

from __future__ import annotations

from ..models import CollectionReport, FilesystemUsageRecord
from .base import BaseFormatter

# (metric, help, record attribute)
_DISK_GAUGES: tuple[tuple[str, str, str], ...] = (
    ("dfmetrics_disk_used_bytes", "Used disk space in bytes", "used_bytes"),
    ("dfmetrics_disk_available_bytes", "Available disk space in bytes", "available_bytes"),
    ("dfmetrics_disk_capacity_percent", "Disk capacity used percentage", "capacity_percent"),
)


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _labels(scheme: str, record: FilesystemUsageRecord) -> str:
    pairs = (
        ("scheme", scheme),
        ("device", record.device),
        ("mountpoint", record.mountpoint),
        ("fstype", record.fstype),
    )
    return ",".join(f'{key}="{_escape(value)}"' for key, value in pairs)


class PrometheusFormatter(BaseFormatter):
    """Format report as Prometheus metrics."""

    def format(self, report: CollectionReport) -> str:
        lines: list[str] = []

        if report.records:
            for metric, help_text, attr in _DISK_GAUGES:
                lines.append(f"# HELP {metric} {help_text}")
                lines.append(f"# TYPE {metric} gauge")
                for record in report.records:
                    labels = _labels(report.scheme, record)
                    lines.append(f"{metric}{{{labels}}} {getattr(record, attr)}")

        scheme = _escape(report.scheme)
        lines.append("# HELP dfmetrics_parse_failures Unparseable df lines in the last pass")
        lines.append("# TYPE dfmetrics_parse_failures gauge")
        lines.append(f'dfmetrics_parse_failures{{scheme="{scheme}"}} {len(report.failures)}')

        return "\n".join(lines)
