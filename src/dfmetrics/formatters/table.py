"""Table formatter for human-readable output."""

from __future__ import annotations

from datetime import datetime, timezone

from ..models import CollectionReport
from .base import BaseFormatter


def _human_bytes(n: int) -> str:
    """Binary-unit rendering, e.g. 7.63 GiB."""
    value = float(n)
    for unit in ("B", "KiB", "MiB", "GiB", "TiB"):
        if abs(value) < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PiB"


class TableFormatter(BaseFormatter):
    """Format report as human-readable table."""

    def format(self, report: CollectionReport) -> str:
        ts = datetime.fromtimestamp(report.timestamp, tz=timezone.utc).isoformat(timespec="seconds")
        lines: list[str] = [
            "=" * 78,
            f"  Disk Space - {report.scheme} - {ts}",
            "=" * 78,
            f"Source: {report.source} | Status: {report.status.value.upper()}",
            "",
        ]

        if report.records:
            lines.append(
                f"  {'DEVICE':<12} {'TYPE':<8} {'USED':>12} {'AVAILABLE':>12} {'CAP':>5}  MOUNT"
            )
            for r in report.records:
                lines.append(
                    f"  {r.device[:12]:<12} {r.fstype[:8]:<8}"
                    f" {_human_bytes(r.used_bytes):>12} {_human_bytes(r.available_bytes):>12}"
                    f" {r.capacity_percent:>4}%  {r.mountpoint}"
                )
        else:
            lines.append("  No device-backed filesystems found.")

        if report.failures:
            lines.append("")
            lines.append(f"Malformed lines ({len(report.failures)}):")
            for f in report.failures:
                lines.append(f"  line {f.line_number}: {f.line!r} ({f.reason})")

        lines.append("")
        lines.append("=" * 78)

        return "\n".join(lines)
