"""Parsing of POSIX `df -PT` output.

Expected layout (one header line, then one line per mount):

    Filesystem     Type  1024-blocks    Used Available Capacity Mounted on
    /dev/sda1      ext4     20000000 8000000  11000000      43% /

Each line resolves to one of three outcomes:
  - a FilesystemUsageRecord (device-backed and well formed),
  - None (not device-backed, or filtered out by type),
  - a ParseFailure (device-backed but malformed, or blank).
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterator

from .models import FilesystemUsageRecord, ParseFailure

DEVICE_RE = re.compile(r"^/dev/([^/]+)")
KIB_RE = re.compile(r"[0-9]+")
PERCENT_RE = re.compile(r"([0-9]+)(?:\.[0-9]+)?%?")

DF_FIELD_COUNT = 7


def device_name(filesystem: str) -> str | None:
    """Return the first path segment after /dev/, or None."""
    m = DEVICE_RE.match(filesystem)
    return m.group(1) if m else None


def _to_kib(value: str) -> int:
    if not KIB_RE.fullmatch(value):
        raise ValueError(f"invalid kilobyte count {value!r}")
    return int(value)


def _to_percent(value: str) -> int:
    # "43%" -> 43, "43.7%" -> 43
    m = PERCENT_RE.fullmatch(value)
    if not m:
        raise ValueError(f"invalid capacity {value!r}")
    return int(m.group(1))


def parse_line(
    line: str,
    line_number: int = 0,
    fs_types: Collection[str] | None = None,
) -> FilesystemUsageRecord | ParseFailure | None:
    """Parse a single df data line."""
    tokens = line.split(maxsplit=DF_FIELD_COUNT - 1)
    if not tokens:
        return ParseFailure(line_number, line, "empty line")

    device = device_name(tokens[0])
    if device is None:
        return None

    if len(tokens) < DF_FIELD_COUNT:
        return ParseFailure(
            line_number,
            line,
            f"expected {DF_FIELD_COUNT} fields, got {len(tokens)}",
        )

    filesystem, fstype, total, used, avail, capacity, mountpoint = tokens
    if fs_types and fstype not in fs_types:
        return None

    try:
        return FilesystemUsageRecord(
            device=device,
            used_kib=_to_kib(used),
            available_kib=_to_kib(avail),
            capacity_percent=_to_percent(capacity),
            fstype=fstype,
            total_kib=_to_kib(total),
            mountpoint=mountpoint.rstrip(),
            filesystem=filesystem,
        )
    except ValueError as exc:
        return ParseFailure(line_number, line, f"non-numeric field: {exc}")


def iter_data_lines(output: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every line after the header.

    Line numbers are 1-based and count the header. A single trailing
    newline does not produce an empty data line.
    """
    lines = output.splitlines()
    for idx, line in enumerate(lines[1:], start=2):
        yield idx, line


def parse_df_output(
    output: str,
    fs_types: Collection[str] | None = None,
) -> tuple[list[FilesystemUsageRecord], list[ParseFailure]]:
    """Parse full df output into records and per-line failures."""
    records: list[FilesystemUsageRecord] = []
    failures: list[ParseFailure] = []
    for line_number, line in iter_data_lines(output):
        result = parse_line(line, line_number, fs_types)
        if isinstance(result, ParseFailure):
            failures.append(result)
        elif result is not None:
            records.append(result)
    return records, failures
