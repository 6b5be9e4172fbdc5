from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_command(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        raw = default
    try:
        return tuple(shlex.split(raw))
    except ValueError:
        return tuple(shlex.split(default))


def _get_list(name: str) -> frozenset[str]:
    raw = os.getenv(name) or ""
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    service_name: str = field(default_factory=lambda: _get_str("SERVICE_NAME", "dfmetrics"))

    # Empty means "<hostname>.disk", resolved at collection time
    metric_scheme: str = field(default_factory=lambda: _get_str("METRIC_SCHEME", ""))

    df_command: tuple[str, ...] = field(
        default_factory=lambda: _get_command("DF_COMMAND", "df -PT")
    )
    command_timeout_seconds: float = field(
        default_factory=lambda: _get_float("DF_TIMEOUT_SECONDS", 5.0)
    )

    output_format: str = field(default_factory=lambda: _get_str("OUTPUT_FORMAT", "graphite"))
    metrics_source: str = field(default_factory=lambda: _get_str("METRICS_SOURCE", "df"))

    # Empty means no filesystem type filter
    filesystem_types: frozenset[str] = field(default_factory=lambda: _get_list("FILESYSTEM_TYPES"))


settings = Settings()
