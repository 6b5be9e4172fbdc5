"""Core collection entry point."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from .collectors import default_scheme, get_collector
from .config import settings
from .models import CollectionReport


def collect(
    scheme: str | None = None,
    *,
    source: str | None = None,
    fs_types: Collection[str] | None = None,
    command: Sequence[str] | None = None,
    timeout: float | None = None,
) -> CollectionReport:
    """Run a single disk usage collection pass.

    Args:
        scheme: Metric prefix (default: METRIC_SCHEME or "<hostname>.disk")
        source: "df" or "psutil" (default: METRICS_SOURCE)
        fs_types: Only report these filesystem types (default: FILESYSTEM_TYPES)
        command: df command line (default: DF_COMMAND)
        timeout: Command timeout in seconds (default: DF_TIMEOUT_SECONDS)

    Returns:
        CollectionReport with metrics in input-line order

    Raises:
        CommandFailure: the usage source could not be read at all
    """
    if scheme is None:
        scheme = settings.metric_scheme or default_scheme()

    collector = get_collector(
        source or settings.metrics_source,
        scheme,
        fs_types=settings.filesystem_types if fs_types is None else fs_types,
        command=command or settings.df_command,
        timeout=settings.command_timeout_seconds if timeout is None else timeout,
    )
    return collector.collect()
