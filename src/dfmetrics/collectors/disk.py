"""Disk usage collector backed by `df -PT`."""

from __future__ import annotations

from collections.abc import Callable, Collection, Sequence

from ..command import DEFAULT_DF_COMMAND, DEFAULT_TIMEOUT_SECONDS, run_df
from ..models import FilesystemUsageRecord, ParseFailure
from ..parser import parse_df_output
from .base import BaseCollector

Runner = Callable[[Sequence[str], float], str]


class DiskUsageCollector(BaseCollector):
    """Collect per-device usage from the df command output."""

    def __init__(
        self,
        scheme: str | None = None,
        *,
        fs_types: Collection[str] | None = None,
        command: Sequence[str] | None = None,
        timeout: float | None = None,
        runner: Runner = run_df,
    ) -> None:
        super().__init__(scheme, fs_types=fs_types)
        self.command = tuple(command) if command else DEFAULT_DF_COMMAND
        self.timeout = DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout
        self._runner = runner

    @property
    def name(self) -> str:
        return "df"

    def read_records(self) -> tuple[list[FilesystemUsageRecord], list[ParseFailure]]:
        output = self._runner(self.command, self.timeout)
        return parse_df_output(output, self.fs_types)
