"""Disk usage collector backed by psutil (no df binary needed)."""

from __future__ import annotations

import logging

import psutil

from ..errors import CommandFailure
from ..models import KIB, FilesystemUsageRecord, ParseFailure
from ..parser import device_name
from .base import BaseCollector

log = logging.getLogger(__name__)


class PsutilDiskCollector(BaseCollector):
    """Collect per-device usage from psutil partitions."""

    @property
    def name(self) -> str:
        return "psutil"

    def read_records(self) -> tuple[list[FilesystemUsageRecord], list[ParseFailure]]:
        try:
            partitions = psutil.disk_partitions(all=False)
        except OSError as exc:
            raise CommandFailure(
                message=f"disk partition enumeration failed: {exc}",
                command="psutil.disk_partitions",
            ) from exc

        records: list[FilesystemUsageRecord] = []
        for part in partitions:
            device = device_name(part.device)
            if device is None:
                continue
            if self.fs_types and part.fstype not in self.fs_types:
                continue

            try:
                usage = psutil.disk_usage(part.mountpoint)
            except (PermissionError, OSError):
                log.debug("mount_unreadable", extra={"device": device, "line": part.mountpoint})
                continue

            records.append(
                FilesystemUsageRecord(
                    device=device,
                    used_kib=usage.used // KIB,
                    available_kib=usage.free // KIB,
                    capacity_percent=int(usage.percent),
                    fstype=part.fstype,
                    total_kib=usage.total // KIB,
                    mountpoint=part.mountpoint,
                    filesystem=part.device,
                )
            )

        return records, []
