"""Tests for df output parsing."""

from __future__ import annotations

from dfmetrics.models import FilesystemUsageRecord, ParseFailure
from dfmetrics.parser import device_name, parse_df_output, parse_line

HEADER = "Filesystem     Type  1024-blocks    Used Available Capacity Mounted on"


def test_parse_device_line() -> None:
    rec = parse_line("/dev/sda1      ext4     20000000 8000000  11000000      43% /", 2)
    assert isinstance(rec, FilesystemUsageRecord)
    assert rec.device == "sda1"
    assert rec.fstype == "ext4"
    assert rec.total_kib == 20000000
    assert rec.used_kib == 8000000
    assert rec.available_kib == 11000000
    assert rec.capacity_percent == 43
    assert rec.mountpoint == "/"
    assert rec.used_bytes == 8192000000
    assert rec.available_bytes == 11264000000


def test_device_name_takes_first_segment() -> None:
    assert device_name("/dev/sda1") == "sda1"
    assert device_name("/dev/mapper/vg0-root") == "mapper"
    assert device_name("tmpfs") is None
    assert device_name("//server/share") is None


def test_non_device_lines_are_skipped() -> None:
    assert parse_line("overlay overlay 1000 500 500 50% /var/lib/docker") is None
    assert parse_line("tmpfs tmpfs 1024 0 1024 0% /run") is None
    # Not device-backed: skipped even when the rest of the line is malformed
    assert parse_line("tmpfs garbage") is None


def test_short_device_line_is_failure() -> None:
    result = parse_line("/dev/sdb1 malformed", 5)
    assert isinstance(result, ParseFailure)
    assert result.line == "/dev/sdb1 malformed"
    assert result.line_number == 5
    assert "fields" in result.reason


def test_non_numeric_fields_are_failures() -> None:
    for line in (
        "/dev/sda1 ext4 100 abc 50 10% /",
        "/dev/sda1 ext4 100 50 xyz 10% /",
        "/dev/sda1 ext4 100 50 50 -% /",
        "/dev/sda1 ext4 100 50 50 - /",
        "/dev/sda1 ext4 100 1.5 50 10% /",
    ):
        result = parse_line(line)
        assert isinstance(result, ParseFailure), line
        assert result.line == line


def test_blank_line_is_failure() -> None:
    result = parse_line("   ", 3)
    assert isinstance(result, ParseFailure)
    assert result.reason == "empty line"


def test_capacity_fraction_is_truncated() -> None:
    rec = parse_line("/dev/nvme0n1p2 xfs 1000 437 563 43.9% /data")
    assert isinstance(rec, FilesystemUsageRecord)
    assert rec.capacity_percent == 43


def test_mountpoint_with_spaces_is_kept() -> None:
    rec = parse_line("/dev/sdc1 vfat 2000 1000 1000 50% /media/usb stick")
    assert isinstance(rec, FilesystemUsageRecord)
    assert rec.mountpoint == "/media/usb stick"


def test_type_filter() -> None:
    line = "/dev/sda1 ext4 100 50 50 50% /"
    assert parse_line(line, fs_types={"xfs"}) is None
    assert isinstance(parse_line(line, fs_types={"ext4", "xfs"}), FilesystemUsageRecord)


def test_parse_df_output_drops_header_and_keeps_order() -> None:
    output = "\n".join(
        [
            HEADER,
            "/dev/sda1 ext4 20000000 8000000 11000000 43% /",
            "tmpfs tmpfs 1024 0 1024 0% /run",
            "/dev/sdb1 malformed",
            "/dev/sdb2 xfs 400 100 300 25% /srv",
        ]
    ) + "\n"
    records, failures = parse_df_output(output)
    assert [r.device for r in records] == ["sda1", "sdb2"]
    assert len(failures) == 1
    assert failures[0].line == "/dev/sdb1 malformed"
    assert failures[0].line_number == 4


def test_parse_df_output_header_only() -> None:
    assert parse_df_output(HEADER + "\n") == ([], [])
    assert parse_df_output("") == ([], [])


def test_python_numeric_literals_are_failures() -> None:
    for line in (
        "/dev/sda1 ext4 1_000 5_0 5_0 50% /",
        "/dev/sda1 ext4 1000 500 500 1e1% /",
        "/dev/sda1 ext4 1e3 500 500 50% /",
        "/dev/sda1 ext4 1000 +500 500 50% /",
        "/dev/sda1 ext4 1000 500 500 nan% /",
    ):
        result = parse_line(line)
        assert isinstance(result, ParseFailure), line


def test_type_filter_applies_before_numeric_checks() -> None:
    line = "/dev/loop0 squashfs x y z 1% /snap"
    assert parse_line(line, fs_types={"ext4"}) is None
    assert isinstance(parse_line(line, fs_types={"squashfs"}), ParseFailure)
