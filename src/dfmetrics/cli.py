"""CLI interface for the dfmetrics disk-space check."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

from .collectors import SOURCES
from .config import settings
from .core import collect
from .errors import EXIT_OK, AppError
from .formatters import FORMATS, get_formatter
from .logging import configure_logging

log = logging.getLogger(__name__)


def _write_output(data: str, output_file: str | None = None) -> None:
    """Append *data* to *output_file*, or write it to stdout."""
    if not data:
        return
    if output_file:
        with open(output_file, "a") as f:
            f.write(data + "\n")
    else:
        sys.stdout.write(data + "\n")
        sys.stdout.flush()


def _scheme(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("scheme must not be empty")
    return value


def _timeout(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError("timeout must be > 0")
    return seconds


def cmd_collect(args: argparse.Namespace) -> int:
    """Run one collection pass and emit the metrics."""
    try:
        report = collect(
            args.scheme or None,
            source=args.source,
            fs_types=args.fs_types or None,
            command=shlex.split(args.command) if args.command else None,
            timeout=args.timeout,
        )
    except AppError as e:
        log.error(
            "collection_failed",
            extra={"code": e.code, "command": getattr(e, "command", "")},
        )
        sys.stderr.write(f"Error: {e.message}\n")
        return e.exit_code

    formatter = get_formatter(args.format)
    _write_output(formatter.format(report), args.output)

    for failure in report.failures:
        sys.stderr.write(f"malformed line from df: {failure.line}\n")

    return report.status.exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfmetrics",
        description=(
            "Emit disk usage metrics for device-backed filesystems.\n"
            "Exit codes: 0 ok, 1 some df lines were malformed, 2 usage error, 3 df failed."
        ),
        epilog=(
            "Examples:\n"
            "  dfmetrics\n"
            "  dfmetrics -s web01.disk\n"
            "  dfmetrics -f json -t ext4 -t xfs\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--scheme",
        "-s",
        type=_scheme,
        default=settings.metric_scheme or None,
        help="Metric naming scheme, text to prepend to metric (default: <hostname>.disk)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=list(FORMATS),
        default=settings.output_format if settings.output_format in FORMATS else "graphite",
        help="Output format (default: graphite)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file, appended to (default: stdout)",
    )
    parser.add_argument(
        "--type",
        "-t",
        dest="fs_types",
        action="append",
        default=None,
        metavar="FSTYPE",
        help="Only report filesystems of this type (repeatable; default: all)",
    )
    parser.add_argument(
        "--source",
        choices=list(SOURCES),
        default=settings.metrics_source if settings.metrics_source in SOURCES else "df",
        help="Where usage figures come from (default: df)",
    )
    parser.add_argument(
        "--command",
        type=str,
        default=None,
        help=f"df command line (default: {shlex.join(settings.df_command)})",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout,
        default=settings.command_timeout_seconds,
        help=f"df timeout in seconds (default: {settings.command_timeout_seconds:g})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        sys.stdout.write(f"dfmetrics version {__version__}\n")
        raise SystemExit(EXIT_OK)

    rc = int(cmd_collect(args))
    raise SystemExit(rc)
