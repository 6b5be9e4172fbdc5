"""JSON formatter."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from ..models import CollectionReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format report as JSON."""

    def format(self, report: CollectionReport) -> str:
        payload: dict[str, Any] = {
            "scheme": report.scheme,
            "timestamp": report.timestamp,
            "source": report.source,
            "status": report.status.value,
            "metrics": report.as_mapping(),
            "filesystems": [asdict(r) for r in report.records],
            "failures": [
                {
                    "line_number": f.line_number,
                    "line": f.line,
                    "reason": f.reason,
                    "kind": f.kind.value,
                }
                for f in report.failures
            ],
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)
