"""Streaming file exporter for OpenTelemetry spans.

Every finished span is appended to a JSONL file, one object per line.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult


logger = logging.getLogger(__name__)


class StreamingFileSpanExporter(SpanExporter):
    """Appends spans to a JSONL file as they finish."""

    def __init__(self, output_path: Path | str) -> None:
        self.output_path = Path(output_path)
        self.reset()

    def reset(self) -> None:
        """Create the parent directory and truncate the output file."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text("")

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        try:
            with self.output_path.open("a", encoding="utf-8") as f:
                for span in spans:
                    f.write(json.dumps(span_to_dict(span), default=str) + "\n")
        except OSError:
            logger.exception("Cannot write spans to %s", self.output_path)
            return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        pass


def span_to_dict(span: ReadableSpan) -> dict[str, Any]:
    """Convert a finished span to a JSON-serializable dict."""
    return {
        "traceId": format(span.context.trace_id, "032x"),
        "spanId": format(span.context.span_id, "016x"),
        "parentSpanId": format(span.parent.span_id, "016x") if span.parent else None,
        "name": span.name,
        "startTimeUnixNano": span.start_time,
        "endTimeUnixNano": span.end_time,
        "attributes": dict(span.attributes or {}),
        "status": {
            "code": span.status.status_code.name,
            "description": span.status.description,
        },
        "events": [
            {"name": e.name, "timeUnixNano": e.timestamp, "attributes": dict(e.attributes or {})}
            for e in span.events
        ],
    }
