"""Lifecycle management for OpenTelemetry tracing in factum.

Sets up the global tracer provider with the streaming exporter and exposes
helpers for getting a tracer and clearing the trace file.
"""

from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from factum.tracing.exporters import StreamingFileSpanExporter


_exporter: StreamingFileSpanExporter | None = None
_initialized = False


def init_tracing(
    *,
    service_name: str = "factum",
    output_path: Path | str = "traces.jsonl",
) -> None:
    """Install a tracer provider that streams finished spans to `output_path`.

    Only the first call has an effect; the global provider cannot be replaced
    once set.
    """
    global _exporter, _initialized

    if _initialized:
        return

    _exporter = StreamingFileSpanExporter(output_path)
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)

    _initialized = True


def is_initialized() -> bool:
    return _initialized


def get_tracer(name: str = "factum") -> trace.Tracer:
    """Get a tracer instance for creating spans."""
    return trace.get_tracer(name)


def clear_traces() -> None:
    """Truncate the trace file."""
    if _exporter is not None:
        _exporter.reset()
