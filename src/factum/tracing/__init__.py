from factum.tracing.lifecycle import (
    clear_traces,
    get_tracer,
    init_tracing,
    is_initialized,
)

__all__ = [
    "clear_traces",
    "get_tracer",
    "init_tracing",
    "is_initialized",
]
