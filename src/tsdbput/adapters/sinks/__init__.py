"""Output sink adapters implementing OutputSinkPort."""

from tsdbput.adapters.sinks.in_memory import InMemoryOutputSink

__all__ = ["InMemoryOutputSink"]
