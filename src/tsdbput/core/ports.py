"""Port interfaces for the encoder's collaborators.

These protocols define what the encoder needs from the host runtime: a
record to read, a way to look up the local host name, and somewhere to
write encoded output. The core depends only on these interfaces.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from tsdbput.core.models import Field, FieldValue


@runtime_checkable
class InputRecordPort(Protocol):
    """Port for reading an input record.

    Examples: Record, or an adapter over a host pipeline message.
    """

    def get_field(self, name: str) -> tuple[bool, FieldValue | None]:
        """Look up a named field.

        Returns:
            Tuple of (present, value). Value is None when absent.
        """
        ...

    def get_fields(self) -> Iterable[Field]:
        """Return all fields in a stable iteration order."""
        ...

    def get_timestamp(self) -> int:
        """Return the record timestamp in nanoseconds since the epoch."""
        ...


@runtime_checkable
class HostnameResolverPort(Protocol):
    """Port for resolving the local host name.

    Returns the host name, or None/empty string when it cannot be resolved.
    """

    def __call__(self) -> str | None: ...


@runtime_checkable
class OutputSinkPort(Protocol):
    """Port for writing encoded output buffers.

    Examples: InMemoryOutputSink, a socket writer.
    """

    async def write(self, data: bytes) -> None:
        """Write one encoded output buffer."""
        ...
