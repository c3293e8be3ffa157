"""In-memory output sink adapter."""


class InMemoryOutputSink:
    """In-memory implementation of OutputSinkPort.

    Keeps every written buffer in a list. Suitable for testing and for
    batching output before handing it to a transport.
    """

    def __init__(self) -> None:
        self._chunks: list[bytes] = []

    async def write(self, data: bytes) -> None:
        """Write one encoded output buffer."""
        self._chunks.append(data)

    @property
    def chunks(self) -> list[bytes]:
        return list(self._chunks)

    def getvalue(self) -> bytes:
        """Return all written output concatenated."""
        return b"".join(self._chunks)

    def lines(self) -> list[str]:
        """Return the written output split into put lines."""
        return self.getvalue().decode("utf-8").splitlines()

