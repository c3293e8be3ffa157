"""OpenTSDB raw line encoder.

Combines the stateless line formatter with the per-series dedupe engine.
One encoder instance serves one output pipeline; its dedupe state is
private and not shared between instances.
"""

import logging
import time
from collections.abc import Callable

from tsdbput.core.dedupe import DedupeEngine
from tsdbput.core.encoding.opentsdb import format_line
from tsdbput.core.models import EncoderConfig, SeriesState
from tsdbput.core.ports import HostnameResolverPort, InputRecordPort

logger = logging.getLogger(__name__)


class OpenTsdbRawEncoder:
    """Encode records into newline-terminated OpenTSDB put lines.

    Example:
        ```python
        from tsdbput import EncoderConfig, OpenTsdbRawEncoder, Record

        encoder = OpenTsdbRawEncoder(EncoderConfig(dedupe_window_seconds=60))
        record = Record.from_dict(1_700_000_000 * 10**9, {"Metric": "cpu", "Value": 1})
        encoder.encode(record)  # b"put cpu 1700000000 1\\n"
        ```
    """

    def __init__(
        self,
        config: EncoderConfig | None = None,
        hostname_resolver: HostnameResolverPort | None = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        """Initialize the encoder.

        Args:
            config: Encoder options. Defaults to EncoderConfig().
            hostname_resolver: Called once here to find the host name for the
                fallback host tag. None disables the fallback.
            clock: Wall-clock source in nanoseconds, used when timestamps
                are not taken from the record.
        """
        self._config = config or EncoderConfig()
        self._hostname = hostname_resolver() if hostname_resolver else None
        self._clock = clock
        self._dedupe = DedupeEngine(self._config.dedupe_window_seconds)
        logger.debug(
            "OpenTsdbRawEncoder configured: hostname=%s dedupe_window=%ss",
            self._hostname,
            self._config.dedupe_window_seconds,
        )

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def hostname(self) -> str | None:
        return self._hostname

    @property
    def series_count(self) -> int:
        """Number of series tracked by the dedupe engine."""
        return len(self._dedupe)

    def series_state(self, series_key: str) -> SeriesState | None:
        return self._dedupe.state_for(series_key)

    def encode(self, record: InputRecordPort) -> bytes | None:
        """Encode one record.

        Args:
            record: Input record with Metric and Value fields.

        Returns:
            Encoded bytes (one line, or two when a stored line is flushed),
            or None when the point is suppressed by deduplication.

        Raises:
            MissingFieldError: If Metric or Value is absent.
        """
        now_nanos = None if self._config.timestamp_from_record else self._clock()
        formatted = format_line(record, self._config, self._hostname, now_nanos)
        output = self._dedupe.process(formatted)
        if output is None:
            return None
        return output.encode("utf-8")
