"""Per-series deduplication of repeated data points.

A series is identified by the metric text plus the tags promoted from record
fields. Within the dedupe window, repeats of an unchanged value are withheld.
When the value changes after a withheld point (or after the window has
elapsed) the last stored line is flushed ahead of the new one, so the graph
keeps the final point of the flat stretch.

Series state lives for the lifetime of the engine and is never evicted.
"""

import logging

from tsdbput.core.models import FieldValue, FormattedLine, SeriesState

logger = logging.getLogger(__name__)

_NANOS_PER_SECOND = 1_000_000_000


def _same_value(previous: FieldValue, current: FieldValue) -> bool:
    # 1 and 1.0 are different variants, so a type change counts as a change
    return type(previous) is type(current) and previous == current


class DedupeEngine:
    """Stateful filter deciding whether a formatted line is emitted.

    Not safe for concurrent use: callers must invoke process() one record
    at a time per engine.

    Args:
        window_seconds: Dedupe window in seconds. 0 disables deduplication
            and no state is recorded.
    """

    def __init__(self, window_seconds: int) -> None:
        self._window_nanos = window_seconds * _NANOS_PER_SECOND
        self._series: dict[str, SeriesState] = {}

    @property
    def enabled(self) -> bool:
        return self._window_nanos > 0

    def __len__(self) -> int:
        return len(self._series)

    def state_for(self, series_key: str) -> SeriesState | None:
        """Return the stored state for a series, or None if never seen."""
        return self._series.get(series_key)

    def process(self, formatted: FormattedLine) -> str | None:
        """Decide what to emit for a formatted line.

        Args:
            formatted: Output of the line formatter for the current record.

        Returns:
            The text to emit (the line itself, or the previously stored line
            followed by this one), or None when the line is suppressed.
        """
        if not self.enabled:
            return formatted.line

        key = formatted.series_key
        output = formatted.line
        prior = self._series.get(key)

        if prior is not None:
            elapsed = formatted.timestamp_nanos - prior.last_timestamp_nanos
            unchanged = _same_value(prior.last_value, formatted.value)

            if unchanged and elapsed < self._window_nanos:
                # The window keeps its original start
                self._series[key] = SeriesState(
                    last_line=formatted.line,
                    was_suppressed=True,
                    last_timestamp_nanos=prior.last_timestamp_nanos,
                    last_value=formatted.value,
                )
                logger.debug("Suppressed repeated value for series %s", key)
                return None

            if not unchanged and (
                prior.was_suppressed or elapsed >= self._window_nanos
            ):
                output = prior.last_line + formatted.line
                logger.debug("Flushed stored line for series %s", key)

        self._series[key] = SeriesState(
            last_line=formatted.line,
            was_suppressed=False,
            last_timestamp_nanos=formatted.timestamp_nanos,
            last_value=formatted.value,
        )
        return output
