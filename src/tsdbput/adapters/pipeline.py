"""Drive an encoder over a stream of records into an output sink."""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from dataclasses import dataclass

from tsdbput.core.encoder import OpenTsdbRawEncoder
from tsdbput.core.errors import EncodeError
from tsdbput.core.ports import InputRecordPort, OutputSinkPort

logger = logging.getLogger(__name__)


@dataclass
class EncodeStats:
    """Counts of what happened to each record of a stream."""

    emitted: int = 0
    suppressed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.emitted + self.suppressed + self.failed


async def _iterate(
    records: Iterable[InputRecordPort] | AsyncIterable[InputRecordPort],
) -> AsyncIterator[InputRecordPort]:
    if isinstance(records, AsyncIterable):
        async for record in records:
            yield record
    else:
        for record in records:
            yield record


async def encode_records(
    encoder: OpenTsdbRawEncoder,
    records: Iterable[InputRecordPort] | AsyncIterable[InputRecordPort],
    sink: OutputSinkPort,
) -> EncodeStats:
    """Encode records one at a time and write the output to a sink.

    A record that cannot be encoded is logged and skipped; encoding carries
    on with the next record.

    Args:
        encoder: Encoder owning the dedupe state for this stream.
        records: Sync or async iterable of input records.
        sink: Destination for encoded output buffers.

    Returns:
        EncodeStats with emitted, suppressed and failed counts.
    """
    stats = EncodeStats()
    async for record in _iterate(records):
        try:
            output = encoder.encode(record)
        except EncodeError as exc:
            logger.warning("Dropping record: %s", exc)
            stats.failed += 1
            continue
        if output is None:
            stats.suppressed += 1
            continue
        await sink.write(output)
        stats.emitted += 1
    logger.debug(
        "Encoded %d records: emitted=%d suppressed=%d failed=%d",
        stats.total,
        stats.emitted,
        stats.suppressed,
        stats.failed,
    )
    return stats
