"""Line formatter for the OpenTSDB telnet-style ``put`` protocol.

Each record becomes one line::

    put <metric> <unix_seconds> <value> [<tag_key>=<tag_value> ...]\\n

Tags come from two sources: segments embedded in the Metric field (after
``tag_name_prefix``) and record fields whose name starts with
``tag_name_prefix``. The formatter keeps no state between records.
"""

import time
from collections.abc import Iterable

from tsdbput.core.errors import MissingFieldError
from tsdbput.core.models import EncoderConfig, FieldValue, FormattedLine
from tsdbput.core.ports import InputRecordPort

METRIC_FIELD = "Metric"
VALUE_FIELD = "Value"
HOST_TAG = "host"

_NANOS_PER_SECOND = 1_000_000_000


def format_value(value: FieldValue) -> str:
    """Render a field value as protocol text.

    Integers have no decimal point, floats use the shortest lossless form
    (``1.5``, ``100.0``, ``1e+16``) and booleans render as ``true``/``false``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def split_metric(metric: str, config: EncoderConfig) -> tuple[str, list[str]]:
    """Split a Metric field into the bare metric name and embedded tag segments.

    Args:
        metric: Text of the Metric field.
        config: Encoder configuration.

    Returns:
        Tuple of (bare metric name, candidate tag segments). Without a
        tag_name_prefix the whole text is the name and there are no segments.
    """
    if not config.tag_name_prefix:
        return metric, []
    parts = metric.split(config.tag_name_prefix)
    return parts[0], parts[1:]


def _embedded_tags(
    segments: list[str], config: EncoderConfig
) -> Iterable[tuple[str, str]]:
    """Yield well-formed (key, value) pairs from embedded tag segments."""
    if config.tag_name_prefix == config.tag_value_prefix:
        # The name split already consumed every value delimiter, so keys and
        # values arrive as consecutive segments
        candidates = [
            segments[i : i + 2] for i in range(0, len(segments), 2)
        ]
    else:
        candidates = [
            segment.split(config.tag_value_prefix, 1) for segment in segments
        ]
    for kv in candidates:
        if len(kv) == 2 and kv[0] and kv[1]:
            yield kv[0], kv[1]


def _field_tags(
    record: InputRecordPort, config: EncoderConfig
) -> Iterable[tuple[str, str]]:
    """Yield (key, value) pairs promoted from prefixed record fields."""
    for item in record.get_fields():
        name = item.name
        if not name.startswith(config.tag_name_prefix):
            continue
        if name in (METRIC_FIELD, VALUE_FIELD):
            continue
        # Character-set trim, not removal of the literal prefix
        key = name.lstrip(config.tag_name_prefix)
        if not key:
            continue
        yield key, format_value(item.value)


def _timestamp_nanos(
    record: InputRecordPort, config: EncoderConfig, now_nanos: int | None
) -> int:
    if config.timestamp_from_record:
        return record.get_timestamp()
    if now_nanos is None:
        return time.time_ns()
    return now_nanos


def format_line(
    record: InputRecordPort,
    config: EncoderConfig,
    hostname: str | None = None,
    now_nanos: int | None = None,
) -> FormattedLine:
    """Format one record as a put line.

    Args:
        record: Input record exposing Metric and Value fields.
        config: Encoder configuration.
        hostname: Host name for the fallback host tag, None or empty to skip it.
        now_nanos: Wall-clock time used when timestamps are not taken from
            the record. Defaults to the current time.

    Returns:
        FormattedLine holding the line and the fields that key deduplication.

    Raises:
        MissingFieldError: If the record has no Metric or no Value field.
    """
    has_metric, metric = record.get_field(METRIC_FIELD)
    if not has_metric or metric is None:
        raise MissingFieldError(METRIC_FIELD)
    metric_text = format_value(metric)
    name, segments = split_metric(metric_text, config)

    timestamp_nanos = _timestamp_nanos(record, config, now_nanos)
    seconds = timestamp_nanos // _NANOS_PER_SECOND

    has_value, value = record.get_field(VALUE_FIELD)
    if not has_value or value is None:
        raise MissingFieldError(VALUE_FIELD)

    tags = list(_embedded_tags(segments, config))
    field_tags = list(_field_tags(record, config)) if config.fields_to_tags else []
    tag_buffer = "".join(f" {key}={val}" for key, val in field_tags)
    tags.extend(field_tags)

    seen_host = any(key.lower() == HOST_TAG for key, _ in tags)
    if not seen_host and config.add_hostname_if_missing and hostname:
        tags.append((HOST_TAG, hostname))

    rendered_tags = "".join(f" {key}={val}" for key, val in tags)
    line = f"put {name} {seconds} {format_value(value)}{rendered_tags}\n"

    return FormattedLine(
        line=line,
        series_key=f"{metric_text}:{tag_buffer}",
        tag_buffer=tag_buffer,
        value=value,
        timestamp_nanos=timestamp_nanos,
        tags=tuple(tags),
    )
