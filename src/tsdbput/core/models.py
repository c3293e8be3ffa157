"""Core domain models for the line encoder."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from tsdbput.core.errors import ConfigError

FieldValue = str | int | float | bool

DEFAULT_TAG_VALUE_PREFIX = "."

# Option names as they appear in encoder configuration files
_CONFIG_KEYS = {
    "tagname_prefix": ("tag_name_prefix", str),
    "tagvalue_prefix": ("tag_value_prefix", str),
    "ts_from_message": ("timestamp_from_record", bool),
    "fields_to_tags": ("fields_to_tags", bool),
    "add_hostname_if_missing": ("add_hostname_if_missing", bool),
    "dedupe_window": ("dedupe_window_seconds", int),
}


@dataclass(frozen=True)
class Field:
    """A single named field of an input record.

    Attributes:
        name: Field name (e.g., Metric, Value, tag_host).
        value: Text, integer, float or boolean value.
    """

    name: str
    value: FieldValue


@dataclass(frozen=True)
class Record:
    """A structured telemetry record.

    Attributes:
        timestamp: Nanoseconds since the Unix epoch.
        fields: Named fields in a stable iteration order.
    """

    timestamp: int
    fields: tuple[Field, ...] = ()

    @classmethod
    def from_dict(cls, timestamp: int, fields: Mapping[str, FieldValue]) -> "Record":
        """Build a record from a name -> value mapping, keeping its order."""
        return cls(
            timestamp=timestamp,
            fields=tuple(Field(name, value) for name, value in fields.items()),
        )

    def get_field(self, name: str) -> tuple[bool, FieldValue | None]:
        """Return (present, value) for the first field called ``name``."""
        for item in self.fields:
            if item.name == name:
                return True, item.value
        return False, None

    def get_fields(self) -> Iterable[Field]:
        return self.fields

    def get_timestamp(self) -> int:
        return self.timestamp


@dataclass(frozen=True)
class EncoderConfig:
    """Encoder options, fixed at construction time.

    Attributes:
        tag_name_prefix: Delimiter between the bare metric name and embedded
            tag segments; also the name prefix that marks tag fields.
        tag_value_prefix: Delimiter between key and value inside an embedded
            tag segment. Defaults to "." when tag_name_prefix is set.
        timestamp_from_record: Use the record timestamp instead of wall time.
        fields_to_tags: Promote prefixed fields to tags.
        add_hostname_if_missing: Append host=<hostname> when no host tag exists.
        dedupe_window_seconds: Deduplication window, 0 disables it.
    """

    tag_name_prefix: str = ""
    tag_value_prefix: str = ""
    timestamp_from_record: bool = True
    fields_to_tags: bool = True
    add_hostname_if_missing: bool = True
    dedupe_window_seconds: int = 0

    def __post_init__(self) -> None:
        if self.dedupe_window_seconds < 0:
            raise ConfigError(
                f"dedupe_window must be >= 0, got {self.dedupe_window_seconds}"
            )
        # A key has to be split from its value somehow
        if self.tag_name_prefix and not self.tag_value_prefix:
            object.__setattr__(self, "tag_value_prefix", DEFAULT_TAG_VALUE_PREFIX)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "EncoderConfig":
        """Build a config from configuration-file option names.

        Args:
            options: Mapping using the file option names (tagname_prefix,
                tagvalue_prefix, ts_from_message, fields_to_tags,
                add_hostname_if_missing, dedupe_window).

        Returns:
            EncoderConfig with unspecified options left at their defaults.

        Raises:
            ConfigError: On unknown option names or values of the wrong type.
        """
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            if key not in _CONFIG_KEYS:
                raise ConfigError(f"unknown encoder option: {key!r}")
            attr, expected = _CONFIG_KEYS[key]
            # bool is an int subclass, reject it explicitly for integer options
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise ConfigError(
                    f"option {key!r} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            kwargs[attr] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class SeriesState:
    """Last-seen state of one series, owned by the dedupe engine.

    Attributes:
        last_line: Rendered line of the most recent record of the series.
        was_suppressed: Whether that line was withheld.
        last_timestamp_nanos: Start of the current dedupe window.
        last_value: Value of the most recent record.
    """

    last_line: str
    was_suppressed: bool
    last_timestamp_nanos: int
    last_value: FieldValue


@dataclass(frozen=True)
class FormattedLine:
    """Output of the line formatter for one record.

    Attributes:
        line: Newline-terminated put line.
        series_key: Dedupe key, metric text + ":" + tag buffer.
        tag_buffer: Rendered tags promoted from prefixed fields.
        value: The record's Value field.
        timestamp_nanos: Timestamp the line was rendered with, in nanoseconds.
        tags: Every emitted (key, value) tag pair, in output order.
    """

    line: str
    series_key: str
    tag_buffer: str
    value: FieldValue
    timestamp_nanos: int
    tags: tuple[tuple[str, str], ...] = field(default=())
