"""tsdbput - encode telemetry records as deduplicated OpenTSDB put lines.

Example:
    ```python
    from tsdbput import EncoderConfig, Record, create_encoder

    encoder = create_encoder(EncoderConfig(tag_name_prefix="tag_"))
    record = Record.from_dict(
        1_700_000_000 * 10**9, {"Metric": "cpu", "Value": 0.5, "tag_dc": "eu"}
    )
    encoder.encode(record)
    ```
"""

from tsdbput.adapters.hostname import resolve_hostname
from tsdbput.adapters.pipeline import EncodeStats, encode_records
from tsdbput.adapters.sinks import InMemoryOutputSink
from tsdbput.core.config import load_config
from tsdbput.core.dedupe import DedupeEngine
from tsdbput.core.encoder import OpenTsdbRawEncoder
from tsdbput.core.encoding.opentsdb import format_line, format_value
from tsdbput.core.errors import ConfigError, EncodeError, MissingFieldError
from tsdbput.core.models import (
    EncoderConfig,
    Field,
    FormattedLine,
    Record,
    SeriesState,
)
from tsdbput.core.registry import EncoderRegistry

ENCODER_NAME = "OpenTsdbRawEncoder"


def _build_opentsdb_encoder(config: EncoderConfig) -> OpenTsdbRawEncoder:
    return OpenTsdbRawEncoder(config, hostname_resolver=resolve_hostname)


registry = EncoderRegistry()
registry.register(ENCODER_NAME, _build_opentsdb_encoder)


def create_encoder(config: EncoderConfig | None = None) -> OpenTsdbRawEncoder:
    """Create an OpenTsdbRawEncoder that resolves the local host name."""
    return registry.create(ENCODER_NAME, config)


__all__ = [
    "ENCODER_NAME",
    "ConfigError",
    "DedupeEngine",
    "EncodeError",
    "EncodeStats",
    "EncoderConfig",
    "EncoderRegistry",
    "Field",
    "FormattedLine",
    "InMemoryOutputSink",
    "MissingFieldError",
    "OpenTsdbRawEncoder",
    "Record",
    "SeriesState",
    "create_encoder",
    "encode_records",
    "format_line",
    "format_value",
    "load_config",
    "registry",
    "resolve_hostname",
]
