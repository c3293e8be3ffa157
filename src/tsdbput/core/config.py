"""Loading encoder configuration from TOML files."""

import tomllib
from pathlib import Path

from tsdbput.core.errors import ConfigError
from tsdbput.core.models import EncoderConfig


def load_config(path: str | Path, table: str | None = None) -> EncoderConfig:
    """Read encoder options from a TOML file.

    Args:
        path: Path to the TOML file.
        table: Optional name of the table holding the options
            (e.g., "OpenTsdbRawEncoder"). Defaults to the top level.

    Returns:
        EncoderConfig built from the file options.

    Raises:
        ConfigError: If the file is not valid TOML, the table is missing,
            or an option is unknown or of the wrong type.
    """
    try:
        with open(path, "rb") as fh:
            document = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    options = document
    if table is not None:
        options = document.get(table)
        if not isinstance(options, dict):
            raise ConfigError(f"table [{table}] not found in {path}")
    # Plugin tables name their plugin with a type key
    options = {key: value for key, value in options.items() if key != "type"}
    return EncoderConfig.from_mapping(options)
