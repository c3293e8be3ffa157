"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from pathlib import Path

import pytest

from tsdbput.core.models import FieldValue, Record

SECOND = 1_000_000_000
BASE_TS = 1_700_000_000 * SECOND


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory fixture for building records.

    Usage:
        record = make_record("cpu", 1, ts=BASE_TS, tag_dc="eu")
    """

    def _record(
        metric: FieldValue | None = "cpu",
        value: FieldValue | None = 1,
        ts: int = BASE_TS,
        **extra: FieldValue,
    ) -> Record:
        fields: dict[str, FieldValue] = {}
        if metric is not None:
            fields["Metric"] = metric
        if value is not None:
            fields["Value"] = value
        fields.update(extra)
        return Record.from_dict(ts, fields)

    return _record


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Provide a temporary path for TOML config files."""
    return tmp_path / "encoders.toml"
