"""BDD step definitions for the dedupe state machine."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from tsdbput.core.encoder import OpenTsdbRawEncoder
from tsdbput.core.models import EncoderConfig, Record

SECOND = 1_000_000_000


@dataclass
class DedupeScenarioContext:
    """Shared state between steps in a dedupe scenario."""

    encoder: OpenTsdbRawEncoder = field(default_factory=OpenTsdbRawEncoder)
    outputs: list[bytes | None] = field(default_factory=list)


@pytest.fixture
def ctx() -> DedupeScenarioContext:
    """Fresh scenario context for each test."""
    return DedupeScenarioContext()


@given(parsers.parse("an encoder with a dedupe window of {window:d} seconds"))
def step_encoder(ctx: DedupeScenarioContext, window: int) -> None:
    config = EncoderConfig(dedupe_window_seconds=window)
    ctx.encoder = OpenTsdbRawEncoder(config)


@when(parsers.parse('"{metric}" is encoded with value {value:d} at {seconds:d} seconds'))
def step_encode(
    ctx: DedupeScenarioContext, metric: str, value: int, seconds: int
) -> None:
    record = Record.from_dict(seconds * SECOND, {"Metric": metric, "Value": value})
    ctx.outputs.append(ctx.encoder.encode(record))


@then(parsers.parse('output {index:d} is "{line}"'))
def step_output_is(ctx: DedupeScenarioContext, index: int, line: str) -> None:
    assert ctx.outputs[index - 1] == f"{line}\n".encode()


@then(parsers.parse("output {index:d} is suppressed"))
def step_output_suppressed(ctx: DedupeScenarioContext, index: int) -> None:
    assert ctx.outputs[index - 1] is None


@then(parsers.parse('output {index:d} flushes "{first}" before "{second}"'))
def step_output_flushes(
    ctx: DedupeScenarioContext, index: int, first: str, second: str
) -> None:
    assert ctx.outputs[index - 1] == f"{first}\n{second}\n".encode()


@then(parsers.parse('series "{key}" is stored as "{line}" at {seconds:d} seconds'))
def step_series_state(
    ctx: DedupeScenarioContext, key: str, line: str, seconds: int
) -> None:
    state = ctx.encoder.series_state(key)
    assert state is not None
    assert state.last_line == f"{line}\n"
    assert state.last_timestamp_nanos == seconds * SECOND
    assert state.was_suppressed is False


@then("no series state is kept")
def step_no_state(ctx: DedupeScenarioContext) -> None:
    assert ctx.encoder.series_count == 0
