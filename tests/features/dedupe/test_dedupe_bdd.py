"""BDD tests for the dedupe state machine."""

import pytest
from pytest_bdd import scenarios

scenarios("dedupe.feature")

pytestmark = [
    pytest.mark.tier(0),
    pytest.mark.tra("Core.Dedupe.StateMachine"),
]
