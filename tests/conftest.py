import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest


# Disable X-Ray tracing for tests
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"

# Add app directory to path for imports
app_dir = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(app_dir))

from roster import Member, RosterService, RosterState, RosterStore, Team, TeamRegistry  # noqa: E402
from scheduler import TimerHandle, Timers  # noqa: E402


NZ = ZoneInfo("Pacific/Auckland")


class MemoryRosterStore(RosterStore):
    def __init__(self, state: RosterState):
        self.state = state
        self.saves = 0

    def load(self) -> RosterState:
        return self.state.model_copy(deep=True)

    def save(self, state: RosterState) -> None:
        self.state = state.model_copy(deep=True)
        self.saves += 1


class FakeTimer(TimerHandle):
    def __init__(self, delay, callback, repeating, first_delay=None):
        self.delay = delay
        self.first_delay = delay if first_delay is None else first_delay
        self.callback = callback
        self.repeating = repeating
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.repeating:
            self.fired = True
        self.callback()


class FakeTimers(Timers):
    def __init__(self):
        self.created: list[FakeTimer] = []

    def call_later(self, delay, callback):
        timer = FakeTimer(delay, callback, repeating=False)
        self.created.append(timer)
        return timer

    def call_every(self, interval, callback, first_delay=None):
        timer = FakeTimer(interval, callback, repeating=True, first_delay=first_delay)
        self.created.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.created if not (t.cancelled or t.fired)]


@pytest.fixture
def alice():
    return Member(display_name="Alice", id="UA")


@pytest.fixture
def bob():
    return Member(display_name="Bob", id="UB")


@pytest.fixture
def carol():
    return Member(display_name="Carol", id="UC")


@pytest.fixture
def registry():
    return TeamRegistry(["cr", "rum", "apm", "ss"])


@pytest.fixture
def roster_state(alice, bob, carol):
    return RosterState(
        teams={
            "cr": Team(members=[alice, bob, carol], current_tick=2),
            "rum": Team(members=[bob], current_tick=0),
            "apm": Team(),
            "ss": Team(members=[carol, alice], current_tick=1),
        }
    )


@pytest.fixture
def memory_store(roster_state):
    return MemoryRosterStore(roster_state)


@pytest.fixture
def roster_service(memory_store, registry):
    return RosterService(store=memory_store, registry=registry)


@pytest.fixture
def fake_timers():
    return FakeTimers()


@pytest.fixture
def fixed_now():
    # a Wednesday afternoon in Auckland
    return datetime(2024, 5, 15, 14, 30, tzinfo=NZ)


@pytest.fixture
def slack_app_mention_payload():
    return {
        "type": "event_callback",
        "event": {
            "type": "app_mention",
            "user": "UA",
            "text": "<@UBOT> skip cr",
            "channel": "C123",
        },
    }


@pytest.fixture
def mock_lambda_context():
    context = MagicMock()
    context.function_name = "test-function"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
    context.aws_request_id = "test-request-id"
    return context
