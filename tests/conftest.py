import pytest

from invitation import create_app
from invitation.config import InvitationConfig


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, now_ms: float):
        self.now_ms = now_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def make_clock():
    """Factory for controllable clocks."""
    return FakeClock


@pytest.fixture
def config():
    """Invitation variant config with the default event."""
    return InvitationConfig.for_variant("invitation", secret_key="test")


@pytest.fixture
def fake_now(config):
    """Clock set one day and 90 seconds before the event ends."""
    return FakeClock(config.target_ms - 86_400_000 - 90_000)


@pytest.fixture
def app(config, fake_now):
    """Create and configure a Flask app for testing."""
    app = create_app(config, now=fake_now)
    app.config["TESTING"] = True
    return app
