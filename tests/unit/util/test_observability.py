"""Unit tests for the Logfire setup."""

import logfire
import pytest

from ideabox.config import ObservabilitySettings, Settings
from ideabox.util.observability import configure_logfire


@pytest.fixture
def configure_calls(monkeypatch):
    calls: list[dict] = []
    monkeypatch.setattr(logfire, "configure", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(logfire, "info", lambda *args, **kwargs: None)
    monkeypatch.setattr(Settings, "_load_git_sha", staticmethod(lambda: "abc123"))
    return calls


def test_service_identity_comes_from_settings(configure_calls):
    settings = Settings(observability=ObservabilitySettings(service_name="ideabox-worker"))

    configure_logfire(settings)

    (kwargs,) = configure_calls
    assert kwargs["service_name"] == "ideabox-worker"
    assert kwargs["service_version"] == "abc123"


@pytest.mark.parametrize(
    "token,send,expected",
    [
        (None, None, False),
        ("lf-token", None, True),
        ("lf-token", False, False),
    ],
)
def test_export_follows_token_unless_overridden(configure_calls, token, send, expected):
    settings = Settings(
        observability=ObservabilitySettings(logfire_token=token, send_to_logfire=send)
    )

    configure_logfire(settings)

    assert configure_calls[0]["send_to_logfire"] is expected
