"""Tests for the typer CLI."""

import io
import logging
import os
import sys

import pytest
from typer.testing import CliRunner

from invitation.config import InvitationConfig
from invitation_cli import setup_logging
from invitation_cli.parser import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path):
    """Run commands from an empty directory with logs kept in tmp_path."""
    for key in list(os.environ):
        if key.startswith("INVITATION_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("INVITATION_VARIANT", "invitation")

    root = logging.getLogger()
    werkzeug = logging.getLogger("werkzeug")
    handlers, level = root.handlers[:], root.level
    werkzeug_level = werkzeug.level
    yield
    werkzeug.setLevel(werkzeug_level)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_link_prints_calendar_url():
    result = runner.invoke(app, ["link"])
    assert result.exit_code == 0, result.output
    assert "https://calendar.google.com/calendar/render?action=TEMPLATE" in result.output
    assert "ctz=America%2FMexico_City" in result.output


def test_link_writes_ics(tmp_path):
    path = tmp_path / "invitation.ics"
    result = runner.invoke(app, ["link", "--ics", str(path)])
    assert result.exit_code == 0, result.output
    assert "Exported ICS" in result.output
    assert path.read_bytes().startswith(b"BEGIN:VCALENDAR")


def test_link_ics_write_failure_exits_1(tmp_path):
    result = runner.invoke(app, ["link", "--ics", str(tmp_path / "missing" / "x.ics")])
    assert result.exit_code == 1


def test_countdown_once_after_event(monkeypatch):
    monkeypatch.setenv("INVITATION_EVENT_END", "2000-01-01T00:00:00")
    result = runner.invoke(app, ["countdown", "--once"])
    assert result.exit_code == 0, result.output
    assert "Momento Especial" in result.output


def test_countdown_once_before_event(monkeypatch):
    monkeypatch.setenv("INVITATION_EVENT_START", "2999-01-01T19:30:00")
    monkeypatch.setenv("INVITATION_EVENT_END", "2999-01-01T21:30:00")
    result = runner.invoke(app, ["countdown", "--once"])
    assert result.exit_code == 0, result.output
    assert "Días" in result.output
    assert "Concierto de Sebastian Romero" in result.output


def test_countdown_runs_until_event_end(monkeypatch):
    """With the event already over the live view exits on the first tick."""
    monkeypatch.setenv("INVITATION_EVENT_END", "2000-01-01T00:00:00")
    result = runner.invoke(app, ["countdown"])
    assert result.exit_code == 0, result.output


def test_config_lists_settings():
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0, result.output
    assert "variant" in result.output
    assert "invitation" in result.output
    assert "********" in result.output


def test_invalid_config_exits_1(monkeypatch):
    monkeypatch.setenv("INVITATION_TIMEZONE", "Nowhere/Special")
    result = runner.invoke(app, ["link"])
    assert result.exit_code == 1


def test_logging_writes_log_file(tmp_path):
    runner.invoke(app, ["--verbose", "link"])
    assert (tmp_path / "logs" / "invitation.log").exists()


def test_serve_runs_flask_app(monkeypatch):
    calls = {}

    def fake_run(self, host=None, port=None, debug=None, **kwargs):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setattr("flask.Flask.run", fake_run)
    result = runner.invoke(app, ["serve", "--port", "8123"])
    assert result.exit_code == 0, result.output
    assert calls == {"host": "127.0.0.1", "port": 8123, "debug": False}


def test_log_file_names_the_logger(tmp_path):
    path = tmp_path / "invitation.ics"
    runner.invoke(app, ["link", "--ics", str(path)])
    log = (tmp_path / "logs" / "invitation.log").read_text(encoding="utf-8")
    assert "invitation.output.ics_writer INFO: Wrote calendar file" in log


def test_request_lines_only_logged_when_verbose(tmp_path):
    config = InvitationConfig.for_variant("invitation", log_dir=tmp_path / "logs")

    setup_logging(config=config)
    assert logging.getLogger("werkzeug").level == logging.WARNING

    setup_logging(verbose=True, config=config)
    assert logging.getLogger("werkzeug").level == logging.INFO


def test_console_logging_follows_swapped_stderr(tmp_path, monkeypatch):
    """Records go to whatever stderr is current, as rich Live swaps it."""
    config = InvitationConfig.for_variant("invitation", log_dir=tmp_path / "logs")
    setup_logging(config=config)

    captured = io.StringIO()
    monkeypatch.setattr(sys, "stderr", captured)
    logging.getLogger("invitation").warning("Audio play failed: blocked")

    assert "WARNING: Audio play failed: blocked" in captured.getvalue()
