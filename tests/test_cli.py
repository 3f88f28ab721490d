"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from fitbit_api.cli import cli
from fitbit_api.clients.fitbit import FitbitClient


@pytest.fixture
def runner(monkeypatch, transport):
    """CliRunner whose FitbitClient talks to the fake transport."""
    monkeypatch.setattr("fitbit_api.cli.get_logger", lambda name: None)
    monkeypatch.setattr("fitbit_api.cli.Config.CLIENT_ID", None)
    monkeypatch.setattr("fitbit_api.cli.Config.ACCESS_TOKEN", None)
    monkeypatch.setattr(
        "fitbit_api.cli.FitbitClient",
        lambda token, user_id, get_token: FitbitClient(token, user_id=user_id, get_token=get_token, http=transport),
    )
    return CliRunner()


def test_profile(runner, transport, make_response):
    transport.add("1/user/-/profile.json", make_response(200, {"user": {"displayName": "Sam"}}))

    result = runner.invoke(cli, ["--token", "abc", "profile"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"user": {"displayName": "Sam"}}
    assert transport.calls[0]["authorization"] == "Bearer abc"


def test_missing_token_aborts(runner, monkeypatch):
    monkeypatch.delenv("FITBIT_ACCESS_TOKEN", raising=False)

    result = runner.invoke(cli, ["profile"])

    assert result.exit_code == 1


def test_failure_aborts_with_error(runner, transport, make_response, make_error):
    transport.add("1/user/-/devices.json", make_response(403, make_error("insufficient_scope")))

    result = runner.invoke(cli, ["--token", "abc", "devices"])

    assert result.exit_code == 1
    assert "HTTP 403" in result.output
    assert "insufficient_scope" in result.output


def test_invalid_date_aborts(runner, transport):
    result = runner.invoke(cli, ["--token", "abc", "sleep", "not-a-date"])

    assert result.exit_code == 1
    assert "invalid date" in result.output
    assert transport.calls == []


def test_sleep_log_follows_pages(runner, transport, make_response):
    first = "1.2/user/-/sleep/list.json?limit=1&offset=0&beforeDate=2021-03-04&sort=desc"
    second = "https://api.fitbit.com/1.2/user/-/sleep/list.json?limit=1&offset=1&beforeDate=2021-03-04&sort=desc"
    transport.add(first, make_response(200, {"pagination": {"next": second}, "sleep": [{"logId": 1}]}))
    transport.add(second, make_response(200, {"pagination": {"next": ""}, "sleep": [{"logId": 2}]}))

    result = runner.invoke(cli, ["--token", "abc", "sleep-log", "--before", "2021-03-04", "--limit", "1"])

    assert result.exit_code == 0
    assert '"logId": 2' in result.output
    assert len(transport.calls) == 2


def test_sleep_log_max_pages(runner, transport, make_response):
    first = "1.2/user/-/sleep/list.json?limit=1&offset=0&beforeDate=2021-03-04&sort=desc"
    second = "https://api.fitbit.com/1.2/user/-/sleep/list.json?limit=1&offset=1&beforeDate=2021-03-04&sort=desc"
    transport.add(first, make_response(200, {"pagination": {"next": second}, "sleep": [{"logId": 1}]}))

    result = runner.invoke(
        cli, ["--token", "abc", "sleep-log", "--before", "2021-03-04", "--limit", "1", "--max-pages", "1"]
    )

    assert result.exit_code == 0
    assert len(transport.calls) == 1
