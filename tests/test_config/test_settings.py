"""Testes de carregamento e validacao das settings via env."""

from __future__ import annotations

import pytest

from config.settings import (
    CalendarSettings,
    SchedulerSettings,
    SlackSettings,
    get_base_settings,
    get_calendar_settings,
    get_scheduler_settings,
    get_slack_settings,
)


def test_base_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("ENVIRONMENT", "SERVICE_NAME", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)

    settings = get_base_settings()

    assert settings.environment == "development"
    assert settings.service_name == "lembra-agenda"
    assert settings.log_format == "json"
    assert settings.validate() == []


def test_base_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")

    settings = get_base_settings()

    assert settings.environment == "production"
    assert settings.log_format == "text"
    assert settings.validate() == ["LOG_LEVEL inválido: VERBOSE"]


def test_calendar_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CALENDAR_ID", "team@group.calendar.google.com")
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", '{"type": "service_account"}')
    monkeypatch.setenv("CALENDAR_TIMEZONE", "America/Sao_Paulo")
    monkeypatch.setenv("CALENDAR_LOOKAHEAD_DAYS", "10")

    settings = get_calendar_settings()

    assert settings.google_calendar_id == "team@group.calendar.google.com"
    assert settings.calendar_lookahead_days == 10
    assert settings.validate_settings() == []


def test_calendar_settings_validation_errors(tmp_path) -> None:  # type: ignore[no-untyped-def]
    settings = CalendarSettings(
        google_service_account_file=str(tmp_path / "missing.json"),
        calendar_timezone="Mars/Olympus_Mons",
        calendar_lookahead_days=3,
    )

    errors = settings.validate_settings()

    assert "GOOGLE_CALENDAR_ID nao configurado" in errors
    assert any("missing.json" in error for error in errors)
    assert "CALENDAR_TIMEZONE invalido: Mars/Olympus_Mons" in errors
    assert "CALENDAR_LOOKAHEAD_DAYS deve ser >= 8" in errors


def test_calendar_settings_accepts_key_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    key_file = tmp_path / "service-account-key.json"
    key_file.write_text("{}")

    settings = CalendarSettings(google_calendar_id="cal", google_service_account_file=str(key_file))

    assert settings.validate_settings() == []


def test_slack_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
    monkeypatch.setenv("SLACK_CHANNEL_ID", "C42")
    monkeypatch.delenv("SLACK_API_BASE_URL", raising=False)

    settings = get_slack_settings()

    assert settings.post_message_endpoint == "https://slack.com/api/chat.postMessage"
    assert settings.validate_settings() == []


def test_slack_settings_require_token_and_channel() -> None:
    assert SlackSettings().validate_settings() == [
        "SLACK_BOT_TOKEN nao configurado",
        "SLACK_CHANNEL_ID nao configurado",
    ]


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("no", False)])
def test_scheduler_run_once_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("RUN_ONCE", raw)
    assert get_scheduler_settings().run_once is expected


def test_scheduler_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CHECK_INTERVAL_CRON", "RUN_ONCE", "PORT"):
        monkeypatch.delenv(key, raising=False)

    settings = get_scheduler_settings()

    assert settings.check_interval_cron == "*/5 * * * *"
    assert settings.run_once is False
    assert settings.port == 3000
    assert settings.validate_settings() == []


def test_scheduler_rejects_invalid_cron() -> None:
    settings = SchedulerSettings(check_interval_cron="*/5 * *")
    assert settings.validate_settings() == ["CHECK_INTERVAL_CRON invalido: */5 * *"]


def test_calendar_settings_reject_malformed_credentials_json() -> None:
    settings = CalendarSettings(
        google_calendar_id="cal",
        google_service_account_json="{not json",
    )

    assert settings.validate_settings() == [
        "GOOGLE_SERVICE_ACCOUNT_JSON nao e um objeto JSON valido"
    ]
