"""Teste E2E: eventos do calendario -> ciclo agendado -> mensagens no Slack."""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import httpx
import pytest

from app.coordinators.reminders import ReminderScheduler
from app.domain.reminder import CalendarEvent
from app.infra.calendar.google_calendar_parsers import map_calendar_events
from app.infra.http import HttpClient, HttpClientConfig
from app.infra.slack import SlackNotifier
from app.infra.stores import MemoryReminderLedger
from app.services.reminder_evaluator import ReminderEvaluator
from app.use_cases.reminders import RunPollCycleUseCase
from tests.fakes.fake_calendar_source import FakeCalendarSource
from tests.fakes.fixed_clock import FixedClock

ZONE = ZoneInfo("Europe/Lisbon")
NOW = datetime(2024, 3, 4, 8, 0, tzinfo=ZONE)


def _google_items() -> list[dict[str, Any]]:
    return [
        {
            "id": "standup",
            "summary": "Daily",
            "start": {"dateTime": "2024-03-05T09:30:00Z"},
            "htmlLink": "https://calendar.google.com/event?eid=standup",
        },
        {
            "id": "offsite",
            "summary": "Offsite",
            "description": "<b>Levar</b> notebook",
            "location": "Porto",
            "start": {"date": "2024-03-11"},
        },
        {"id": "broken", "summary": "Sem inicio", "start": {}},
        {"summary": "Sem id", "start": {"date": "2024-03-05"}},
    ]


def _events() -> list[CalendarEvent]:
    return map_calendar_events(_google_items())


def _notifier(posted: list[dict[str, Any]]) -> SlackNotifier:
    def handler(request: httpx.Request) -> httpx.Response:
        posted.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True})

    return SlackNotifier(
        bot_token="xoxb-e2e",
        channel_id="C-E2E",
        endpoint="https://slack.test/api/chat.postMessage",
        http_client=HttpClient(
            HttpClientConfig(max_retries=0, backoff_base_seconds=0.0),
            transport=httpx.MockTransport(handler),
        ),
    )


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_scheduled_cycles_post_each_reminder_once() -> None:
    posted: list[dict[str, Any]] = []
    clock = FixedClock(NOW)
    cycle = RunPollCycleUseCase(
        FakeCalendarSource(_events()),
        _notifier(posted),
        ReminderEvaluator(MemoryReminderLedger(), ZONE),
        clock=clock,
    )
    scheduler = ReminderScheduler(cycle, cron_expression="*/5 * * * *", timezone=ZONE)

    first = await scheduler.run_once()
    clock.advance(timedelta(minutes=5))
    second = await scheduler.run_once()

    assert first.fetched == 2
    assert first.delivered == 2
    assert second.requested == 0
    assert [body["channel"] for body in posted] == ["C-E2E", "C-E2E"]
    assert posted[0]["text"].startswith("⏰ *Upcoming event in 1 day*\n*Daily*")
    assert "📍 Porto" in posted[1]["text"]
    assert "Levar notebook" in posted[1]["text"]
    assert "<b>" not in posted[1]["text"]


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_fetch_outage_recovers_on_next_cycle() -> None:
    posted: list[dict[str, Any]] = []
    cycle = RunPollCycleUseCase(
        FakeCalendarSource(_events(), fail_times=1),
        _notifier(posted),
        ReminderEvaluator(MemoryReminderLedger(), ZONE),
        clock=FixedClock(NOW),
    )
    scheduler = ReminderScheduler(cycle, timezone=ZONE)

    failed = await scheduler.run_once()
    assert failed.failed_stage == "fetch"
    assert posted == []

    recovered = await scheduler.run_once()
    assert recovered.delivered == 2
    assert len(posted) == 2
