"""Testes do avaliador de lembretes (classificador + ledger)."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from app.domain.reminder import CalendarEvent, ReminderThreshold
from app.infra.stores import MemoryReminderLedger
from app.services.reminder_evaluator import ReminderEvaluator

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


def _event(event_id: str | None, **start: str) -> CalendarEvent:
    payload: dict[str, object] = {"summary": f"Evento {event_id}"}
    if event_id is not None:
        payload["id"] = event_id
    if start:
        payload["start"] = start
    return CalendarEvent.model_validate(payload)


@pytest.fixture
def ledger() -> MemoryReminderLedger:
    return MemoryReminderLedger()


@pytest.fixture
def evaluator(ledger: MemoryReminderLedger) -> ReminderEvaluator:
    return ReminderEvaluator(ledger, SAO_PAULO)


def test_all_day_event_tomorrow_fires_once(
    evaluator: ReminderEvaluator,
    ledger: MemoryReminderLedger,
) -> None:
    events = [_event("a", date="2024-06-10")]
    now = datetime(2024, 6, 9, 12, 0, tzinfo=SAO_PAULO)

    first = evaluator.evaluate(events, now)
    second = evaluator.evaluate(events, now)

    assert [(r.event_id, r.threshold) for r in first] == [("a", ReminderThreshold.ONE_DAY)]
    assert second == []
    assert ledger.has_fired("a", ReminderThreshold.ONE_DAY) is True


def test_matches_one_day_and_one_week_from_local_midnight(evaluator: ReminderEvaluator) -> None:
    now = datetime(2024, 1, 1, 0, 0, tzinfo=SAO_PAULO)
    events = [
        _event("tomorrow", dateTime="2024-01-02T18:00:00-03:00"),
        _event("week", dateTime="2024-01-08T08:00:00-03:00"),
        _event("neither", dateTime="2024-01-03T08:00:00-03:00"),
    ]

    requests = evaluator.evaluate(events, now)

    assert [(r.event_id, r.threshold) for r in requests] == [
        ("tomorrow", ReminderThreshold.ONE_DAY),
        ("week", ReminderThreshold.ONE_WEEK),
    ]


def test_requests_follow_input_order(evaluator: ReminderEvaluator) -> None:
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)
    events = [
        _event("w", date="2024-01-08"),
        _event("d1", date="2024-01-02"),
        _event("d2", dateTime="2024-01-02T09:00:00-03:00"),
    ]

    assert [r.event_id for r in evaluator.evaluate(events, now)] == ["w", "d1", "d2"]


def test_second_evaluation_with_same_ledger_is_empty(evaluator: ReminderEvaluator) -> None:
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)
    events = [_event("d", date="2024-01-02"), _event("w", date="2024-01-08")]

    assert len(evaluator.evaluate(events, now)) == 2
    assert evaluator.evaluate(events, now) == []


def test_one_week_then_one_day_for_same_event(evaluator: ReminderEvaluator) -> None:
    events = [_event("conf", date="2024-01-08")]

    week = evaluator.evaluate(events, datetime(2024, 1, 1, 9, 0, tzinfo=SAO_PAULO))
    day = evaluator.evaluate(events, datetime(2024, 1, 7, 9, 0, tzinfo=SAO_PAULO))

    assert [r.threshold for r in week] == [ReminderThreshold.ONE_WEEK]
    assert [r.threshold for r in day] == [ReminderThreshold.ONE_DAY]


@pytest.mark.parametrize(
    "event",
    [
        _event("no-start"),
        _event(None, date="2024-01-02"),
        CalendarEvent.model_validate({"id": "empty-start", "start": {}}),
        CalendarEvent.model_validate({"id": "tz-only", "start": {"timeZone": "UTC"}}),
    ],
)
def test_malformed_event_is_skipped_without_side_effect(
    evaluator: ReminderEvaluator,
    ledger: MemoryReminderLedger,
    event: CalendarEvent,
) -> None:
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)

    assert evaluator.evaluate([event], now) == []
    assert len(ledger) == 0


def test_malformed_event_does_not_block_the_rest(evaluator: ReminderEvaluator) -> None:
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)
    events = [_event("broken"), _event("ok", date="2024-01-02")]

    assert [r.event_id for r in evaluator.evaluate(events, now)] == ["ok"]


def test_moved_event_does_not_fire_again_for_same_threshold(
    evaluator: ReminderEvaluator,
) -> None:
    """O ledger nao guarda a data de inicio: remarcar nao gera novo lembrete."""
    first_now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)
    assert len(evaluator.evaluate([_event("m", date="2024-01-02")], first_now)) == 1

    later_now = datetime(2024, 1, 4, 10, 0, tzinfo=SAO_PAULO)
    assert evaluator.evaluate([_event("m", date="2024-01-05")], later_now) == []


def test_ledger_is_marked_when_request_is_built(
    evaluator: ReminderEvaluator,
    ledger: MemoryReminderLedger,
) -> None:
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)

    requests = evaluator.evaluate([_event("x", date="2024-01-02")], now)

    # Nenhuma entrega aconteceu ainda e o par ja consta como disparado.
    assert len(requests) == 1
    assert ledger.has_fired("x", ReminderThreshold.ONE_DAY) is True


def test_pair_already_in_ledger_is_not_requested(
    evaluator: ReminderEvaluator,
    ledger: MemoryReminderLedger,
) -> None:
    ledger.mark_fired("pre", ReminderThreshold.ONE_DAY)
    now = datetime(2024, 1, 1, 10, 0, tzinfo=SAO_PAULO)

    assert evaluator.evaluate([_event("pre", date="2024-01-02")], now) == []


def test_request_carries_display_fields(evaluator: ReminderEvaluator) -> None:
    event = CalendarEvent.model_validate(
        {
            "id": "rich",
            "summary": "Planejamento",
            "description": "<b>Pauta</b><br>Roadmap &amp; metas",
            "htmlLink": "https://calendar.google.com/event?eid=rich",
            "location": "Sala 2",
            "start": {"dateTime": "2024-01-02T14:00:00Z"},
        }
    )

    (request,) = evaluator.evaluate([event], datetime(2024, 1, 1, 12, 0, tzinfo=UTC))

    assert request.title == "Planejamento"
    assert request.label == "1 day"
    assert request.description == "Pauta\nRoadmap & metas"
    assert request.link == "https://calendar.google.com/event?eid=rich"
    assert request.location == "Sala 2"
    assert request.start_display == "Tue, Jan 02, 2024 11:00 -03"
