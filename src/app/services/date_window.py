"""Classificacao deterministica de eventos em janelas de lembrete.

Regra de negocio:
- Um evento recebe lembrete quando sua data de calendario (no timezone
  configurado) e exatamente amanha ou exatamente daqui a 7 dias.

Eventos de dia inteiro usam a data informada sem conversao de timezone;
converter uma data pura em datetime e de volta desloca o dia conforme o
offset local. Nao ha tolerancia: a granularidade e o dia inteiro.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from app.domain.reminder import ReminderThreshold

if TYPE_CHECKING:
    from app.domain.reminder import EventStart

CalendarDateConverter = Callable[[datetime, tzinfo], date]


def to_calendar_date(instant: datetime, zone: tzinfo) -> date:
    """Data de calendario de um instante no timezone informado.

    Datetime sem tzinfo e tratado como ja expresso no timezone alvo.
    """
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(zone).date()


@dataclass(frozen=True, slots=True)
class ReminderWindow:
    """Datas de referencia de um ciclo: hoje, amanha e hoje+7."""

    today: date

    @property
    def tomorrow(self) -> date:
        return self.today + timedelta(days=ReminderThreshold.ONE_DAY.days)

    @property
    def one_week_out(self) -> date:
        return self.today + timedelta(days=ReminderThreshold.ONE_WEEK.days)

    def matches(self, event_date: date, threshold: ReminderThreshold) -> bool:
        """Igualdade exata de data, sem tolerancia."""
        return event_date == self.today + timedelta(days=threshold.days)

    def is_tomorrow(self, event_date: date) -> bool:
        return self.matches(event_date, ReminderThreshold.ONE_DAY)

    def is_one_week_out(self, event_date: date) -> bool:
        return self.matches(event_date, ReminderThreshold.ONE_WEEK)


def resolve_window(
    now: datetime,
    zone: tzinfo,
    *,
    converter: CalendarDateConverter = to_calendar_date,
) -> ReminderWindow:
    """Calcula a janela de datas de referencia para o instante `now`."""
    return ReminderWindow(today=converter(now, zone))


def event_calendar_date(
    start: EventStart,
    zone: tzinfo,
    *,
    converter: CalendarDateConverter = to_calendar_date,
) -> date | None:
    """Data de calendario do inicio do evento; None se o inicio estiver vazio."""
    if start.all_day:
        return start.date
    if start.date_time is None:
        return None
    return converter(start.date_time, zone)
