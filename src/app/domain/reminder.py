"""Modelos de dominio para lembretes de eventos de calendario.

Os eventos chegam do provider ja normalizados nestes contratos, para que
as regras de lembrete nao dependam do formato bruto da API externa.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReminderThreshold(Enum):
    """Antecedencias suportadas, em dias de calendario."""

    ONE_DAY = (1, "1 day")
    ONE_WEEK = (7, "1 week")

    def __init__(self, days: int, label: str) -> None:
        self.days = days
        self.label = label


class EventStart(BaseModel):
    """Inicio de um evento: `date` para dia inteiro, `date_time` para horario."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date: dt.date | None = Field(default=None, description="Data de evento de dia inteiro.")
    date_time: dt.datetime | None = Field(
        default=None,
        alias="dateTime",
        description="Instante de inicio de evento com horario.",
    )

    @property
    def all_day(self) -> bool:
        return self.date_time is None and self.date is not None

    @property
    def is_empty(self) -> bool:
        return self.date_time is None and self.date is None


class CalendarEvent(BaseModel):
    """Evento lido da fonte de calendario (somente leitura para o core).

    `id` e unico por instancia; recorrencias expandidas tem ids proprios.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(default=None, description="Identificador estavel do evento.")
    start: EventStart | None = Field(default=None, description="Inicio do evento.")
    summary: str | None = Field(default=None, description="Titulo exibido.")
    description: str | None = Field(default=None, description="Descricao (pode conter HTML).")
    html_link: str | None = Field(default=None, alias="htmlLink")
    location: str | None = Field(default=None, description="Local do evento.")

    @property
    def is_well_formed(self) -> bool:
        """False quando falta id ou qualquer campo de inicio."""
        return bool(self.id) and self.start is not None and not self.start.is_empty


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """Pedido de lembrete pronto para um canal de entrega."""

    event_id: str
    threshold: ReminderThreshold
    title: str
    start_display: str
    description: str | None = None
    link: str | None = None
    location: str | None = None

    @property
    def label(self) -> str:
        return self.threshold.label


__all__ = ["CalendarEvent", "EventStart", "NotificationRequest", "ReminderThreshold"]
