"""Settings de integracao com Google Calendar."""

from __future__ import annotations

import json
import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field

# Janela minima para enxergar o alvo de 7 dias antes que ele passe.
MIN_LOOKAHEAD_DAYS = 8


class CalendarSettings(BaseModel):
    """Configuracoes da fonte de eventos usada pelos lembretes."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default="",
        description="ID do calendario alvo no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    google_service_account_file: str = Field(
        default="service-account-key.json",
        description="Caminho do arquivo de credencial, usado quando o JSON nao vem na env.",
    )
    calendar_timezone: str = Field(
        default="UTC",
        description="Timezone IANA em que as datas dos lembretes sao calculadas.",
    )
    calendar_lookahead_days: int = Field(
        default=MIN_LOOKAHEAD_DAYS,
        ge=1,
        description="Tamanho da janela de busca em dias a partir de agora.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas de calendario."""
        errors: list[str] = []
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID nao configurado")
        if not self.google_service_account_json and not os.path.exists(
            self.google_service_account_file
        ):
            errors.append(
                "GOOGLE_SERVICE_ACCOUNT_JSON ausente e arquivo "
                f"{self.google_service_account_file} nao encontrado"
            )
        if self.google_service_account_json and not _is_json_object(self.google_service_account_json):
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON nao e um objeto JSON valido")
        try:
            ZoneInfo(self.calendar_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"CALENDAR_TIMEZONE invalido: {self.calendar_timezone}")
        if self.calendar_lookahead_days < MIN_LOOKAHEAD_DAYS:
            errors.append(f"CALENDAR_LOOKAHEAD_DAYS deve ser >= {MIN_LOOKAHEAD_DAYS}")
        return errors


def _is_json_object(raw: str) -> bool:
    try:
        return isinstance(json.loads(raw), dict)
    except json.JSONDecodeError:
        return False


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", ""),
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        google_service_account_file=os.getenv(
            "GOOGLE_SERVICE_ACCOUNT_FILE", "service-account-key.json"
        ),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "UTC"),
        calendar_lookahead_days=int(
            os.getenv("CALENDAR_LOOKAHEAD_DAYS", str(MIN_LOOKAHEAD_DAYS))
        ),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["MIN_LOOKAHEAD_DAYS", "CalendarSettings", "get_calendar_settings"]
