"""Fonte concreta de eventos usando a API v3 do Google Calendar."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import http_status, map_calendar_events
from app.observability import get_correlation_id
from app.protocols.calendar_source import CalendarSourceProtocol
from utils.errors import FetchError

if TYPE_CHECKING:
    from app.domain.reminder import CalendarEvent
    from config.settings import CalendarSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_source"
_CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"
_PAGE_SIZE = 250


class GoogleCalendarSource(CalendarSourceProtocol):
    """Lista eventos expandidos (singleEvents) ordenados por inicio.

    A credencial da service account so e lida e validada na primeira busca;
    JSON invalido ou falha de autenticacao aparecem como FetchError no
    ciclo, nao no startup.
    """

    def __init__(
        self,
        *,
        calendar_id: str,
        credentials_json: str | None = None,
        credentials_file: str | None = None,
    ) -> None:
        if not credentials_json and not credentials_file:
            raise ValueError("credentials_json ou credentials_file e obrigatorio")
        self._calendar_id = calendar_id
        self._credentials_json = credentials_json or None
        self._credentials_file = credentials_file
        self._service: Any = None
        self._authorized = False

    @classmethod
    def from_settings(cls, settings: CalendarSettings) -> GoogleCalendarSource:
        return cls(
            calendar_id=settings.google_calendar_id,
            credentials_json=settings.google_service_account_json,
            credentials_file=settings.google_service_account_file,
        )

    async def fetch_events(
        self,
        window_start: datetime,
        window_end: datetime,
    ) -> list[CalendarEvent]:
        try:
            items = await asyncio.to_thread(self._list_events_sync, window_start, window_end)
        except HttpError as exc:
            self._log_error(action="fetch_events", exc=exc)
            raise FetchError(f"google_calendar_http_error:{http_status(exc)}") from exc
        except Exception as exc:
            self._log_error(action="fetch_events")
            raise FetchError("google_calendar_unexpected_error") from exc

        if not self._authorized:
            self._authorized = True
            logger.info(
                "google_calendar_authorized",
                extra={"component": _COMPONENT, "correlation_id": get_correlation_id()},
            )

        events = map_calendar_events(items)
        logger.info(
            "google_calendar_events_fetched",
            extra={
                "component": _COMPONENT,
                "raw_count": len(items),
                "event_count": len(events),
                "correlation_id": get_correlation_id(),
            },
        )
        return events

    def _get_service(self) -> Any:
        if self._service is None:
            if self._credentials_json is not None:
                credentials = service_account.Credentials.from_service_account_info(
                    json.loads(self._credentials_json),
                    scopes=[_CALENDAR_READONLY_SCOPE],
                )
            else:
                credentials = service_account.Credentials.from_service_account_file(
                    self._credentials_file,
                    scopes=[_CALENDAR_READONLY_SCOPE],
                )
            self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)
        return self._service

    def _list_events_sync(self, window_start: datetime, window_end: datetime) -> list[Any]:
        events_api = self._get_service().events()
        items: list[Any] = []
        page_token: str | None = None
        while True:
            response = events_api.list(
                calendarId=self._calendar_id,
                timeMin=_rfc3339(window_start),
                timeMax=_rfc3339(window_end),
                singleEvents=True,
                orderBy="startTime",
                maxResults=_PAGE_SIZE,
                pageToken=page_token,
            ).execute()
            items.extend(response.get("items") or [])
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def _log_error(self, *, action: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)


def _rfc3339(value: datetime) -> str:
    aware = value.replace(tzinfo=UTC) if value.tzinfo is None else value
    return aware.isoformat()
