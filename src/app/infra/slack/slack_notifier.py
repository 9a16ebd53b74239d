"""Entrega de lembretes via Slack Web API (chat.postMessage).

Logging sem token e sem conteudo do evento: apenas ids e resultado.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.observability import get_correlation_id
from app.protocols.notification_sink import NotificationSinkProtocol
from utils.errors import DeliveryError

if TYPE_CHECKING:
    from app.domain.reminder import NotificationRequest
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)

_COMPONENT = "slack_notifier"


def render_reminder_text(request: NotificationRequest) -> str:
    """Renderiza o lembrete em mrkdwn do Slack."""
    lines = [
        f"⏰ *Upcoming event in {request.label}*",
        f"*{request.title}*",
        f"📅 {request.start_display}",
    ]
    if request.location:
        lines.append(f"📍 {request.location}")
    if request.description:
        lines.append("")
        lines.append(request.description)
        lines.append("")
    if request.link:
        lines.append(f"🔗 <{request.link}|Open in Google Calendar>")
    return "\n".join(lines).rstrip()


class SlackNotifier(NotificationSinkProtocol):
    """Posta lembretes em um canal Slack com bot token."""

    __slots__ = ("_channel_id", "_endpoint", "_http", "_token")

    def __init__(
        self,
        *,
        bot_token: str,
        channel_id: str,
        endpoint: str,
        http_client: HttpClient | None = None,
    ) -> None:
        self._token = bot_token
        self._channel_id = channel_id
        self._endpoint = endpoint
        self._http = http_client or HttpClient()

    @classmethod
    def from_settings(cls, settings: SlackSettings) -> SlackNotifier:
        config = HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )
        return cls(
            bot_token=settings.bot_token,
            channel_id=settings.channel_id,
            endpoint=settings.post_message_endpoint,
            http_client=HttpClient(config),
        )

    async def deliver(self, request: NotificationRequest) -> None:
        if not self._token.strip():
            raise DeliveryError("slack_token_missing")

        payload = {
            "channel": self._channel_id,
            "text": render_reminder_text(request),
            "mrkdwn": True,
        }
        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {self._token}",
        }
        try:
            response = await self._http.post(self._endpoint, json=payload, headers=headers)
        except HttpError as exc:
            self._log_failure(request, error=str(exc), status_code=exc.status_code)
            raise DeliveryError("slack_http_error", status_code=exc.status_code) from exc
        except httpx.HTTPError as exc:
            self._log_failure(request, error=type(exc).__name__, status_code=None)
            raise DeliveryError("slack_http_error") from exc

        body = _parse_body(response.content)
        if response.status_code >= 400 or not body.get("ok"):
            error = str(body.get("error") or "unknown_error")
            self._log_failure(request, error=error, status_code=response.status_code)
            raise DeliveryError(f"slack_api_error:{error}", status_code=response.status_code)

        logger.info(
            "slack_reminder_sent",
            extra={
                "component": _COMPONENT,
                "event_id": request.event_id,
                "threshold": request.threshold.name,
                "correlation_id": get_correlation_id(),
            },
        )

    def _log_failure(
        self,
        request: NotificationRequest,
        *,
        error: str,
        status_code: int | None,
    ) -> None:
        logger.error(
            "slack_reminder_failed",
            extra={
                "component": _COMPONENT,
                "event_id": request.event_id,
                "threshold": request.threshold.name,
                "error": error,
                "status_code": status_code,
                "correlation_id": get_correlation_id(),
            },
        )


def _parse_body(content: bytes) -> dict[str, Any]:
    try:
        data = json.loads(content or b"{}")
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}
