"""Settings do canal Slack usado para entregar lembretes."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

SLACK_API_BASE_URL: str = "https://slack.com/api"


class SlackSettings(BaseModel):
    """Configuracoes do bot Slack.

    O token nunca deve aparecer em logs.
    """

    model_config = ConfigDict(extra="ignore")

    bot_token: str = Field(default="", description="Bot token (xoxb-...) do app Slack.")
    channel_id: str = Field(default="", description="Canal que recebe os lembretes.")
    api_base_url: str = Field(default=SLACK_API_BASE_URL, description="URL base da Web API.")
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=2, ge=0)

    @property
    def post_message_endpoint(self) -> str:
        """Endpoint completo do chat.postMessage."""
        return f"{self.api_base_url.rstrip('/')}/chat.postMessage"

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas do Slack."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN nao configurado")
        if not self.channel_id:
            errors.append("SLACK_CHANNEL_ID nao configurado")
        return errors


def _load_slack_from_env() -> SlackSettings:
    """Carrega SlackSettings de variaveis de ambiente."""
    return SlackSettings(
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        channel_id=os.getenv("SLACK_CHANNEL_ID", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "10")),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "2")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instancia cacheada de SlackSettings."""
    return _load_slack_from_env()


__all__ = ["SLACK_API_BASE_URL", "SlackSettings", "get_slack_settings"]
