"""Adapter Slack para entrega de lembretes."""

from __future__ import annotations

from app.infra.slack.slack_notifier import SlackNotifier, render_reminder_text

__all__ = ["SlackNotifier", "render_reminder_text"]
