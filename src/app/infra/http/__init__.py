"""Cliente HTTP compartilhado pelos adapters de saída."""

from __future__ import annotations

from app.infra.http.http_client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]
