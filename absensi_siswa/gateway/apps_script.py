from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT
from ..core.exceptions import ConfigurationError, GatewayError

logger = logging.getLogger(__name__)


@dataclass
class AppsScriptConfig:
    url: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT


class AppsScriptClient:
    """Thin JSON client for the Apps Script web app acting as the database.

    Note: A single endpoint serves every operation; GET requests select the
    operation with an ``action`` query parameter, POST requests with a
    ``type`` field (or a bare list for attendance batches).
    """

    def __init__(self, config: AppsScriptConfig, *, session: Optional[requests.Session] = None):
        if not config.url:
            raise ConfigurationError("APPS_SCRIPT_URL belum diatur (set environment variable APPS_SCRIPT_URL)")
        self._config = config
        self._session = session or requests.Session()

    def get_json(self, params: Optional[Mapping[str, str]] = None) -> Any:
        try:
            response = self._session.get(self._config.url, params=dict(params or {}), timeout=self._config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("GET %s failed: %s", dict(params or {}), e)
            raise GatewayError("Gagal menghubungi server spreadsheet") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error("GET %s returned non-JSON body", dict(params or {}))
            raise GatewayError("Respons server spreadsheet tidak valid") from e

    def post_json(self, payload: Any) -> Any:
        """POST a JSON body; returns the decoded reply or None for an empty one."""
        try:
            response = self._session.post(self._config.url, json=payload, timeout=self._config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("POST to Apps Script failed: %s", e)
            raise GatewayError("Gagal mengirim data ke server spreadsheet") from e

        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            # Apps Script sometimes answers writes with plain text.
            return None
        if isinstance(body, dict) and body.get("success") is False:
            raise GatewayError(str(body.get("message") or "Server spreadsheet menolak permintaan"))
        return body


def unwrap_result(body: Any) -> Any:
    """Unwrap a ``{"success": ..., "data": ..., "message": ...}`` envelope."""
    if not isinstance(body, dict) or "success" not in body:
        return body
    if not body.get("success"):
        raise GatewayError(str(body.get("message") or "Server spreadsheet menolak permintaan"))
    return body.get("data") or []
