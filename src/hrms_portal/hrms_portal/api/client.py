from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


class HrApiClient:
    """Thin JSON client for the HR backend.

    Every call goes through one ``requests.Session`` with a fixed base URL and
    timeout. Transport failures, non-2xx responses and unreadable bodies all
    surface as :class:`ApiError`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    @property
    def base_url(self) -> str:
        return self._base_url

    def get(self, path: str, *, params: Optional[dict] = None) -> Any:
        return self._request("GET", path, params=_drop_empty(params))

    def post(self, path: str, *, json: Any = None) -> Any:
        return self._request("POST", path, json=json)

    def put(self, path: str, *, json: Any = None) -> Any:
        return self._request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("API %s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach the HR service ({exc.__class__.__name__})") from exc

        if not response.ok:
            message = _error_message(response)
            logger.warning("API %s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("API %s %s returned a non-JSON body", method, url)
            raise ApiError("The HR service returned an invalid response", status_code=response.status_code) from exc


def _drop_empty(params: Optional[dict]) -> Optional[dict]:
    if not params:
        return None
    return {k: v for k, v in params.items() if v not in (None, "")}


def _error_message(response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return f"HR service error {response.status_code}"
