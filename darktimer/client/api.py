"""HTTP client for the Dark Timer API."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..core.config import API_URL
from .timer import AttemptSubmission


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class DarkTimerClient:
    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = 20,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"), timeout=timeout, transport=transport
        )

    def __enter__(self) -> "DarkTimerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def submit_attempt(self, submission: AttemptSubmission) -> Dict[str, Any]:
        """Post a stopped time and return the resolved outcome."""
        return self._request("POST", "/api/attempt", json=submission.to_payload())

    def update_message(self, player_name: str, message: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/api/update-message",
            json={"playerName": player_name, "message": message},
        )

    def leaderboard(self, limit: Optional[int] = None) -> Dict[str, Any]:
        params = {"limit": limit} if limit is not None else None
        return self._request("GET", "/api/leaderboard", params=params)

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        r = self._client.request(method, path, **kwargs)
        if r.is_error:
            try:
                detail = r.json().get("detail", r.text)
            except ValueError:
                detail = r.text
            raise ApiError(r.status_code, str(detail))
        return r.json()


__all__ = ["ApiError", "DarkTimerClient"]
