from __future__ import annotations

from typing import Optional

import httpx


class NetworkError(Exception):
    """Request failed, or the server answered with an error."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(message)


class HelloClient:
    """
    HTTP client for /api/hello.

    If `http` is given (e.g. a FastAPI TestClient), its base URL is used
    and the caller owns closing it.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._client = http if http is not None else httpx.Client(timeout=timeout)

    def __enter__(self) -> HelloClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._client.close()

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> str:
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise NetworkError(f"Connection error: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            raise NetworkError(error or f"HTTP error! status: {response.status_code}", response.status_code)

        if not isinstance(data, dict):
            raise NetworkError("Invalid response from server", response.status_code)
        if "error" in data:
            raise NetworkError(str(data["error"]), response.status_code)
        if not isinstance(data.get("message"), str):
            raise NetworkError("Invalid response from server", response.status_code)
        return data["message"]

    def get_message(self) -> str:
        return self._request("GET", "/api/hello")

    def set_message(self, content: str) -> str:
        return self._request("POST", "/api/hello", json={"content": content})
