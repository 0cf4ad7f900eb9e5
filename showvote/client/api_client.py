"""HTTP client for the Show Vote API.

The anonymous identity lives in the `token` cookie the server issues. The
client persists its cookie jar to a JSON file so the same identity is
presented on every invocation.
"""

import json
from pathlib import Path
from typing import Any, Optional

import httpx


class ShowVoteClientError(Exception):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        detail: Decoded response body, if it was JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        detail: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or {}


class ShowVoteClient:
    """Client for the Show Vote API.

    Example:
        async with ShowVoteClient(cookie_path=Path("~/.showvote/cookies.json")) as client:
            shows = await client.get_daily_shows()
            await client.vote(shows[0]["id"])
    """

    DEFAULT_BASE_URL = "http://localhost:8000"

    def __init__(
        self,
        base_url: Optional[str] = None,
        cookie_path: Optional[Path] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API base URL. Defaults to a local server.
            cookie_path: File the cookie jar is loaded from and saved to.
                None keeps cookies in memory only.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.cookie_path = cookie_path
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            cookies=self._load_cookies(),
            transport=transport,
        )

    async def __aenter__(self) -> "ShowVoteClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def get_daily_shows(self) -> list[dict]:
        """Fetch today's slate."""
        response = await self._client.get("/api/daily-shows")
        return self._handle(response)

    async def vote(self, show_id: str) -> dict:
        """Cast today's vote.

        Raises:
            ShowVoteClientError: 403 when voting is closed or the viewer
                already voted, 400 when the show is not in today's slate.
        """
        response = await self._client.post("/api/vote", json={"showId": show_id})
        return self._handle(response)

    async def get_results(self) -> list[dict]:
        """Fetch today's ranking.

        Raises:
            ShowVoteClientError: 403 before the reveal hour (detail carries
                availableAt), 404 when no slate was drawn today.
        """
        response = await self._client.get("/api/results")
        return self._handle(response)

    async def add_show(
        self,
        title: str,
        description: str,
        image_url: Optional[str] = None,
        genre: Optional[str] = None,
    ) -> dict:
        """Insert a show into the catalog."""
        payload: dict[str, Any] = {"title": title, "description": description}
        if image_url:
            payload["imageUrl"] = image_url
        if genre:
            payload["genre"] = genre
        response = await self._client.post("/api/admin/shows", json=payload)
        return self._handle(response)

    def _handle(self, response: httpx.Response) -> Any:
        self._save_cookies()
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("error"):
            message = str(body["error"])
        else:
            message = f"Request failed with status {response.status_code}"
            body = body if isinstance(body, dict) else None
        raise ShowVoteClientError(message, response.status_code, body)

    def _load_cookies(self) -> dict[str, str]:
        if self.cookie_path is None or not self.cookie_path.exists():
            return {}
        try:
            data = json.loads(self.cookie_path.read_text())
        except (OSError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(name): str(value) for name, value in data.items()}

    def _save_cookies(self) -> None:
        if self.cookie_path is None:
            return
        cookies = {cookie.name: cookie.value for cookie in self._client.cookies.jar}
        if not cookies:
            return
        self.cookie_path.parent.mkdir(parents=True, exist_ok=True)
        self.cookie_path.write_text(json.dumps(cookies))
