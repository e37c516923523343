"""
HTTP Client for the Endpoints API.

Provides the async client every API function goes through. Each call issues
exactly one authenticated request and returns the decoded JSON body, or
raises APIError carrying the status code and raw response text.

Every request carries `Authorization: Bearer <api key>`. JSON requests also
carry `Content-Type: application/json`; multipart requests do not, so that
httpx can attach the boundary itself.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx

from endpoint_assistant.core.config import Settings, get_settings
from endpoint_assistant.core.exceptions import APIError
from endpoint_assistant.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


@dataclass
class FormData:
    """
    Multipart form body for post_form_data().

    Text fields and files share one list, are sent in the order they were
    appended and may repeat a name (e.g. several "file" entries in one scan
    request).

    Usage:
        form = FormData()
        form.append("prompt", "track job applications")
        form.append_file("file", "cv.pdf", pdf_bytes, "application/pdf")
    """

    parts: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def append(self, name: str, value: str) -> None:
        """Add a text field, encoded as a part without a filename."""
        self.parts.append((name, (None, value.encode("utf-8"))))

    def append_file(
        self,
        name: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> None:
        """Add a file part."""
        if content_type:
            self.parts.append((name, (filename, content, content_type)))
        else:
            self.parts.append((name, (filename, content)))

    def to_multipart(self) -> list[tuple[str, tuple[Any, ...]]]:
        """
        Render as an httpx `files=` list.

        Text fields travel as file-style parts so the body is multipart even
        when no file is attached.
        """
        return list(self.parts)


class EndpointsClient:
    """
    HTTP client for Endpoints API communication.

    Features:
    - Bearer authentication on every request
    - Uniform translation of non-2xx responses into APIError
    - Structured logging of requests/responses
    - Lazily created httpx.AsyncClient (no I/O at construction)

    Usage:
        client = EndpointsClient(get_settings())
        tree = await client.get("/api/endpoints/tree")
        await client.close()
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialize the client.

        Args:
            settings: Resolved settings; base URL and key are fixed for the
                lifetime of the instance.
        """
        self._settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self.timeout = settings.timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def settings(self) -> Settings:
        """Settings this client was built from."""
        return self._settings

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._settings.api_key}"}

    async def _request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        """
        Send one request and decode its response.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path including any query string (e.g., /api/endpoints/tree)
            headers: Extra headers merged over the auth header
            **kwargs: Additional arguments for httpx (json, files)

        Returns:
            Decoded JSON body

        Raises:
            APIError: On a status outside 200-299
            httpx.TransportError: On connection-level failures
            json.JSONDecodeError: If a successful body is not valid JSON
        """
        client = await self._get_client()
        url = f"{self.base_url}{path}"
        request_headers = {**self._auth_headers(), **(headers or {})}

        log_with_source(logger, "sdk", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, url, headers=request_headers, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "sdk",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            "sdk",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        if not response.is_success:
            raise APIError(response.status_code, response.text)
        return response.json()

    async def get(self, path: str) -> Any:
        """Make a GET request."""
        return await self._request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        """Make a POST request with a JSON body."""
        return await self._request(
            "POST", path, headers={"Content-Type": "application/json"}, json=body
        )

    async def patch(self, path: str, body: Any) -> Any:
        """Make a PATCH request with a JSON body."""
        return await self._request(
            "PATCH", path, headers={"Content-Type": "application/json"}, json=body
        )

    async def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return await self._request("DELETE", path)

    async def post_form_data(self, path: str, form: FormData) -> Any:
        """Make a multipart POST request. Content-Type is left to httpx."""
        return await self._request("POST", path, files=form.to_multipart())


# Module-level client instance
_client: EndpointsClient | None = None


def get_client() -> EndpointsClient:
    """
    Get or create the process-wide client.

    Settings are resolved on first access only.

    Raises:
        ConfigurationError: If required settings are missing.
    """
    global _client
    if _client is None:
        _client = EndpointsClient(get_settings())
    return _client


def reset_client() -> None:
    """Discard the process-wide client so the next get_client() builds a new one."""
    global _client
    _client = None
