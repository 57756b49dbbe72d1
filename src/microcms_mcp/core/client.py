import logging
import time
from typing import Any, Dict, Optional

import httpx

from .config import DEFAULT_BASE_URL, MicroCMSConfig, load_config
from .observability import log_event

API_KEY_HEADER = "X-MICROCMS-API-KEY"
API_PREFIX = "/api/v1"


class MicroCMSClientError(Exception):
    """Base error for client failures (network errors included)."""


class MicroCMSHTTPError(MicroCMSClientError):
    """The content API answered with a non-2xx status."""

    def __init__(
        self,
        *,
        status_code: int,
        reason: str,
        url: str,
        message: str,
    ):
        super().__init__(f"{message}: {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.url = url


class MicroCMSParseError(MicroCMSClientError):
    pass


class MicroCMSClient:
    """
    Read-only HTTP client for the microCMS content API.
    - Sends the API key header on every request
    - Returns decoded JSON exactly as the service sent it
    - No retries, no caching; httpx default timeouts apply
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        api_key = api_key or ""

        if not api_key:
            raise ValueError("api_key must be provided.")

        self.base_url = base_url
        self.log = logger or logging.getLogger("microcms_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                API_KEY_HEADER: api_key,
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_config(cls, config: MicroCMSConfig, **kwargs) -> "MicroCMSClient":
        return cls(api_key=config.api_key, base_url=config.base_url, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "MicroCMSClient":
        return cls.from_config(load_config(), **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "MicroCMSClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        error_prefix: str = "Failed to fetch from microCMS",
        tool: Optional[str] = None,
    ) -> Any:
        """
        Core request method.
        - Raises MicroCMSHTTPError on non-2xx HTTP responses
        - Raises MicroCMSClientError on network/timeout errors
        - Raises MicroCMSParseError if the body isn't valid JSON
        - Returns the parsed JSON value on success
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            # An empty map must not leave a dangling "?" on the URL.
            resp = await self.http.request(method, path, params=params or None)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # InvalidURL is not an HTTPError; httpx raises it while building the
            # URL from caller strings (control characters, over-long query).
            log_event(
                "op_call",
                tool=tool,
                method=method,
                endpoint=path,
                status="exception",
                error_type=type(exc).__name__,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            if isinstance(exc, httpx.InvalidURL):
                raise MicroCMSClientError(
                    f"Invalid request URL for {method} {path!r}: {exc}"
                ) from exc
            raise MicroCMSClientError(
                f"Network error calling {method} {path}: {exc}"
            ) from exc

        log_event(
            "op_call",
            tool=tool,
            method=method,
            endpoint=path,
            status=resp.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise MicroCMSHTTPError(
                status_code=resp.status_code,
                reason=resp.reason_phrase,
                url=str(resp.request.url),
                message=error_prefix,
            )

        return self._safe_json(resp)

    def _safe_json(self, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise MicroCMSParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    async def get_list(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        *,
        tool: Optional[str] = None,
    ) -> Any:
        """Fetch a page of contents from ``endpoint``."""
        return await self.request(
            "GET",
            f"{API_PREFIX}/{endpoint}",
            params=params,
            error_prefix="Failed to fetch from microCMS",
            tool=tool,
        )

    async def get_content(
        self,
        endpoint: str,
        content_id: str,
        params: Optional[Dict[str, str]] = None,
        *,
        tool: Optional[str] = None,
    ) -> Any:
        """Fetch a single content item by id.

        ``endpoint`` and ``content_id`` are interpolated into the path as given,
        not percent-escaped; a "?" in either starts the query string.
        """
        return await self.request(
            "GET",
            f"{API_PREFIX}/{endpoint}/{content_id}",
            params=params,
            error_prefix="Failed to fetch content from microCMS",
            tool=tool,
        )


__all__ = [
    "API_KEY_HEADER",
    "MicroCMSClient",
    "MicroCMSClientError",
    "MicroCMSHTTPError",
    "MicroCMSParseError",
]
