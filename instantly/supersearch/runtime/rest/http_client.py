"""Async HTTP client used by the REST transport.

The client owns a lazily created aiohttp session and adds the behaviour the
Instantly API needs on top of it:

- relative paths are joined onto ``base_url``
- default headers (the Bearer token) are sent with every request
- response hooks may inspect each response and request a throttle delay
- 429/418 responses are retried after ``Retry-After`` (or a backoff)
- other non-2xx responses raise ``ProviderError`` with the decoded body
- connection failures and timeouts are raised as ``ProviderError``
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.exceptions import AuthenticationError, ProviderError, RateLimitError

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], "float | None | Awaitable[float | None]"]

_RATE_LIMIT_STATUSES = (418, 429)
_AUTH_STATUSES = (401, 403)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        headers: dict[str, str] | None = None,
        max_retries: int = 3,
        backoff: float = 1.0,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self.max_retries = max_retries
        self.backoff = backoff
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a hook called with every response.

        A hook may return a delay in seconds; the next request waits at least
        that long.
        """
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Delay the next request by ``delay`` seconds."""
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self._request("POST", url, json=json, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

    def _build_url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        full_url = self._build_url(url)
        merged_headers = {**self.headers, **(headers or {})} or None
        kwargs: dict[str, Any] = {"headers": merged_headers}
        if method == "GET":
            kwargs["params"] = _clean_query(params)
        else:
            kwargs["json"] = json

        attempt = 0
        while True:
            await self._wait_for_throttle()
            send = getattr(self.session, method.lower())
            logger.debug("HTTP request", extra={"method": method, "url": full_url})
            try:
                async with send(full_url, **kwargs) as response:
                    await self._run_hooks(response)

                    if response.status in _RATE_LIMIT_STATUSES:
                        delay = self._retry_delay(response, attempt)
                        if attempt < self.max_retries:
                            attempt += 1
                            logger.warning(
                                "Rate limited, retrying",
                                extra={"url": full_url, "status": response.status, "delay": delay},
                            )
                            self.set_throttle(delay)
                            continue
                        body = await _read_error_body(response)
                        raise RateLimitError(
                            f"Rate limit exceeded for {method} {full_url}",
                            retry_after=delay,
                            response=body,
                            status_code=response.status,
                        )

                    if response.status >= 400:
                        body = await _read_error_body(response)
                        raise _error_for_status(method, full_url, response.status, body)

                    if response.status == 204:
                        return {}
                    data = await response.json(content_type=None)
                    return {} if data is None else data
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning(
                    "HTTP request failed", extra={"method": method, "url": full_url, "error": str(e)}
                )
                raise ProviderError(f"{method} {full_url} failed: {e}") from e

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        if remaining > 0:
            await asyncio.sleep(remaining)
        self._throttle_until = None

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    result = await result
            except Exception:
                logger.warning("Response hook failed", exc_info=True)
                continue
            if isinstance(result, (int, float)) and result > 0:
                self.set_throttle(float(result))

    def _retry_delay(self, response: aiohttp.ClientResponse, attempt: int) -> float:
        header = response.headers.get("Retry-After") if response.headers else None
        if header:
            try:
                return max(float(header), 0.0)
            except ValueError:
                pass
        return self.backoff * (2**attempt)


def _clean_query(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop ``None`` values and render booleans the way the API expects."""
    if params is None:
        return None
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = value
    return cleaned


async def _read_error_body(response: aiohttp.ClientResponse) -> Any:
    try:
        return await response.json(content_type=None)
    except (aiohttp.ContentTypeError, ValueError):
        return await response.text()


def _error_for_status(method: str, url: str, status: int, body: Any) -> ProviderError:
    detail = None
    if isinstance(body, dict):
        detail = body.get("message") or body.get("error")
    elif isinstance(body, str) and body:
        detail = body
    message = f"{method} {url} failed with status {status}"
    if detail:
        message = f"{message}: {detail}"
    if status in _AUTH_STATUSES:
        return AuthenticationError(message, status_code=status, response=body)
    return ProviderError(message, status_code=status, response=body)
