"""HTTP client that drives a ``SearchSession`` against the listing endpoint.

A fetch never raises for transport or HTTP failures: the failure is recorded
on the session (``LoadState.ERROR``) and calling ``fetch`` again is the retry.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Mapping, Optional

import httpx

from jobboard.core.logging import get_logger
from jobboard.domain.exceptions import ListingFetchError
from jobboard.domain.session import ListingRequest, SearchSession

logger = get_logger(__name__)

LISTING_PATH = "/jobs-listing"
DEFAULT_TIMEOUT = 10.0

# An independent fetch run next to the listing: (path, callback receiving the JSON body).
SideFetch = tuple[str, Callable[[Any], None]]


def _failure(exc: Exception) -> ListingFetchError:
    if isinstance(exc, httpx.HTTPStatusError):
        return ListingFetchError(
            f"Listing request failed with status {exc.response.status_code}",
            status_code=exc.response.status_code,
        )
    return ListingFetchError(f"Listing request failed: {exc}")


def _apply(session: SearchSession, request: ListingRequest, response: httpx.Response) -> bool:
    try:
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPStatusError, ValueError) as exc:
        return session.apply_failure(request, _failure(exc))
    return session.apply_response(request, payload)


class JobListingClient:
    """Synchronous client over ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers=dict(headers or {}),
        )

    def fetch(self, session: SearchSession) -> bool:
        """Fetch the session's current page; returns True when the result was applied."""
        request = session.begin_request()
        try:
            response = self._client.get(LISTING_PATH, params=request.params)
        except httpx.HTTPError as exc:
            return session.apply_failure(request, _failure(exc))
        return _apply(session, request, response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JobListingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncJobListingClient:
    """Async client; ``refresh`` runs the listing and side fetches concurrently."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers=dict(headers or {}),
        )

    async def fetch(self, session: SearchSession) -> bool:
        request = session.begin_request()
        try:
            response = await self._client.get(LISTING_PATH, params=request.params)
        except httpx.HTTPError as exc:
            return session.apply_failure(request, _failure(exc))
        return _apply(session, request, response)

    async def _side_fetch(self, path: str, callback: Callable[[Any], None]) -> bool:
        try:
            response = await self._client.get(path)
            response.raise_for_status()
            callback(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            # Side panels degrade on their own; the listing state is untouched.
            logger.warning("Side fetch failed", extra={"path": path, "error": str(exc)})
            return False
        return True

    async def refresh(
        self, session: SearchSession, extra: tuple[SideFetch, ...] = ()
    ) -> list[bool]:
        """Fetch the listing plus each ``(path, callback)`` in parallel.

        Returns one flag per fetch (listing first) telling whether it was applied.
        """
        tasks: list[Awaitable[bool]] = [self.fetch(session)]
        tasks.extend(self._side_fetch(path, callback) for path, callback in extra)
        return list(await asyncio.gather(*tasks))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncJobListingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
