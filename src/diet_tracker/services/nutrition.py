"""Nutrition service proxying USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from diet_tracker.adapters.fdc_client import FdcClient
from diet_tracker.errors import UpstreamError

_logger = logging.getLogger(__name__)

_SERVER_ERROR = 500

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for USDA lookups with a short retry on transient failures."""

    fdc_client: FdcClient
    page_size: int = 10
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str) -> dict[str, object]:
        """Search FDC foods and return the upstream payload."""
        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=self.page_size),
            action="search",
        )
        _logger.debug(
            "Nutrition search FDC: query=%s results=%s",
            query,
            len(payload.get("foods") or []),
        )
        return payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch one FDC food and return the upstream payload."""
        return await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call the FDC client, retrying connection errors and 5xx answers."""
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                _logger.warning(
                    "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    status_code if status_code is not None else "n/a",
                    exc,
                )
                if attempt > self.retry_attempts or not _is_retryable(exc):
                    raise _upstream_error(exc, status_code) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> int | None:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    return None


def _is_retryable(exc: httpx.HTTPError) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= _SERVER_ERROR
    return isinstance(exc, httpx.ConnectError)


def _upstream_error(exc: httpx.HTTPError, status_code: int | None) -> UpstreamError:
    if status_code is not None:
        return UpstreamError(
            f"Nutrition API responded with status: {status_code}",
            upstream_status=status_code,
        )
    if isinstance(exc, httpx.TimeoutException):
        return UpstreamError("Nutrition API request timed out")
    return UpstreamError("Failed to fetch nutrition data")
