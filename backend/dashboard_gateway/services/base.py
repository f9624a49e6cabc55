"""Shared HTTP plumbing for upstream provider clients.

Each provider client owns one pooled ``httpx.AsyncClient`` (created lazily,
closed on shutdown) and performs exactly one GET per logical operation.
There are no retries: a non-2xx answer or a timeout becomes an
``UpstreamError`` and the caller decides what to do with it.
"""

import logging
from typing import Any

import httpx

from dashboard_gateway.models import UpstreamError

logger = logging.getLogger(__name__)


class ProviderClient:
    """Base class for thin upstream API clients.

    Subclasses set ``provider_name`` and ``timeout`` and call ``_get_json``.
    A custom ``transport`` lets tests swap the network for
    ``httpx.MockTransport``.
    """

    provider_name = "upstream"
    timeout = 10.0
    user_agent = "DashboardGateway/0.1"

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        client = self._get_client()
        try:
            response = await client.get(path, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = _error_detail(e.response)
            logger.warning(f"[{self.provider_name.upper()}] {path} -> HTTP {status}: {detail}")
            raise UpstreamError(self.provider_name, detail, status_code=status) from e
        except httpx.TimeoutException as e:
            logger.warning(f"[{self.provider_name.upper()}] {path} timed out after {self.timeout}s")
            raise UpstreamError(self.provider_name, f"{self.provider_name} request timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"[{self.provider_name.upper()}] {path} failed: {type(e).__name__}: {e}")
            raise UpstreamError(self.provider_name, f"{self.provider_name} request failed: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"[{self.provider_name.upper()}] {path} returned a non-JSON body")
            raise UpstreamError(self.provider_name, f"{self.provider_name} returned invalid JSON") from e


def _error_detail(response: httpx.Response) -> str:
    """Pull a readable message out of a provider error body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "description", "message"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    return f"Upstream responded with HTTP {response.status_code}"
