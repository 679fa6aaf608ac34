"""
Seat Layout Client
==================

HTTP client for a remote seat-layout service exposing
/seat-layouts/{layout_id}/hybrid.
"""

import logging
from typing import Optional
import httpx
from pydantic import BaseModel

from ..config import SEAT_LAYOUT_API_URL, SEAT_LAYOUT_API_TIMEOUT
from ..models.hybrid_models import HybridLayoutDTO

logger = logging.getLogger(__name__)


class SeatLayoutResponse(BaseModel):
    """Result of a seat-layout service call."""
    success: bool
    layout: Optional[HybridLayoutDTO] = None
    status_code: Optional[int] = None
    error: Optional[str] = None


class SeatLayoutClient:
    """Client for the seat-layout service's hybrid layout endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = SEAT_LAYOUT_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or SEAT_LAYOUT_API_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        logger.info(f"[SEAT-LAYOUT-CLIENT] Initialized with timeout={timeout}, url={self.base_url}")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def hybrid_url(self, layout_id: str) -> str:
        return f"{self.base_url}/seat-layouts/{layout_id}/hybrid"

    async def get_hybrid_layout(self, layout_id: str) -> SeatLayoutResponse:
        """Fetch the hybrid layout of a seat layout."""
        return await self._request("GET", layout_id)

    async def save_hybrid_layout(self, layout_id: str, layout: HybridLayoutDTO) -> SeatLayoutResponse:
        """Replace the hybrid layout of a seat layout; returns what the service stored."""
        return await self._request("PUT", layout_id, payload=layout.to_payload())

    async def _request(self, method: str, layout_id: str, payload: Optional[dict] = None) -> SeatLayoutResponse:
        url = self.hybrid_url(layout_id)
        logger.info(f"[SEAT-LAYOUT-CLIENT] {method} {url}")

        try:
            client = await self._get_client()
            response = await client.request(method, url, json=payload)
            response.raise_for_status()

            layout = HybridLayoutDTO.from_payload(response.json())
            logger.info(
                f"[SEAT-LAYOUT-CLIENT-OK] {method} {layout_id}: "
                f"sections={len(layout.sections)}, elements={len(layout.elements)}, seats={len(layout.seats)}"
            )
            return SeatLayoutResponse(success=True, layout=layout, status_code=response.status_code)

        except httpx.TimeoutException:
            logger.error(f"[SEAT-LAYOUT-CLIENT-TIMEOUT] Request to {url} timed out")
            return SeatLayoutResponse(success=False, error="Request timed out")

        except httpx.HTTPStatusError as e:
            logger.error(f"[SEAT-LAYOUT-CLIENT-ERROR] HTTP {e.response.status_code}: {e.response.text}")
            return SeatLayoutResponse(
                success=False,
                status_code=e.response.status_code,
                error=f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            )

        except Exception as e:
            logger.error(f"[SEAT-LAYOUT-CLIENT-ERROR] {type(e).__name__}: {e}")
            return SeatLayoutResponse(success=False, error=str(e))
