"""
Async client that keeps a map's listings in sync with its viewport.

Viewport changes are debounced, and each fetch is tagged with a generation
token so a slow response for an old viewport never replaces a newer result.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional
import logging

from httpx import AsyncClient, HTTPError

from app.config import get_settings
from app.utils.viewport import Debouncer, RequestGenerationCounter

settings = get_settings()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    north: float
    south: float
    east: float
    west: float

    def as_params(self) -> Dict[str, float]:
        return asdict(self)


class MapViewportClient:
    """
    Fetches `/properties/map` for the latest viewport.

    Args:
        client: httpx client pointed at the API root (base_url includes the API prefix)
        on_results: Called with (listings, total) whenever a current result arrives
        debounce_seconds: Quiet period before a viewport change is fetched
        filters: Extra search filters sent with every request
    """

    def __init__(
        self,
        client: AsyncClient,
        on_results: Optional[Callable[[List[Dict[str, Any]], int], None]] = None,
        debounce_seconds: Optional[float] = None,
        filters: Optional[Dict[str, Any]] = None
    ):
        self.client = client
        self.on_results = on_results
        self.filters = dict(filters or {})
        self.generations = RequestGenerationCounter()
        self.debouncer = Debouncer(
            self._fetch,
            settings.viewport_debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self.listings: List[Dict[str, Any]] = []
        self.total = 0
        self.viewport: Optional[Viewport] = None

    def viewport_changed(self, viewport: Viewport) -> None:
        """Record a viewport change; the fetch happens after the quiet period."""
        self.debouncer.trigger(viewport)

    async def settle(self) -> None:
        """Wait until the pending fetch, if any, has finished."""
        await self.debouncer.flush()

    async def fetch_now(self, viewport: Viewport) -> bool:
        """Fetch immediately, bypassing the debounce."""
        self.debouncer.cancel()
        return await self._fetch(viewport)

    async def _fetch(self, viewport: Viewport) -> bool:
        """
        Request listings for a viewport and apply them if still current.

        Returns:
            True if the response was applied, False if it was stale or failed
        """
        token = self.generations.next()
        params = {**self.filters, **viewport.as_params()}

        try:
            response = await self.client.get("/properties/map", params=params)
            response.raise_for_status()
            payload = response.json()
        except (HTTPError, ValueError) as e:
            logger.warning(f"Map fetch for generation {token} failed: {e}")
            return False

        if not self.generations.is_current(token):
            logger.debug(f"Discarding stale map results for generation {token}")
            return False

        self.viewport = viewport
        self.listings = payload.get("data", [])
        self.total = payload.get("total", len(self.listings))
        if self.on_results is not None:
            self.on_results(self.listings, self.total)
        return True
