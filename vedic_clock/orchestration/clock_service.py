"""
Clock Service - snapshot cache and throttle/refresh policy over a browser session
"""

import asyncio
import time
from typing import Any, Callable, Dict, Optional

from loguru import logger

from ..exceptions import ExtractionFailed
from ..extractors.clock_extractor import extract_clock
from ..models import Snapshot, utc_timestamp
from ..scrapers.browser_session import BrowserSession


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class ClockService:
    """
    Serve the upstream clock from a cached snapshot.

    Reads within the throttle window return the cached snapshot without
    touching the page. Past the full-refresh window the page is reloaded
    before extracting. Reads are serialized so only one request drives the
    shared page at a time.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        session: Optional[BrowserSession] = None,
        clock: Callable[[], float] = monotonic_ms
    ):
        """
        Initialize clock service.

        Args:
            config: Configuration dictionary (reads the 'cache' section)
            session: Browser session; created from config when omitted
            clock: Millisecond clock used for the throttle windows
        """
        cache_config = config.get('cache', {})
        self.min_refresh_ms = cache_config.get('min_refresh_ms', 5_000)
        self.full_refresh_ms = cache_config.get('full_refresh_ms', 300_000)

        self.session = session or BrowserSession(config)
        self._clock = clock
        self._lock = asyncio.Lock()
        self._snapshot: Optional[Snapshot] = None
        self._last_fetch: Optional[float] = None

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    def _elapsed(self, now: float) -> float:
        if self._last_fetch is None:
            return float('inf')
        return now - self._last_fetch

    async def read_snapshot(self) -> Snapshot:
        """
        Return the current clock snapshot, cached or freshly extracted.

        Raises:
            SessionLaunchFailed, NavigationFailed: browser session could not be set up
            ExtractionFailed: no clock text on the page; the cache is left as it was
        """
        async with self._lock:
            created = await self.session.ensure_session()
            now = self._clock()
            elapsed = self._elapsed(now)

            if self._snapshot is not None and elapsed < self.min_refresh_ms:
                logger.debug(f"Serving cached snapshot ({elapsed:.0f} ms old)")
                return self._snapshot

            # a session opened by this call was navigated moments ago
            if elapsed > self.full_refresh_ms and not created:
                outcome = await self.session.reload()
                if not outcome.ok:
                    logger.warning(f"{outcome.error}; extracting from the current page")

            reading = await extract_clock(self.session)
            if not reading.time_text:
                logger.warning("No HH:MM:SS text found on the upstream page")
                raise ExtractionFailed("Could not read HH:MM:SS from the source page.")

            self._snapshot = Snapshot.from_reading(reading, fetched_at=utc_timestamp())
            self._last_fetch = now
            logger.info(f"Clock read: {self._snapshot.time} ({self._snapshot.location or 'no location'})")
            return self._snapshot

    async def close(self) -> None:
        """Tear down the browser session."""
        await self.session.close()
