"""Mocked MLS integration.

There is no live MLS feed yet: ``fetch_mls_comparables`` waits a fixed delay
and returns canned listings.  ``ComparablesFetcher`` keeps at most one
request in flight, keyed by address, and cancels it when the address changes.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from core.models import ComparableListing
from core.presets import MLS_DELAY_SECONDS, MLS_TIMEOUT_SECONDS, MOCK_MLS_COMPARABLES

logger = logging.getLogger(__name__)


def _is_valid_listing(row: dict) -> bool:
    return bool(row.get("address")) and row.get("list_price", 0) > 0 and row.get("sqft", 0) > 0


async def fetch_mls_comparables(
    address: str,
    delay: float = MLS_DELAY_SECONDS,
    timeout: float = MLS_TIMEOUT_SECONDS,
) -> List[ComparableListing]:
    """Search comparables near ``address``.

    Raises ``ValueError`` for a missing or too-short address and
    ``TimeoutError`` when the simulated request outlives ``timeout``.
    """
    if not address or len(address) < 5:
        raise ValueError("Address is required for MLS search")
    logger.info("Fetching MLS data for: %s", address)
    try:
        await asyncio.wait_for(asyncio.sleep(delay), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise TimeoutError("Request timeout") from exc

    base_id = int(time.time() * 1000)
    rows = [r for r in MOCK_MLS_COMPARABLES if _is_valid_listing(r)]
    return [ComparableListing(id=base_id + i, **r) for i, r in enumerate(rows, start=1)]


def merge_comparables(
    existing: Sequence[ComparableListing], fetched: Sequence[ComparableListing]
) -> List[ComparableListing]:
    """Keep the subject (first entry) and replace everything else."""
    head = list(existing[:1])
    return head + list(fetched)


class ComparablesFetcher:
    """Single in-flight comparables request keyed by address."""

    def __init__(self, delay: float = MLS_DELAY_SECONDS, timeout: float = MLS_TIMEOUT_SECONDS) -> None:
        self.delay = delay
        self.timeout = timeout
        self.address: Optional[str] = None
        self._task: Optional[asyncio.Task] = None

    def request(self, address: str) -> asyncio.Task:
        """Start a search for ``address``; must be called inside a running loop.

        A pending request for the same address is reused; one for a
        different address is cancelled first.
        """
        if self._task is not None and not self._task.done():
            if address == self.address:
                return self._task
            logger.debug("Cancelling stale MLS request for %s", self.address)
            self._task.cancel()
        self.address = address
        self._task = asyncio.get_running_loop().create_task(
            fetch_mls_comparables(address, self.delay, self.timeout)
        )
        return self._task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def result(self) -> List[ComparableListing]:
        if self._task is None:
            raise RuntimeError("No MLS request has been made")
        return await self._task


def load_comparables(address: str, delay: float = MLS_DELAY_SECONDS) -> List[ComparableListing]:
    """Blocking wrapper for Streamlit callbacks."""
    return asyncio.run(fetch_mls_comparables(address, delay=delay))
