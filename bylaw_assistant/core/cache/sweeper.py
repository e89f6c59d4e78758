
import logging
import threading
from typing import Optional

from ..protocols.cache import CacheProtocol

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Runs cache cleanup on a fixed interval from a daemon thread."""

    def __init__(self, cache: CacheProtocol, interval: float = 60.0):
        """Initialize sweeper.

        Args:
            cache: Cache to sweep.
            interval: Seconds between sweeps.
        """
        self._cache = cache
        self._interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="cache-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(f"Cache sweeper started (every {self._interval:.0f}s)")

    def stop(self, timeout: float = 5.0) -> None:
        if self._thread is None:
            return

        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("Cache sweeper stopped")

    def sweep(self) -> None:
        try:
            self._cache.cleanup()
        except Exception as e:
            logger.warning(f"Cache sweep failed: {e}")

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            self.sweep()
