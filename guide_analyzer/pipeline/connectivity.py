"""Process-wide online/offline status.

The pipeline refuses to start a run while offline. Status is refreshed by
probing the analysis service host with httpx; listeners are notified only
when the status actually changes.
"""

import logging
from collections.abc import Callable

import httpx

from guide_analyzer.pipeline.config import get_pipeline_config

logger = logging.getLogger(__name__)

Listener = Callable[[bool], None]


class ConnectivityMonitor:
    """Tracks whether the analysis service is reachable."""

    def __init__(self, probe_url: str, timeout: float = 5.0, online: bool = True) -> None:
        self._probe_url = probe_url
        self._timeout = timeout
        self._online = online
        self._listeners: list[Listener] = []

    @property
    def is_online(self) -> bool:
        return self._online

    def set_online(self, online: bool) -> None:
        """Update the status and notify listeners on change."""
        if online == self._online:
            return
        self._online = online
        logger.info(f"Connectivity changed: {'online' if online else 'offline'}")
        for listener in list(self._listeners):
            listener(online)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for status changes.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def refresh(self) -> bool:
        """Probe the service host and update the status.

        Any HTTP response counts as online; transport errors count as offline.

        Returns:
            The refreshed status.
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                await client.head(self._probe_url)
            except httpx.RequestError as e:
                logger.debug(f"Connectivity probe failed: {e}")
                self.set_online(False)
            else:
                self.set_online(True)
        return self._online


# Module-level singleton instance
_monitor: ConnectivityMonitor | None = None


def get_connectivity_monitor() -> ConnectivityMonitor:
    """Get or create the global connectivity monitor."""
    global _monitor
    if _monitor is None:
        config = get_pipeline_config()
        _monitor = ConnectivityMonitor(config.probe_url, timeout=config.probe_timeout)
    return _monitor
