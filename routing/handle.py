"""Hot-reload holder for a finalized Router.

A Router is not safe to mutate while queries run. Reloading therefore
means building and finalizing a new Router, then swapping the reference
held here. Readers always see a complete table, old or new.
"""

import threading

from errors import ConfigError
from logging_config import get_logger
from routing.router import Router

logger = get_logger(__name__)


class RouterHandle:
    def __init__(self, router: Router | None = None) -> None:
        self._lock = threading.Lock()
        self._router = router if router is not None else Router()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of successful swaps."""
        return self._generation

    def current(self) -> Router:
        with self._lock:
            return self._router

    def swap(self, router: Router) -> Router:
        """Install a new router and return the previous one.

        Raises:
            ConfigError: router has entries added after its last update().
        """
        if not router.finalized:
            raise ConfigError("Router must be finalized with update() before swap")

        with self._lock:
            previous, self._router = self._router, router
            self._generation += 1
            generation = self._generation

        logger.info("Route table swapped (generation %d, %d entries)", generation, len(router))
        return previous
