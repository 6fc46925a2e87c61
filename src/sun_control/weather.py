"""
Keeps an external weather system's clock in step with the sun controller.
"""
import logging

_LOGGER = logging.getLogger(__name__)


class WeatherSync:
    """
    Forward the controller's instant to a weather system when it changes.

    Args:
        target: Callable taking the new datetime
    """

    def __init__(self, target):
        self.target = target
        self.last_instant = None
        self._unsubscribe = None

    @property
    def attached(self):
        return self._unsubscribe is not None

    def attach(self, controller):
        """Sync once with the controller's current instant, then follow its updates."""
        if self.attached:
            raise RuntimeError("WeatherSync is already attached to a controller")
        self.sync(controller.get_instant())
        self._unsubscribe = controller.subscribe(self._on_state)

    def detach(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def sync(self, instant):
        """Push `instant` to the target unless it was the last one pushed."""
        if instant == self.last_instant:
            return False
        _LOGGER.debug("Weather clock -> %s", instant.isoformat())
        self.target(instant)
        self.last_instant = instant
        return True

    def _on_state(self, state):
        self.sync(state.instant)
