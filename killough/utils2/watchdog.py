# killough/utils2/watchdog.py
import logging
import time
from ..config import check_expiration

logger = logging.getLogger(__name__)


class SafetyWatchdog:
    """
    Feed-or-stop timer for an actuator owner.

    Not threaded: the control loop calls check() once per period, the same
    way it feeds the drive.
    """
    def __init__(self, expiration=0.1, enabled=True, on_timeout=None, owner="Actuator",
                 clock=time.monotonic):
        self.expiration = check_expiration(expiration)
        self.enabled = bool(enabled)
        self.on_timeout = on_timeout
        self.owner = owner
        self._clock = clock
        self._last_feed = clock()
        self.feeds = 0
        self.timeouts = 0

    def feed(self):
        self._last_feed = self._clock()
        self.feeds += 1

    def set_expiration(self, seconds: float):
        self.expiration = check_expiration(seconds)

    def set_enabled(self, enabled: bool):
        self.enabled = bool(enabled)
        if self.enabled:
            self._last_feed = self._clock()

    def is_alive(self) -> bool:
        if not self.enabled:
            return True
        return (self._clock() - self._last_feed) <= self.expiration

    def check(self) -> bool:
        if self.is_alive():
            return True
        self.timeouts += 1
        logger.error(f"{self.owner}... Output not updated often enough.")
        if self.on_timeout is not None:
            self.on_timeout()
        return False
