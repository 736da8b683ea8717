# killough/telemetry.py
from __future__ import annotations
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

SPEED_PROPERTIES = {
    "Left Motor Speed": "left",
    "Right Motor Speed": "right",
    "Back Motor Speed": "back",
}


def log_usage(name: str, mode: str, motors: int) -> None:
    logger.info(f"[USAGE] {name}: {mode} drive with {motors} motors")


class UsageReport:
    """Forwards the first report only; every later call is ignored."""

    def __init__(self, sink: Callable[[str, str, int], None] | None = None):
        self.sink = sink if sink is not None else log_usage
        self.reported = False

    def report(self, name: str, mode: str, motors: int = 3) -> bool:
        if self.reported:
            return False
        self.reported = True
        self.sink(name, mode, motors)
        return True


class DriveTelemetry:
    """
    Dashboard-side view of registered drives, keyed by their explicit name.
    Reads the sinks' last commanded speeds; never touches kinematics.
    """

    def __init__(self):
        self._drives = {}

    def register(self, drive) -> None:
        if drive.name in self._drives and self._drives[drive.name] is not drive:
            raise ValueError(f"a drive named {drive.name!r} is already registered")
        self._drives[drive.name] = drive

    def remove(self, drive) -> None:
        if self._drives.get(drive.name) is drive:
            del self._drives[drive.name]

    def names(self) -> list[str]:
        return sorted(self._drives)

    def __contains__(self, name: str) -> bool:
        return name in self._drives

    @staticmethod
    def snapshot(drive) -> dict:
        motors = drive.motors
        out = {"type": drive.description, "actuator": True}
        for prop, role in SPEED_PROPERTIES.items():
            out[prop] = float(motors[role].get())
        return out

    @staticmethod
    def apply(drive, properties: dict) -> None:
        """Dashboard setter: push speed properties straight to the sinks."""
        # resolve every key first so an unknown one leaves all sinks untouched
        targets = [(SPEED_PROPERTIES[prop], float(value)) for prop, value in properties.items()]
        motors = drive.motors
        for role, value in targets:
            motors[role].set(value)

    def snapshot_all(self) -> dict[str, dict]:
        return {name: self.snapshot(d) for name, d in sorted(self._drives.items())}

    @staticmethod
    def lines(drive) -> list[str]:
        snap = DriveTelemetry.snapshot(drive)
        return [f"{drive.name} ({snap['type']})"] + [
            f"{prop}: {snap[prop]:+.3f}" for prop in SPEED_PROPERTIES
        ]
