# killough/actuators.py
from __future__ import annotations
from collections import deque
from typing import Protocol, runtime_checkable
import numpy as np


@runtime_checkable
class ActuatorSink(Protocol):
    """
    Anything that accepts a normalized output ratio in [-1, 1].
    Positive output turns the wheel along its configured mounting angle.
    """
    def set(self, speed: float) -> None: ...
    def get(self) -> float: ...
    def stop_motor(self) -> None: ...


class SimulatedMotor:
    """In-memory motor controller; remembers what it was told to do."""

    def __init__(self, name: str, inverted: bool = False, history: int = 256):
        self.name = str(name)
        self.inverted = bool(inverted)
        self._speed = 0.0
        self.history: deque[float] = deque(maxlen=int(history))

    # -------------------------------------------------
    # actuation
    # -------------------------------------------------
    def set(self, speed: float) -> None:
        self._speed = float(np.clip(speed, -1.0, 1.0))
        self.history.append(self._speed)

    def get(self) -> float:
        return self._speed

    def stop_motor(self) -> None:
        self.set(0.0)

    # -------------------------------------------------
    # what reaches the wheel
    # -------------------------------------------------
    @property
    def output(self) -> float:
        return -self._speed if self.inverted else self._speed

    def __repr__(self) -> str:
        return f"SimulatedMotor({self.name!r}, speed={self._speed:+.3f}, inverted={self.inverted})"
