"""Shared fixtures for the drive tests."""

from __future__ import annotations

import pytest

from killough import DriveTelemetry, KilloughDrive, SafetyWatchdog, SimulatedMotor


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += dt


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def motors() -> list[SimulatedMotor]:
    return [SimulatedMotor("left"), SimulatedMotor("right"), SimulatedMotor("back")]


@pytest.fixture
def telemetry() -> DriveTelemetry:
    return DriveTelemetry()


@pytest.fixture
def drive(motors, clock, telemetry) -> KilloughDrive:
    watchdog = SafetyWatchdog(expiration=0.1, clock=clock, owner="test")
    return KilloughDrive(*motors, watchdog=watchdog, telemetry=telemetry, name="test")
