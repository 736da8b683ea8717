# killough/config.py
from dataclasses import dataclass


@dataclass(frozen=True)
class WheelAngles:
    # degrees clockwise from +x; each wheel rolls parallel to the opposite side
    left: float = 60.0
    right: float = 120.0
    back: float = 270.0

    def as_tuple(self) -> tuple[float, float, float]:
        return float(self.left), float(self.right), float(self.back)


@dataclass
class DriveConfig:
    deadband: float = 0.02      # |input| below this is treated as 0
    max_output: float = 1.0     # multiplier applied to every wheel output

    def __post_init__(self):
        self.deadband = check_deadband(self.deadband)
        self.max_output = check_max_output(self.max_output)


@dataclass(frozen=True)
class SafetyConfig:
    expiration: float = 0.1     # s without a feed before the motors are cut
    enabled: bool = True

    def __post_init__(self):
        check_expiration(self.expiration)


def check_deadband(value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"deadband must be in [0, 1], got {value}")
    return value


def check_max_output(value: float) -> float:
    value = float(value)
    if not 0.0 < value <= 1.0:
        raise ValueError(f"max_output must be in (0, 1], got {value}")
    return value


def check_expiration(value: float) -> float:
    value = float(value)
    if value <= 0.0:
        raise ValueError(f"expiration must be positive, got {value}")
    return value
