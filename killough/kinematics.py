# killough/kinematics.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from .geometry import DEFAULT_GEOMETRY, WheelGeometry
from .vector import PlanarVector


@dataclass(frozen=True)
class WheelSpeeds:
    """Per-wheel outputs as normalized ratios [-1.0..1.0]."""
    left: float = 0.0
    right: float = 0.0
    back: float = 0.0

    @classmethod
    def from_mapping(cls, speeds: dict[str, float]) -> WheelSpeeds:
        return cls(float(speeds["left"]), float(speeds["right"]), float(speeds["back"]))

    def as_tuple(self) -> tuple[float, float, float]:
        return self.left, self.right, self.back

    def scale(self, factor: float) -> WheelSpeeds:
        f = float(factor)
        return WheelSpeeds(self.left * f, self.right * f, self.back * f)

    def max_abs(self) -> float:
        return max(abs(self.left), abs(self.right), abs(self.back))


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return float(np.clip(value, low, high))


def apply_deadband(value: float, deadband: float) -> float:
    """
    Zero `value` when |value| < deadband. A value exactly at the threshold
    passes through, and the remaining range is not rescaled.
    """
    return 0.0 if abs(value) < deadband else float(value)


def normalize(speeds) -> np.ndarray:
    """
    Scale wheel speeds down so that max(|w|) <= 1, keeping their ratios.
    Speeds already inside [-1, 1] are returned unchanged (never scaled up).
    """
    w = np.asarray(speeds, dtype=float)
    m = float(np.max(np.abs(w))) if w.size else 0.0
    if m > 1.0:
        w = w / m
    return w


def raw_wheel_speeds(y_speed: float, x_speed: float, z_rotation: float,
                     gyro_angle: float, geometry: WheelGeometry) -> np.ndarray:
    """Projected wheel speeds before normalization, ordered like `geometry.wheels`."""
    # (y, x) order lines up with the clockwise-from-forward wheel angles
    inp = PlanarVector(y_speed, x_speed).rotate(-gyro_angle)
    return np.array([inp.scalar_project(d) + z_rotation for _, d in geometry.wheels], dtype=float)


def solve_cartesian(y_speed: float, x_speed: float, z_rotation: float,
                    gyro_angle: float = 0.0,
                    geometry: WheelGeometry = DEFAULT_GEOMETRY) -> WheelSpeeds:
    """
    Cartesian inverse kinematics for a Killough platform.

    y_speed: lateral speed [-1..1], right positive.
    x_speed: forward speed [-1..1], forward positive.
    z_rotation: rotation rate, clockwise positive. Not clamped, unlike the
        translation axes; oversized values are only tamed by normalization.
    gyro_angle: heading in degrees, used for field-relative driving.
    """
    y_speed = clamp(y_speed)
    x_speed = clamp(x_speed)
    w = normalize(raw_wheel_speeds(y_speed, x_speed, z_rotation, gyro_angle, geometry))
    return WheelSpeeds.from_mapping(dict(zip(geometry.roles, w)))


def polar_to_cartesian(magnitude: float, angle: float) -> tuple[float, float]:
    """(magnitude, angle deg) -> (y_speed, x_speed)."""
    th = angle * (np.pi / 180.0)
    return float(magnitude * np.sin(th)), float(magnitude * np.cos(th))


def solve_polar(magnitude: float, angle: float, z_rotation: float,
                geometry: WheelGeometry = DEFAULT_GEOMETRY) -> WheelSpeeds:
    y_speed, x_speed = polar_to_cartesian(magnitude, angle)
    return solve_cartesian(y_speed, x_speed, z_rotation, 0.0, geometry)
