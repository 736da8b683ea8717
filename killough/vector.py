# killough/vector.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class PlanarVector:
    """2D vector in the robot frame (NED: x ahead, y right, clockwise positive)."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle_deg: float) -> PlanarVector:
        """Unit vector pointing `angle_deg` degrees clockwise from +x."""
        th = float(angle_deg) * (np.pi / 180.0)
        return cls(float(np.cos(th)), float(np.sin(th)))

    def rotate(self, angle_deg: float) -> PlanarVector:
        """Return this vector rotated clockwise by `angle_deg` degrees."""
        th = float(angle_deg) * (np.pi / 180.0)
        c, s = np.cos(th), np.sin(th)
        return PlanarVector(float(self.x * c - self.y * s),
                            float(self.x * s + self.y * c))

    def dot(self, other: PlanarVector) -> float:
        return float(self.x * other.x + self.y * other.y)

    def magnitude(self) -> float:
        return float(np.hypot(self.x, self.y))

    def scalar_project(self, other: PlanarVector) -> float:
        # other is a unit vector, so the projection is just the dot product
        return self.dot(other)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)
