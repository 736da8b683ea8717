# killough/geometry.py
from __future__ import annotations
from dataclasses import dataclass
from .config import WheelAngles
from .vector import PlanarVector

ROLES = ("left", "right", "back")


@dataclass(frozen=True)
class WheelGeometry:
    """
    Rolling direction of every wheel, as ordered (role, unit vector) pairs.

    Roles must be exactly left, right and back (in any order); anything
    else is rejected here so the solver never sees an unknown layout.
    Degenerate layouts (two parallel wheels) are not rejected.
    """
    wheels: tuple[tuple[str, PlanarVector], ...]

    def __post_init__(self):
        roles = [role for role, _ in self.wheels]
        if len(roles) != len(ROLES) or set(roles) != set(ROLES):
            raise ValueError(f"wheel roles must be {ROLES}, got {tuple(roles)}")

    @classmethod
    def from_angles(cls, left: float = 60.0, right: float = 120.0,
                    back: float = 270.0) -> WheelGeometry:
        return cls.from_mapping({"left": left, "right": right, "back": back})

    @classmethod
    def from_config(cls, angles: WheelAngles) -> WheelGeometry:
        return cls.from_angles(*angles.as_tuple())

    @classmethod
    def from_mapping(cls, angles_deg: dict[str, float]) -> WheelGeometry:
        return cls(tuple((role, PlanarVector.from_angle(a)) for role, a in angles_deg.items()))

    @property
    def roles(self) -> tuple[str, ...]:
        return tuple(role for role, _ in self.wheels)

    def direction(self, role: str) -> PlanarVector:
        for r, vec in self.wheels:
            if r == role:
                return vec
        raise KeyError(role)


DEFAULT_GEOMETRY = WheelGeometry.from_config(WheelAngles())
