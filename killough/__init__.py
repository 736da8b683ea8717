from .actuators import ActuatorSink, SimulatedMotor
from .config import DriveConfig, SafetyConfig, WheelAngles
from .drive import KilloughDrive
from .geometry import WheelGeometry
from .kinematics import WheelSpeeds, apply_deadband, clamp, normalize, solve_cartesian, solve_polar
from .telemetry import DriveTelemetry, UsageReport
from .utils2.watchdog import SafetyWatchdog
from .vector import PlanarVector

__all__ = [
    "ActuatorSink", "SimulatedMotor",
    "DriveConfig", "SafetyConfig", "WheelAngles",
    "KilloughDrive", "WheelGeometry",
    "WheelSpeeds", "apply_deadband", "clamp", "normalize", "solve_cartesian", "solve_polar",
    "DriveTelemetry", "UsageReport", "SafetyWatchdog", "PlanarVector",
]
