# killough/drive.py
from __future__ import annotations
import logging
import threading
from .config import DriveConfig, SafetyConfig, WheelAngles, check_deadband, check_max_output
from .geometry import WheelGeometry
from .kinematics import WheelSpeeds, apply_deadband, polar_to_cartesian, solve_cartesian, solve_polar
from .telemetry import DriveTelemetry, UsageReport
from .utils2.watchdog import SafetyWatchdog

logger = logging.getLogger(__name__)


class KilloughDrive:
    """
    Drive for a triangular platform with one omni wheel on each corner.

          /_____\\
         / \\   / \\
            \\ /
            ---

    Axes follow NED: +x ahead, +y right, clockwise rotation is positive.
    Wheel angles are degrees clockwise from +x; the defaults put each
    wheel parallel to the side opposite it. Invert a motor on the sink,
    not here.
    """

    description = "KilloughDrive"

    def __init__(
        self,
        left_motor,
        right_motor,
        back_motor,
        angles: WheelAngles | None = None,
        config: DriveConfig | None = None,
        safety: SafetyConfig | None = None,
        watchdog: SafetyWatchdog | None = None,
        usage: UsageReport | None = None,
        telemetry: DriveTelemetry | None = None,
        name: str = "KilloughDrive",
    ):
        for role, motor in (("left", left_motor), ("right", right_motor), ("back", back_motor)):
            if motor is None:
                raise ValueError(f"{role.capitalize()} motor cannot be None")

        self.name = str(name)
        self.motors = {"left": left_motor, "right": right_motor, "back": back_motor}

        # shared config; swapped under the lock, read as one snapshot per command
        self._lock = threading.Lock()
        self._config = config if config is not None else DriveConfig()
        self._geometry = WheelGeometry.from_config(angles if angles is not None else WheelAngles())

        # collaborators
        if watchdog is None:
            safety = safety if safety is not None else SafetyConfig()
            watchdog = SafetyWatchdog(safety.expiration, safety.enabled, owner=self.name)
        self.usage = usage if usage is not None else UsageReport()
        self.telemetry = telemetry
        if telemetry is not None:
            telemetry.register(self)

        # the drive owns its watchdog: a callback-less one gets wired to stop_motor
        if watchdog.on_timeout is None:
            watchdog.on_timeout = self.stop_motor
        self.watchdog = watchdog

        self.last_speeds = WheelSpeeds()

    # -------------------------------------------------
    # configuration
    # -------------------------------------------------
    @property
    def deadband(self) -> float:
        return self._config.deadband

    @property
    def max_output(self) -> float:
        return self._config.max_output

    @property
    def geometry(self) -> WheelGeometry:
        return self._geometry

    def set_deadband(self, deadband: float) -> None:
        deadband = check_deadband(deadband)
        with self._lock:
            self._config = DriveConfig(deadband, self._config.max_output)

    def set_max_output(self, max_output: float) -> None:
        max_output = check_max_output(max_output)
        with self._lock:
            self._config = DriveConfig(self._config.deadband, max_output)

    def set_wheel_angles(self, left: float, right: float, back: float) -> None:
        geometry = WheelGeometry.from_angles(left, right, back)
        with self._lock:
            self._geometry = geometry
        logger.debug(f"[{self.name}] wheel angles -> ({left:.1f}, {right:.1f}, {back:.1f}) deg")

    def _snapshot(self) -> tuple[DriveConfig, WheelGeometry]:
        with self._lock:
            return self._config, self._geometry

    # -------------------------------------------------
    # inverse kinematics (no side effects)
    # -------------------------------------------------
    def drive_cartesian_ik(self, y_speed: float, x_speed: float, z_rotation: float,
                           gyro_angle: float = 0.0) -> WheelSpeeds:
        return solve_cartesian(y_speed, x_speed, z_rotation, gyro_angle, self._snapshot()[1])

    def drive_polar_ik(self, magnitude: float, angle: float, z_rotation: float) -> WheelSpeeds:
        return solve_polar(magnitude, angle, z_rotation, self._snapshot()[1])

    # -------------------------------------------------
    # commands
    # -------------------------------------------------
    def drive_cartesian(self, y_speed: float, x_speed: float, z_rotation: float,
                        gyro_angle: float = 0.0) -> WheelSpeeds:
        """
        Drive with robot-frame (or, given `gyro_angle`, field-frame) speeds.

        y_speed: [-1..1], right positive.  x_speed: [-1..1], forward positive.
        z_rotation: [-1..1], clockwise positive. The deadband only applies
        to the two translation axes.
        Returns the outputs sent to the motors.
        """
        self.usage.report(self.name, "cartesian")
        cfg, geometry = self._snapshot()

        y_speed = apply_deadband(y_speed, cfg.deadband)
        x_speed = apply_deadband(x_speed, cfg.deadband)

        speeds = solve_cartesian(y_speed, x_speed, z_rotation, gyro_angle, geometry)
        speeds = speeds.scale(cfg.max_output)
        self._dispatch(speeds)
        self.feed_watchdog()
        return speeds

    def drive_polar(self, magnitude: float, angle: float, z_rotation: float) -> WheelSpeeds:
        """
        magnitude: [-1..1], forward positive.  angle: degrees from straight
        ahead.  Always robot-relative (gyro angle 0).
        """
        self.usage.report(self.name, "polar")
        y_speed, x_speed = polar_to_cartesian(magnitude, angle)
        return self.drive_cartesian(y_speed, x_speed, z_rotation, 0.0)

    def stop_motor(self) -> None:
        for role, motor in self.motors.items():
            try:
                motor.stop_motor()
            except Exception:
                logger.exception(f"[{self.name}] failed to stop {role} motor")
        self.last_speeds = WheelSpeeds()
        self.feed_watchdog()

    def _dispatch(self, speeds: WheelSpeeds) -> None:
        self.motors["left"].set(speeds.left)
        self.motors["right"].set(speeds.right)
        self.motors["back"].set(speeds.back)
        self.last_speeds = speeds
        logger.debug(f"[{self.name}] wheels L={speeds.left:+.3f} R={speeds.right:+.3f} B={speeds.back:+.3f}")

    # -------------------------------------------------
    # safety
    # -------------------------------------------------
    def feed_watchdog(self) -> None:
        self.watchdog.feed()

    def check_safety(self) -> bool:
        """Poll once per control period; stops the motors when the feed lapsed."""
        return self.watchdog.check()

    # -------------------------------------------------
    # housekeeping
    # -------------------------------------------------
    def close(self) -> None:
        self.stop_motor()
        if self.telemetry is not None:
            self.telemetry.remove(self)

    def __enter__(self) -> KilloughDrive:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.description}(name={self.name!r})"
