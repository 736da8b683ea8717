import logging
import time
from killough import DriveTelemetry, KilloughDrive, SimulatedMotor
from killough.logger_setup import setup_logging

PERIOD = 0.02  # s per control cycle

# (y_speed, x_speed, z_rotation, gyro_angle, cycles)
SCRIPT = [
    (0.0, 1.0, 0.0, 0.0, 25),    # straight ahead
    (1.0, 0.0, 0.0, 0.0, 25),    # strafe right
    (0.0, 0.0, 0.5, 0.0, 25),    # spin in place
    (0.0, 1.0, 0.0, 90.0, 25),   # field-relative forward while turned 90 deg
]

if __name__ == "__main__":
    setup_logging()
    log = logging.getLogger("main")
    telemetry = DriveTelemetry()
    motors = [SimulatedMotor(n) for n in ("left", "right", "back")]
    with KilloughDrive(*motors, telemetry=telemetry, name="demo") as drive:
        for y, x, z, gyro, cycles in SCRIPT:
            for _ in range(cycles):
                drive.check_safety()
                drive.drive_cartesian(y, x, z, gyro)
                time.sleep(PERIOD)
            log.info(" | ".join(telemetry.lines(drive)))
        drive.drive_polar(0.8, 45.0, 0.0)
        log.info(" | ".join(telemetry.lines(drive)))
