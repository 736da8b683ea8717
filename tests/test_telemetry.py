"""Tests for usage reporting and the dashboard view."""

from __future__ import annotations

import logging

import pytest

from killough import DriveTelemetry, KilloughDrive, SimulatedMotor, UsageReport


class TestUsageReport:
    """One-shot usage reporting."""

    def test_only_first_report_forwarded(self) -> None:
        calls = []
        usage = UsageReport(lambda *a: calls.append(a))
        assert usage.report("d", "cartesian") is True
        assert usage.report("d", "polar") is False
        assert calls == [("d", "cartesian", 3)]

    def test_default_sink_logs(self, caplog) -> None:
        with caplog.at_level(logging.INFO):
            UsageReport().report("demo", "polar")
        assert "demo: polar drive with 3 motors" in caplog.text


class TestDriveTelemetry:
    """Snapshots read the sinks; apply writes them."""

    def test_snapshot(self, drive, motors) -> None:
        drive.drive_cartesian(0.0, 0.0, 0.5)
        snap = DriveTelemetry.snapshot(drive)
        assert snap["type"] == "KilloughDrive"
        assert snap["actuator"] is True
        assert snap["Left Motor Speed"] == pytest.approx(0.5)
        assert snap["Right Motor Speed"] == pytest.approx(0.5)
        assert snap["Back Motor Speed"] == pytest.approx(0.5)

    def test_apply(self, drive, motors) -> None:
        DriveTelemetry.apply(drive, {"Back Motor Speed": -0.3, "Left Motor Speed": 0.1})
        assert motors[2].get() == pytest.approx(-0.3)
        assert motors[0].get() == pytest.approx(0.1)
        assert motors[1].get() == 0.0

    def test_apply_unknown_property(self, drive) -> None:
        with pytest.raises(KeyError):
            DriveTelemetry.apply(drive, {"Front Motor Speed": 1.0})

    def test_apply_unknown_property_moves_nothing(self, drive, motors) -> None:
        with pytest.raises(KeyError):
            DriveTelemetry.apply(drive, {"Left Motor Speed": 0.7, "Front Motor Speed": 1.0})
        assert [m.get() for m in motors] == [0.0, 0.0, 0.0]

    def test_duplicate_name_rejected(self, drive, telemetry) -> None:
        others = [SimulatedMotor(n) for n in ("l", "r", "b")]
        with pytest.raises(ValueError):
            KilloughDrive(*others, telemetry=telemetry, name="test")

    def test_snapshot_all_and_lines(self, drive, telemetry) -> None:
        assert telemetry.names() == ["test"]
        assert set(telemetry.snapshot_all()) == {"test"}
        lines = telemetry.lines(drive)
        assert lines[0] == "test (KilloughDrive)"
        assert lines[1] == "Left Motor Speed: +0.000"
