"""Tests for the transition driver."""

from __future__ import annotations

import math

import numpy as np
import pytest

from lib_figure import (
    DEFAULT_POSE_TABLE,
    FIXED_CROSSED_ANCHORS,
    DriverState,
    PoseSelection,
    TransitionDriver,
)
from lib_figure.data import Pose, PoseParams, PoseTable

FRAME = 1.0 / 60.0


def run_to_completion(driver: TransitionDriver, frame: float = FRAME) -> int:
    """Tick `driver` at a fixed frame rate until it is idle; returns frame count."""
    frames = 0
    while driver.state is DriverState.TRANSITIONING:
        driver.tick(frame)
        frames += 1
        assert frames < 10_000
    return frames


def assert_params_equal(actual: PoseParams, expected: PoseParams) -> None:
    for name in expected.fields_present():
        assert getattr(actual, name) == pytest.approx(getattr(expected, name)), name


class TestInitialState:
    """Tests for the state right after construction."""

    def test_starts_idle_at_first_position(self, driver) -> None:
        assert driver.state is DriverState.IDLE
        assert driver.active_pose.id == 1
        assert_params_equal(driver.current, DEFAULT_POSE_TABLE.get(1).params)

    def test_initial_pose_is_applied(self, rig) -> None:
        TransitionDriver(rig)
        np.testing.assert_allclose(rig.left_leg.center, [-0.25, 0.9, 0.0])
        np.testing.assert_allclose(rig.right_leg.center, [0.25, 0.9, 0.0])

    def test_current_does_not_alias_table(self, driver) -> None:
        driver.go_to_pose(2)
        run_to_completion(driver)
        assert DEFAULT_POSE_TABLE.get(1).params.dist == 0.0

    def test_rejects_unknown_initial_pose(self, rig) -> None:
        with pytest.raises(ValueError):
            TransitionDriver(rig, initial_pose_id=42)

    def test_rejects_non_positive_duration(self, rig) -> None:
        with pytest.raises(ValueError):
            TransitionDriver(rig, duration=0)


class TestGoToPose:
    """Tests for go_to_pose and ticking."""

    @pytest.mark.parametrize("pose_id", DEFAULT_POSE_TABLE.ids())
    def test_converges_to_every_pose(self, driver, pose_id: int) -> None:
        assert driver.go_to_pose(pose_id) is True
        run_to_completion(driver)
        assert driver.state is DriverState.IDLE
        assert_params_equal(driver.current, DEFAULT_POSE_TABLE.get(pose_id).params)

    def test_completes_after_duration(self, driver) -> None:
        driver.go_to_pose(3)
        driver.tick(0.5)
        assert driver.state is DriverState.TRANSITIONING
        driver.tick(0.41)
        assert driver.state is DriverState.IDLE

    def test_second_position_scenario(self, driver, rig) -> None:
        """I -> II ends with anchors at -/+0.75 and +/-45 degree leg spin."""
        driver.go_to_pose(2)
        run_to_completion(driver)
        np.testing.assert_allclose(rig.left_leg.center, [-0.75, 0.9, 0.0], atol=1e-12)
        np.testing.assert_allclose(rig.right_leg.center, [0.75, 0.9, 0.0], atol=1e-12)
        np.testing.assert_allclose(rig.left_leg.spin, [math.radians(45), 0, 0])
        np.testing.assert_allclose(rig.right_leg.spin, [-math.radians(45), 0, 0])

    def test_fifth_position_scenario(self, driver, rig) -> None:
        """Pose V ends exactly on the fixed crossed anchors."""
        driver.go_to_pose(5)
        run_to_completion(driver)
        assert driver.crossed == 1.0
        assert rig.left_leg.center.tolist() == list(FIXED_CROSSED_ANCHORS[0])
        assert rig.right_leg.center.tolist() == list(FIXED_CROSSED_ANCHORS[1])

    def test_crossed_stance_eases_in_and_out(self, driver) -> None:
        """The crossed weight moves gradually instead of snapping at the end."""
        driver.go_to_pose(5)
        driver.tick(0.45)
        assert 0.0 < driver.crossed < 1.0
        run_to_completion(driver)
        driver.go_to_pose(2)
        driver.tick(0.45)
        assert 0.0 < driver.crossed < 1.0
        run_to_completion(driver)
        assert driver.crossed == 0.0

    def test_intermediate_frames_are_applied(self, driver, rig) -> None:
        driver.go_to_pose(2)
        driver.tick(0.45)
        # halfway through the quadratic curve: dist == 0.5
        assert driver.current.dist == pytest.approx(0.5)
        np.testing.assert_allclose(rig.left_leg.center, [-0.5, 0.9, 0.0])

    def test_unknown_id_is_ignored(self, driver) -> None:
        selection = PoseSelection(driver)
        driver.go_to_pose(3)
        driver.tick(0.2)
        snapshot = driver.current.copy()

        assert driver.go_to_pose(999) is False

        assert driver.current == snapshot
        assert driver.active_pose.id == 3
        assert selection.active_id == 3
        assert driver.state is DriverState.TRANSITIONING

    def test_tick_while_idle_does_nothing(self, driver, rig) -> None:
        before = rig.left_leg.center.copy()
        driver.tick(5.0)
        assert driver.state is DriverState.IDLE
        np.testing.assert_allclose(rig.left_leg.center, before)

    def test_double_call_equals_single_call(self, rig) -> None:
        once = TransitionDriver(rig)
        once.go_to_pose(4)
        once_values = []
        while once.state is DriverState.TRANSITIONING:
            once.tick(FRAME)
            once_values.append(once.current.copy())

        twice = TransitionDriver(rig)
        twice.go_to_pose(4)
        twice.go_to_pose(4)
        twice_values = []
        while twice.state is DriverState.TRANSITIONING:
            twice.tick(FRAME)
            twice_values.append(twice.current.copy())

        assert once_values == twice_values

    def test_preemption_converges_to_latest(self, driver) -> None:
        driver.go_to_pose(2)
        driver.tick(0.3)
        driver.go_to_pose(4)
        run_to_completion(driver)
        assert_params_equal(driver.current, DEFAULT_POSE_TABLE.get(4).params)
        assert driver.active_pose.id == 4

    def test_preemption_starts_from_mid_flight_values(self, driver) -> None:
        driver.go_to_pose(2)
        driver.tick(0.45)
        mid_dist = driver.current.dist
        driver.go_to_pose(1)
        driver.tick(FRAME)
        # just after the restart the value is still close to the mid-flight one
        assert driver.current.dist == pytest.approx(mid_dist, abs=0.01)

    def test_reselecting_restarts_duration(self, driver) -> None:
        driver.go_to_pose(2)
        driver.tick(0.6)
        driver.go_to_pose(2)
        driver.tick(0.6)
        assert driver.state is DriverState.TRANSITIONING
        driver.tick(0.31)
        assert driver.state is DriverState.IDLE

    def test_listeners_called_synchronously(self, driver) -> None:
        seen = []
        driver.add_listener(lambda pose: seen.append(pose.id))
        driver.go_to_pose(6)
        assert seen == [6]
        driver.go_to_pose(999)
        assert seen == [6]

    def test_optional_fields_start_from_neutral(self, rig) -> None:
        """Fields absent from the current pose start at values that change nothing."""
        table = PoseTable(
            [
                Pose(1, "plain", "", PoseParams(dist=0.0, turnout=45, front=0.0)),
                Pose(2, "plie", "", PoseParams(dist=0.5, turnout=45, front=0.0, knee_bend=30)),
            ]
        )
        driver = TransitionDriver(rig, table)
        arm_spin = rig.left_arm.spin.copy()
        driver.go_to_pose(2)
        assert driver.current.knee_bend == 0.0
        run_to_completion(driver)
        assert driver.current.knee_bend == 30.0
        np.testing.assert_allclose(rig.left_knee.spin, [0, math.radians(30), 0])
        np.testing.assert_allclose(rig.left_arm.spin, arm_spin)
        assert driver.current.arm_lift is None
