"""Timed transitions of the live pose toward a selected target pose."""

from __future__ import annotations

import enum
from typing import Callable, List, Optional

from .apply import ARM_BASE_DEG, ARM_EXTENDED_BASE_DEG, apply_pose
from .data import DEFAULT_POSE_TABLE, Pose, PoseParams, PoseTable
from .easing import EasingFunc, Tween, ease_quadratic_in_out
from .rig import FigureRig

TRANSITION_DURATION = 0.9  # seconds

# Values that leave the figure unchanged when an optional field first appears.
NEUTRAL_OPTIONAL_VALUES = {
    "arm_lift": ARM_BASE_DEG - ARM_EXTENDED_BASE_DEG,
    "elbow_bend": 0.0,
    "knee_bend": 0.0,
}

PoseListener = Callable[[Pose], None]
Applicator = Callable[[FigureRig, PoseParams, float], None]


class DriverState(enum.Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


class TransitionDriver:
    """Owns the current pose parameters and eases them toward target poses.

    Only one transition runs at a time; selecting a pose while another
    transition is in flight discards the old one (no completion) and starts
    from the current, partially interpolated values.
    """

    def __init__(
        self,
        rig: FigureRig,
        table: PoseTable = DEFAULT_POSE_TABLE,
        *,
        initial_pose_id: int = 1,
        duration: float = TRANSITION_DURATION,
        easing: EasingFunc = ease_quadratic_in_out,
        apply: Applicator = apply_pose,
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")

        initial = table.get(initial_pose_id)
        if initial is None:
            raise ValueError(f"unknown initial pose id: {initial_pose_id}")

        self._rig = rig
        self._table = table
        self._duration = float(duration)
        self._easing = easing
        self._apply = apply
        self._listeners: List[PoseListener] = []

        self._current = initial.params.copy()
        self._crossed = 1.0 if initial.fixed_crossed_stance else 0.0
        self._crossed_from = self._crossed
        self._crossed_to = self._crossed
        self._active: Pose = initial
        self._tween: Optional[Tween] = None

        self._apply(self._rig, self._current, self._crossed)

    @property
    def current(self) -> PoseParams:
        return self._current

    @property
    def crossed(self) -> float:
        return self._crossed

    @property
    def active_pose(self) -> Pose:
        return self._active

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def state(self) -> DriverState:
        if self._tween is not None and self._tween.running:
            return DriverState.TRANSITIONING
        return DriverState.IDLE

    def add_listener(self, listener: PoseListener) -> None:
        """Call `listener(pose)` synchronously on every accepted pose selection."""

        self._listeners.append(listener)

    def go_to_pose(self, pose_id: object) -> bool:
        """Start a transition toward `pose_id`; unknown ids are ignored."""

        target = self._table.get(pose_id)
        if target is None:
            return False

        if self._tween is not None:
            self._tween.stop()
            self._tween = None

        values = target.params.as_dict()
        for name in values:
            if getattr(self._current, name) is None:
                setattr(self._current, name, NEUTRAL_OPTIONAL_VALUES[name])

        self._crossed_from = self._crossed
        self._crossed_to = 1.0 if target.fixed_crossed_stance else 0.0
        self._tween = Tween(
            self._current,
            values,
            self._duration,
            easing=self._easing,
            on_update=self._on_update,
            on_complete=self._on_complete,
        )
        self._active = target

        for listener in list(self._listeners):
            listener(target)
        return True

    def tick(self, dt: float) -> None:
        """Advance the running transition by `dt` seconds (no-op when idle)."""

        if self._tween is None:
            return
        self._tween.update(dt)

    def _on_update(self, eased: float) -> None:
        if eased >= 1.0:
            self._crossed = self._crossed_to
        else:
            self._crossed = (
                self._crossed_from + (self._crossed_to - self._crossed_from) * eased
            )
        self._apply(self._rig, self._current, self._crossed)

    def _on_complete(self) -> None:
        self._tween = None


__all__ = ["DriverState", "TRANSITION_DURATION", "TransitionDriver"]
