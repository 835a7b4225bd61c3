"""Easing curves and a frame-stepped tween over attribute records."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

EasingFunc = Callable[[float], float]


def ease_linear(t: float) -> float:
    return max(0.0, min(1.0, t))


def ease_quadratic_in_out(t: float) -> float:
    """Quadratic ease-in-ease-out on [0, 1] (t is clamped)."""

    t = max(0.0, min(1.0, t)) * 2.0
    if t < 1.0:
        return 0.5 * t * t
    t -= 1.0
    return -0.5 * (t * (t - 2.0) - 1.0)


class Tween:
    """Interpolates attributes of `record` toward `target` over `duration` seconds.

    The start values are snapshotted when the tween is created. `update(dt)`
    writes eased intermediate values and calls `on_update`; on the final step
    the exact target values are written and `on_complete` fires once.
    `stop()` cancels without completing.
    """

    def __init__(
        self,
        record: Any,
        target: Mapping[str, float],
        duration: float,
        *,
        easing: EasingFunc = ease_quadratic_in_out,
        on_update: Optional[Callable[[float], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._record = record
        self._target: Dict[str, float] = {k: float(v) for k, v in target.items()}
        self._start: Dict[str, float] = {
            name: float(getattr(record, name)) for name in self._target
        }
        self.duration = float(duration)
        self._easing = easing
        self._on_update = on_update
        self._on_complete = on_complete
        self._elapsed = 0.0
        self._running = True
        self._finished = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def progress(self) -> float:
        return min(1.0, self._elapsed / self.duration)

    def stop(self) -> None:
        self._running = False

    def update(self, dt: float) -> bool:
        """Advance by `dt` seconds. Returns True while still running."""

        if not self._running:
            return False

        self._elapsed += max(0.0, dt)
        if self._elapsed >= self.duration:
            for name, value in self._target.items():
                setattr(self._record, name, value)
            self._running = False
            self._finished = True
            if self._on_update is not None:
                self._on_update(1.0)
            if self._on_complete is not None:
                self._on_complete()
            return False

        eased = self._easing(self._elapsed / self.duration)
        for name, end in self._target.items():
            start = self._start[name]
            setattr(self._record, name, start + (end - start) * eased)
        if self._on_update is not None:
            self._on_update(eased)
        return True


__all__ = ["Tween", "ease_linear", "ease_quadratic_in_out"]
