"""Pointer-drag rotation of the whole figure."""

from __future__ import annotations

from typing import Optional

from .scene import Node

DRAG_SENSITIVITY = 0.01  # radians per pixel


class DragRotator:
    """Accumulates horizontal pointer movement into `node.spin[0]`.

    The rotation is unbounded and additive; it never touches pose state.
    """

    def __init__(self, node: Node, *, sensitivity: float = DRAG_SENSITIVITY) -> None:
        self.node = node
        self.sensitivity = sensitivity
        self._last_x: Optional[float] = None

    @property
    def dragging(self) -> bool:
        return self._last_x is not None

    def press(self, x: float) -> None:
        self._last_x = float(x)

    def move(self, x: float) -> float:
        """Apply the displacement since the last event; returns the added angle."""

        if self._last_x is None:
            return 0.0
        dx = float(x) - self._last_x
        self._last_x = float(x)
        delta = dx * self.sensitivity
        spin = self.node.spin.copy()
        spin[0] += delta
        self.node.spin = spin
        return delta

    def release(self) -> None:
        self._last_x = None


__all__ = ["DRAG_SENSITIVITY", "DragRotator"]
