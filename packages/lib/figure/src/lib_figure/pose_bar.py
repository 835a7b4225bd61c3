"""Pose selection buttons and pose name/description labels drawn with pyglet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pyglet
from pyglet import shapes, text

from .data import PoseTable
from .selection import PoseSelection

BUTTON_COLOR = (255, 255, 255, 230)
ACTIVE_COLOR = (255, 182, 193, 255)
TEXT_COLOR = (40, 40, 40, 255)


@dataclass
class _Button:
    pose_id: int
    rect: shapes.Rectangle
    label: text.Label

    def contains(self, x: float, y: float) -> bool:
        return (
            self.rect.x <= x <= self.rect.x + self.rect.width
            and self.rect.y <= y <= self.rect.y + self.rect.height
        )


class PoseBar:
    """A row of pose buttons along the bottom edge plus the pose text above it."""

    def __init__(
        self,
        table: PoseTable,
        selection: PoseSelection,
        *,
        button_size: Tuple[int, int] = (56, 36),
        margin: int = 12,
        batch: Optional["pyglet.graphics.Batch"] = None,
    ) -> None:
        self.batch = batch or pyglet.graphics.Batch()
        self._selection = selection
        self._buttons: List[_Button] = []
        self._margin = margin
        self._button_size = button_size

        background = pyglet.graphics.Group(order=0)
        foreground = pyglet.graphics.Group(order=1)

        for pose in table:
            rect = shapes.Rectangle(
                0, 0, *button_size, color=BUTTON_COLOR, batch=self.batch, group=background
            )
            label = text.Label(
                pose.name,
                font_size=14,
                color=TEXT_COLOR,
                anchor_x="center",
                anchor_y="center",
                batch=self.batch,
                group=foreground,
            )
            self._buttons.append(_Button(pose.id, rect, label))

        self._name_label = text.Label(
            "", font_size=18, bold=True, color=TEXT_COLOR, batch=self.batch, group=foreground
        )
        self._desc_label = text.Label(
            "", font_size=13, color=TEXT_COLOR, batch=self.batch, group=foreground
        )
        self.layout(640)
        self.refresh()

    def layout(self, width: int) -> None:
        """Center the buttons horizontally in a window of `width` pixels."""

        button_w, button_h = self._button_size
        total = len(self._buttons) * button_w + (len(self._buttons) - 1) * self._margin
        x = (width - total) / 2
        for button in self._buttons:
            button.rect.x = x
            button.rect.y = self._margin
            button.label.x = x + button_w / 2
            button.label.y = self._margin + button_h / 2
            x += button_w + self._margin

        self._desc_label.x = self._margin
        self._desc_label.y = self._margin * 2 + button_h
        self._name_label.x = self._margin
        self._name_label.y = self._desc_label.y + 24

    def refresh(self) -> None:
        """Sync the labels and the active highlight with the selection."""

        self._name_label.text = self._selection.name_text
        self._desc_label.text = self._selection.desc_text
        for button in self._buttons:
            active = self._selection.is_active(button.pose_id)
            button.rect.color = ACTIVE_COLOR if active else BUTTON_COLOR

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Return the pose id of the button under (x, y), if any."""

        for button in self._buttons:
            if button.contains(x, y):
                return button.pose_id
        return None

    def draw(self) -> None:
        self.batch.draw()


__all__ = ["PoseBar"]
