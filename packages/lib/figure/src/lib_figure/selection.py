"""State shown by the pose bar: active button, pose name and description."""

from __future__ import annotations

from typing import Optional

from .data import Pose
from .driver import TransitionDriver


class PoseSelection:
    """Mirror of the UI text regions and the "active" button marker."""

    def __init__(self, driver: Optional[TransitionDriver] = None) -> None:
        self.active_id: Optional[int] = None
        self.name_text = ""
        self.desc_text = ""
        if driver is not None:
            self.show(driver.active_pose)
            driver.add_listener(self.show)

    def show(self, pose: Pose) -> None:
        self.active_id = pose.id
        self.name_text = "Pose: " + pose.name
        self.desc_text = pose.desc

    def is_active(self, pose_id: int) -> bool:
        return self.active_id == pose_id
