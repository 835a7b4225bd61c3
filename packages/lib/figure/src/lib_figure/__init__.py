from .apply import FIXED_CROSSED_ANCHORS, apply_pose, pose_transforms
from .data import DEFAULT_POSE_TABLE, POSES, Pose, PoseParams, PoseTable
from .drag import DRAG_SENSITIVITY, DragRotator
from .driver import TRANSITION_DURATION, DriverState, TransitionDriver
from .easing import Tween, ease_quadratic_in_out
from .rig import FigureRig, MissingNodeError, build_ballerina
from .selection import PoseSelection

__all__ = [
    "PoseParams",
    "Pose",
    "PoseTable",
    "POSES",
    "DEFAULT_POSE_TABLE",
    "FigureRig",
    "MissingNodeError",
    "build_ballerina",
    "FIXED_CROSSED_ANCHORS",
    "apply_pose",
    "pose_transforms",
    "Tween",
    "ease_quadratic_in_out",
    "DriverState",
    "TRANSITION_DURATION",
    "TransitionDriver",
    "PoseSelection",
    "DRAG_SENSITIVITY",
    "DragRotator",
]
