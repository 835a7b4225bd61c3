"""Mapping of pose parameters onto the figure's node transforms."""

from __future__ import annotations

import math
from typing import Dict, Tuple

import numpy as np

from .data import PoseParams
from .rig import FigureRig

# 足を交差させた V ポジションの固定アンカー (左, 右)
FIXED_CROSSED_ANCHORS = (
    (-0.1, 0.9, 0.42),
    (0.1, 0.9, -0.42),
)
LEG_HEIGHT = 0.9
HIP_OFFSET = 0.25
FRONT_SCALE = 0.5
ARM_BASE_DEG = 25.0
ARM_EXTENDED_BASE_DEG = 20.0

Transform = Tuple[np.ndarray, np.ndarray]


def _blend(a, b, weight: float) -> np.ndarray:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if weight <= 0.0:
        return a
    if weight >= 1.0:
        return b.copy()
    return a + (b - a) * weight


def pose_transforms(params: PoseParams, crossed: float = 0.0) -> Dict[str, Transform]:
    """Compute (center, spin) per rig node for `params`.

    `crossed` blends the leg anchors toward FIXED_CROSSED_ANCHORS; at 1.0 the
    anchors are exactly the fixed values regardless of `dist`/`front`.
    Returns only entries for nodes whose transform depends on the params;
    `center` is None where the node keeps its constructed position.
    """

    a = math.radians(params.turnout)
    half = params.dist / 2

    left_anchor = np.array(
        [-HIP_OFFSET - half, LEG_HEIGHT, params.front * FRONT_SCALE], dtype=np.float64
    )
    right_anchor = np.array(
        [HIP_OFFSET + half, LEG_HEIGHT, -params.front * FRONT_SCALE], dtype=np.float64
    )
    left_anchor = _blend(left_anchor, FIXED_CROSSED_ANCHORS[0], crossed)
    right_anchor = _blend(right_anchor, FIXED_CROSSED_ANCHORS[1], crossed)

    if params.arm_lift is None:
        lift = math.radians(ARM_BASE_DEG)
    else:
        lift = math.radians(ARM_EXTENDED_BASE_DEG + params.arm_lift)
    elbow = math.radians(params.elbow_bend or 0.0)
    knee = math.radians(params.knee_bend or 0.0)

    return {
        "left_leg": (left_anchor, np.array([a, 0.0, 0.0])),
        "right_leg": (right_anchor, np.array([-a, 0.0, 0.0])),
        "left_foot": (None, np.array([a, 0.0, 0.0])),
        "right_foot": (None, np.array([-a, 0.0, 0.0])),
        "left_arm": (None, np.array([0.0, 0.0, lift])),
        "right_arm": (None, np.array([0.0, 0.0, -lift])),
        "left_forearm": (None, np.array([0.0, 0.0, elbow])),
        "right_forearm": (None, np.array([0.0, 0.0, -elbow])),
        "left_knee": (None, np.array([0.0, knee, 0.0])),
        "right_knee": (None, np.array([0.0, knee, 0.0])),
    }


def apply_pose(rig: FigureRig, params: PoseParams, crossed: float = 0.0) -> None:
    """Write the transforms for `params` onto the rig's nodes."""

    for name, (center, spin) in pose_transforms(params, crossed).items():
        node = getattr(rig, name)
        if center is not None:
            node.center = center
        node.spin = spin


__all__ = ["FIXED_CROSSED_ANCHORS", "apply_pose", "pose_transforms"]
