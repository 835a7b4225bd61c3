"""Construction of the ballerina figure and the bundle of posable nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Mapping

from .scene import Node, cone, cube, cylinder, group, sphere


class MissingNodeError(RuntimeError):
    """Raised when a rig cannot be assembled because named nodes are absent."""

    def __init__(self, missing) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing figure nodes: {', '.join(self.missing)}")


@dataclass
class FigureRig:
    """Handles of every node the pose applicator writes to.

    root: whole-figure group (drag rotation acts on its spin)
    left_leg / right_leg: leg groups whose centers are the stance anchors
    left_foot / right_foot: feet, spun together with their leg
    left_arm / right_arm: shoulder groups (arm lift)
    left_forearm / right_forearm: elbow groups (elbow bend)
    left_knee / right_knee: knee groups holding the shins (knee bend)
    """

    root: Node
    left_leg: Node
    right_leg: Node
    left_foot: Node
    right_foot: Node
    left_arm: Node
    right_arm: Node
    left_forearm: Node
    right_forearm: Node
    left_knee: Node
    right_knee: Node

    @classmethod
    def node_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_nodes(cls, nodes: Mapping[str, Node]) -> "FigureRig":
        """Bundle nodes looked up by name; all or nothing."""

        missing = [name for name in cls.node_names() if nodes.get(name) is None]
        if missing:
            raise MissingNodeError(missing)
        return cls(**{name: nodes[name] for name in cls.node_names()})


def _build_arm(side: float) -> tuple:
    upper = cylinder([0, 0, 0], [0.14, 0.55, 0.14], "mistyrose")
    lower = cylinder([0, 0, 0], [0.12, 0.5, 0.12], "mistyrose")
    forearm = group(lower, center=[0, 0.55, 0])
    arm = group(upper, forearm, center=[0.95 * side, 2.35, 0])
    return arm, forearm


def _build_leg() -> tuple:
    thigh = cylinder([0, 0.9, 0], [0.2, 1.0, 0.2], "gainsboro")
    shin = cylinder([0, -0.8, 0], [0.16, 0.8, 0.16], "gainsboro")
    knee = group(shin, center=[0, 0.9, 0])
    foot = cube([0, -0.3, 0.3], [0.55, 0.15, 1.05], "linen")
    leg = group(thigh, knee, foot)
    return leg, knee, foot


def build_ballerina() -> FigureRig:
    """Build the figure from primitives and return its rig."""

    torso = cylinder([0, 2.2, 0], [0.7, 1.4, 0.7], "white")
    head = sphere([0, 3.5, 0], 0.42, "mistyrose")
    tutu = cone([0, 1.55, 0], [1.4, 0.8, 1.4], "pink")

    left_arm, left_forearm = _build_arm(-1.0)
    right_arm, right_forearm = _build_arm(1.0)
    left_arm.spin = [0, 0, math.radians(25)]
    right_arm.spin = [0, 0, math.radians(-25)]

    left_leg, left_knee, left_foot = _build_leg()
    right_leg, right_knee, right_foot = _build_leg()
    left_leg.center = [-0.25, 0.9, 0]
    right_leg.center = [0.25, 0.9, 0]

    root = group(
        torso,
        head,
        tutu,
        left_arm,
        right_arm,
        left_leg,
        right_leg,
        center=[0, 0.2, 0],
        size=2.2,
    )

    return FigureRig.from_nodes(
        {
            "root": root,
            "left_leg": left_leg,
            "right_leg": right_leg,
            "left_foot": left_foot,
            "right_foot": right_foot,
            "left_arm": left_arm,
            "right_arm": right_arm,
            "left_forearm": left_forearm,
            "right_forearm": right_forearm,
            "left_knee": left_knee,
            "right_knee": right_knee,
        }
    )


__all__ = ["FigureRig", "MissingNodeError", "build_ballerina"]
