"""Minimal primitive scene graph.

Nodes carry a `center` (position relative to the parent), a `spin` (radians)
and a `size` (per-axis scale). Spin components are (turn, tilt, roll): turn
about the vertical Y axis, tilt about X, roll about Z, applied intrinsically
in that order.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.spatial.transform import Rotation

Vector = Union[Sequence[float], np.ndarray]
Size = Union[float, Sequence[float], np.ndarray]
Color = Union[str, Tuple[float, float, float]]

PRIMITIVE_KINDS = ("sphere", "cylinder", "cone", "cube")


def _vec3(value: Vector, name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have three components, got {arr.shape}")
    return arr.copy()


def _size3(value: Size) -> np.ndarray:
    if np.isscalar(value):
        return np.full(3, float(value), dtype=np.float64)
    return _vec3(value, "size")


def spin_matrix(spin: Vector) -> np.ndarray:
    """3x3 rotation matrix for a (turn, tilt, roll) spin vector."""

    turn, tilt, roll = _vec3(spin, "spin")
    return Rotation.from_euler("YXZ", [turn, tilt, roll]).as_matrix()


class Node:
    """A primitive or group in the figure hierarchy."""

    def __init__(
        self,
        kind: str,
        center: Vector = (0.0, 0.0, 0.0),
        size: Size = 1.0,
        color: Optional[Color] = None,
    ) -> None:
        if kind != "group" and kind not in PRIMITIVE_KINDS:
            raise ValueError(f"unknown node kind: {kind}")
        self.kind = kind
        self._center = _vec3(center, "center")
        self._spin = np.zeros(3, dtype=np.float64)
        self._size = _size3(size)
        self.color = color
        self.parent: Optional["Node"] = None
        self.children: List["Node"] = []

    @property
    def center(self) -> np.ndarray:
        return self._center

    @center.setter
    def center(self, value: Vector) -> None:
        self._center = _vec3(value, "center")

    @property
    def spin(self) -> np.ndarray:
        return self._spin

    @spin.setter
    def spin(self, value: Vector) -> None:
        self._spin = _vec3(value, "spin")

    @property
    def size(self) -> np.ndarray:
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        self._size = _size3(value)

    def add(self, *children: "Node") -> "Node":
        """Parent `children` under this node, detaching them from any old parent."""

        for child in children:
            if child is self:
                raise ValueError("a node cannot be its own child")
            if child.parent is not None:
                child.parent.children.remove(child)
            child.parent = self
            self.children.append(child)
        return self

    def local_matrix(self) -> np.ndarray:
        """Translation * rotation * scale, as a 4x4 matrix."""

        matrix = np.eye(4, dtype=np.float64)
        matrix[:3, :3] = spin_matrix(self._spin) @ np.diag(self._size)
        matrix[:3, 3] = self._center
        return matrix

    def world_matrix(self) -> np.ndarray:
        matrix = self.local_matrix()
        node = self.parent
        while node is not None:
            matrix = node.local_matrix() @ matrix
            node = node.parent
        return matrix

    def world_position(self) -> np.ndarray:
        return self.world_matrix()[:3, 3].copy()

    def __repr__(self) -> str:
        return (
            f"Node(kind={self.kind!r}, center={self._center.tolist()}, "
            f"spin={self._spin.tolist()}, children={len(self.children)})"
        )


def walk(node: Node) -> Iterator[Node]:
    """Depth-first traversal of `node` and its descendants."""

    yield node
    for child in node.children:
        yield from walk(child)


def sphere(center: Vector, size: Size, color: Optional[Color] = None) -> Node:
    return Node("sphere", center, size, color)


def cylinder(center: Vector, size: Size, color: Optional[Color] = None) -> Node:
    return Node("cylinder", center, size, color)


def cone(center: Vector, size: Size, color: Optional[Color] = None) -> Node:
    return Node("cone", center, size, color)


def cube(center: Vector, size: Size, color: Optional[Color] = None) -> Node:
    return Node("cube", center, size, color)


def group(*children: Node, center: Vector = (0.0, 0.0, 0.0), size: Size = 1.0) -> Node:
    node = Node("group", center, size)
    node.add(*children)
    return node


__all__ = [
    "Node",
    "PRIMITIVE_KINDS",
    "cone",
    "cube",
    "cylinder",
    "group",
    "sphere",
    "spin_matrix",
    "walk",
]
