"""Tests for the primitive scene graph and the ballerina rig."""

from __future__ import annotations

import math

import numpy as np
import pytest

from lib_figure import FigureRig, MissingNodeError
from lib_figure.scene import Node, cube, cylinder, group, sphere, spin_matrix, walk


class TestNode:
    """Tests for Node transforms and grouping."""

    def test_scalar_size_expands(self) -> None:
        node = sphere([0, 1, 0], 0.42, "mistyrose")
        np.testing.assert_allclose(node.size, [0.42, 0.42, 0.42])

    def test_rejects_bad_vectors(self) -> None:
        with pytest.raises(ValueError):
            cube([0, 1], 1.0)
        node = cube([0, 0, 0], 1.0)
        with pytest.raises(ValueError):
            node.spin = [1.0, 2.0]

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            Node("torus")

    def test_turn_rotates_about_vertical(self) -> None:
        rotation = spin_matrix([math.pi / 2, 0.0, 0.0])
        np.testing.assert_allclose(rotation @ [1.0, 0.0, 0.0], [0.0, 0.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(rotation @ [0.0, 1.0, 0.0], [0.0, 1.0, 0.0], atol=1e-12)

    def test_world_position_composes_parents(self) -> None:
        child = cube([1.0, 0.0, 0.0], 1.0)
        parent = group(child, center=[0.0, 2.0, 0.0], size=2.0)
        parent.spin = [math.pi / 2, 0.0, 0.0]
        np.testing.assert_allclose(child.world_position(), [0.0, 2.0, -2.0], atol=1e-12)

    def test_add_reparents(self) -> None:
        child = cylinder([0, 0, 0], 1.0)
        first = group(child)
        second = group()
        second.add(child)
        assert child.parent is second
        assert first.children == []
        assert second.children == [child]

    def test_cannot_add_self(self) -> None:
        node = group()
        with pytest.raises(ValueError):
            node.add(node)

    def test_walk_is_depth_first(self) -> None:
        a = cube([0, 0, 0], 1.0)
        b = sphere([0, 0, 0], 1.0)
        inner = group(a)
        root = group(inner, b)
        assert list(walk(root)) == [root, inner, a, b]


class TestFigureRig:
    """Tests for the ballerina construction."""

    def test_all_named_nodes_are_in_the_tree(self, rig) -> None:
        nodes = set(map(id, walk(rig.root)))
        for name in FigureRig.node_names():
            assert id(getattr(rig, name)) in nodes

    def test_initial_leg_anchors(self, rig) -> None:
        np.testing.assert_allclose(rig.left_leg.center, [-0.25, 0.9, 0.0])
        np.testing.assert_allclose(rig.right_leg.center, [0.25, 0.9, 0.0])
        np.testing.assert_allclose(rig.root.size, [2.2, 2.2, 2.2])

    def test_missing_nodes_are_reported_together(self, rig) -> None:
        nodes = {name: getattr(rig, name) for name in FigureRig.node_names()}
        del nodes["left_foot"]
        nodes["right_knee"] = None
        with pytest.raises(MissingNodeError) as excinfo:
            FigureRig.from_nodes(nodes)
        assert excinfo.value.missing == ("left_foot", "right_knee")
        assert isinstance(excinfo.value, RuntimeError)
