"""Triangle meshes for the primitives and world-space flattening of a figure."""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np
from matplotlib import colors as mcolors

from .scene import Node, walk

DEFAULT_COLOR = (0.8, 0.8, 0.8, 1.0)
LIGHT_DIRECTION = np.array([0.4, 0.8, 0.6], dtype=np.float64)
AMBIENT = 0.35
SEGMENTS = 24


def _cube() -> np.ndarray:
    h = 0.5
    corners = np.array(
        [[x, y, z] for x in (-h, h) for y in (-h, h) for z in (-h, h)],
        dtype=np.float64,
    )
    # corner index = 4*ix + 2*iy + iz, quads wound counter-clockwise from outside
    quads = [
        (0, 1, 3, 2),  # -x
        (4, 6, 7, 5),  # +x
        (0, 4, 5, 1),  # -y
        (2, 3, 7, 6),  # +y
        (0, 2, 6, 4),  # -z
        (1, 5, 7, 3),  # +z
    ]
    tris = []
    for a, b, c, d in quads:
        tris.append(corners[[a, b, c]])
        tris.append(corners[[a, c, d]])
    return np.array(tris)


def _ring(radius: float, y: float) -> np.ndarray:
    angles = np.linspace(0.0, 2.0 * np.pi, SEGMENTS, endpoint=False)
    return np.stack(
        [radius * np.cos(angles), np.full(SEGMENTS, y), radius * np.sin(angles)], axis=1
    )


def _cylinder(top_radius: float) -> np.ndarray:
    bottom = _ring(0.5, 0.0)
    top = _ring(top_radius, 1.0)
    bottom_center = np.array([0.0, 0.0, 0.0])
    top_center = np.array([0.0, 1.0, 0.0])
    tris = []
    for i in range(SEGMENTS):
        j = (i + 1) % SEGMENTS
        tris.append([bottom[i], top[i], bottom[j]])
        if top_radius > 0.0:
            tris.append([bottom[j], top[i], top[j]])
            tris.append([top_center, top[j], top[i]])
        tris.append([bottom_center, bottom[i], bottom[j]])
    return np.array(tris, dtype=np.float64)


def _sphere(rings: int = 12) -> np.ndarray:
    tris = []
    for r in range(rings):
        phi0 = np.pi * r / rings
        phi1 = np.pi * (r + 1) / rings
        upper = _ring(0.5 * np.sin(phi0), 0.5 * np.cos(phi0))
        lower = _ring(0.5 * np.sin(phi1), 0.5 * np.cos(phi1))
        for i in range(SEGMENTS):
            j = (i + 1) % SEGMENTS
            if r > 0:
                tris.append([upper[i], upper[j], lower[i]])
            if r < rings - 1:
                tris.append([upper[j], lower[j], lower[i]])
    return np.array(tris, dtype=np.float64)


@lru_cache(maxsize=None)
def unit_mesh(kind: str) -> np.ndarray:
    """Triangles (T, 3, 3) of a unit primitive.

    Spheres and cubes are centered at the origin with diameter/side 1;
    cylinders and cones stand on the origin with base radius 0.5 and height 1.
    """

    if kind == "cube":
        mesh = _cube()
    elif kind == "sphere":
        mesh = _sphere()
    elif kind == "cylinder":
        mesh = _cylinder(0.5)
    elif kind == "cone":
        mesh = _cylinder(0.0)
    else:
        raise ValueError(f"no mesh for node kind: {kind}")
    mesh.setflags(write=False)
    return mesh


def resolve_color(color) -> Tuple[float, float, float, float]:
    if color is None:
        return DEFAULT_COLOR
    return tuple(float(c) for c in mcolors.to_rgba(color))


def figure_triangles(root: Node) -> Tuple[np.ndarray, np.ndarray]:
    """World-space triangles (N, 3, 3) and shaded face colors (N, 4) for `root`."""

    light = LIGHT_DIRECTION / np.linalg.norm(LIGHT_DIRECTION)
    all_tris = []
    all_colors = []
    for node in walk(root):
        if node.kind == "group":
            continue
        local = unit_mesh(node.kind)
        matrix = node.world_matrix()
        flat = local.reshape(-1, 3) @ matrix[:3, :3].T + matrix[:3, 3]
        tris = flat.reshape(-1, 3, 3)

        normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        normals = np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 1e-12)
        # winding is not guaranteed after mirrored scaling, so light both faces
        intensity = AMBIENT + (1.0 - AMBIENT) * np.abs(normals @ light)

        rgba = np.array(resolve_color(node.color), dtype=np.float64)
        face_colors = np.empty((len(tris), 4), dtype=np.float64)
        face_colors[:, :3] = rgba[:3] * intensity[:, None]
        face_colors[:, 3] = rgba[3]

        all_tris.append(tris)
        all_colors.append(face_colors)

    if not all_tris:
        return np.zeros((0, 3, 3)), np.zeros((0, 4))
    return np.concatenate(all_tris), np.concatenate(all_colors)


__all__ = ["figure_triangles", "resolve_color", "unit_mesh"]
