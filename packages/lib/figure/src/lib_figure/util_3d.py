"""Utilities for rendering the figure with pyglet."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, cast

import numpy as np
import pyglet

from .mesh import figure_triangles
from .scene import Node


@dataclass
class FigureVisuals:
    """Container returned by :func:`create_figure_batch`.

    batch: The pyglet batch that owns the vertex lists.
    entries: Mapping of semantic names (``triangles``) to the vertex lists
        created for rendering. Entries with no geometry are omitted.
    """

    batch: "pyglet.graphics.Batch"
    entries: Dict[str, Any]


def create_figure_batch(
    root: Node,
    *,
    batch: Optional["pyglet.graphics.Batch"] = None,
    group: Optional["pyglet.graphics.Group"] = None,
) -> FigureVisuals:
    """Create a pyglet vertex list holding every primitive under `root`.

    Geometry is baked in world space with flat shading, so the batch has to be
    recreated whenever a node transform changes.
    """

    triangles, face_colors = figure_triangles(root)

    working_batch = batch or pyglet.graphics.Batch()
    shader = pyglet.graphics.get_default_shader()
    entries: Dict[str, Any] = {}

    vertex_count = len(triangles) * 3
    if vertex_count:
        positions = triangles.reshape(-1).astype(np.float32).tolist()
        colors = np.repeat(face_colors, 3, axis=0).reshape(-1).astype(np.float32).tolist()
        entries["triangles"] = shader.vertex_list(
            vertex_count,
            pyglet.gl.GL_TRIANGLES,
            batch=working_batch,
            group=cast(Any, group),
            position=("f", positions),
            colors=("f", colors),
        )

    return FigureVisuals(batch=working_batch, entries=entries)


def dispose_figure_visuals(visuals: Optional[FigureVisuals]) -> None:
    if visuals is None:
        return
    for vertex_list in visuals.entries.values():
        vertex_list.delete()
    visuals.entries.clear()


__all__ = [
    "FigureVisuals",
    "create_figure_batch",
    "dispose_figure_visuals",
]
