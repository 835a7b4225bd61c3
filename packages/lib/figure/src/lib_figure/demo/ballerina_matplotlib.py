"""指定したポジションのバレリーナを matplotlib で 3D 描画し、画像として保存するデモ。"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional

from lib_figure import (
    DEFAULT_POSE_TABLE,
    MissingNodeError,
    PoseTable,
    TransitionDriver,
    build_ballerina,
)
from lib_figure.mesh import figure_triangles
from lib_figure.scene import Node
from matplotlib import pyplot as plt
from matplotlib.artist import Artist
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401 (required for 3D projection)
from mpl_toolkits.mplot3d.art3d import Poly3DCollection


@dataclass
class FigureVisualsMatplotlib:
    """Container for the matplotlib artist representing the figure."""

    surfaces: Optional[Artist]


def create_figure_matplotlib(root: Node, *, ax) -> FigureVisualsMatplotlib:
    """Add the figure under `root` to a 3D axes as a single Poly3DCollection."""

    triangles, face_colors = figure_triangles(root)
    if len(triangles) == 0:
        return FigureVisualsMatplotlib(surfaces=None)

    # Map scene coords -> plotting coords: (X=x, Y=z, Z=y)
    plot_triangles = triangles[:, :, [0, 2, 1]]
    collection = Poly3DCollection(plot_triangles, facecolors=face_colors, linewidths=0)
    ax.add_collection3d(collection)
    return FigureVisualsMatplotlib(surfaces=collection)


def dispose_figure_visuals_matplotlib(visuals: Optional[FigureVisualsMatplotlib]) -> None:
    if visuals is None or visuals.surfaces is None:
        return
    visuals.surfaces.remove()
    visuals.surfaces = None


def _setup_axes(fig, *, elev: float, azim: float):
    ax = fig.add_subplot(111, projection="3d")
    ax.set_box_aspect((1, 1, 1))
    ax.set_xlim(-5.0, 5.0)
    ax.set_ylim(-5.0, 5.0)  # depth (z)
    ax.set_zlim(0.0, 10.0)  # vertical (y)
    ax.view_init(elev=elev, azim=azim)
    ax.set_xlabel("x (horizontal)")
    ax.set_ylabel("z (depth)")
    ax.set_zlabel("y (vertical)")
    return ax


def render_pose_snapshot(
    pose_id: int,
    output: Optional[str] = None,
    *,
    table: PoseTable = DEFAULT_POSE_TABLE,
    elev: float = 15.0,
    azim: float = -70.0,
    show: bool = False,
):
    """Drive a fresh figure to `pose_id` and draw it.

    The image is written to `output` when given. Returns the matplotlib figure
    (already closed unless `show` is set).
    """

    pose = table.get(pose_id)
    if pose is None:
        raise ValueError(f"unknown pose id: {pose_id}")

    rig = build_ballerina()
    driver = TransitionDriver(rig, table)
    driver.go_to_pose(pose_id)
    driver.tick(driver.duration)

    fig = plt.figure(figsize=(6, 8))
    ax = _setup_axes(fig, elev=elev, azim=azim)
    create_figure_matplotlib(rig.root, ax=ax)
    ax.set_title(f"Pose: {pose.name} - {pose.desc}")

    if output:
        fig.savefig(output, dpi=100)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--pose",
        type=int,
        default=1,
        help="Pose id to render (default: 1).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="PNG path to write. Without it the figure is shown in a window.",
    )
    parser.add_argument(
        "--elev",
        type=float,
        default=15.0,
        help="Camera elevation in degrees (default: 15).",
    )
    parser.add_argument(
        "--azim",
        type=float,
        default=-70.0,
        help="Camera azimuth in degrees (default: -70).",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if DEFAULT_POSE_TABLE.get(args.pose) is None:
        parser.error(f"unknown pose id: {args.pose}")

    try:
        render_pose_snapshot(
            args.pose,
            args.output,
            elev=args.elev,
            azim=args.azim,
            show=args.output is None,
        )
    except MissingNodeError as e:
        print(f"Could not build the figure: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
