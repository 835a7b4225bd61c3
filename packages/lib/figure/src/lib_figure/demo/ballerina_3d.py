"""Interactive 3D ballerina that moves between the six ballet foot positions."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

import pyglet
from lib_figure import (
    DEFAULT_POSE_TABLE,
    DRAG_SENSITIVITY,
    TRANSITION_DURATION,
    DragRotator,
    DriverState,
    FigureRig,
    MissingNodeError,
    PoseSelection,
    PoseTable,
    TransitionDriver,
    build_ballerina,
)
from lib_figure.pose_bar import PoseBar
from lib_figure.util_3d import (
    FigureVisuals,
    create_figure_batch,
    dispose_figure_visuals,
)
from pyglet import clock, gl, graphics, window
from pyglet.math import Mat4, Vec3
from pyglet.window import key, mouse

POSE_KEYS = {
    key._1: 1,
    key._2: 2,
    key._3: 3,
    key._4: 4,
    key._5: 5,
    key._6: 6,
}


class BallerinaViewer:
    """pyglet window showing the figure, the pose bar and drag rotation."""

    def __init__(
        self,
        rig: FigureRig,
        *,
        table: PoseTable = DEFAULT_POSE_TABLE,
        initial_pose_id: int = 1,
        duration: float = TRANSITION_DURATION,
        sensitivity: float = DRAG_SENSITIVITY,
        update_rate: float = 60.0,
        debug: bool = False,
    ) -> None:
        if update_rate <= 0:
            raise ValueError("update_rate must be positive")

        self.rig = rig
        self.driver = TransitionDriver(
            rig, table, initial_pose_id=initial_pose_id, duration=duration
        )
        self.selection = PoseSelection(self.driver)
        self.drag = DragRotator(rig.root, sensitivity=sensitivity)

        self.window = window.Window(
            width=960,
            height=720,
            caption="Ballet Positions",
            resizable=True,
        )
        self.pose_bar = PoseBar(table, self.selection)
        self.pose_bar.layout(self.window.width)

        self.batch = graphics.Batch()
        self.figure_visuals: Optional[FigureVisuals] = None
        self._dirty = True
        self._update_rate = update_rate
        self._closed = False
        self._debug = debug

        self.driver.add_listener(self._on_pose_selected)
        self._register_handlers()
        clock.schedule_interval(self.update, 1.0 / self._update_rate)
        print("BallerinaViewer: enter")

    def _register_handlers(self) -> None:
        @self.window.event
        def on_draw() -> None:
            gl.glClearColor(0.96, 0.96, 0.96, 1.0)
            self.window.clear()

            gl.glEnable(gl.GL_DEPTH_TEST)
            self.window.projection = Mat4.perspective_projection(
                fov=45.0,
                aspect=self.window.width / max(1, self.window.height),
                z_near=0.1,
                z_far=100.0,
            )
            self.window.view = Mat4.look_at(
                Vec3(0.0, 6.0, 20.0),
                Vec3(0.0, 4.5, 0.0),
                Vec3(0.0, 1.0, 0.0),
            )
            if self.figure_visuals:
                self.figure_visuals.batch.draw()

            gl.glDisable(gl.GL_DEPTH_TEST)
            self.window.projection = Mat4.orthogonal_projection(
                0, self.window.width, 0, self.window.height, -255, 255
            )
            self.window.view = Mat4()
            self.pose_bar.draw()

        @self.window.event
        def on_resize(width: int, height: int) -> None:
            self.pose_bar.layout(width)

        @self.window.event
        def on_mouse_press(x: int, y: int, button: int, modifiers: int) -> None:
            if button != mouse.LEFT:
                return
            pose_id = self.pose_bar.hit_test(x, y)
            if pose_id is not None:
                self.driver.go_to_pose(pose_id)
                return
            self.drag.press(x)

        @self.window.event
        def on_mouse_drag(
            x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
        ) -> None:
            if self.drag.move(x):
                self._dirty = True

        @self.window.event
        def on_mouse_release(x: int, y: int, button: int, modifiers: int) -> None:
            self.drag.release()

        @self.window.event
        def on_key_press(symbol: int, modifiers: int) -> None:
            if symbol in (key.ESCAPE, key.Q):
                pyglet.app.exit()
            elif symbol in POSE_KEYS:
                self.driver.go_to_pose(POSE_KEYS[symbol])

    def _on_pose_selected(self, pose) -> None:
        self.pose_bar.refresh()
        if self._debug:
            print(f"BallerinaViewer: pose {pose.id} ({pose.name})")

    def update(self, dt: float) -> None:
        if self.driver.state is DriverState.TRANSITIONING:
            self.driver.tick(dt)
            self._dirty = True

        if not self._dirty:
            return

        if self.figure_visuals:
            dispose_figure_visuals(self.figure_visuals)

        self.figure_visuals = create_figure_batch(self.rig.root, batch=self.batch)
        self._dirty = False

    def close(self) -> None:
        if self._closed:
            return

        clock.unschedule(self.update)
        if self.figure_visuals:
            dispose_figure_visuals(self.figure_visuals)
            self.figure_visuals = None

        self._closed = True
        print("BallerinaViewer: exit")

    def run(self) -> None:
        try:
            pyglet.app.run()
        finally:
            self.close()


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--pose",
        type=int,
        default=1,
        help="Pose id shown at startup (default: 1).",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=TRANSITION_DURATION,
        help="Transition duration in seconds (default: 0.9).",
    )
    parser.add_argument(
        "--sensitivity",
        type=float,
        default=DRAG_SENSITIVITY,
        help="Drag rotation in radians per pixel (default: 0.01).",
    )
    parser.add_argument(
        "--update-rate",
        type=float,
        default=60.0,
        help="Scheduler frequency in Hz for animation frames (default: 60).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if DEFAULT_POSE_TABLE.get(args.pose) is None:
        parser.error(f"unknown pose id: {args.pose}")

    try:
        rig = build_ballerina()
    except MissingNodeError as e:
        print(f"Could not build the figure: {e}", file=sys.stderr)
        return 2

    viewer = BallerinaViewer(
        rig,
        initial_pose_id=args.pose,
        duration=args.duration,
        sensitivity=args.sensitivity,
        update_rate=args.update_rate,
        debug=args.debug,
    )
    viewer.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
