"""Shared pytest fixtures for lib_figure tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from lib_figure import (  # noqa: E402
    DEFAULT_POSE_TABLE,
    FigureRig,
    TransitionDriver,
    build_ballerina,
)


@pytest.fixture
def rig() -> FigureRig:
    """Freshly built ballerina rig."""
    return build_ballerina()


@pytest.fixture
def driver(rig: FigureRig) -> TransitionDriver:
    """Driver at pose 1 with the default table and 0.9 s transitions."""
    return TransitionDriver(rig, DEFAULT_POSE_TABLE)

