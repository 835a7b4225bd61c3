"""Tests for easing curves and the Tween stepper."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lib_figure.easing import Tween, ease_linear, ease_quadratic_in_out


class TestQuadraticInOut:
    """Tests for ease_quadratic_in_out."""

    @pytest.mark.parametrize(
        ("t", "expected"),
        [(0.0, 0.0), (0.25, 0.125), (0.5, 0.5), (0.75, 0.875), (1.0, 1.0)],
    )
    def test_known_values(self, t: float, expected: float) -> None:
        assert ease_quadratic_in_out(t) == pytest.approx(expected)

    def test_clamps_out_of_range(self) -> None:
        assert ease_quadratic_in_out(-0.5) == 0.0
        assert ease_quadratic_in_out(1.5) == 1.0

    def test_monotonic(self) -> None:
        samples = [ease_quadratic_in_out(i / 100) for i in range(101)]
        assert samples == sorted(samples)


class TestTween:
    """Tests for Tween."""

    def test_reaches_target_exactly(self) -> None:
        record = SimpleNamespace(x=0.0, y=10.0)
        tween = Tween(record, {"x": 0.3, "y": -1.0}, 0.9, easing=ease_linear)
        for _ in range(7):
            tween.update(0.13)
        assert tween.finished
        assert not tween.running
        assert record.x == 0.3
        assert record.y == -1.0

    def test_intermediate_values_follow_easing(self) -> None:
        record = SimpleNamespace(x=0.0)
        tween = Tween(record, {"x": 2.0}, 1.0)
        tween.update(0.25)
        assert record.x == pytest.approx(2.0 * 0.125)
        assert tween.progress == pytest.approx(0.25)

    def test_untargeted_attributes_untouched(self) -> None:
        record = SimpleNamespace(x=0.0, other=7.0)
        tween = Tween(record, {"x": 1.0}, 0.5)
        tween.update(0.5)
        assert record.other == 7.0

    def test_callbacks(self) -> None:
        updates = []
        completions = []
        record = SimpleNamespace(x=0.0)
        tween = Tween(
            record,
            {"x": 1.0},
            0.2,
            easing=ease_linear,
            on_update=updates.append,
            on_complete=lambda: completions.append(True),
        )
        tween.update(0.1)
        tween.update(0.1)
        tween.update(0.1)
        assert updates == [pytest.approx(0.5), 1.0]
        assert completions == [True]

    def test_stop_skips_completion(self) -> None:
        completions = []
        record = SimpleNamespace(x=0.0)
        tween = Tween(record, {"x": 1.0}, 0.2, on_complete=lambda: completions.append(True))
        tween.update(0.1)
        value = record.x
        tween.stop()
        assert tween.update(1.0) is False
        assert record.x == value
        assert not tween.finished
        assert completions == []

    def test_rejects_non_positive_duration(self) -> None:
        with pytest.raises(ValueError):
            Tween(SimpleNamespace(x=0.0), {"x": 1.0}, 0.0)
