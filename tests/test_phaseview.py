import cmath
import math

import pytest

from sigwidgets.phaseview import (
    ANG_TICKS,
    PhaseView,
    SampleRing,
    phase_to_color_index,
)


def test_ring_keeps_order_before_wrap():
    ring = SampleRing(4)
    ring.feed([1, 2])
    assert ring.samples() == [1, 2]
    assert len(ring) == 2


def test_ring_wraps_keeping_newest():
    ring = SampleRing(4)
    ring.feed([1, 2, 3])
    ring.feed([4, 5, 6])
    assert ring.samples() == [3, 4, 5, 6]
    assert len(ring) == 4


def test_ring_feed_longer_than_size():
    ring = SampleRing(3)
    ring.feed(range(10))
    assert ring.samples() == [7, 8, 9]


def test_ring_resize_discards():
    ring = SampleRing(3)
    ring.feed([1, 2, 3])
    ring.resize(5)
    assert len(ring) == 0
    assert ring.samples() == []
    assert ring.size == 5


def test_ring_zero_size_ignores_feed():
    ring = SampleRing(0)
    ring.feed([1, 2])
    assert ring.samples() == []


def test_ring_negative_size():
    with pytest.raises(ValueError):
        SampleRing(-1)


def test_color_index_bounds():
    assert phase_to_color_index(0.0) == 0
    assert phase_to_color_index(2 * math.pi) == 1023
    assert phase_to_color_index(-1e-9) == 1023


def test_color_index_monotonic():
    indexes = [phase_to_color_index(a / 10) for a in range(63)]
    assert indexes == sorted(indexes)


def test_screen_point_origin_is_center():
    view = PhaseView(200, 100)
    assert view.screen_point(0, 0) == view.center == (100, 50)


def test_screen_point_clipped_to_unit_circle():
    view = PhaseView(200, 100)
    assert view.screen_point(10, 0) == view.screen_point(1, 0)
    assert view.screen_point(0, -5) == view.screen_point(0, -1)


def test_screen_point_y_up():
    view = PhaseView(200, 100)
    _, y_up = view.screen_point(0, 0.5)
    _, y_down = view.screen_point(0, -0.5)
    assert y_up < 50 < y_down


def test_angular_tick_count_and_symmetry():
    view = PhaseView(200, 200)
    ticks = view.angular_ticks()
    assert len(ticks) == ANG_TICKS
    (x1, y1), (x2, _) = ticks[0]
    assert y1 == pytest.approx(100)
    assert x2 > x1 > 100


def test_phase_lines_fade_in_to_newest():
    view = PhaseView(200, 200, history_size=4)
    view.feed([1, 1j, -1, -1j])
    lines = view.phase_lines()
    assert len(lines) == 4
    alphas = [line.alpha for line in lines]
    assert alphas == sorted(alphas)
    assert alphas[-1] == 255


def test_phase_lines_endpoint_and_color():
    view = PhaseView(200, 200, history_size=2)
    sample = cmath.rect(0.5, 1.0)
    view.feed([sample])
    (line,) = view.phase_lines()
    assert line.end == view.screen_point(sample.real, sample.imag)
    assert line.color_index == phase_to_color_index(1.0)


def test_gain_scales_lines():
    view = PhaseView(200, 200, history_size=1)
    view.gain = 0.5
    view.feed([0.8])
    assert view.phase_lines()[0].end == view.screen_point(0.4, 0)


def test_aoa_zero_phase_points_forward_and_back():
    view = PhaseView(200, 200, history_size=1)
    view.feed([1.0])
    (line,) = view.aoa_lines()
    assert line.ends == (view.screen_point(0, 1), view.screen_point(0, -1))
    assert line.alpha == 255


def test_aoa_skips_out_of_scale_phase():
    view = PhaseView(200, 200, history_size=2)
    view.phase_scale = 0.5
    view.feed([cmath.rect(1, 2.0), 1.0])
    assert len(view.aoa_lines()) == 1


def test_set_history_size_clears():
    view = PhaseView(100, 100, history_size=4)
    view.feed([1, 2])
    view.set_history_size(8)
    assert view.phase_lines() == []


def test_negative_view_size():
    with pytest.raises(ValueError):
        PhaseView(-1, 10)