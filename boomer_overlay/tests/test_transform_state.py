from __future__ import annotations

import pytest

from boomer_overlay.transform_state import SCALE_MAX, SCALE_MIN, TransformState, clamp_scale


def test_defaults():
    state = TransformState()
    assert state.scale == 1.0
    assert state.offset == (0.0, 0.0)
    assert state.pointer_position == (0.0, 0.0)
    assert state.highlight_active is False
    assert state.drag_anchor is None
    assert state.dragging is False


def test_set_scale_always_clamps():
    state = TransformState()
    assert state.set_scale(10.0) == SCALE_MAX
    assert state.set_scale(-4.0) == SCALE_MIN
    assert state.set_scale(0.0) == SCALE_MIN
    assert state.set_scale(2.5) == 2.5


def test_constructor_clamps_out_of_range_scale():
    assert TransformState(scale=7.0).scale == SCALE_MAX
    assert clamp_scale(0.01) == SCALE_MIN


def test_invalid_scale_range_rejected():
    with pytest.raises(ValueError):
        TransformState(scale_min=0.0)
    with pytest.raises(ValueError):
        TransformState(scale_min=2.0, scale_max=1.0)


def test_drag_and_translate_helpers():
    state = TransformState()
    state.begin_drag((3, 4))
    assert state.drag_anchor == (3.0, 4.0)
    state.translate(5.0, -2.0)
    state.translate(1.0, 1.0)
    assert state.offset == (6.0, -1.0)
    state.end_drag()
    assert state.drag_anchor is None


def test_snapshot_is_detached_copy():
    state = TransformState()
    state.set_highlight(True)
    state.move_pointer((10, 20))
    snap = state.snapshot()
    state.set_highlight(False)
    state.move_pointer((0, 0))
    assert snap.highlight_active is True
    assert snap.pointer_position == (10.0, 20.0)
