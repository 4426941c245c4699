import logging

import pytest

from duolayout.config.settings import LayoutSettings
from duolayout.layout.engine import LayoutEngine
from duolayout.layout.layouts import (
    LargeMode,
    Layout,
    LayoutOption,
    default_frame_layout,
    large_frame_layout,
    side_frame_layout,
)
from duolayout.layout.rect import Rect


class Recorder:
    def __init__(self) -> None:
        self.layouts: list[Layout] = []

    def __call__(self, layout: Layout) -> None:
        self.layouts.append(layout)


def test_initial_layout_uses_first_mode() -> None:
    engine = LayoutEngine(800, 480)

    assert engine.layout_name == "Default"
    assert engine.layout == default_frame_layout(800, 480)
    assert engine.window_size == (800, 480)
    assert engine.mode_count == 4
    assert not engine.swapped


def test_resize_recomputes_and_notifies() -> None:
    engine = LayoutEngine(800, 480)
    recorder = Recorder()
    engine.on_layout_changed(recorder)

    layout = engine.resize(400, 480)

    assert layout == default_frame_layout(400, 480)
    assert recorder.layouts == [layout]


def test_resize_to_same_size_does_not_notify() -> None:
    engine = LayoutEngine(800, 480)
    recorder = Recorder()
    engine.on_layout_changed(recorder)

    engine.resize(800, 480)

    assert recorder.layouts == []


def test_next_and_prev_layout_cycle() -> None:
    engine = LayoutEngine(800, 480)

    names = [engine.next_layout().name for _ in range(4)]
    assert names == ["Single", "Large", "SideBySide", "Default"]

    assert engine.prev_layout().name == "SideBySide"
    assert engine.layout == side_frame_layout(800, 480)


def test_set_layout_unknown_option_returns_false() -> None:
    engine = LayoutEngine(800, 480)
    assert not engine.set_layout(LayoutOption.CUSTOM)
    assert engine.layout_name == "Default"


def test_set_layout_switches_mode() -> None:
    engine = LayoutEngine(800, 240)
    assert engine.set_layout(LayoutOption.SIDE_BY_SIDE)
    assert engine.layout == side_frame_layout(800, 240)


def test_toggle_swap() -> None:
    engine = LayoutEngine(400, 480)
    recorder = Recorder()
    engine.on_layout_changed(recorder)

    engine.toggle_swap()

    assert engine.swapped
    assert engine.layout == default_frame_layout(400, 480, swapped=True)
    assert len(recorder.layouts) == 1

    # Mismo valor: no se recalcula
    engine.set_swapped(True)
    assert len(recorder.layouts) == 1


def test_failing_callback_is_logged_and_others_still_run(caplog) -> None:
    engine = LayoutEngine(800, 480)
    recorder = Recorder()

    def broken(layout: Layout) -> None:
        raise RuntimeError("boom")

    engine.on_layout_changed(broken)
    engine.on_layout_changed(recorder)

    with caplog.at_level(logging.ERROR, logger="duolayout.layout.engine"):
        engine.resize(640, 480)

    assert len(recorder.layouts) == 1
    assert any("callback" in r.getMessage() for r in caplog.records)


def test_from_settings_custom() -> None:
    settings = LayoutSettings(
        layout_option=LayoutOption.CUSTOM,
        custom_top=Rect(0, 0, 200, 120),
        custom_bottom=Rect(200, 0, 360, 120),
    )
    engine = LayoutEngine.from_settings(settings, 800, 480)

    assert engine.layout_name == "Custom"
    assert engine.layout.top_screen == Rect(0, 0, 200, 120)
    assert engine.layout.bottom_screen == Rect(200, 0, 360, 120)
    assert engine.mode_count == 5


def test_from_settings_swapped_side() -> None:
    settings = LayoutSettings(layout_option=LayoutOption.SIDE_BY_SIDE, swap_screen=True)
    engine = LayoutEngine.from_settings(settings, 800, 240)

    assert engine.swapped
    assert engine.layout == side_frame_layout(800, 240, swapped=True)


def test_dump_state() -> None:
    engine = LayoutEngine(800, 480)
    state = engine.dump_state()

    assert "Default" in state
    assert "800x480" in state
    assert "Rect(400x240+200+0)" in state
    assert repr(engine) == "LayoutEngine(layout=Default, window=800x480, swapped=False)"


def test_resize_to_invalid_size_keeps_previous_state() -> None:
    engine = LayoutEngine(800, 480)
    recorder = Recorder()
    engine.on_layout_changed(recorder)
    before = engine.layout

    with pytest.raises(AssertionError):
        engine.resize(0, 480)

    assert engine.window_size == (800, 480)
    assert engine.layout is before
    assert recorder.layouts == []
    # Un resize valido posterior sigue funcionando
    assert engine.resize(640, 480) == default_frame_layout(640, 480)


def test_from_settings_uses_mode_from_settings(monkeypatch) -> None:
    monkeypatch.setattr(LayoutSettings, "to_mode", lambda self: LargeMode(scale=0.5))
    engine = LayoutEngine.from_settings(LayoutSettings(), 1280, 720)

    assert engine.layout_name == "Large"
    assert engine.current_mode.scale == 0.5
    assert engine.layout == large_frame_layout(1280, 720, scale=0.5)
    assert engine.mode_count == 5
