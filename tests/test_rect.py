from duolayout.layout.rect import Rect


def test_derived_dimensions() -> None:
    r = Rect(40, 240, 360, 480)
    assert r.width == 320
    assert r.height == 240
    assert r.area == 320 * 240
    assert not r.is_empty


def test_translate_returns_new_rect() -> None:
    r = Rect(0, 0, 400, 240)
    moved = r.translate_x(40).translate_y(-10)
    assert moved == Rect(40, -10, 440, 230)
    assert r == Rect(0, 0, 400, 240)


def test_clamp_inside_returns_same_object() -> None:
    r = Rect(10, 10, 100, 100)
    assert r.clamp(200, 200) is r


def test_clamp_trims_overflow() -> None:
    assert Rect(57, 183, 102, 217).clamp(101, 400) == Rect(57, 183, 101, 217)
    assert Rect(-5, -5, 50, 50).clamp(40, 40) == Rect(0, 0, 40, 40)


def test_clamp_never_inverts_bounds() -> None:
    r = Rect(300, 300, 400, 400).clamp(100, 100)
    assert r.left <= r.right
    assert r.top <= r.bottom
    assert r.is_empty


def test_conversions_and_str() -> None:
    r = Rect.from_xywh(360, 0, 400, 240)
    assert r.to_ltrb() == (360, 0, 760, 240)
    assert str(r) == "Rect(400x240+360+0)"
