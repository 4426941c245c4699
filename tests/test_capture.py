import logging

import pytest

from duolayout.capture import factory as capture
from duolayout.capture.factory import (
    BlankStream,
    CaptureFactory,
    CaptureRegistry,
    CaptureStream,
)


class FakeStream(CaptureStream):
    def __init__(self, config: str) -> None:
        self.config = config
        self.resolution = (0, 0)
        self.started = False

    def start_capture(self) -> None:
        self.started = True

    def stop_capture(self) -> None:
        self.started = False

    def set_resolution(self, width: int, height: int) -> None:
        self.resolution = (width, height)

    def set_flip(self, horizontal: bool, vertical: bool) -> None:
        pass

    def receive_frame(self) -> list[int]:
        return [1] * (self.resolution[0] * self.resolution[1])


class FakeFactory(CaptureFactory):
    def __init__(self) -> None:
        self.created: list[str] = []

    def create(self, config: str) -> CaptureStream:
        self.created.append(config)
        return FakeStream(config)


@pytest.fixture
def registry() -> CaptureRegistry:
    return CaptureRegistry()


def test_create_uses_registered_factory(registry: CaptureRegistry) -> None:
    fake = FakeFactory()
    registry.register("image", fake)

    stream = registry.create("image", "photo.png")

    assert isinstance(stream, FakeStream)
    assert stream.config == "photo.png"
    assert fake.created == ["photo.png"]
    assert registry.names == ["image"]
    assert registry.count == 1


def test_create_preview_default_sets_resolution(registry: CaptureRegistry) -> None:
    registry.register("image", FakeFactory())

    stream = registry.create_preview("image", "photo.png", 160, 120)

    assert isinstance(stream, FakeStream)
    assert stream.resolution == (160, 120)


def test_unknown_name_falls_back_to_blank(registry: CaptureRegistry, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="duolayout.capture.factory"):
        stream = registry.create("webcam", "")

    assert isinstance(stream, BlankStream)
    assert any("webcam" in r.getMessage() for r in caplog.records)


def test_blank_name_is_not_an_error(registry: CaptureRegistry, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="duolayout.capture.factory"):
        stream = registry.create_preview("blank", "", 32, 24)

    assert isinstance(stream, BlankStream)
    assert stream.resolution == (32, 24)
    assert caplog.records == []


def test_register_replaces_factory(registry: CaptureRegistry) -> None:
    first, second = FakeFactory(), FakeFactory()
    registry.register("image", first)
    registry.register("image", second)

    registry.create("image", "a.png")

    assert first.created == []
    assert second.created == ["a.png"]
    assert registry.get("image") is second


def test_unregister(registry: CaptureRegistry) -> None:
    registry.register("image", FakeFactory())

    assert registry.unregister("image")
    assert not registry.unregister("image")
    assert isinstance(registry.create("image", ""), BlankStream)


def test_blank_stream_frames() -> None:
    stream = BlankStream()
    stream.set_resolution(4, 3)
    stream.start_capture()

    assert stream.is_capturing
    assert stream.receive_frame() == [0] * 12

    stream.stop_capture()
    assert not stream.is_capturing


def test_module_level_helpers_use_default_registry() -> None:
    fake = FakeFactory()
    capture.register_factory("fake-helper", fake)
    try:
        assert isinstance(capture.create_stream("fake-helper", "cfg"), FakeStream)
        preview = capture.create_preview_stream("fake-helper", "cfg", 10, 10)
        assert preview.resolution == (10, 10)
        assert "fake-helper" in capture.default_registry().names
    finally:
        capture.default_registry().unregister("fake-helper")
