"""
duolayout.capture - Device-capture provider registry.
"""

from duolayout.capture.factory import (
    BlankStream,
    CaptureFactory,
    CaptureRegistry,
    CaptureStream,
    create_preview_stream,
    create_stream,
    register_factory,
)

__all__ = [
    "BlankStream",
    "CaptureFactory",
    "CaptureRegistry",
    "CaptureStream",
    "create_preview_stream",
    "create_stream",
    "register_factory",
]
