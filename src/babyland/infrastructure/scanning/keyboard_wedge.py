"""Keyboard-wedge scanning.

Handheld USB/Bluetooth QR scanners present themselves as keyboards:
each scan is typed out as the payload followed by Enter.  Reading such
a scanner therefore means reading lines from a text stream, and the
decoding already happened inside the device.
"""

from __future__ import annotations

from typing import TextIO

from babyland.domain.service.scanner import FrameDecoder, FrameSource


class LineFrameSource(FrameSource):
    """Frames are the lines typed into *stream* (usually stdin)."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read(self) -> str | None:
        line = self._stream.readline()
        if line == "":
            return None  # EOF
        return line


class TextFrameDecoder(FrameDecoder):
    """Accepts a text frame as-is; blank lines decode to nothing."""

    def decode(self, frame: str) -> str | None:
        if not isinstance(frame, str):
            raise TypeError(f"Expected a text frame, got {type(frame).__name__}")
        payload = frame.strip()
        return payload or None
