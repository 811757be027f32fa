"""Domain service: QR scanning.

Scanning is split into two pluggable parts so the rest of the system
never cares which camera or decoding library is in use:

- a ``FrameSource`` hands out frames (camera images, lines of text
  from a handheld scanner, ...) and returns None once it is exhausted;
- a ``FrameDecoder`` turns one frame into zero or one payload string.

``QrScanner`` drives the two with a simple polling loop.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from babyland.domain.exceptions import ScannerError

logger = logging.getLogger(__name__)


class FrameSource(ABC):

    @abstractmethod
    def read(self) -> Any | None:
        """Return the next frame, or None when no more frames will come."""


class FrameDecoder(ABC):

    @abstractmethod
    def decode(self, frame: Any) -> str | None:
        """Return the payload found in *frame*, or None if there is none."""


class QrScanner:

    def __init__(self, source: FrameSource, decoder: FrameDecoder) -> None:
        self._source = source
        self._decoder = decoder
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def poll(self) -> str | None:
        """Read and decode a single frame.

        Returns the stripped payload, or None if the frame held nothing
        readable.  Source and decoder failures surface as ScannerError.
        """
        if self._exhausted:
            return None

        try:
            frame = self._source.read()
        except (OSError, ValueError) as exc:
            raise ScannerError(f"Failed to read frame: {exc}") from exc

        if frame is None:
            self._exhausted = True
            return None

        try:
            payload = self._decoder.decode(frame)
        except (ValueError, TypeError) as exc:
            raise ScannerError(f"Failed to decode frame: {exc}") from exc

        if payload is None or not payload.strip():
            return None

        logger.info("Decoded payload %r", payload.strip())
        return payload.strip()

    def scan(self, max_polls: int | None = None) -> str | None:
        """Poll until a payload is decoded.

        Stops early when the source runs dry or after *max_polls*
        attempts, returning None in both cases.
        """
        polls = 0
        while not self._exhausted:
            if max_polls is not None and polls >= max_polls:
                break
            polls += 1
            payload = self.poll()
            if payload is not None:
                return payload
        return None
