"""The chain stage that feeds captured I420 frames into a media chain."""

from __future__ import annotations

import logging

from xrtcsdk.media_chain import MediaObject
from xrtcsdk.media_frame import MediaFormat, MediaFrame, SubMediaType
from xrtcsdk.pins import InPin, OutPin

_log = logging.getLogger(__name__)


class XRTCVideoSource(MediaObject):
    """Receives frames from a capture device and pushes them out of its pin."""

    def __init__(self) -> None:
        self._out_pin = OutPin(self)
        self._out_pin.format = MediaFormat.video(SubMediaType.I420)
        self._running = False

    @property
    def running(self) -> bool:
        """Whether the stage has been started and not stopped since."""
        return self._running

    def start(self) -> bool:
        self._running = True
        return True

    def stop(self) -> None:
        _log.info("XRTCVideoSource Stop")
        self._running = False

    def in_pins(self) -> list[InPin]:
        return []

    def out_pins(self) -> list[OutPin]:
        return [self._out_pin]

    def on_frame(self, frame: MediaFrame) -> None:
        self._out_pin.push_media_frame(frame)