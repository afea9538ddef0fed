"""Pins that connect media objects and carry frames between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from xrtcsdk.media_frame import MainMediaType, MediaFormat, MediaFrame, SubMediaType

if TYPE_CHECKING:
    from xrtcsdk.media_chain import MediaObject


class BasePin(ABC):
    """A connection point on a media object with the format it handles."""

    def __init__(self, owner: MediaObject | None) -> None:
        self.media_object = owner
        self.format = MediaFormat()

    @abstractmethod
    def push_media_frame(self, frame: MediaFrame) -> None:
        """Pass a frame on through this pin."""


class InPin(BasePin):
    """An input pin; frames pushed into it go to its owner."""

    def __init__(self, owner: MediaObject | None) -> None:
        super().__init__(owner)
        self._out_pin: OutPin | None = None

    @property
    def connected_out_pin(self) -> OutPin | None:
        return self._out_pin

    def accept(self, out_pin: OutPin | None) -> bool:
        """Accept ``out_pin`` if its format is compatible with this pin's."""
        if out_pin is None:
            return False

        out_fmt = out_pin.format
        if MainMediaType.COMMON in (out_fmt.media_type, self.format.media_type):
            self._out_pin = out_pin
            return True
        if out_fmt.media_type is not self.format.media_type:
            return False
        if out_fmt.media_type not in (MainMediaType.AUDIO, MainMediaType.VIDEO):
            return False

        if SubMediaType.COMMON not in (out_fmt.sub_type, self.format.sub_type):
            if out_fmt.sub_type is not self.format.sub_type:
                return False

        self._out_pin = out_pin
        return True

    def push_media_frame(self, frame: MediaFrame) -> None:
        if self.media_object is not None:
            self.media_object.on_new_media_frame(frame)


class OutPin(BasePin):
    """An output pin; frames pushed into it go to the connected input pin."""

    def __init__(self, owner: MediaObject | None) -> None:
        super().__init__(owner)
        self._in_pin: InPin | None = None

    @property
    def connected_in_pin(self) -> InPin | None:
        return self._in_pin

    def connect_to(self, in_pin: InPin | None) -> bool:
        """Connect to ``in_pin`` if it accepts this pin."""
        if in_pin is None or not in_pin.accept(self):
            return False
        self._in_pin = in_pin
        return True

    def push_media_frame(self, frame: MediaFrame) -> None:
        if self._in_pin is not None:
            self._in_pin.push_media_frame(frame)