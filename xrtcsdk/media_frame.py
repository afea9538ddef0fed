"""Media formats and the frame buffer passed between media objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PLANE_COUNT = 4


class MainMediaType(Enum):
    COMMON = 0
    AUDIO = 1
    VIDEO = 2
    DATA = 3


class SubMediaType(Enum):
    COMMON = 0
    I420 = 1
    H264 = 2


@dataclass
class AudioFormat:
    type: SubMediaType = SubMediaType.COMMON


@dataclass
class VideoFormat:
    type: SubMediaType = SubMediaType.COMMON
    width: int = 0
    height: int = 0
    idr: bool = False


@dataclass
class MediaFormat:
    """A main media type plus the audio or video details that go with it."""

    media_type: MainMediaType = MainMediaType.COMMON
    sub_fmt: AudioFormat | VideoFormat = field(default_factory=AudioFormat)

    @property
    def sub_type(self) -> SubMediaType:
        return self.sub_fmt.type

    @classmethod
    def video(
        cls,
        sub_type: SubMediaType,
        width: int = 0,
        height: int = 0,
        idr: bool = False,
    ) -> MediaFormat:
        return cls(MainMediaType.VIDEO, VideoFormat(sub_type, width, height, idr))

    @classmethod
    def audio(cls, sub_type: SubMediaType) -> MediaFormat:
        return cls(MainMediaType.AUDIO, AudioFormat(sub_type))


@dataclass
class MediaFrame:
    """A frame backed by one buffer of ``max_size`` bytes.

    The buffer holds up to four consecutive planes whose lengths are given
    by ``data_len``; a new frame has a single plane covering the buffer.
    """

    max_size: int
    fmt: MediaFormat = field(default_factory=MediaFormat)
    ts: int = 0
    capture_time_ms: int = 0
    data: bytearray = field(init=False, repr=False)
    data_len: list[int] = field(init=False)
    stride: list[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise ValueError(f"frame size must not be negative: {self.max_size}")
        self.data = bytearray(self.max_size)
        self.data_len = [self.max_size] + [0] * (PLANE_COUNT - 1)
        self.stride = [0] * PLANE_COUNT

    def plane(self, index: int) -> memoryview:
        """A writable view of plane ``index``, placed after the planes before it."""
        if not 0 <= index < PLANE_COUNT:
            raise IndexError(f"plane index out of range: {index}")
        lengths = self.data_len[: index + 1]
        if any(length < 0 for length in lengths):
            raise ValueError("plane lengths must not be negative")
        offset = sum(lengths[:-1])
        end = offset + lengths[-1]
        if end > self.max_size:
            raise ValueError(f"plane {index} ends at {end}, past the buffer of {self.max_size}")
        return memoryview(self.data)[offset:end]

    def planes(self) -> list[memoryview]:
        return [self.plane(index) for index in range(PLANE_COUNT)]