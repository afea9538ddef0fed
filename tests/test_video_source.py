from xrtcsdk.media_chain import MediaObject
from xrtcsdk.media_frame import MainMediaType, MediaFormat, MediaFrame, SubMediaType
from xrtcsdk.pins import InPin
from xrtcsdk.video_source import XRTCVideoSource


class Sink(MediaObject):
    def __init__(self, fmt):
        self.frames = []
        self.pin = InPin(self)
        self.pin.format = fmt

    def start(self):
        return True

    def stop(self):
        pass

    def on_new_media_frame(self, frame):
        self.frames.append(frame)

    def in_pins(self):
        return [self.pin]

    def out_pins(self):
        return []


def test_out_pin_produces_i420_video():
    source = XRTCVideoSource()
    (pin,) = source.out_pins()
    assert pin.format.media_type is MainMediaType.VIDEO
    assert pin.format.sub_type is SubMediaType.I420
    assert pin.media_object is source


def test_has_no_input_pins():
    assert XRTCVideoSource().in_pins() == []


def test_start_succeeds():
    assert XRTCVideoSource().start() is True


def test_on_frame_reaches_connected_sink():
    source = XRTCVideoSource()
    sink = Sink(MediaFormat.video(SubMediaType.I420))
    assert source.out_pins()[0].connect_to(sink.pin) is True
    frame = MediaFrame(3)
    source.on_frame(frame)
    source.stop()
    assert sink.frames == [frame]


def test_does_not_connect_to_h264_input():
    source = XRTCVideoSource()
    sink = Sink(MediaFormat.video(SubMediaType.H264))
    assert source.out_pins()[0].connect_to(sink.pin) is False
    source.on_frame(MediaFrame(1))
    assert sink.frames == []