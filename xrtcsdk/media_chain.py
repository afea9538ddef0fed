"""Media objects and the chains that wire them together."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from xrtcsdk.media_frame import MediaFrame
from xrtcsdk.pins import InPin, OutPin


class MediaObject(ABC):
    """A stage of a media chain: a source, a filter or a sink."""

    json_config: str = ""
    dropped_frames: int = 0

    @abstractmethod
    def start(self) -> bool:
        """Start the stage; returns False if it could not start."""

    def setup(self, json_config: str) -> None:
        """Keep the chain's JSON configuration for the stage."""
        self.json_config = json_config

    @abstractmethod
    def stop(self) -> None:
        """Stop the stage."""

    def on_new_media_frame(self, frame: MediaFrame) -> None:
        """Receive a frame from an input pin; a stage that does not consume frames drops it."""
        self.dropped_frames += 1

    @abstractmethod
    def in_pins(self) -> list[InPin]:
        """The stage's input pins."""

    @abstractmethod
    def out_pins(self) -> list[OutPin]:
        """The stage's output pins."""


class MediaChain(ABC):
    """An ordered set of media objects that start and stop together."""

    def __init__(self) -> None:
        self._media_objects: list[MediaObject] = []
        self._succeeded = False
        self._failure: tuple[MediaObject | None, Any] | None = None

    @property
    def media_objects(self) -> list[MediaObject]:
        return list(self._media_objects)

    @property
    def succeeded(self) -> bool:
        """Whether the chain last reported success."""
        return self._succeeded

    @property
    def failure(self) -> tuple[MediaObject | None, Any] | None:
        """The stage and error of the last reported failure, if any."""
        return self._failure

    @abstractmethod
    def start(self) -> None:
        """Start the chain."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the chain."""

    @abstractmethod
    def destroy(self) -> None:
        """Release the chain."""

    def on_chain_success(self) -> None:
        """Called when the chain has come up."""
        self._succeeded = True
        self._failure = None

    def on_chain_failed(self, obj: MediaObject | None, error: Any) -> None:
        """Called when a stage of the chain has failed."""
        self._succeeded = False
        self._failure = (obj, error)

    def add_media_object(self, obj: MediaObject) -> None:
        self._media_objects.append(obj)

    def connect_media_object(self, source: MediaObject | None, target: MediaObject | None) -> bool:
        """Connect every output pin of ``source`` to some input pin of ``target``."""
        if source is None or target is None:
            return False
        in_pins = target.in_pins()
        return all(
            any(out_pin.connect_to(in_pin) for in_pin in in_pins)
            for out_pin in source.out_pins()
        )

    def setup_chain(self, json_config: str) -> None:
        for obj in self._media_objects:
            obj.setup(json_config)

    def start_chain(self) -> bool:
        """Start the objects in order, stopping at the first that fails."""
        return all(obj.start() for obj in self._media_objects)

    def stop_chain(self) -> None:
        for obj in self._media_objects:
            obj.stop()