"""Process-wide engine state: worker threads, HTTP manager and observer."""

from __future__ import annotations

import threading
from typing import Any, ClassVar

from xrtcsdk.http import HttpManager
from xrtcsdk.tasks import TaskThread


class XRTCGlobal:
    """The single shared engine state; obtain it with :meth:`instance`."""

    _instance: ClassVar[XRTCGlobal | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self.api_thread = TaskThread("api_thread")
        self.worker_thread = TaskThread("worker_thread")
        self.network_thread = TaskThread("network_thread")
        for thread in (self.api_thread, self.worker_thread, self.network_thread):
            thread.start()

        self.http_manager = HttpManager(callback_thread=self.worker_thread)
        self.http_manager.start()

        self._engine_observer: Any = None

    @classmethod
    def instance(cls) -> XRTCGlobal:
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def engine_observer(self) -> Any:
        return self._engine_observer

    def register_engine_observer(self, observer: Any) -> None:
        self._engine_observer = observer