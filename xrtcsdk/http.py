"""Asynchronous HTTP requests with callbacks delivered to registered owners."""

from __future__ import annotations

import dataclasses
import logging
import socket
import ssl
import threading
import time
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from xrtcsdk.tasks import TaskThread

_log = logging.getLogger(__name__)

_CONNECT_TIMEOUT_S = 15
_MAX_WORKERS = 16

_ERR_URL_MALFORMAT = (3, "URL using bad/illegal format or missing URL")
_ERR_RESOLVE_HOST = (6, "Couldn't resolve host name")
_ERR_CONNECT = (7, "Couldn't connect to server")
_ERR_TIMEOUT = (28, "Timeout was reached")
_NO_ERROR = (0, "No error")


class HttpMethod(Enum):
    GET = 0
    POST = 1
    POST_FORM = 2


@dataclass
class HttpRequest:
    """An HTTP request; ``timeout`` is in seconds."""

    url: str = ""
    body: str = ""
    timeout: int = 10
    encode_body: str = ""
    form: dict[str, str] = field(default_factory=dict)
    method: HttpMethod = HttpMethod.GET
    obj: Any = None


@dataclass(frozen=True)
class HttpReply:
    """The outcome of a request; ``duration`` is in milliseconds."""

    duration: int = 0
    error: int = 0
    err_msg: str = ""
    resp: str = ""
    url: str = ""
    body: str = ""
    status_code: int = 0
    form: dict[str, str] = field(default_factory=dict)
    obj: Any = None


Fetch = Callable[[HttpRequest], "tuple[int, str]"]
Callback = Callable[[HttpReply], Any]


def _unverified_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def urllib_fetch(request: HttpRequest) -> tuple[int, str]:
    """Perform a request with urllib; returns (status code, response text)."""
    if request.method is HttpMethod.POST:
        req = urllib.request.Request(
            request.url,
            data=request.body.encode("utf-8"),
            headers={"Content-Type": "application/x-www-form-urlencoded;"},
            method="POST",
        )
    else:
        req = urllib.request.Request(request.url, method="GET")
    timeout = request.timeout if request.timeout > 0 else _CONNECT_TIMEOUT_S
    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_unverified_context()) as resp:
            return resp.status, resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read().decode("utf-8", errors="replace")


def _classify(exc: BaseException) -> tuple[int, str]:
    if isinstance(exc, urllib.error.URLError) and not isinstance(exc, urllib.error.HTTPError):
        reason = exc.reason
        if isinstance(reason, BaseException):
            return _classify(reason)
        return _ERR_CONNECT
    if isinstance(exc, (TimeoutError, socket.timeout)):
        return _ERR_TIMEOUT
    if isinstance(exc, socket.gaierror):
        return _ERR_RESOLVE_HOST
    if isinstance(exc, ValueError):
        return _ERR_URL_MALFORMAT
    return _ERR_CONNECT


class HttpManager:
    """Runs requests in the background and hands replies to callbacks.

    A reply is delivered only while its owner is registered with
    :meth:`add_object`. Callbacks run on ``callback_thread`` when one is
    given, otherwise on the thread that finished the request.
    """

    def __init__(
        self,
        callback_thread: TaskThread | None = None,
        fetch: Fetch | None = None,
    ) -> None:
        self._callback_thread = callback_thread
        self._fetch = fetch or urllib_fetch
        self._lock = threading.Lock()
        self._dispatch_lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._pending: list[tuple[HttpRequest, Callback | None]] = []
        self._alive: dict[int, Any] = {}

    @staticmethod
    def url_encode(content: str) -> str:
        """Percent-encode every character except unreserved ones."""
        return urllib.parse.quote(content, safe="")

    @property
    def running(self) -> bool:
        return self._executor is not None

    def start(self) -> None:
        _log.info("HttpManager Start")
        with self._lock:
            if self._executor is not None:
                return
            self._executor = ThreadPoolExecutor(
                max_workers=_MAX_WORKERS, thread_name_prefix="http_thread"
            )
            pending, self._pending = self._pending, []
            for request, callback in pending:
                self._executor.submit(self._perform, request, callback)

    def stop(self) -> None:
        """Stop accepting work and wait for requests in flight."""
        _log.info("HttpManager Stop")
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        _log.info("HttpManager Stop Finished")

    def get(self, request: HttpRequest, callback: Callback | None, owner: Any) -> None:
        self._submit(dataclasses.replace(request, method=HttpMethod.GET, obj=owner), callback)

    def post(self, request: HttpRequest, callback: Callback | None, owner: Any) -> None:
        self._submit(dataclasses.replace(request, method=HttpMethod.POST, obj=owner), callback)

    def add_object(self, obj: Any) -> None:
        """Allow replies for requests owned by ``obj`` to be delivered."""
        self._dispatch(lambda: self._alive.__setitem__(id(obj), obj))

    def remove_object(self, obj: Any) -> None:
        """Stop delivering replies for requests owned by ``obj``."""
        self._dispatch(lambda: self._alive.pop(id(obj), None))

    def _submit(self, request: HttpRequest, callback: Callback | None) -> None:
        with self._lock:
            if self._executor is None:
                self._pending.append((request, callback))
            else:
                self._executor.submit(self._perform, request, callback)

    def _dispatch(self, task: Callable[[], Any]) -> None:
        if self._callback_thread is not None:
            self._callback_thread.post_task(task)
        else:
            with self._dispatch_lock:
                task()

    def _perform(self, request: HttpRequest, callback: Callback | None) -> None:
        started = time.monotonic()
        status, resp = 0, ""
        try:
            status, resp = self._fetch(request)
            error, err_msg = _NO_ERROR
        except Exception as exc:
            error, err_msg = _classify(exc)
        reply = HttpReply(
            duration=int((time.monotonic() - started) * 1000),
            error=error,
            err_msg=err_msg,
            resp=resp,
            url=request.url,
            body=request.body,
            status_code=status,
            form=dict(request.form),
            obj=request.obj,
        )
        self._dispatch(lambda: self._deliver(reply, callback))

    def _deliver(self, reply: HttpReply, callback: Callback | None) -> None:
        owner = self._alive.get(id(reply.obj), _MISSING)
        if callback is not None and owner is reply.obj:
            callback(reply)


_MISSING = object()