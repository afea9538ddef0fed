# xrtcsdk

Building blocks for a client that pushes a video stream to a real-time
streaming server. The package uses only the standard library.

## Modules

- `xrtcsdk.json_value`: `JsonValue`, `JsonObject`, `JsonArray` and the
  `JsonType` enum. The `to_bool`, `to_int`, `to_double`, `to_string`,
  `to_array` and `to_object` accessors return a default when the held type
  does not match. Integers are held as unsigned 64-bit numbers.
  `JsonValue.to_json()` writes compact JSON with sorted keys and a trailing
  newline, and returns `""` for null, empty arrays and empty objects.
  `JsonValue.from_json()` accepts a top-level object or array. Any other
  document, or text that does not parse, gives a null value. Missing keys and
  out-of-range indexes read as null.
- `xrtcsdk.urls`: `parse_url()` splits an address such as
  `xrtc://host/push?uid=u1&streamName=s1` into a frozen `ParsedUrl` with
  `protocol`, `host`, `action` and `params`. It raises `ValueError` when the
  protocol, host or action cannot be found. Query fields that are not a single
  `key=value` pair are skipped.
- `xrtcsdk.tasks`: `TaskThread` is a named thread that runs posted callables
  one at a time, in order. It has `start()`, `stop()` and `post_task()`, and
  can be used as a context manager. `stop()` runs the tasks already queued
  before the thread ends. `post_task()` returns `False` after a stop.
- `xrtcsdk.http`: `HttpMethod`, `HttpRequest`, `HttpReply`, `HttpManager`
  and `urllib_fetch`. `HttpManager.get()` and `HttpManager.post()` run
  requests on a thread pool. A reply reaches its callback only while its
  owner is registered with `add_object()`; `remove_object()` stops delivery.
  Requests made before `start()` wait until the manager starts. Failures are
  reported in the reply's `error` and `err_msg` fields, not raised. For
  example, code 28 means a timeout and code 6 means the host could not be
  resolved. You can pass a `fetch` callable to replace the urllib transport.
  `HttpManager.url_encode()` percent-encodes everything except unreserved
  characters.
- `xrtcsdk.engine_global`: `XRTCGlobal.instance()` returns the one shared
  holder of `api_thread`, `worker_thread`, `network_thread`, a started
  `http_manager` and the engine observer. Set the observer with
  `register_engine_observer()`.
- `xrtcsdk.media_frame`: `MainMediaType`, `SubMediaType`, `AudioFormat`,
  `VideoFormat`, `MediaFormat` and `MediaFrame`. A frame owns one buffer of
  `max_size` bytes. `plane(i)` gives a writable view of the i-th plane, laid
  out after the planes before it, based on `data_len`.
- `xrtcsdk.pins`: `InPin` and `OutPin`. `OutPin.connect_to()` succeeds only
  when the input pin accepts the output pin's format. A `COMMON` main type or
  sub type matches anything.
- `xrtcsdk.media_chain`: the abstract `MediaObject` and `MediaChain`. A chain
  adds objects and connects every output pin of one object to an input pin
  of the next. It sets them all up with a JSON configuration, starts them in
  order (stopping at the first failure), and stops them.
- `xrtcsdk.video_source`: `XRTCVideoSource` is a chain stage with one I420
  video output pin. `on_frame()` pushes a frame down the chain.

## What it does not do

The package has no camera capture, no video encoder, no on-screen preview and
no peer connection. It cannot send media to a server by itself. It provides
the pieces that such stages plug into: media chains, pins, frames, signaling
URLs, JSON handling and background HTTP requests.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from xrtcsdk.json_value import JsonValue
from xrtcsdk.urls import parse_url

url = parse_url("xrtc://example.com/push?uid=u1&streamName=demo")
print(url.host, url.action, url.params["streamName"])

value = JsonValue.from_json('{"errNo": 0, "data": {"sdp": "v=0"}}')
obj = value.to_object()
print(obj["errNo"].to_int(), obj["data"].to_object()["sdp"].to_string())
```