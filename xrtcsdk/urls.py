"""Parsing of stream URLs such as ``xrtc://host/push?uid=a&streamName=b``."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedUrl:
    """The parts of a stream URL."""

    protocol: str
    host: str
    action: str
    params: dict[str, str] = field(default_factory=dict)


def _split_first(source: str, delimiter: str) -> tuple[str, str] | None:
    """Split at the first delimiter, skipping any run of repeated delimiters."""
    left = source.find(delimiter)
    if left < 0:
        return None
    right = left + 1
    while right < len(source) and source[right] == delimiter:
        right += 1
    return source[:left], source[right:]


def _tokenize(source: str, delimiter: str) -> list[str]:
    return [token for token in source.split(delimiter) if token]


def parse_url(url: str) -> ParsedUrl:
    """Split a URL into protocol, host, action and query parameters.

    Query fields that are not exactly one key and one value are ignored.
    Raises ValueError when the protocol, host or action cannot be found.
    """
    parts = _split_first(url, ":")
    if parts is None:
        raise ValueError(f"parse protocol failed, url: {url}")
    protocol, rest = parts

    if len(rest) < 2:
        raise ValueError(f"parse host failed, url: {url}")
    rest = rest[2:]

    parts = _split_first(rest, "/")
    if parts is None:
        raise ValueError(f"parse host failed, url: {url}")
    host, rest = parts

    parts = _split_first(rest, "?")
    if parts is None:
        raise ValueError(f"parse action failed, url: {url}")
    action, rest = parts

    params: dict[str, str] = {}
    for item in _tokenize(rest, "&"):
        pair = _tokenize(item, "=")
        if len(pair) == 2:
            params[pair[0]] = pair[1]

    return ParsedUrl(protocol, host, action, params)