"""
Server-Timing accumulator.

Records named, sequential durations while a request is handled and renders
them as a Server-Timing header value, visible in browser DevTools.

Usage:
    from server_timing.timer import Timer

    timer = Timer()
    # ... parse headers
    timer.checkpoint("parse headers")
    # ... query the database
    timer.checkpoint("get_db_data")

    response.headers[Timer.header_name()] = timer.render()
    # "parse_headers;dur=0, get_db_data;dur=0"

See: https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Server-Timing
"""

import time
from dataclasses import dataclass, field
from typing import Any, Iterator, List

import regex

HEADER_NAME = "Server-Timing"

_NS_PER_MS = 1_000_000

# Anything outside the Unicode Alphabetic and Numeric properties
_NOT_ALPHANUMERIC = regex.compile(r"[^\p{Alphabetic}\p{N}]")


def _now() -> int:
    """Current monotonic clock reading, in nanoseconds."""
    return time.monotonic_ns()


def sanitize_label(label: Any) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return _NOT_ALPHANUMERIC.sub("_", str(label))


@dataclass(frozen=True)
class Measurement:
    """A single named duration, in whole milliseconds."""
    label: Any
    duration: int

    def render(self) -> str:
        return f"{sanitize_label(self.label)};dur={self.duration}"


@dataclass
class Timer:
    """
    Accumulates measurements, each counted from the previous checkpoint.

    Not safe for concurrent use; bind one Timer per request.
    """
    last: int = field(default_factory=lambda: _now())
    entries: List[Measurement] = field(default_factory=list)

    def checkpoint(self, label: Any) -> None:
        """
        Record the time elapsed since the last checkpoint (or creation).

        The label is stored as given and only sanitized when rendered.
        Sub-millisecond remainders are truncated.
        """
        now = _now()
        duration = (now - self.last) // _NS_PER_MS
        self.last = now
        self.entries.append(Measurement(label=label, duration=duration))

    @staticmethod
    def header_name() -> str:
        return HEADER_NAME

    def render(self) -> str:
        """Return the Server-Timing header value ("" when nothing was recorded)."""
        return ", ".join(entry.render() for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self.entries)

    def __str__(self) -> str:
        return self.render()
