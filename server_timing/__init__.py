"""
Monitor back-end performance using the HTTP Server-Timing header.

Usage:
    from server_timing import Timer

    timer = Timer()
    timer.checkpoint("parse_headers")
    timer.checkpoint("get_db_data")
    timer.render()  # "parse_headers;dur=0, get_db_data;dur=0"
"""

from .timer import HEADER_NAME, Measurement, Timer, sanitize_label

__all__ = [
    "HEADER_NAME",
    "Measurement",
    "Timer",
    "sanitize_label",
]
