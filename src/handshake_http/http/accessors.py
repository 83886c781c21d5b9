"""
Read-only field lookups over an HTTPMessage.

Free-function forms of the HTTPMessage accessor methods, for callers that
pass messages around as plain values:

    get_header_value("upgrade", message)        # "websocket" or None
    get_start_line_value("status", message)     # "101" or None

Misses return None; absence of a header is an expected outcome, not an
error.
"""

from typing import Optional

from .message import HTTPMessage


def get_start_line_value(field_name: str, message: HTTPMessage) -> Optional[str]:
    """Value of start-line field `field_name`, or None if `message.kind` has no such field."""
    return message.get_start_line_value(field_name)


def get_header_value(name: str, message: HTTPMessage) -> Optional[str]:
    """First value whose header name equals `name` case-insensitively, or None."""
    return message.get_header(name)


def get_header_values(name: str, message: HTTPMessage) -> list[str]:
    return message.get_header_values(name)


def has_header(name: str, message: HTTPMessage) -> bool:
    return message.has_header(name)
