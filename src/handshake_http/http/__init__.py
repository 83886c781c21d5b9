"""
=============================================================================
HANDSHAKE MESSAGE CODEC
=============================================================================

Turns raw handshake bytes into structured messages and back.

=============================================================================
MODULE COMPONENTS
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   raw bytes ──► splitter ──► decoder ──► HTTPMessage ──► encoder    │
    │                                              │                       │
    │                                              ▼                       │
    │                                          accessors                   │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

    splitter.py    CRLF line splitting
    decoder.py     Start-line and header grammars, MalformedMessageError
    message.py     Immutable HTTPMessage, MessageKind, build()
    encoder.py     HTTPMessage → wire fragments
    accessors.py   Start-line / case-insensitive header lookups

=============================================================================
WIRE FORMAT
=============================================================================

    REQUEST:                          RESPONSE:
    ─────────                         ──────────
    GET / HTTP/1.1\r\n                HTTP/1.1 101 Switching Protocols\r\n
    Header: Value\r\n                 Header: Value\r\n
    \r\n                              \r\n

Key points:
- Lines end with CRLF (\r\n)
- No body: the header block ends at the empty line
- Header names are case-insensitive for lookup, verbatim in storage

=============================================================================
"""

from .message import (
    HTTPMessage,
    MessageKind,
    REQUEST_FIELDS,
    RESPONSE_FIELDS,
    build,
)
from .splitter import split_lines
from .decoder import (
    MessageDecoder,
    MalformedMessageError,
    MalformedMessage,
    decode,
)
from .encoder import encode, encode_bytes
from .accessors import (
    get_start_line_value,
    get_header_value,
    get_header_values,
    has_header,
)

__all__ = [
    # Model
    "HTTPMessage",
    "MessageKind",
    "REQUEST_FIELDS",
    "RESPONSE_FIELDS",
    "build",

    # Decoding
    "split_lines",
    "MessageDecoder",
    "MalformedMessageError",
    "MalformedMessage",
    "decode",

    # Encoding
    "encode",
    "encode_bytes",

    # Lookups
    "get_start_line_value",
    "get_header_value",
    "get_header_values",
    "has_header",
]
