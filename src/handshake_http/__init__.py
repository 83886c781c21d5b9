"""
=============================================================================
HANDSHAKE-HTTP: HTTP-STYLE HANDSHAKE MESSAGE PARSING
=============================================================================

Parses and serializes the HTTP-style messages exchanged while opening a
protocol connection, such as the WebSocket opening handshake.

=============================================================================
QUICK START
=============================================================================

    from handshake_http import decode, encode_bytes, get_header_value

    request = decode(
        b"GET / HTTP/1.1\r\n"
        b"Host: example.com\r\n"
        b"Upgrade: websocket\r\n"
        b"\r\n",
        "request",
    )

    request.start_line["method"]                # "GET"
    get_header_value("upgrade", request)        # "websocket"
    encode_bytes(request)                       # the same bytes back

=============================================================================
PROJECT STRUCTURE
=============================================================================

    handshake_http/
    ├── __init__.py          # Public API
    ├── config.py            # ParserConfig, Grammar
    └── http/
        ├── message.py       # HTTPMessage, MessageKind, build()
        ├── splitter.py      # CRLF line splitting
        ├── decoder.py       # MessageDecoder, decode(), MalformedMessageError
        ├── encoder.py       # encode(), encode_bytes()
        └── accessors.py     # get_header_value(), get_start_line_value()

=============================================================================
WHAT THIS IS NOT
=============================================================================

No sockets, no TLS, no bodies, no streaming. The caller buffers bytes
until a full header block has arrived, then hands it over.

=============================================================================
"""

__version__ = "1.0.0"

from .config import Grammar, ParserConfig
from .http import (
    HTTPMessage,
    MessageKind,
    MessageDecoder,
    MalformedMessageError,
    MalformedMessage,
    build,
    decode,
    encode,
    encode_bytes,
    split_lines,
    get_start_line_value,
    get_header_value,
    get_header_values,
    has_header,
)

__all__ = [
    "Grammar",
    "ParserConfig",
    "HTTPMessage",
    "MessageKind",
    "MessageDecoder",
    "MalformedMessageError",
    "MalformedMessage",
    "build",
    "decode",
    "encode",
    "encode_bytes",
    "split_lines",
    "get_start_line_value",
    "get_header_value",
    "get_header_values",
    "has_header",
    "__version__",
]
