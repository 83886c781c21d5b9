"""
=============================================================================
HANDSHAKE MESSAGE ENCODER
=============================================================================

Serializes an HTTPMessage back into wire fragments.

=============================================================================
SERIALIZATION FORMAT
=============================================================================

    REQUEST                               RESPONSE
    ───────                               ────────
    GET /chat HTTP/1.1\r\n                HTTP/1.1 101 Switching Protocols\r\n   ← start-line
    Host: example.com\r\n                 Upgrade: websocket\r\n                 ← one per header
    \r\n                                  \r\n                                   ← terminator

Each line is its own fragment, so a transport can write them one by one:

    for fragment in encode(message):
        sock.sendall(fragment)

or join them once with encode_bytes().

Nothing here can fail: HTTPMessage's constructor already guarantees a
complete start-line, no CR/LF inside any field, and header names and
values the decoder reads back unchanged.

=============================================================================
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .message import HTTPMessage


CRLF = "\r\n"


def _start_line(message: "HTTPMessage") -> str:
    fields = message.start_line
    if message.is_request:
        return f"{fields['method']} {fields['resource']} HTTP/{fields['version']}"
    return f"HTTP/{fields['version']} {fields['status']} {fields['reason']}"


def encode(message: "HTTPMessage", encoding: str = "utf-8") -> list[bytes]:
    """
    Encode a message into its ordered wire fragments.

    Args:
        message: Request or response to serialize.
        encoding: Text encoding for every fragment.

    Returns:
        [start-line + CRLF, header + CRLF, ..., CRLF]
    """
    lines = [_start_line(message)]
    lines.extend(f"{name}: {value}" for name, value in message.headers)
    lines.append("")  # Empty line ends the header block

    return [(line + CRLF).encode(encoding) for line in lines]


def encode_bytes(message: "HTTPMessage", encoding: str = "utf-8") -> bytes:
    """Encode a message as one contiguous bytes object."""
    return b"".join(encode(message, encoding=encoding))
