"""
Line splitting for raw handshake bytes.

    b"GET / HTTP/1.1\\r\\nHost: a\\r\\n\\r\\n"
                    │
                    ▼  split on CRLF, strip, drop empties
    [b"GET / HTTP/1.1", b"Host: a"]

Only the exact two-byte CRLF sequence terminates a line. A bare LF stays
inside its fragment, where the decoder's grammars then reject it.
"""

CRLF = b"\r\n"


def split_lines(raw: bytes) -> list[bytes]:
    """
    Split `raw` into trimmed, non-empty lines.

    Never fails: a buffer with no CRLF comes back as a single line, and an
    empty (or all-whitespace) buffer comes back as [].

    Example:
        split_lines(b"a\\r\\n\\r\\nb\\r\\n")  # [b"a", b"b"]
    """
    lines = []
    for fragment in raw.split(CRLF):
        fragment = fragment.strip()
        if fragment:
            lines.append(fragment)
    return lines
