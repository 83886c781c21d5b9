"""
=============================================================================
HANDSHAKE MESSAGE MODEL
=============================================================================

The structured, immutable form of an HTTP-style handshake message.

=============================================================================
MESSAGE ANATOMY
=============================================================================

A handshake message is an HTTP/1.1 header block without a body:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HANDSHAKE MESSAGE STRUCTURE                      │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  REQUEST                         RESPONSE                            │
    │  ───────                         ────────                            │
    │  GET /chat HTTP/1.1\r\n          HTTP/1.1 101 Switching Protocols\r\n│
    │  Host: example.com\r\n           Upgrade: websocket\r\n              │
    │  Upgrade: websocket\r\n          Connection: Upgrade\r\n             │
    │  \r\n                            \r\n                                │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The first line (the START-LINE) becomes an ordered mapping of three fields:

    REQUEST:   {"method": "GET", "resource": "/chat", "version": "1.1"}
    RESPONSE:  {"version": "1.1", "status": "101", "reason": "Switching Protocols"}

Every following line becomes one (name, value) pair in `headers`.

=============================================================================
STORAGE VS LOOKUP
=============================================================================

Header names are stored EXACTLY as they appeared on the wire:

    - "Host" stays "Host", "sec-websocket-key" stays "sec-websocket-key"
    - Repeated headers are kept as separate pairs, in order

Lookups are case-insensitive instead. Keeping storage verbatim means
encode(decode(raw)) reproduces the original names byte-for-byte.

=============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from .encoder import encode_bytes


class MessageKind(str, Enum):
    """Which start-line grammar a message follows."""

    REQUEST = "request"
    RESPONSE = "response"


# Start-line fields per kind, in wire order.
REQUEST_FIELDS: Tuple[str, ...] = ("method", "resource", "version")
RESPONSE_FIELDS: Tuple[str, ...] = ("version", "status", "reason")

START_LINE_FIELDS: Mapping[MessageKind, Tuple[str, ...]] = MappingProxyType({
    MessageKind.REQUEST: REQUEST_FIELDS,
    MessageKind.RESPONSE: RESPONSE_FIELDS,
})

Header = Tuple[str, str]
KindLike = Union[MessageKind, str]


# Whitespace the splitter and header grammar trim off a line.
_OWS = " \t\x0b\x0c"


def _has_line_break(text: str) -> bool:
    return "\r" in text or "\n" in text


@dataclass(frozen=True)
class HTTPMessage:
    """
    A parsed (or hand-built) handshake request or response.

    =========================================================================
    ATTRIBUTES
    =========================================================================

        kind:        MessageKind.REQUEST or MessageKind.RESPONSE.
                     Plain "request"/"response" strings are coerced.

        start_line:  Read-only ordered mapping of the three start-line
                     fields for `kind`. Always complete.

        headers:     Tuple of (name, value) pairs, verbatim, in wire order.

    =========================================================================
    CONSTRUCTION CONTRACT
    =========================================================================

    __post_init__ enforces what the encoder relies on, so encoding never
    fails:

        1. start_line has exactly the fields of `kind`   → ValueError
        2. every field value and header item is a str    → TypeError
        3. no CR or LF anywhere in fields or headers     → ValueError
        4. header names are non-empty                    → ValueError
        5. header names contain no ":"                   → ValueError
        6. header values are non-empty                   → ValueError
        7. no whitespace around header names or values   → ValueError

    Rule 3 blocks header injection: a value like "x\\r\\nEvil: 1" would
    otherwise encode to an extra header the caller never built.
    Rules 5-7 keep encode and decode inverse: ("A:B", "c") would go out
    as "A:B: c" and come back as ("A", "B: c"), and padding would be
    trimmed off by the decoder.

    =========================================================================
    """

    kind: MessageKind
    start_line: Mapping[str, str]
    headers: Tuple[Header, ...] = ()

    def __post_init__(self) -> None:
        kind = MessageKind(self.kind)
        expected = START_LINE_FIELDS[kind]

        start_line = dict(self.start_line)
        if set(start_line) != set(expected):
            raise ValueError(
                f"{kind.value} start-line needs fields {list(expected)}, "
                f"got {sorted(start_line)}"
            )

        for name in expected:
            value = start_line[name]
            if not isinstance(value, str):
                raise TypeError(f"start-line field {name!r} must be str, not {type(value).__name__}")
            if _has_line_break(value):
                raise ValueError(f"start-line field {name!r} contains a line break")

        headers = tuple(self._check_header(pair) for pair in self.headers)

        # Frozen dataclass: normalized values have to go through object.__setattr__
        object.__setattr__(self, "kind", kind)
        object.__setattr__(
            self, "start_line", MappingProxyType({name: start_line[name] for name in expected})
        )
        object.__setattr__(self, "headers", headers)

    @staticmethod
    def _check_header(pair: Iterable[str]) -> Header:
        name, value = pair
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(f"header {name!r} must be a pair of str")
        if not name.strip():
            raise ValueError("header name must not be empty")
        if not value.strip(_OWS):
            raise ValueError(f"header {name!r} has an empty value")
        if _has_line_break(name) or _has_line_break(value):
            raise ValueError(f"header {name!r} contains a line break")
        if ":" in name:
            raise ValueError(f"header name {name!r} contains a colon")
        if name != name.strip(_OWS) or value != value.strip(_OWS):
            raise ValueError(f"header {name!r} has surrounding whitespace")
        return (name, value)

    # MappingProxyType is not hashable, so the generated __hash__ can't be used.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPMessage):
            return NotImplemented
        return (
            self.kind is other.kind
            and dict(self.start_line) == dict(other.start_line)
            and self.headers == other.headers
        )

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.start_line.items()), self.headers))

    def __repr__(self) -> str:
        return (
            f"HTTPMessage(kind={self.kind.value!r}, "
            f"start_line={dict(self.start_line)!r}, headers={list(self.headers)!r})"
        )

    # =========================================================================
    # PROPERTIES - start-line fields, None where the kind does not define one
    # =========================================================================

    @property
    def is_request(self) -> bool:
        return self.kind is MessageKind.REQUEST

    @property
    def is_response(self) -> bool:
        return self.kind is MessageKind.RESPONSE

    @property
    def method(self) -> Optional[str]:
        return self.start_line.get("method")

    @property
    def resource(self) -> Optional[str]:
        return self.start_line.get("resource")

    @property
    def version(self) -> Optional[str]:
        return self.start_line.get("version")

    @property
    def status(self) -> Optional[str]:
        return self.start_line.get("status")

    @property
    def reason(self) -> Optional[str]:
        return self.start_line.get("reason")

    # =========================================================================
    # ACCESSOR METHODS
    # =========================================================================

    def get_start_line_value(self, field_name: str) -> Optional[str]:
        """
        Get a start-line field by name.

        Returns None when `field_name` is not a field of this kind, e.g.
        "status" on a request. Never raises.
        """
        return self.start_line.get(field_name)

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the first header value whose name matches `name` (any case).

        Linear scan over `headers`. Handshake messages carry a dozen headers
        at most, so no index is built.

        Example:
            message.get_header("sec-websocket-key")
            # matches a stored "Sec-WebSocket-Key"
        """
        wanted = name.lower()
        for header_name, value in self.headers:
            if header_name.lower() == wanted:
                return value
        return default

    def get_header_values(self, name: str) -> list[str]:
        """Get every value for `name` (any case), in wire order."""
        wanted = name.lower()
        return [value for header_name, value in self.headers if header_name.lower() == wanted]

    def has_header(self, name: str) -> bool:
        wanted = name.lower()
        return any(header_name.lower() == wanted for header_name, _ in self.headers)

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Serialize to wire bytes. See encoder.encode_bytes."""
        return encode_bytes(self, encoding=encoding)


def build(
    kind: KindLike,
    start_line: Mapping[str, str],
    headers: Iterable[Header] = (),
) -> HTTPMessage:
    """
    Construct an HTTPMessage from its parts.

    Args:
        kind: MessageKind (or "request"/"response").
        start_line: Mapping with exactly the start-line fields of `kind`.
        headers: Iterable of (name, value) pairs, kept in the given order.

    Returns:
        A new immutable HTTPMessage.

    Raises:
        ValueError / TypeError: If the parts break the construction contract.
    """
    return HTTPMessage(kind=MessageKind(kind), start_line=start_line, headers=tuple(headers))
