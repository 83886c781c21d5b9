"""
=============================================================================
HANDSHAKE MESSAGE DECODER
=============================================================================

Parses a raw header block into an HTTPMessage.

=============================================================================
DECODER PIPELINE
=============================================================================

        Raw bytes (complete header block, no body)
              │
              ▼
        ┌───────────────────────────────────────────────────────────────────┐
        │  MESSAGE DECODER                                                  │
        ├───────────────────────────────────────────────────────────────────┤
        │                                                                    │
        │  1. Size Check ──────────────────────────────────────────────────►│
        │     │  Too large? → MalformedMessageError                         │
        │     ▼                                                             │
        │  2. Split Lines (splitter.split_lines) ─────────────────────────►│
        │     │  No lines? → MalformedMessageError                          │
        │     ▼                                                             │
        │  3. Parse Start-Line (request or response grammar) ─────────────►│
        │     │  No match? → MalformedMessageError                          │
        │     ▼                                                             │
        │  4. Parse Headers ("Name: Value", order preserved) ─────────────►│
        │     │  Any bad line? → MalformedMessageError                      │
        │     ▼                                                             │
        │  5. Build HTTPMessage ──────────────────────────────────────────►│
        │                                                                    │
        └───────────────────────────────────────────────────────────────────┘

All-or-nothing: one bad header invalidates the whole message. There is no
partial result.

=============================================================================
REGEX PATTERNS EXPLAINED
=============================================================================

All patterns are used with fullmatch(), so trailing garbage is rejected,
and are compiled with IGNORECASE: "get / http/1.1" is a valid request line.

STRICT_REQUEST_PATTERN:    (GET)\\s+(\\S)\\s+HTTP/([0-9]\\.[0-9])

    (GET)           - Method, literally GET
    (\\S)            - Resource, exactly ONE non-whitespace char ("/")
    ([0-9]\\.[0-9])   - Version without the "HTTP/" prefix ("1.1")

GENERAL_REQUEST_PATTERN:   (<token>)\\s+(\\S+)\\s+HTTP/([0-9]\\.[0-9])

    (<token>)       - Any RFC 7230 token (GET, POST, OPTIONS, ...)
    (\\S+)           - Any non-whitespace run ("/chat?room=1")

STRICT_RESPONSE_PATTERN:   HTTP/([0-9]\\.[0-9])\\s([0-9]{3})\\s([A-Za-z0-9 ]+)

    ([0-9]{3})      - Status, exactly three digits
    ([A-Za-z0-9 ]+) - Reason phrase, letters/digits/spaces

GENERAL_RESPONSE_PATTERN:  reason is any printable text (tabs allowed)

HEADER_PATTERN:            ([^:\\r\\n]*[^:\\s])\\s*:\\s*(\\S[^\\r\\n]*)

    ([^:\\r\\n]*[^:\\s]) - Name: everything before the FIRST colon,
                        ending in a non-space character
    \\s*:\\s*          - Colon with optional surrounding whitespace
    (\\S[^\\r\\n]*)      - Value: rest of the line, at least one visible char

Splitting at the first colon keeps "Host: example.com:8080" intact.

=============================================================================
"""

import logging
import re
from typing import Optional, Pattern, Union

from ..config import Grammar, ParserConfig
from .message import (
    Header,
    HTTPMessage,
    KindLike,
    MessageKind,
    START_LINE_FIELDS,
)
from .splitter import split_lines


logger = logging.getLogger(__name__)


class MalformedMessageError(ValueError):
    """
    Raised when a handshake message does not match its grammar.

    This is the ONLY decode failure. The attributes below are diagnostics
    for logs and debugging; callers should not branch on them.

        reason:       Short description ("invalid start-line", ...)
        line:         The offending line as text, if any
        line_number:  0-based index of that line among the split lines
    """

    def __init__(
        self,
        reason: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        message = reason if line is None else f"{reason}: {line!r}"
        super().__init__(message)
        self.reason = reason
        self.line = line
        self.line_number = line_number


# Name used throughout the handshake documentation.
MalformedMessage = MalformedMessageError


_FLAGS = re.IGNORECASE | re.ASCII

STRICT_REQUEST_PATTERN = re.compile(r"(GET)\s+(\S)\s+HTTP/([0-9]\.[0-9])", _FLAGS)
GENERAL_REQUEST_PATTERN = re.compile(
    r"([!#$%&'*+.^_`|~0-9A-Za-z-]+)\s+(\S+)\s+HTTP/([0-9]\.[0-9])", _FLAGS
)
STRICT_RESPONSE_PATTERN = re.compile(
    r"HTTP/([0-9]\.[0-9])\s([0-9]{3})\s([A-Za-z0-9 ]+)", _FLAGS
)
GENERAL_RESPONSE_PATTERN = re.compile(
    r"HTTP/([0-9]\.[0-9])\s+([0-9]{3})\s+([^\x00-\x08\x0a-\x1f\x7f]+)", _FLAGS
)
HEADER_PATTERN = re.compile(r"([^:\r\n]*[^:\s])\s*:\s*(\S[^\r\n]*)", _FLAGS)

START_LINE_PATTERNS = {
    (Grammar.STRICT, MessageKind.REQUEST): STRICT_REQUEST_PATTERN,
    (Grammar.GENERAL, MessageKind.REQUEST): GENERAL_REQUEST_PATTERN,
    (Grammar.STRICT, MessageKind.RESPONSE): STRICT_RESPONSE_PATTERN,
    (Grammar.GENERAL, MessageKind.RESPONSE): GENERAL_RESPONSE_PATTERN,
}


class MessageDecoder:
    """
    Decodes raw handshake bytes into HTTPMessage objects.

    A decoder only holds its (validated) ParserConfig, so one instance can
    be shared freely between threads.

    Example:
        decoder = MessageDecoder(ParserConfig(grammar=Grammar.GENERAL))
        message = decoder.decode(raw, MessageKind.REQUEST)
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.config.validate()

    def decode(self, raw: Union[bytes, bytearray, memoryview], kind: KindLike) -> HTTPMessage:
        """
        Decode one complete header block.

        Args:
            raw: Bytes of the start-line and headers, CRLF-separated.
            kind: MessageKind.REQUEST or MessageKind.RESPONSE (or the
                  strings "request"/"response").

        Returns:
            The parsed HTTPMessage, headers in wire order.

        Raises:
            MalformedMessageError: If the size limit is exceeded, the
                start-line doesn't match, or any header line is invalid.
            ValueError: If `kind` is not a known message kind.
        """
        kind = MessageKind(kind)
        raw = bytes(raw)

        try:
            # -----------------------------------------------------------------
            # Security: bound the work done on a single buffer
            # -----------------------------------------------------------------
            limit = self.config.max_message_size
            if limit is not None and len(raw) > limit:
                raise MalformedMessageError(f"message too large: {len(raw)} > {limit} bytes")

            lines = [
                line.decode(self.config.encoding, errors="replace")
                for line in split_lines(raw)
            ]
            if not lines:
                raise MalformedMessageError("missing start-line")

            start_line = self._parse_start_line(lines[0], kind)
            headers = self._parse_headers(lines[1:])
        except MalformedMessageError as e:
            logger.debug(
                f"Rejected {kind.value} ({e.reason}, line {e.line_number}): {e.line!r}"
            )
            raise

        logger.debug(f"Decoded {kind.value} with {len(headers)} header(s)")
        return HTTPMessage(kind=kind, start_line=start_line, headers=headers)

    def _pattern_for(self, kind: MessageKind) -> Pattern[str]:
        return START_LINE_PATTERNS[(self.config.grammar, kind)]

    def _parse_start_line(self, line: str, kind: MessageKind) -> dict[str, str]:
        """
        Parse the start-line into its three named fields.

        Returns:
            {"method", "resource", "version"} for requests,
            {"version", "status", "reason"} for responses.
        """
        match = self._pattern_for(kind).fullmatch(line)
        if not match:
            raise MalformedMessageError(f"invalid {kind.value} start-line", line, 0)

        return dict(zip(START_LINE_FIELDS[kind], match.groups()))

    def _parse_headers(self, lines: list[str]) -> tuple[Header, ...]:
        """
        Parse header lines into (name, value) pairs.

        Names are trimmed but keep their case. Values are taken as matched.
        Duplicates are kept. Order follows the wire.
        """
        headers = []
        for index, line in enumerate(lines, start=1):
            match = HEADER_PATTERN.fullmatch(line)
            if not match:
                raise MalformedMessageError("invalid header line", line, index)

            name, value = match.groups()
            headers.append((name.strip(), value))

        return tuple(headers)


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def decode(
    raw: Union[bytes, bytearray, memoryview],
    kind: KindLike,
    config: Optional[ParserConfig] = None,
) -> HTTPMessage:
    """
    Decode a handshake message in one call.

    Creates a MessageDecoder and decodes `raw` with it. Use MessageDecoder
    directly to reuse a validated config across many messages.

    Example:
        message = decode(b"GET / HTTP/1.1\\r\\nHost: example.com\\r\\n\\r\\n", "request")
        message.start_line["resource"]  # "/"
    """
    return MessageDecoder(config).decode(raw, kind)
