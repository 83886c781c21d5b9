"""
=============================================================================
PARSER CONFIGURATION
=============================================================================

Tunables for decoding handshake messages.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. Explicit ParserConfig(...) passed to decode()/MessageDecoder   │
    │      └── ParserConfig(grammar=Grammar.GENERAL)                      │
    │                                                                      │
    │   2. Environment variables via ParserConfig.from_env()              │
    │      └── HANDSHAKE_HTTP_GRAMMAR=general                             │
    │                                                                      │
    │   3. Defaults (below)                                               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

There is no global parser: the config travels with each call.

=============================================================================
GRAMMARS
=============================================================================

    STRICT   Request line is "GET <one char> HTTP/x.y".
             Response reason is letters, digits and spaces only.
             This is what the handshake peers historically accepted.

    GENERAL  Request method is any RFC 7230 token, resource is any
             non-whitespace run. Response reason is any printable text.

=============================================================================
"""

import codecs
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Grammar(str, Enum):
    """Start-line grammar used by the decoder."""

    STRICT = "strict"
    GENERAL = "general"


DEFAULT_MAX_MESSAGE_SIZE = 64 * 1024  # 64 KB


@dataclass
class ParserConfig:
    """
    Configuration for MessageDecoder.

    =========================================================================
    FIELDS
    =========================================================================

        grammar            Grammar.STRICT (default) or Grammar.GENERAL.

        max_message_size   Largest raw buffer accepted, in bytes.
                           None disables the check. A handshake header
                           block is a few hundred bytes, so 64 KB is
                           already generous.

        encoding           Codec for turning lines into str. Undecodable
                           bytes are replaced, not rejected.

    =========================================================================
    """

    grammar: Grammar = Grammar.STRICT
    max_message_size: Optional[int] = DEFAULT_MAX_MESSAGE_SIZE
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.grammar = Grammar(self.grammar)

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        HANDSHAKE_HTTP_GRAMMAR            strict | general (default: strict)
        HANDSHAKE_HTTP_MAX_MESSAGE_SIZE   Bytes, 0 or empty = no limit
                                          (default: 65536)
        HANDSHAKE_HTTP_ENCODING           Codec name (default: utf-8)

        =====================================================================
        """
        raw_size = os.getenv("HANDSHAKE_HTTP_MAX_MESSAGE_SIZE", str(DEFAULT_MAX_MESSAGE_SIZE))
        max_size = int(raw_size) if raw_size.strip() else 0

        return cls(
            grammar=Grammar(os.getenv("HANDSHAKE_HTTP_GRAMMAR", "strict").strip().lower()),
            max_message_size=max_size or None,
            encoding=os.getenv("HANDSHAKE_HTTP_ENCODING", "utf-8"),
        )

    def validate(self) -> None:
        """Fail fast on values the decoder cannot work with."""
        # Fields may have been reassigned since __post_init__
        self.grammar = Grammar(self.grammar)

        if self.max_message_size is not None and self.max_message_size <= 0:
            raise ValueError("max_message_size must be > 0 or None")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from None
