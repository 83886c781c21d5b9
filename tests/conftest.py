"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from handshake_http import HTTPMessage, MessageKind, ParserConfig, Grammar, build


@pytest.fixture
def sample_request() -> bytes:
    """Sample opening-handshake request."""
    return (
        b"GET / HTTP/1.1\r\n"
        b"Host: example.com\r\n"
        b"Upgrade: websocket\r\n"
        b"Connection: Upgrade\r\n"
        b"Sec-WebSocket-Key: dGhlIHNhbXBsZSBub25jZQ==\r\n"
        b"Sec-WebSocket-Version: 13\r\n"
        b"\r\n"
    )


@pytest.fixture
def sample_response() -> bytes:
    """Sample opening-handshake response."""
    return (
        b"HTTP/1.1 101 Switching Protocols\r\n"
        b"Upgrade: websocket\r\n"
        b"Connection: Upgrade\r\n"
        b"Sec-WebSocket-Accept: s3pPLMBiTxaQ9kYGzzhZRbK+xOo=\r\n"
        b"\r\n"
    )


@pytest.fixture
def request_message() -> HTTPMessage:
    """A request built directly, without decoding."""
    return build(
        MessageKind.REQUEST,
        {"method": "GET", "resource": "/", "version": "1.1"},
        [("Host", "example.com"), ("Upgrade", "websocket")],
    )


@pytest.fixture
def response_message() -> HTTPMessage:
    """A response built directly, without decoding."""
    return build(
        MessageKind.RESPONSE,
        {"version": "1.1", "status": "101", "reason": "Switching Protocols"},
        [("Upgrade", "websocket"), ("Connection", "Upgrade")],
    )


@pytest.fixture
def general_config() -> ParserConfig:
    """Config with the widened start-line grammar."""
    return ParserConfig(grammar=Grammar.GENERAL)
