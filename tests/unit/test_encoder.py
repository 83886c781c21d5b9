"""
Unit tests for handshake message encoding.
"""

import pytest

from handshake_http import Grammar, ParserConfig
from handshake_http.http.decoder import decode
from handshake_http.http.encoder import encode, encode_bytes
from handshake_http.http.message import HTTPMessage, MessageKind, build


class TestEncode:
    """Tests for encode() and encode_bytes()."""

    def test_request_fragments(self, request_message: HTTPMessage):
        """One fragment per line, header block terminator last."""
        assert encode(request_message) == [
            b"GET / HTTP/1.1\r\n",
            b"Host: example.com\r\n",
            b"Upgrade: websocket\r\n",
            b"\r\n",
        ]

    def test_response_fragments(self, response_message: HTTPMessage):
        assert encode(response_message) == [
            b"HTTP/1.1 101 Switching Protocols\r\n",
            b"Upgrade: websocket\r\n",
            b"Connection: Upgrade\r\n",
            b"\r\n",
        ]

    def test_no_headers(self):
        message = build("response", {"version": "1.0", "status": "200", "reason": "OK"})
        assert encode_bytes(message) == b"HTTP/1.0 200 OK\r\n\r\n"

    def test_encode_bytes_joins_fragments(self, request_message: HTTPMessage):
        assert encode_bytes(request_message) == b"".join(encode(request_message))
        assert request_message.to_bytes() == encode_bytes(request_message)

    def test_header_order_and_case_verbatim(self):
        """Headers go out exactly as stored, duplicates included."""
        message = build(
            MessageKind.REQUEST,
            {"method": "GET", "resource": "/", "version": "1.1"},
            [("b-second", "2"), ("A-First", "1"), ("b-second", "3")],
        )

        assert encode(message)[1:-1] == [
            b"b-second: 2\r\n",
            b"A-First: 1\r\n",
            b"b-second: 3\r\n",
        ]

    def test_non_ascii_encoding(self):
        message = build(
            MessageKind.REQUEST,
            {"method": "GET", "resource": "/", "version": "1.1"},
            [("X-Name", "café")],
        )

        assert encode(message)[1] == "X-Name: café\r\n".encode("utf-8")
        assert encode(message, encoding="latin-1")[1] == b"X-Name: caf\xe9\r\n"

    def test_encode_does_not_mutate(self, request_message: HTTPMessage):
        before = repr(request_message)
        encode(request_message)
        assert repr(request_message) == before


class TestRoundTrip:
    """decode(encode(m)) == m for well-formed messages."""

    @pytest.mark.parametrize("headers", [
        [("Host", "example.com:8080")],
        [("X-Spaced", "a  b\tc")],
        [("X-Colons", "a: b: c")],
        [("x-lower", "1"), ("X-LOWER", "2"), ("x-lower", "3")],
        [("X-Punct", "!#$%&'*+.^_`|~")],
    ])
    def test_edge_case_headers_round_trip(self, headers):
        """Every header the constructor accepts reads back unchanged."""
        message = build(
            MessageKind.REQUEST,
            {"method": "GET", "resource": "/", "version": "1.1"},
            headers,
        )

        assert decode(encode_bytes(message), MessageKind.REQUEST) == message

    def test_request_round_trip(self, request_message: HTTPMessage):
        assert decode(encode_bytes(request_message), MessageKind.REQUEST) == request_message

    def test_response_round_trip(self, response_message: HTTPMessage):
        assert decode(encode_bytes(response_message), MessageKind.RESPONSE) == response_message

    def test_decoded_bytes_reencode_identically(self, sample_request: bytes, sample_response: bytes):
        assert encode_bytes(decode(sample_request, "request")) == sample_request
        assert encode_bytes(decode(sample_response, "response")) == sample_response

    @pytest.mark.parametrize("method, resource", [
        ("POST", "/api/chat"),
        ("OPTIONS", "*"),
        ("GET", "/chat?room=lobby&user=1"),
    ])
    def test_general_grammar_round_trip(self, method: str, resource: str):
        message = build(
            MessageKind.REQUEST,
            {"method": method, "resource": resource, "version": "1.1"},
            [("Host", "example.com:8080"), ("Origin", "http://example.com")],
        )
        config = ParserConfig(grammar=Grammar.GENERAL)

        assert decode(encode_bytes(message), MessageKind.REQUEST, config) == message
