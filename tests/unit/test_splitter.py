"""
Unit tests for CRLF line splitting.
"""

from handshake_http.http.splitter import split_lines


class TestSplitLines:
    """Tests for split_lines()."""

    def test_drops_empty_fragments(self):
        """Consecutive terminators don't produce empty lines."""
        assert split_lines(b"a\r\n\r\nb\r\n") == [b"a", b"b"]

    def test_trims_each_line(self):
        """Leading/trailing whitespace and stray newlines are stripped."""
        assert split_lines(b"  GET / HTTP/1.1 \r\n\n Host: x\t\r\n") == [
            b"GET / HTTP/1.1",
            b"Host: x",
        ]

    def test_no_terminator(self):
        """A buffer without CRLF is one line."""
        assert split_lines(b" just one line ") == [b"just one line"]

    def test_empty_input(self):
        """Empty and whitespace-only buffers yield nothing."""
        assert split_lines(b"") == []
        assert split_lines(b"\r\n\r\n   \r\n") == []

    def test_bare_lf_is_not_a_terminator(self):
        """Only CRLF splits; an inner LF stays in its line."""
        assert split_lines(b"a\nb\r\nc") == [b"a\nb", b"c"]

    def test_order_preserved(self):
        """Lines come back in input order."""
        raw = b"\r\n".join(b"line%d" % i for i in range(10))
        assert split_lines(raw) == [b"line%d" % i for i in range(10)]
