"""Header tokenizer — cursor over the raw file bytes.

Tokens are runs of non-whitespace bytes. A ``#`` wherever a token could
start opens a comment that runs to the end of the line.
"""

from __future__ import annotations

from pnmkit.errors import HeaderError

WHITESPACE = b" \t\n\r\v\f"
_COMMENT = ord("#")
_NEWLINES = b"\n\r"

# Widest decimal token accepted for a header number
MAX_HEADER_DIGITS = 9


class HeaderTokenizer:
    """Reads header tokens one at a time and tracks the byte cursor."""

    def __init__(self, buf: bytes, pos: int = 0) -> None:
        self.buf = buf
        self.pos = pos

    def _skip_blank(self) -> None:
        buf = self.buf
        n = len(buf)
        while self.pos < n:
            c = buf[self.pos]
            if c in WHITESPACE:
                self.pos += 1
            elif c == _COMMENT:
                while self.pos < n and buf[self.pos] not in _NEWLINES:
                    self.pos += 1
            else:
                return

    def next_token(self, what: str) -> tuple[bytes, int]:
        """Return the next token and the offset it starts at.

        ``what`` names the expected field for the error message.
        """
        self._skip_blank()
        start = self.pos
        n = len(self.buf)
        while self.pos < n and self.buf[self.pos] not in WHITESPACE and self.buf[self.pos] != _COMMENT:
            self.pos += 1
        if self.pos == start:
            raise HeaderError(f"Missing {what}", offset=start)
        return self.buf[start : self.pos], start

    def next_int(self, what: str) -> int:
        token, offset = self.next_token(what)
        if not token.isdigit():
            raise HeaderError(f"Non-numeric {what}: {token!r}", offset=offset)
        if len(token.lstrip(b"0")) > MAX_HEADER_DIGITS:
            raise HeaderError(f"{what.capitalize()} too large: {len(token)} digits", offset=offset)
        return int(token)

    def end_header(self, body_bytes: int | None = None) -> int:
        """Consume the single whitespace byte that ends the header.

        For a binary body of ``body_bytes`` bytes, a ``\\r\\n`` terminator is
        consumed whole when exactly one extra byte would otherwise be left.
        Returns the offset where the body starts.
        """
        buf = self.buf
        if self.pos >= len(buf):
            return self.pos
        if buf[self.pos] not in WHITESPACE:
            raise HeaderError("Header must end with whitespace", offset=self.pos)
        self.pos += 1
        if (
            body_bytes is not None
            and buf[self.pos - 1 : self.pos + 1] == b"\r\n"
            and len(buf) - self.pos == body_bytes + 1
        ):
            self.pos += 1
        return self.pos
