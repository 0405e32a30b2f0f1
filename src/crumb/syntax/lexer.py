"""Forward-only tokenizer for ``Cookie`` header values.

At each cursor position the categories are tried in a fixed order and
the first match wins:

1. a lone ``" "`` not followed by another space → ``SPACE``
2. ``=``, ``;``, ``"`` → ``EQUALS``, ``SEMICOLON``, ``DOUBLE_QUOTE``
3. a maximal run of spaces and tabs → ``WHITESPACE``
4. a maximal run of cookie octets → ``TOKEN_OR_COOKIE_OCTETS``, or
   ``COOKIE_OCTETS`` if any character in it is not a token character

A character none of these accept ends the token stream. The lexer does
not fail; the grammar notices that the cursor stopped short of the end.
"""

from collections.abc import Iterator

from crumb.syntax.tokens import (
    COOKIE_ONLY_OCTET,
    OCTET_RUN,
    OWS_RUN,
    Token,
    TokenKind,
)

_SINGLE_CHAR_TOKENS = {
    "=": TokenKind.EQUALS,
    ";": TokenKind.SEMICOLON,
    '"': TokenKind.DOUBLE_QUOTE,
}


class CookieLexer(Iterator[Token]):
    """Iterate over the tokens of *data*, left to right."""

    __slots__ = ("_cursor", "_data")

    def __init__(self, data: str) -> None:
        self._data = data
        self._cursor = 0

    @property
    def data(self) -> str:
        return self._data

    @property
    def cursor(self) -> int:
        """Offset of the first character not yet consumed."""
        return self._cursor

    @property
    def exhausted(self) -> bool:
        """True once every character of the input has been tokenized."""
        return self._cursor >= len(self._data)

    def __iter__(self) -> "CookieLexer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def __str__(self) -> str:
        return f"Cookie Lexer, cursor at position {self._cursor}."

    def next_token(self) -> Token | None:
        """Consume and return the next token, or ``None`` when no token starts here."""
        data, pos = self._data, self._cursor
        if pos >= len(data):
            return None

        char = data[pos]
        if char == " " and data[pos + 1 : pos + 2] != " ":
            return self._emit(TokenKind.SPACE, pos + 1)

        kind = _SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            return self._emit(kind, pos + 1)

        match = OWS_RUN.match(data, pos)
        if match:
            return self._emit(TokenKind.WHITESPACE, match.end())

        match = OCTET_RUN.match(data, pos)
        if match:
            if COOKIE_ONLY_OCTET.search(match.group()):
                return self._emit(TokenKind.COOKIE_OCTETS, match.end())
            return self._emit(TokenKind.TOKEN_OR_COOKIE_OCTETS, match.end())

        return None

    def _emit(self, kind: TokenKind, end: int) -> Token:
        token = Token(kind, self._cursor, end)
        self._cursor = end
        return token
