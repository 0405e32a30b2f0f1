"""Recursive-descent parser for the RFC 6265 §4.2.1 cookie-string.

::

    cookie-string := OWS? cookie-pair (";" OWS? cookie-pair)* OWS?
    cookie-pair   := cookie-name? "=" OWS? cookie-value
                   | cookie-value                 ; no "=": name is empty
    cookie-value  := raw-value | DQUOTE raw-value DQUOTE
    raw-value     := (TokenOrCookieOctets | CookieOctets | "=")*

A pair may carry OWS on either side; it never reaches a span. Only the
first ``=`` of a pair separates name from value. Once the separator is
consumed, ``EQUALS`` tokens are ordinary value content, so ``a=b=c``
yields the value ``b=c`` while the lexer stays context-free.

One token of lookahead is enough for every decision.
"""

from crumb.cookie import RawCookie
from crumb.span import Span
from crumb.syntax.errors import (
    GrammarError,
    InvalidToken,
    LimitExceeded,
    UnrecognizedEOF,
    UnrecognizedToken,
)
from crumb.syntax.lexer import CookieLexer
from crumb.syntax.tokens import OWS_KINDS, VALUE_KINDS, Token, TokenKind

_PAIR_START = (
    TokenKind.TOKEN_OR_COOKIE_OCTETS,
    TokenKind.COOKIE_OCTETS,
    TokenKind.EQUALS,
    TokenKind.DOUBLE_QUOTE,
)
_QUOTED_VALUE_CONTENT = (
    TokenKind.TOKEN_OR_COOKIE_OCTETS,
    TokenKind.COOKIE_OCTETS,
    TokenKind.EQUALS,
    TokenKind.DOUBLE_QUOTE,
)
_PAIR_END = (TokenKind.SEMICOLON,)


class CookieGrammar:
    """Consume a ``CookieLexer`` and produce raw cookie-pairs in input order.

    Args:
        lexer: Token source, positioned at the start of the header.
        max_cookies: Reject headers with more pairs than this.
    """

    __slots__ = ("_lexer", "_lookahead", "_max_cookies")

    def __init__(self, lexer: CookieLexer, *, max_cookies: int | None = None) -> None:
        self._lexer = lexer
        self._max_cookies = max_cookies
        self._lookahead: Token | None = lexer.next_token()

    def parse(self) -> list[RawCookie]:
        """Parse the whole header. All-or-nothing.

        Raises:
            GrammarError: The token stream does not form a cookie-string.
        """
        pairs: list[RawCookie] = []
        self._skip_ows()
        self._push(pairs, self._cookie_pair())
        self._skip_ows()
        while self._at(TokenKind.SEMICOLON):
            self._advance()
            self._skip_ows()
            self._push(pairs, self._cookie_pair())
            self._skip_ows()

        if self._lookahead is not None or not self._lexer.exhausted:
            raise self._unexpected(_PAIR_END)
        return pairs

    # -- productions --

    def _cookie_pair(self) -> RawCookie:
        token = self._lookahead
        if token is None:
            raise self._unexpected(_PAIR_START)

        if token.kind is TokenKind.EQUALS:
            return RawCookie(Span.empty(token.start), self._assignment())

        if token.kind is TokenKind.TOKEN_OR_COOKIE_OCTETS:
            self._advance()
            if self._at(TokenKind.EQUALS):
                return RawCookie(token.span, self._assignment())
            return RawCookie(Span.empty(token.start), token.span)

        if token.kind is TokenKind.COOKIE_OCTETS:
            # Not a valid cookie-name, so only the value-only form applies.
            self._advance()
            return RawCookie(Span.empty(token.start), token.span)

        if token.kind is TokenKind.DOUBLE_QUOTE:
            return RawCookie(Span.empty(token.start), self._quoted_value())

        raise self._unexpected(_PAIR_START)

    def _assignment(self) -> Span:
        """``"=" OWS? cookie-value``; returns the value span."""
        self._advance()
        self._skip_ows()
        if self._at(TokenKind.DOUBLE_QUOTE):
            return self._quoted_value()
        return self._raw_value()

    def _quoted_value(self) -> Span:
        self._advance()
        value = self._raw_value()
        if not self._at(TokenKind.DOUBLE_QUOTE):
            raise self._unexpected(_QUOTED_VALUE_CONTENT)
        self._advance()
        return value

    def _raw_value(self) -> Span:
        span = Span.empty(self._position())
        while self._lookahead is not None and self._lookahead.kind in VALUE_KINDS:
            span = span.cover(self._advance().span)
        return span

    # -- token stream --

    def _at(self, kind: TokenKind) -> bool:
        return self._lookahead is not None and self._lookahead.kind is kind

    def _advance(self) -> Token:
        token = self._lookahead
        assert token is not None
        self._lookahead = self._lexer.next_token()
        return token

    def _skip_ows(self) -> None:
        while self._lookahead is not None and self._lookahead.kind in OWS_KINDS:
            self._advance()

    def _position(self) -> int:
        if self._lookahead is not None:
            return self._lookahead.start
        return self._lexer.cursor

    def _push(self, pairs: list[RawCookie], pair: RawCookie) -> None:
        if self._max_cookies is not None and len(pairs) >= self._max_cookies:
            raise LimitExceeded(self._position(), "cookie count", self._max_cookies)
        pairs.append(pair)

    def _unexpected(self, expected: tuple[TokenKind, ...]) -> GrammarError:
        if self._lookahead is not None:
            return UnrecognizedToken(self._lookahead, expected)
        if not self._lexer.exhausted:
            return InvalidToken(self._lexer.cursor)
        return UnrecognizedEOF(self._lexer.cursor, expected)
