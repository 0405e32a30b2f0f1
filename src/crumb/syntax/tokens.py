"""Terminal categories of the cookie-string grammar.

Character classes follow RFC 6265 §4.1.1: ``cookie-octet`` is split into
the octets that are also valid in an RFC 7230 ``token`` and those that
are only valid in a cookie value. ``=`` belongs to neither.
"""

import re
from dataclasses import dataclass
from enum import Enum

from crumb.span import Span


class TokenKind(Enum):
    """What a token is. Values double as display names in error messages."""

    COOKIE_OCTETS = "CookieOctets"
    TOKEN_OR_COOKIE_OCTETS = "TokenOrCookieOctets"
    EQUALS = "Equals"
    SEMICOLON = "Semicolon"
    WHITESPACE = "Whitespace"
    SPACE = "Space"
    DOUBLE_QUOTE = "DoubleQuote"

    def __str__(self) -> str:
        return self.value


# ! #-' * + - . 0-9 A-Z ^-z | ~
TOKEN_OCTETS = r"!#-'*+\-.0-9A-Z^-z|~"
# ( ) / : < >-@ [ ] { }
COOKIE_ONLY_OCTETS = r"()/:<>-@\[\]{}"

OCTET_RUN = re.compile(f"[{TOKEN_OCTETS}{COOKIE_ONLY_OCTETS}]+")
COOKIE_ONLY_OCTET = re.compile(f"[{COOKIE_ONLY_OCTETS}]")
OWS_RUN = re.compile(r"[ \t]+")

VALUE_KINDS = frozenset(
    {TokenKind.TOKEN_OR_COOKIE_OCTETS, TokenKind.COOKIE_OCTETS, TokenKind.EQUALS}
)
OWS_KINDS = frozenset({TokenKind.SPACE, TokenKind.WHITESPACE})


@dataclass(frozen=True, slots=True)
class Token:
    """A classified run of the input, ``[start, end)``."""

    kind: TokenKind
    start: int
    end: int

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    def __str__(self) -> str:
        return f"{self.kind}@{self.start}:{self.end}"
