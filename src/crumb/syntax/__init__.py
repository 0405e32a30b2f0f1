"""Tokenizer and grammar for ``Cookie`` header values."""

from crumb.syntax.errors import (
    GrammarError,
    InvalidToken,
    LimitExceeded,
    UnrecognizedEOF,
    UnrecognizedToken,
)
from crumb.syntax.grammar import CookieGrammar
from crumb.syntax.lexer import CookieLexer
from crumb.syntax.tokens import Token, TokenKind

__all__ = [
    "CookieGrammar",
    "CookieLexer",
    "GrammarError",
    "InvalidToken",
    "LimitExceeded",
    "Token",
    "TokenKind",
    "UnrecognizedEOF",
    "UnrecognizedToken",
]
