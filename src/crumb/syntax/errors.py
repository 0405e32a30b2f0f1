"""Grammar failures.

These describe *where* and *why* a header failed to parse. ``parse``
wraps them in ``crumb.errors.ParseError``; they never escape on their own.
"""

from collections.abc import Iterable

from crumb.errors import CrumbError
from crumb.syntax.tokens import Token, TokenKind

# Exceptions pickle from their constructor arguments, not the formatted message.
_Reduced = tuple[type, tuple[object, ...]]


def _format_expected(expected: tuple[TokenKind, ...]) -> str:
    if not expected:
        return ""
    names = [f"`{kind}`" for kind in expected]
    if len(names) == 1:
        return f"\nExpected {names[0]}"
    return f"\nExpected one of {', '.join(names[:-1])} or {names[-1]}"


class GrammarError(CrumbError):
    """Base for cookie-string grammar failures. ``location`` is an input offset."""

    def __init__(self, location: int, message: str) -> None:
        super().__init__(message)
        self.location = location

    def __reduce__(self) -> _Reduced:
        return type(self), (self.location, str(self))


class InvalidToken(GrammarError):
    """A character that belongs to no terminal category."""

    def __init__(self, location: int) -> None:
        super().__init__(location, f"Invalid token at {location}")

    def __reduce__(self) -> _Reduced:
        return type(self), (self.location,)


class UnrecognizedToken(GrammarError):
    """A well-formed token appeared where the grammar does not allow it."""

    def __init__(self, token: Token, expected: Iterable[TokenKind] = ()) -> None:
        self.token = token
        self.expected = tuple(expected)
        super().__init__(
            token.start,
            f"Unrecognized token `{token.kind}` found at {token.start}:{token.end}"
            + _format_expected(self.expected),
        )

    def __reduce__(self) -> _Reduced:
        return type(self), (self.token, self.expected)


class UnrecognizedEOF(GrammarError):
    """The input ended while the grammar still needed more."""

    def __init__(self, location: int, expected: Iterable[TokenKind] = ()) -> None:
        self.expected = tuple(expected)
        super().__init__(
            location,
            f"Unrecognized EOF found at {location}" + _format_expected(self.expected),
        )

    def __reduce__(self) -> _Reduced:
        return type(self), (self.location, self.expected)


class LimitExceeded(GrammarError):
    """A ``ParserConfig`` limit was exceeded."""

    def __init__(self, location: int, what: str, limit: int) -> None:
        self.what = what
        self.limit = limit
        super().__init__(location, f"{what} exceeds limit of {limit} at {location}")

    def __reduce__(self) -> _Reduced:
        return type(self), (self.location, self.what, self.limit)
