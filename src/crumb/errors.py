"""Crumb exception hierarchy.

``parse`` raises exactly two kinds of failure, both subclasses of
``CookieError``: ``ParseError`` for input that does not match the
cookie-string grammar, and ``InternalError`` for a broken invariant
inside the library.
"""

from enum import Enum


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when a ``ParserConfig`` is constructed with invalid limits."""


class CookieError(CrumbError):
    """A ``Cookie`` header could not be turned into cookies.

    Terminal: no partial result accompanies it.
    """

    description = "Cookie Parsing Error"

    @property
    def source(self) -> BaseException | None:
        """The underlying failure, if any."""
        return self.__cause__

    def detail(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        return f"{CookieError.description}: {self.detail()}"


class InternalErrorKind(Enum):
    """Invariant violations the library can detect in itself."""

    SPAN_OUT_OF_BOUNDS = "span out of bounds"


class InternalError(CookieError):
    """An invariant was violated inside crumb (a bug, not bad input).

    Callers should log and report it rather than blame the client.
    """

    kind_description = "Internal Error"

    def __init__(self, kind: InternalErrorKind) -> None:
        super().__init__(kind)
        self.kind = kind

    @property
    def source(self) -> BaseException | None:
        return None

    def detail(self) -> str:
        return f"{self.kind_description}: {self.kind.value}"


class ParseError(CookieError):
    """The header does not conform to the RFC 6265 cookie-string grammar.

    ``error`` holds the grammar failure with its position; it is also
    chained as ``__cause__``.
    """

    kind_description = "Parse Error"

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    @property
    def source(self) -> BaseException | None:
        return self.error

    def detail(self) -> str:
        return f"{self.kind_description}: {self.error}"
