"""Parser configuration.

ParserConfig is a frozen dataclass, immutable after creation and safe to
share across threads.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """How ``parse`` treats edge cases and oversized headers.

    The defaults are strict RFC 6265 with no limits::

        config = ParserConfig(allow_empty=True, max_length=4096)
    """

    # Empty or whitespace-only headers yield no cookies instead of a ParseError
    allow_empty: bool = False

    # Limits (None = unlimited)
    max_length: int | None = None  # characters in the header value
    max_cookies: int | None = None

    def __post_init__(self) -> None:
        for name in ("max_length", "max_cookies"):
            limit = getattr(self, name)
            if limit is not None and limit < 0:
                msg = f"{name} must be non-negative, got {limit}"
                raise ConfigurationError(msg)


DEFAULT_CONFIG = ParserConfig()
