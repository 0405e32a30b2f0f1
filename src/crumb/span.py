"""Half-open offset ranges into a parsed header.

Spans are recorded while tokenizing and parsing; text is only cut out of
the input once, when a cookie is resolved.
"""

from dataclasses import dataclass

from crumb.errors import InternalError, InternalErrorKind


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` of code-point offsets into the input."""

    start: int
    end: int

    @classmethod
    def empty(cls, at: int) -> "Span":
        """Zero-length span positioned at *at*."""
        return cls(at, at)

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def cover(self, other: "Span") -> "Span":
        """Smallest span containing both *self* and *other*."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def resolve(self, data: str) -> str:
        """Return the substring of *data* this span addresses.

        Raises:
            InternalError: The span does not lie within *data*.
        """
        if not 0 <= self.start <= self.end <= len(data):
            raise InternalError(InternalErrorKind.SPAN_OUT_OF_BOUNDS)
        return data[self.start : self.end]
