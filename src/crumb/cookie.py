"""Resolved cookies and the raw span pairs they are built from."""

from dataclasses import dataclass, field

from crumb.span import Span


@dataclass(frozen=True, slots=True)
class Cookie:
    """One ``name=value`` pair from a ``Cookie`` header.

    ``name`` and ``value`` are copies cut from the header; ``name_span``
    and ``value_span`` record where in the header they came from, so
    ``header[c.value_span.start:c.value_span.end] == c.value`` always holds
    for parsed cookies. A quoted value excludes its quotes.
    """

    name: str
    value: str
    name_span: Span | None = field(default=None, compare=False, repr=False)
    value_span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class RawCookie:
    """A cookie-pair as recognized by the grammar, not yet cut from the input."""

    name: Span
    value: Span

    def resolve(self, data: str) -> Cookie:
        return Cookie(
            name=self.name.resolve(data),
            value=self.value.resolve(data),
            name_span=self.name,
            value_span=self.value,
        )
