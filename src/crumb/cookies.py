"""Immutable, ordered result of parsing a ``Cookie`` header.

Implements ``Sequence[Cookie]`` in header order, plus name lookups.
Names are case-sensitive and may repeat.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from crumb.cookie import Cookie


class Cookies(Sequence[Cookie]):
    """Immutable, ordered cookies.

    ``get`` returns the first value for a name.
    ``get_list`` returns all values for a name, in header order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Cookie] = ()) -> None:
        object.__setattr__(self, "_items", tuple(items))

    @overload
    def __getitem__(self, index: int) -> Cookie: ...
    @overload
    def __getitem__(self, index: slice) -> "Cookies": ...
    def __getitem__(self, index: int | slice) -> "Cookie | Cookies":
        if isinstance(index, slice):
            return Cookies(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cookies):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        items = ", ".join(f"{c.name!r}: {c.value!r}" for c in self._items)
        return f"Cookies([{items}])"

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default* if missing."""
        for cookie in self._items:
            if cookie.name == name:
                return cookie.value
        return default

    def get_list(self, name: str) -> list[str]:
        """Return all values for *name*."""
        return [c.value for c in self._items if c.name == name]

    def names(self) -> list[str]:
        """Distinct names in order of first appearance."""
        return list(dict.fromkeys(c.name for c in self._items))

    def pairs(self) -> list[tuple[str, str]]:
        return [(c.name, c.value) for c in self._items]

    def to_dict(self) -> dict[str, str]:
        """Collapse to a dict. A repeated name keeps its last value."""
        return dict(self.pairs())
