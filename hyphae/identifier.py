"""Component identifiers: a key plus the separator used to split it."""

from __future__ import annotations

import re


class Identifier:
    """An immutable component key, e.g. ``admin.users`` with separator ``.``."""

    __slots__ = ("_key", "_separator")

    def __init__(self, key: str, separator: str = ".") -> None:
        self._key = str(key)
        self._separator = separator

    @property
    def key(self) -> str:
        return self._key

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def segments(self) -> list[str]:
        return self._key.split(self._separator)

    @property
    def root_key(self) -> str:
        """First segment of the key."""
        return self.segments[0]

    @property
    def base_path(self) -> str:
        """Key segments without the last one, joined with '/'."""
        return "/".join(self.segments[:-1])

    def start_with(self, leading: str | None) -> bool:
        """Return True if the key begins with the whole segments of ``leading``.

        ``None`` matches every key. ``admin`` matches ``admin`` and
        ``admin.users`` but not ``administrators``.
        """
        if leading is None:
            return True
        return self._key == leading or self._key.startswith(f"{leading}{self._separator}")

    def namespaced(self, from_: str | None, to: str | None) -> Identifier:
        """Return an identifier with the ``from_`` prefix swapped for ``to``.

        ``to=None`` strips the prefix, ``from_=None`` prepends ``to``.
        """
        if from_ == to:
            return self

        separated_to = f"{to}{self._separator}" if to is not None else ""

        if from_ is None:
            new_key = f"{separated_to}{self._key}"
        else:
            pattern = f"^{re.escape(from_)}{re.escape(self._separator)}"
            new_key = re.sub(pattern, lambda _: separated_to, self._key, count=1)

        if new_key == self._key:
            return self
        return Identifier(new_key, separator=self._separator)

    def key_with_separator(self, separator: str) -> str:
        return separator.join(self.segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return (self._key, self._separator) == (other._key, other._separator)

    def __hash__(self) -> int:
        return hash((self._key, self._separator))

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"Identifier({self._key!r}, separator={self._separator!r})"
