"""Bidirectional mapping between strings and small integer ids."""

from __future__ import annotations

from collections.abc import Iterable


class StringInterner:
    """Assigns each distinct string a stable id, starting at zero."""

    def __init__(self) -> None:
        self._forward: dict[str, int] = {}
        self._backward: list[str] = []

    @classmethod
    def from_iterable(cls, values: Iterable[str]) -> StringInterner:
        """Build an interner with every string in ``values`` interned in order."""
        interner = cls()
        for value in values:
            interner.intern(value)
        return interner

    def intern(self, key: str) -> int:
        """Return the id of ``key``, assigning a new one if it is unseen."""
        existing = self._forward.get(key)
        if existing is not None:
            return existing
        new_id = len(self._backward)
        self._forward[key] = new_id
        self._backward.append(key)
        return new_id

    def resolve(self, key: int) -> str | None:
        """Return the string for ``key``, or None if no such id exists."""
        if 0 <= key < len(self._backward):
            return self._backward[key]
        return None

    def __len__(self) -> int:
        return len(self._backward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def items(self) -> Iterable[tuple[str, int]]:
        """Yield (string, id) pairs in id order."""
        return ((name, index) for index, name in enumerate(self._backward))