"""Small container types: a last-in-first-out stack and an integer map."""

from __future__ import annotations


class LifoStack:
    """A stack of integers; the most recently pushed item comes out first."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, x: int) -> None:
        self._items.append(x)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class IntHashMap:
    """A map from integer keys to integer values; missing keys read as -1."""

    MISSING = -1

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def put(self, key: int, value: int) -> None:
        self._data[key] = value

    def get(self, key: int) -> int:
        return self._data.get(key, self.MISSING)

    def remove(self, key: int) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)