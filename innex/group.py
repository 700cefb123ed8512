"""An indexed collection of items keyed by their ``id`` attribute."""

from __future__ import annotations

import copy
from collections import deque
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Group(Generic[T]):
    """Items stored in slots, reachable by id or by slot index.

    Freed slots are remembered and reused by :meth:`put`.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._size = 0
        self._index_of: dict[str, int] = {}
        self._id_at: dict[int, str] = {}
        self._free: deque[int] = deque()

    def _register(self, item_id: str, index: int) -> None:
        if item_id in self._index_of or index in self._id_at:
            return
        self._index_of[item_id] = index
        self._id_at[index] = item_id
        self._size += 1

    def _unregister_id(self, item_id: str) -> bool:
        if item_id not in self._index_of:
            return False
        index = self._index_of.pop(item_id)
        del self._id_at[index]
        self._free.append(index)
        self._size -= 1
        return True

    def _unregister_index(self, index: int) -> bool:
        if index not in self._id_at:
            return False
        item_id = self._id_at.pop(index)
        del self._index_of[item_id]
        self._free.append(index)
        self._size -= 1
        return True

    def _shorten(self) -> None:
        while self._size > 0 and (self._size - 1) not in self._id_at:
            self._size -= 1
        if self._size < len(self._items):
            del self._items[self._size:]

    def _get_free(self) -> int | None:
        while self._free:
            if self._free[0] >= self._size:
                self._free.popleft()
            else:
                return self._free[0]
        return None

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"slot {index} does not exist")
        return index

    def _first(self) -> T:
        if not self._items:
            raise IndexError("the group is empty")
        return copy.copy(self._items[0])

    def put(self, item: T) -> None:
        """Store a copy of ``item`` in a free slot, or append it."""
        stored = copy.copy(item)
        position = self._get_free()
        if position is None:
            self._register(item.id, len(self._items))
            self._items.append(stored)
        else:
            self._free.popleft()
            self._register(item.id, position)
            self._items[position] = stored

    def submit(self, item: T) -> bool:
        """Store ``item`` unless its id is already present."""
        if item.id in self._index_of:
            return False
        self.put(item)
        return True

    def get_by_id(self, item_id: str) -> T:
        """Return a copy of the item with ``item_id``."""
        return copy.copy(self._items[self._index_of[item_id]])

    def get_by_index(self, index: int) -> T:
        """Return a copy of the item in slot ``index``."""
        return copy.copy(self._items[self._check_index(index)])

    def take_by_id(self, item_id: str) -> T:
        """Remove and return the item with ``item_id``.

        When the id is unknown, a copy of the first slot is returned instead.
        """
        if item_id not in self._index_of:
            return self._first()
        result = self.get_by_id(item_id)
        self._free.append(self._index_of[item_id])
        self._unregister_id(item_id)
        return result

    def take_by_index(self, index: int) -> T:
        """Remove and return the item in slot ``index``.

        When the slot is not in use, a copy of the first slot is returned.
        """
        if index >= len(self._items) or index not in self._id_at:
            return self._first()
        result = self.get_by_index(index)
        self._free.append(index)
        self._unregister_index(index)
        return result

    def push(self, item: T) -> None:
        """Append ``item`` after the last slot."""
        self._register(item.id, len(self._items))
        self._items.append(item)

    def pick(self) -> T:
        """Remove and return the last item in use."""
        if not self._items:
            raise IndexError("pick from an empty group")
        self._shorten()
        if self._size == 0:
            return self._first()
        return self.take_by_index(self._size - 1)

    def pock(self) -> None:
        """Drop the last slot."""
        if not self._items:
            raise IndexError("pock from an empty group")
        self._size = len(self._items) - 1
        self._shorten()

    def free_size(self) -> int:
        """Number of remembered free slots."""
        return len(self._free)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _slot(self, key: Any) -> int:
        if isinstance(key, str):
            return self._index_of[key]
        if isinstance(key, int):
            return self._check_index(key)
        raise TypeError(f"group keys are str ids or int slots, not {type(key).__name__}")

    def __getitem__(self, key: str | int) -> T:
        return self._items[self._slot(key)]

    def __setitem__(self, key: str | int, value: T) -> None:
        self._items[self._slot(key)] = value