"""A growable sequence with a read/write cursor and file persistence."""

from __future__ import annotations

import struct
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, TextIO

DEFAULT_CAPACITY = 10
MAX_CAPACITY = 1_000_000_000
GROWTH_STEP = 1
GROWTH_FACTOR = 2
FILE_GROWTH_FACTOR = 1.25


class Vector:
    """Sequence that tracks a capacity and a cursor over its items."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._capacity = DEFAULT_CAPACITY
        self._cursor = 0
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def append(self, item: Any) -> None:
        """Add an item at the end, growing the capacity when full."""
        if len(self._items) == self._capacity:
            self.resize(self._capacity * GROWTH_FACTOR or GROWTH_STEP)
        self._items.append(item)

    def remove_last(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("remove_last from an empty vector")
        item = self._items.pop()
        self._cursor = min(self._cursor, len(self._items))
        return item

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def get(self, pos: int) -> Any:
        """Return the item at pos."""
        self._check_position(pos)
        return self._items[pos]

    def set(self, pos: int, item: Any) -> None:
        """Replace the item at pos."""
        self._check_position(pos)
        self._items[pos] = item

    def clear(self) -> None:
        """Remove every item and rewind the cursor."""
        self._items.clear()
        self._cursor = 0

    def resize(self, capacity: int) -> None:
        """Set the capacity."""
        if capacity < 0 or capacity > MAX_CAPACITY:
            raise ValueError(f"capacity {capacity} out of range")
        if capacity < len(self._items):
            raise ValueError(f"capacity {capacity} smaller than size {len(self._items)}")
        self._capacity = capacity

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def rewind(self) -> None:
        """Move the cursor to the first item."""
        self._cursor = 0

    def read(self) -> Any:
        """Return the item under the cursor and advance."""
        if self.at_end():
            raise IndexError("cursor at end")
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def write(self, item: Any) -> None:
        """Overwrite the item under the cursor and advance."""
        if self.at_end():
            raise IndexError("cursor at end")
        self._items[self._cursor] = item
        self._cursor += 1

    def seek(self, pos: int) -> None:
        """Move the cursor to pos, which may be one past the last item."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"position {pos} out of range")
        self._cursor = pos

    def tell(self) -> int:
        return self._cursor

    def at_end(self) -> bool:
        return self._cursor == len(self._items)

    def find(self, key: Any, compare: Callable[[Any, Any], int]) -> int | None:
        """Return the position of the first item comparing equal to key, or None."""
        for pos, item in enumerate(self._items):
            if compare(item, key) == 0:
                return pos
        return None

    def sort(self, compare: Callable[[Any, Any], int]) -> None:
        """Sort the items stably with a three-way compare function."""
        self._items.sort(key=cmp_to_key(compare))

    def for_each(self, action: Callable[[Any], None]) -> None:
        """Call action on every item."""
        for item in self._items:
            action(item)

    def show(self, printer: Callable[[Any], None]) -> None:
        """Call printer on every item; an empty vector is an error."""
        if not self._items:
            raise ValueError("nothing to show")
        for item in self._items:
            printer(item)

    def load_text(self, path, reader: Callable[[str], Any]) -> None:
        """Append reader(line) for each line of a text file, newline stripped."""
        with open(path, encoding="utf-8") as stream:
            for line in stream:
                self.append(reader(line.rstrip("\n")))

    def save_text(self, path, writer: Callable[[TextIO, Any], None]) -> None:
        """Write every item to a text file through writer(stream, item)."""
        with open(path, "w", encoding="utf-8") as stream:
            for item in self._items:
                writer(stream, item)

    def load_binary(self, path, fmt: str) -> None:
        """Replace the items with fixed-size records read from a binary file."""
        size = struct.calcsize(fmt)
        with open(path, "rb") as stream:
            data = stream.read()
        data = data[: len(data) - len(data) % size]
        items = [
            fields[0] if len(fields) == 1 else fields
            for fields in struct.iter_unpack(fmt, data)
        ]
        self._items = []
        self._cursor = 0
        if self._capacity <= len(items):
            self.resize(int(len(items) * FILE_GROWTH_FACTOR))
        self._items = items

    def save_binary(self, path, fmt: str) -> None:
        """Write every item as a fixed-size record."""
        with open(path, "wb") as stream:
            for item in self._items:
                fields = item if isinstance(item, tuple) else (item,)
                stream.write(struct.pack(fmt, *fields))