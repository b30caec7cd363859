# wgraph/_indexed.py

"""
Dense insertion-ordered containers with O(1) positional access.

Plain dicts and sets keep insertion order (dicts) or nothing at all (sets), but
neither can hand out "the i-th element" without walking. Both containers here
keep a list of keys plus a key -> slot index. Removal is a swap-removal: the
last element is moved into the vacated slot, so removal stays O(1) and the
order of the remaining elements changes only at that slot.
"""

from __future__ import annotations
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class IndexedSet(Generic[K]):
    __slots__ = ("_items", "_slots")

    def __init__(self) -> None:
        self._items: List[K] = []
        self._slots: Dict[K, int] = {}

    def add(self, x: K) -> bool:
        """Append ``x`` if absent. Returns True when it was inserted."""
        if x in self._slots:
            return False
        self._slots[x] = len(self._items)
        self._items.append(x)
        return True

    def swap_remove(self, x: K) -> bool:
        slot = self._slots.pop(x, None)
        if slot is None:
            return False
        last = self._items.pop()
        if slot < len(self._items):
            self._items[slot] = last
            self._slots[last] = slot
        return True

    def __getitem__(self, i: int) -> K:
        return self._items[i]

    def __contains__(self, x: object) -> bool:
        return x in self._slots

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IndexedSet({self._items!r})"

    def copy(self) -> "IndexedSet[K]":
        out: IndexedSet[K] = IndexedSet()
        out._items = list(self._items)
        out._slots = dict(self._slots)
        return out


class IndexedMap(Generic[K, V]):
    __slots__ = ("_keys", "_values", "_slots")

    def __init__(self) -> None:
        self._keys: List[K] = []
        self._values: List[V] = []
        self._slots: Dict[K, int] = {}

    def __setitem__(self, key: K, value: V) -> None:
        slot = self._slots.get(key)
        if slot is None:
            self._slots[key] = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
        else:
            self._values[slot] = value

    def __getitem__(self, key: K) -> V:
        return self._values[self._slots[key]]

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        slot = self._slots.get(key)
        return default if slot is None else self._values[slot]

    def swap_remove(self, key: K, default: object = _MISSING) -> V:
        """Remove ``key`` and return its value; the last entry takes its slot."""
        slot = self._slots.pop(key, None)
        if slot is None:
            if default is _MISSING:
                raise KeyError(key)
            return default  # type: ignore[return-value]
        value = self._values[slot]
        last_key = self._keys.pop()
        last_value = self._values.pop()
        if slot < len(self._keys):
            self._keys[slot] = last_key
            self._values[slot] = last_value
            self._slots[last_key] = slot
        return value

    def get_index(self, i: int) -> Optional[Tuple[K, V]]:
        if 0 <= i < len(self._keys):
            return self._keys[i], self._values[i]
        return None

    def key_at(self, i: int) -> K:
        return self._keys[i]

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def items(self) -> Iterator[Tuple[K, V]]:
        return zip(self._keys, self._values)

    def __repr__(self) -> str:
        return f"IndexedMap({dict(self.items())!r})"
