import logging
from typing import AbstractSet, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ordset import merge
from ordset.errors import EmptyCollection

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")


class OrderedSet(AbstractSet[T]):
    """
    An immutable set kept as a sorted, duplicate-free tuple.

    Elements are ordered by their natural ``<`` or, when ``key`` is given,
    by ``key(element)`` the way ``sorted(key=...)`` orders them. Iteration
    always yields ascending order, and two sets holding the same members
    always hold the same backing tuple, so equality is plain sequence
    equality.

    Every operation that changes membership returns a new set. Binary
    operations walk both sorted sequences once and keep the order of the
    left operand.
    """

    __slots__ = ("_items", "_key")

    def __init__(self, iterable: Optional[Iterable[T]] = None, key: Optional[Callable] = None):
        self._key = key
        if iterable is None:
            self._items: Tuple[T, ...] = ()
        else:
            self._items = tuple(merge.canonicalize(iterable, key))

    @classmethod
    def _from_canonical(cls, items: Iterable[T], key: Optional[Callable]) -> "OrderedSet[T]":
        new_set = cls.__new__(cls)
        new_set._items = tuple(items)
        new_set._key = key
        return new_set

    @classmethod
    def empty(cls, key: Optional[Callable] = None) -> "OrderedSet[T]":
        return cls._from_canonical((), key)

    @classmethod
    def from_sequence(cls, items: Iterable[T], key: Optional[Callable] = None) -> "OrderedSet[T]":
        """Build a set from any finite iterable, sorting and dropping repeats."""
        return cls(items, key=key)

    @classmethod
    def from_sequence_mapped(
        cls, items: Iterable[S], func: Callable[[S], T], key: Optional[Callable] = None
    ) -> "OrderedSet[T]":
        """Apply ``func`` to every item, then build the set from the results."""
        return cls([func(item) for item in items], key=key)

    @property
    def key(self) -> Optional[Callable]:
        return self._key

    def _coerce(self, other: Iterable) -> Tuple:
        """Return the canonical sequence of ``other`` under this set's order."""
        if isinstance(other, OrderedSet) and other._key is self._key:
            return other._items
        if isinstance(other, OrderedSet):
            LOGGER.debug(f"Re-sorting {len(other)} elements under a different key")
        return tuple(merge.canonicalize(other, self._key))

    # Queries

    def __len__(self) -> int:
        return len(self._items)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, item) -> bool:
        _, found = merge.bisect_position(self._items, item, self._key)
        return found

    def member(self, item: T) -> bool:
        return item in self

    def __getitem__(self, index):
        if isinstance(index, slice):
            items = self._items[index]
            if index.step is not None and index.step < 0:
                items = items[::-1]
            return self._from_canonical(items, self._key)
        return self._items[index]

    def index(self, item: T) -> int:
        """Return the rank of ``item``, or raise ``ValueError`` if absent."""
        idx, found = merge.bisect_position(self._items, item, self._key)
        if not found:
            raise ValueError(f"{item!r} is not in OrderedSet")
        return idx

    def min(self) -> T:
        if not self._items:
            raise EmptyCollection("min")
        return self._items[0]

    def max(self) -> T:
        if not self._items:
            raise EmptyCollection("max")
        return self._items[-1]

    def to_list(self) -> List[T]:
        return list(self._items)

    def copy(self) -> "OrderedSet[T]":
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        if self._key is None and other._key is None:
            return self._items == other._items
        if self._key is other._key:
            return len(self._items) == len(other._items) and merge.is_subset(
                self._items, other._items, self._key
            )
        # Different orders: equal when each holds the other under both keys
        return self.subset(other) and other.subset(self)

    def equal(self, other: "OrderedSet[T]") -> bool:
        return self == other

    def __hash__(self) -> int:
        # Agrees with == for sets sharing the same key.
        if self._key is None:
            return hash(self._items)
        return hash(tuple(self._key(item) for item in self._items))

    def __repr__(self) -> str:
        if self._key is None:
            return f"OrderedSet({list(self._items)!r})"
        return f"OrderedSet({list(self._items)!r}, key={self._key!r})"

    # Mutation

    def put(self, item: T) -> "OrderedSet[T]":
        """Return a set that also holds ``item``; ``self`` if already present."""
        idx, found = merge.bisect_position(self._items, item, self._key)
        if found:
            return self
        items = self._items[:idx] + (item,) + self._items[idx:]
        return self._from_canonical(items, self._key)

    insert = put

    def delete(self, item: T) -> "OrderedSet[T]":
        """Return a set without ``item``. Deleting a non-member is a no-op."""
        idx, found = merge.bisect_position(self._items, item, self._key)
        if not found:
            return self
        items = self._items[:idx] + self._items[idx + 1 :]
        return self._from_canonical(items, self._key)

    remove = delete

    def filter(self, predicate: Callable[[T], object]) -> "OrderedSet[T]":
        return self._from_canonical(
            (item for item in self._items if predicate(item)), self._key
        )

    def reject(self, predicate: Callable[[T], object]) -> "OrderedSet[T]":
        return self.filter(lambda item: not predicate(item))

    # Set algebra

    def union(self, other: Iterable[T]) -> "OrderedSet[T]":
        items = merge.union(self._items, self._coerce(other), self._key)
        return self._from_canonical(items, self._key)

    def intersection(self, other: Iterable[T]) -> "OrderedSet[T]":
        items = merge.intersection(self._items, self._coerce(other), self._key)
        return self._from_canonical(items, self._key)

    def difference(self, other: Iterable[T]) -> "OrderedSet[T]":
        items = merge.difference(self._items, self._coerce(other), self._key)
        return self._from_canonical(items, self._key)

    def symmetric_difference(self, other: Iterable[T]) -> "OrderedSet[T]":
        items = merge.symmetric_difference(self._items, self._coerce(other), self._key)
        return self._from_canonical(items, self._key)

    def disjoint(self, other: Iterable[T]) -> bool:
        return merge.is_disjoint(self._items, self._coerce(other), self._key)

    isdisjoint = disjoint

    def subset(self, other: Iterable[T]) -> bool:
        return merge.is_subset(self._items, self._coerce(other), self._key)

    issubset = subset

    def issuperset(self, other: Iterable[T]) -> bool:
        return merge.is_subset(self._coerce(other), self._items, self._key)

    # Operators only accept set-like operands, like the builtin sets do.

    def __or__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.union(other)

    def __ror__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.intersection(other)

    def __rand__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.difference(other)

    def __rsub__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self._from_canonical(self._coerce(other), self._key).difference(self)

    def __xor__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __rxor__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.subset(other)

    def __lt__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        other_items = self._coerce(other)
        return len(self._items) < len(other_items) and merge.is_subset(
            self._items, other_items, self._key
        )

    def __ge__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        other_items = self._coerce(other)
        return len(self._items) > len(other_items) and merge.is_subset(
            other_items, self._items, self._key
        )
