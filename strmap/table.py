from dataclasses import dataclass, field
from typing import Callable, Iterator

from .hashing import hash_bytes
from .shared import debug_trace_lookup, printf_err


NUM_BUCKETS = 256

HashFn = Callable[[bytes], int]


@dataclass(frozen=True)
class NotFound:
    pass


class InvalidKeyError(ValueError):
    pass


class MapFreedError(RuntimeError):
    pass


@dataclass
class Entry:
    key: str | None
    value: str | None
    next: "Entry | None" = None

    @classmethod
    def empty(cls):
        return Entry(None, None)

    @property
    def has_entry(self) -> bool:
        return self.key is not None


@dataclass
class StringMap:
    """Fixed bucket count hash table of strings, collisions chained per bucket.

    The bucket array never grows. Each slot is the head entry of its chain,
    further colliding keys hang off ``next`` in insertion order.
    """

    count: int
    num_buckets: int
    buckets: tuple[Entry, ...] | None = field(repr=False)
    hash_fn: HashFn = field(repr=False)

    def __init__(self, num_buckets: int = NUM_BUCKETS, hash_fn: HashFn = hash_bytes) -> None:
        if num_buckets < 1:
            raise ValueError(f"bucket count must be positive, got {num_buckets}")

        self.count = 0
        self.num_buckets = num_buckets
        self.hash_fn = hash_fn
        self.buckets = tuple(Entry.empty() for _ in range(num_buckets))

    def __len__(self) -> int:
        return self.count

    def __enter__(self) -> "StringMap":
        return self

    def __exit__(self, *exc_info) -> None:
        self.free()

    def bucket_index(self, key: str) -> int:
        return self.hash_fn(key.encode("utf-8", "surrogatepass")) % self.num_buckets

    def insert(self, key: str, value: str) -> bool:
        """Store value under key, replacing any previous value.

        Returns True if key was not in the map before.
        """
        if not key:
            raise InvalidKeyError("key must be a non-empty string")

        cell = self._buckets()[self.bucket_index(key)]
        if not cell.has_entry:
            cell.key = key
            cell.value = value
            cell.next = None
            self.count += 1
            return True

        while True:
            if cell.key == key:
                cell.value = value
                return False
            if cell.next is None:
                break
            cell = cell.next

        cell.next = Entry(key, value)
        self.count += 1
        return True

    def get(self, key: str) -> str | NotFound:
        index = self.bucket_index(key)
        cell: Entry | None = self._buckets()[index]

        link = 0
        while cell is not None and cell.has_entry:
            if cell.key == key:
                assert cell.value is not None
                if debug_trace_lookup():
                    printf_err("{0:d}-{1:d}: '{2:s}'->'{3:s}'\n", index, link, key, cell.value)
                return cell.value
            cell = cell.next
            link += 1

        if debug_trace_lookup():
            printf_err("{0:d}-{1:d}: '{2:s}' not found\n", index, link, key)
        return NotFound()

    def add_all(self, from_m: "StringMap"):
        for key, value in from_m.items():
            self.insert(key, value)

    def items(self) -> Iterator[tuple[str, str]]:
        for head in self._buckets():
            cell: Entry | None = head
            while cell is not None and cell.has_entry:
                assert cell.key is not None and cell.value is not None
                yield cell.key, cell.value
                cell = cell.next

    def chain_length(self, index: int) -> int:
        if not 0 <= index < self.num_buckets:
            raise IndexError(f"bucket index {index} out of range")

        length = 0
        cell: Entry | None = self._buckets()[index]
        while cell is not None and cell.has_entry:
            length += 1
            cell = cell.next
        return length

    def free(self):
        if self.buckets is None:
            return

        for head in self.buckets:
            cell = head.next
            head.key = None
            head.value = None
            head.next = None
            # unlink the chain so no entry outlives the map
            while cell is not None:
                following = cell.next
                cell.next = None
                cell = following

        self.count = 0
        self.buckets = None

    def _buckets(self) -> tuple[Entry, ...]:
        if self.buckets is None:
            raise MapFreedError("string map has been freed")
        return self.buckets


def create(num_buckets: int = NUM_BUCKETS, hash_fn: HashFn = hash_bytes) -> StringMap:
    return StringMap(num_buckets, hash_fn)


def destroy(m: StringMap):
    m.free()
