"""Set of integer keys stored in separately chained buckets."""

from __future__ import annotations


class HashTable:
    """Integer key set with a fixed number of buckets.

    The bucket of a key is ``key & size``; a key whose bucket falls outside
    the table raises ``IndexError``.
    """

    def __init__(self, size: int) -> None:
        self._size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[int]:
        index = key & self._size
        if not 0 <= index < len(self._buckets):
            raise IndexError(
                f"bucket {index} for key {key} out of range for table of size {self._size}"
            )
        return self._buckets[index]

    def insert(self, key: int) -> None:
        """Add ``key``; adding a key already present does nothing."""
        bucket = self._bucket(key)
        if key not in bucket:
            bucket.insert(0, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        if key in bucket:
            bucket.remove(key)

    def search(self, key: int) -> bool:
        """Return whether ``key`` is stored."""
        return key in self._bucket(key)