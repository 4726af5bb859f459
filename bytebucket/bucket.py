# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""In-memory byte bucket that behaves like an open file handle.

Key pieces:
  - Bucket: growable contents plus one cursor shared by reads and writes.
  - BucketLike: the operation set wrappers such as `Closer` depend on.
  - read_from: drain a bucket-like reader into bytes, stopping at end of data.

The backing store is a `bytearray` whose length is the capacity; the logical
size is tracked separately so truncate and reset keep the allocation.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol, runtime_checkable

from .errors import (
    EndOfDataError,
    InvalidWhenceError,
    NegativePositionError,
    NegativeSizeError,
    UnexpectedEOFError,
)
from .options import BucketOption, BucketOptions

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


@runtime_checkable
class BucketLike(Protocol):
    """Read/write/seek/truncate/reset operations shared by buckets and their wrappers."""

    def read_at(self, buf: bytearray | memoryview, offset: int) -> int: ...

    def readinto(self, buf: bytearray | memoryview) -> int: ...

    def write(self, data: bytes) -> int: ...

    def write_at(self, data: bytes, position: int) -> int: ...

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int: ...

    def truncate(self, size: int) -> None: ...

    def reset(self) -> None: ...


def read_from(reader: BucketLike, size: int | None = -1) -> bytes:
    """Read up to `size` bytes (everything if None or negative) via `reader.readinto`.

    End of data terminates the read and is not reported; a cursor beyond the
    end still raises `UnexpectedEOFError`.
    """
    if size is None:
        size = -1
    out = bytearray()
    while size < 0 or len(out) < size:
        want = READ_CHUNK_SIZE if size < 0 else min(READ_CHUNK_SIZE, size - len(out))
        chunk = bytearray(want)
        try:
            n = reader.readinto(chunk)
        except EndOfDataError:
            break
        if n == 0:
            break
        out += chunk[:n]
    return bytes(out)


class Bucket:
    """Growable byte contents with a single read/write cursor.

    In append mode `write` always lands at the current end of data and never
    moves the cursor. Seeking past the end is allowed; a later write there
    zero-fills the gap.
    """

    def __init__(self, data: bytes | bytearray | memoryview = b"", append: bool = False):
        # A bytearray is adopted as the backing store, anything else is copied.
        self._data = data if isinstance(data, bytearray) else bytearray(data)
        self._len = len(self._data)
        self._pos = 0
        self._append = append

    @property
    def append(self) -> bool:
        return self._append

    @property
    def size(self) -> int:
        """Logical length of the contents."""
        return self._len

    @property
    def cap(self) -> int:
        """Capacity of the backing store."""
        return len(self._data)

    def __len__(self) -> int:
        return self._len

    def tell(self) -> int:
        return self._pos

    def getvalue(self) -> bytes:
        """Return a copy of the logical contents."""
        return bytes(self._data[: self._len])

    def read_at(self, buf: bytearray | memoryview, offset: int) -> int:
        """Copy bytes starting at `offset` into `buf` without moving the cursor.

        Raises:
            EndOfDataError: `offset` equals the size and `buf` is not empty.
            UnexpectedEOFError: `offset` is beyond the size.
            NegativePositionError: `offset` is negative.
        """
        if offset < 0:
            raise NegativePositionError()
        with memoryview(buf) as raw, raw.cast("B") as view:
            wanted = view.nbytes
            if wanted > 0 and offset == self._len:
                raise EndOfDataError()
            if offset > self._len:
                raise UnexpectedEOFError()
            n = min(wanted, self._len - offset)
            view[:n] = self._data[offset : offset + n]
        return n

    def readinto(self, buf: bytearray | memoryview) -> int:
        """Read into `buf` at the cursor and advance it by the count copied."""
        n = self.read_at(buf, self._pos)
        self._pos += n
        return n

    def read(self, size: int | None = -1) -> bytes:
        """Return up to `size` bytes (or the remainder if None) and advance the cursor.

        Returns b"" at the end of data; a cursor beyond the end raises
        `UnexpectedEOFError`.
        """
        if size == 0:
            return b""
        if self._pos > self._len:
            raise UnexpectedEOFError()
        if size is None or size < 0:
            end = self._len
        else:
            end = min(self._pos + size, self._len)
        chunk = bytes(self._data[self._pos : end])
        self._pos = end
        return chunk

    def write_at(self, data: bytes | bytearray | memoryview, position: int) -> int:
        """Write `data` at `position`, growing the contents as needed.

        Outside append mode the cursor ends up right after the written bytes.
        """
        if position < 0:
            raise NegativePositionError()
        n = self._write_at(data, position)
        if not self._append:
            self._pos = position + n
        return n

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write at the cursor, or at the end of data in append mode."""
        if self._append:
            return self.write_at(data, self._len)
        return self.write_at(data, self._pos)

    def _write_at(self, data: bytes | bytearray | memoryview, position: int) -> int:
        with memoryview(data) as raw, raw.cast("B") as view:
            n = view.nbytes
            end = position + n
            if end > self._len:
                if end > len(self._data):
                    # Exact fit, no headroom.
                    grown = bytearray(end)
                    grown[: self._len] = self._data[: self._len]
                    logger.debug("bucket grown from %d to %d bytes", len(self._data), end)
                    self._data = grown
                else:
                    self._data[self._len : end] = bytes(end - self._len)
                self._len = end
            self._data[position:end] = view
        return n

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the cursor and return its new absolute position."""
        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self._pos + offset
        elif whence == os.SEEK_END:
            target = self._len + offset
        else:
            raise InvalidWhenceError()
        if target < 0:
            raise NegativePositionError()
        self._pos = target
        return target

    def truncate(self, size: int) -> None:
        """Clamp or extend the contents to `size` bytes; capacity is kept when shrinking."""
        if size == 0:
            self.reset()
            return
        if size < 0:
            raise NegativeSizeError()
        if size > self._len:
            self._write_at(bytes(size - self._len), self._len)
        self._len = size

    def reset(self) -> None:
        """Empty the bucket and rewind the cursor; capacity is kept."""
        self._len = 0
        self._pos = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._len}, cap={len(self._data)}, "
            f"cursor={self._pos}, append={self._append})"
        )


def new(data: bytes | bytearray | memoryview = b"", *options: BucketOption) -> Bucket:
    """Create a bucket from initial contents and option setters."""
    opts = BucketOptions()
    for apply in options:
        apply(opts)
    return Bucket(data, append=opts.append)
