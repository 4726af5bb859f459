# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Bucket gated by the access mode of the file it stands in for."""

from __future__ import annotations

import os

from .bucket import Bucket
from .errors import ClosedError, NoAccessError
from .modes import AccessMode, is_append


class ModeBucket(Bucket):
    """Bucket that honours an `os.O_*` flag set and tracks its own close state.

    The flags are decoded once: reads need a readable mode, writes, truncate
    and reset need a writable one, and `os.O_APPEND` turns on append mode.
    Every operation fails with `ClosedError` after `close()`.
    """

    def __init__(self, data: bytes | bytearray | memoryview = b"", flags: int = os.O_RDWR):
        super().__init__(data, append=is_append(flags))
        self._flags = flags
        self._access = AccessMode.from_flags(flags)
        self._closed = False
        self._changed = False

    @property
    def mode(self) -> int:
        """The flag set the bucket was created with."""
        return self._flags

    @property
    def access(self) -> AccessMode:
        return self._access

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def changed(self) -> bool:
        return self._changed

    def _check(self, allowed: bool = True) -> None:
        if self._closed:
            raise ClosedError()
        if not allowed:
            raise NoAccessError()

    def read_at(self, buf: bytearray | memoryview, offset: int) -> int:
        self._check(self._access.readable)
        return super().read_at(buf, offset)

    def read(self, size: int | None = -1) -> bytes:
        self._check(self._access.readable)
        return super().read(size)

    def write_at(self, data: bytes | bytearray | memoryview, position: int) -> int:
        self._check(self._access.writable)
        n = super().write_at(data, position)
        self._changed = True
        return n

    def write(self, data: bytes | bytearray | memoryview) -> int:
        self._check(self._access.writable)
        return super().write(data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        self._check()
        return super().seek(offset, whence)

    def tell(self) -> int:
        self._check()
        return super().tell()

    def truncate(self, size: int) -> None:
        self._check(self._access.writable)
        super().truncate(size)
        self._changed = True

    def reset(self) -> None:
        self._check(self._access.writable)
        super().reset()
        self._changed = True

    def close(self) -> None:
        self._check()
        self._closed = True

    def __enter__(self) -> ModeBucket:
        self._check()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.close()
