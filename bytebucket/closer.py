# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Close tracking for bucket-like values.

`Closer` wraps anything implementing `BucketLike` and forwards operations
only while it is open. Mutating operations mark the closer as changed before
forwarding, so the close hook can tell whether the data needs to be flushed
somewhere.
"""

from __future__ import annotations

import logging
import os

from .bucket import BucketLike, read_from
from .errors import ClosedError
from .options import CloseHook, CloserOption, CloserOptions

logger = logging.getLogger(__name__)


class Closer:
    """Bucket wrapper with a one-way open -> closed transition.

    The hook receives the wrapped value rather than the closer, so it can still
    seek and read after the closer itself has stopped accepting calls.
    """

    def __init__(self, inner: BucketLike, close_hook: CloseHook | None = None):
        self._inner = inner
        self._close_hook = close_hook
        self._closed = False
        self._changed = False

    @property
    def inner(self) -> BucketLike:
        return self._inner

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def changed(self) -> bool:
        """True once any write, truncate or reset went through the closer."""
        return self._changed

    def is_closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ClosedError()

    def read_at(self, buf: bytearray | memoryview, offset: int) -> int:
        self._check_open()
        return self._inner.read_at(buf, offset)

    def readinto(self, buf: bytearray | memoryview) -> int:
        self._check_open()
        return self._inner.readinto(buf)

    def read(self, size: int | None = -1) -> bytes:
        self._check_open()
        return read_from(self, size)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        self._check_open()
        self._changed = True
        return self._inner.write(data)

    def write_at(self, data: bytes | bytearray | memoryview, position: int) -> int:
        self._check_open()
        self._changed = True
        return self._inner.write_at(data, position)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        self._check_open()
        return self._inner.seek(offset, whence)

    def tell(self) -> int:
        self._check_open()
        return self._inner.seek(0, os.SEEK_CUR)

    def truncate(self, size: int) -> None:
        self._check_open()
        self._changed = True
        self._inner.truncate(size)

    def reset(self) -> None:
        self._check_open()
        self._changed = True
        self._inner.reset()

    def close(self) -> None:
        """Close the wrapper and run the close hook once.

        The closer is closed even when the hook raises; the hook's exception
        propagates to the caller unchanged.

        Raises:
            ClosedError: If the closer was already closed.
        """
        self._check_open()
        # Closed before the hook runs, so a hook calling close() gets ClosedError.
        self._closed = True
        if self._close_hook is not None:
            logger.debug("running close hook (changed=%s)", self._changed)
            self._close_hook(self._changed, self._inner)

    def __enter__(self) -> Closer:
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Closer({self._inner!r}, {state}, changed={self._changed})"


def with_closer(inner: BucketLike, *options: CloserOption) -> Closer:
    """Wrap `inner` with close tracking configured by option setters."""
    opts = CloserOptions()
    for apply in options:
        apply(opts)
    return Closer(inner, close_hook=opts.close_hook)
