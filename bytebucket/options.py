# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Construction options for buckets and closers.

Options are small callables that mutate an options dataclass, so factories
accept any number of them in any order:

    bucket = new(b"abc", set_op_modes(os.O_RDWR | os.O_APPEND))
    closer = with_closer(bucket, close_hook(flush))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .modes import is_append

if TYPE_CHECKING:
    from .bucket import BucketLike

CloseHook = Callable[[bool, "BucketLike"], None]


@dataclass
class BucketOptions:
    """Settings applied when a bucket is created."""

    # Writes always go to the end of data.
    append: bool = False


@dataclass
class CloserOptions:
    """Settings applied when a closer is created."""

    # Called once, on the first close, with (changed, wrapped bucket).
    close_hook: CloseHook | None = None


BucketOption = Callable[[BucketOptions], None]
CloserOption = Callable[[CloserOptions], None]


def set_append(value: bool) -> BucketOption:
    """Set the append flag directly."""

    def apply(options: BucketOptions) -> None:
        options.append = value

    return apply


def set_op_modes(flags: int) -> BucketOption:
    """Derive the append flag from an `os.O_*` flag set."""

    def apply(options: BucketOptions) -> None:
        options.append = is_append(flags)

    return apply


def close_hook(fn: CloseHook) -> CloserOption:
    """Register the callback run by the first `close()`."""

    def apply(options: CloserOptions) -> None:
        options.close_hook = fn

    return apply
