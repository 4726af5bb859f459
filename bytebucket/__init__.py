# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""In-memory byte buckets that behave like open file handles."""

from .bucket import Bucket, BucketLike, new, read_from
from .closer import Closer, with_closer
from .errors import (
    BucketError,
    ClosedError,
    EndOfDataError,
    InvalidWhenceError,
    NegativePositionError,
    NegativeSizeError,
    NoAccessError,
    UnexpectedEOFError,
)
from .mode_bucket import ModeBucket
from .modes import AccessMode, describe_flags
from .options import BucketOptions, CloserOptions, close_hook, set_append, set_op_modes

__all__ = [
    "AccessMode",
    "Bucket",
    "BucketError",
    "BucketLike",
    "BucketOptions",
    "ClosedError",
    "Closer",
    "CloserOptions",
    "EndOfDataError",
    "InvalidWhenceError",
    "ModeBucket",
    "NegativePositionError",
    "NegativeSizeError",
    "NoAccessError",
    "UnexpectedEOFError",
    "close_hook",
    "describe_flags",
    "new",
    "read_from",
    "set_append",
    "set_op_modes",
    "with_closer",
]
