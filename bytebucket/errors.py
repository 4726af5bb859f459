# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Exception types raised by buckets and closers.

Every error derives from `BucketError` and from the builtin that matches it
best, so `except EOFError` or `except ValueError` keep working for callers
that treat a bucket like any other file object.
"""


class BucketError(Exception):
    """Base exception for bucket failures."""


class ClosedError(BucketError, ValueError):
    """Raised when an operation is attempted after close."""

    def __init__(self, message: str = "operation on closed bucket"):
        super().__init__(message)


class NoAccessError(BucketError, PermissionError):
    """Raised when the access mode does not allow the operation."""

    def __init__(self, message: str = "no access"):
        super().__init__(message)


class EndOfDataError(BucketError, EOFError):
    """Raised when a non-empty read starts exactly at the end of data."""

    def __init__(self, message: str = "EOF"):
        super().__init__(message)


class UnexpectedEOFError(BucketError, EOFError):
    """Raised when a read starts beyond the end of data."""

    def __init__(self, message: str = "unexpected EOF"):
        super().__init__(message)


class NegativePositionError(BucketError, ValueError):
    def __init__(self, message: str = "negative position"):
        super().__init__(message)


class NegativeSizeError(BucketError, ValueError):
    def __init__(self, message: str = "negative size"):
        super().__init__(message)


class InvalidWhenceError(BucketError, ValueError):
    def __init__(self, message: str = "invalid whence"):
        super().__init__(message)
