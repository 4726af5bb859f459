# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Decoding of POSIX-style `os.O_*` flag sets into access modes."""

from __future__ import annotations

import os
from enum import Enum

ACCESS_BITS = os.O_RDONLY | os.O_WRONLY | os.O_RDWR


class AccessMode(str, Enum):
    """Read/write permission encoded by the low bits of an open flag set."""

    READ_ONLY = "readOnly"
    WRITE_ONLY = "writeOnly"
    READ_WRITE = "read&&write"

    @classmethod
    def from_flags(cls, flags: int) -> AccessMode:
        bits = flags & ACCESS_BITS
        if bits & os.O_RDWR:
            return cls.READ_WRITE
        if bits & os.O_WRONLY:
            return cls.WRITE_ONLY
        return cls.READ_ONLY

    @property
    def readable(self) -> bool:
        return self is not AccessMode.WRITE_ONLY

    @property
    def writable(self) -> bool:
        return self is not AccessMode.READ_ONLY


def is_append(flags: int) -> bool:
    return flags & os.O_APPEND != 0


def is_create(flags: int) -> bool:
    return flags & os.O_CREAT != 0


def is_truncate(flags: int) -> bool:
    return flags & os.O_TRUNC != 0


def describe_flags(flags: int) -> str:
    """Render a flag set for humans, e.g. ``File access modes: append read&&write``."""
    parts = []
    if is_create(flags):
        parts.append("create")
    if is_append(flags):
        parts.append("append")
    if is_truncate(flags):
        parts.append("truncate")
    parts.append(AccessMode.from_flags(flags).value)
    return "File access modes: " + " ".join(parts)
