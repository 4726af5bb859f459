import os
from unittest.mock import MagicMock

import pytest

from bytebucket.bucket import Bucket, new
from bytebucket.closer import Closer, with_closer
from bytebucket.errors import ClosedError, NegativeSizeError, NoAccessError
from bytebucket.mode_bucket import ModeBucket
from bytebucket.options import close_hook, set_append


def test_close_hook_reads_back_written_data():
    seen = {}

    def hook(changed, inner):
        seen["changed"] = changed
        inner.seek(0)
        seen["data"] = inner.read()

    hook_mock = MagicMock(side_effect=hook)
    bucket = new(b"", set_append(True))
    closer = with_closer(bucket, close_hook(hook_mock))

    closer.write(b"foo")
    closer.write(b" ")
    closer.write(b"bar")
    closer.close()

    hook_mock.assert_called_once()
    assert hook_mock.call_args.args[1] is bucket
    assert seen == {"changed": True, "data": b"foo bar"}


def test_not_closed():
    closer = with_closer(new(b"", set_append(True)))
    assert not closer.is_closed()

    assert closer.write(b"abc") == 3
    assert closer.write_at(b"abc", 3) == 3
    closer.truncate(3)
    assert closer.read() == b"abc"
    assert closer.tell() == 3
    assert closer.seek(1) == 1
    buf = bytearray(2)
    assert closer.readinto(buf) == 2
    assert buf == bytearray(b"bc")
    assert closer.read_at(buf, 0) == 2
    assert buf == bytearray(b"ab")


def test_closed():
    bucket = Bucket(b"", append=True)
    closer = with_closer(bucket)

    closer.close()
    assert closer.is_closed()
    assert closer.closed

    with pytest.raises(ClosedError):
        closer.close()
    assert closer.is_closed()

    with pytest.raises(ClosedError):
        closer.write(b"abc")
    with pytest.raises(ClosedError):
        closer.write_at(b"abc", 3)
    with pytest.raises(ClosedError):
        closer.truncate(3)
    with pytest.raises(ClosedError):
        closer.reset()
    with pytest.raises(ClosedError):
        closer.read()
    with pytest.raises(ClosedError):
        closer.readinto(bytearray(1))
    with pytest.raises(ClosedError):
        closer.read_at(bytearray(1), 0)
    with pytest.raises(ClosedError):
        closer.seek(0)
    with pytest.raises(ClosedError):
        closer.tell()

    assert bucket.getvalue() == b""
    assert closer.changed is False


def test_closed_error_is_value_error():
    closer = with_closer(Bucket())
    closer.close()
    with pytest.raises(ValueError, match="closed"):
        closer.write(b"x")


def test_close_hook_ok():
    hook = MagicMock(return_value=None)
    bucket = new(b"", set_append(True))
    closer = with_closer(bucket, close_hook(hook))

    assert hook.call_count == 0
    closer.close()
    assert closer.is_closed()
    hook.assert_called_once_with(False, bucket)

    with pytest.raises(ClosedError):
        closer.close()
    assert hook.call_count == 1


def test_close_hook_error():
    hook = MagicMock(side_effect=RuntimeError("some errors"))
    closer = with_closer(new(b"", set_append(True)), close_hook(hook))

    with pytest.raises(RuntimeError, match="some errors"):
        closer.close()
    assert hook.call_count == 1
    assert closer.is_closed()

    with pytest.raises(ClosedError):
        closer.close()
    assert hook.call_count == 1


def test_changed_only_after_mutation():
    closer = Closer(Bucket(b"abc"))
    closer.read()
    closer.seek(0)
    assert closer.changed is False

    closer.reset()
    assert closer.changed is True


def test_changed_recorded_before_forwarding():
    closer = Closer(Bucket(b"abc"))
    with pytest.raises(NegativeSizeError):
        closer.truncate(-1)
    assert closer.changed is True


def test_wraps_any_bucket_like():
    hook = MagicMock()
    inner = ModeBucket(b"abc", os.O_RDONLY)
    closer = with_closer(inner, close_hook(hook))

    with pytest.raises(NoAccessError):
        closer.write(b"x")
    assert closer.read() == b"abc"

    closer.close()
    hook.assert_called_once_with(True, inner)
    assert inner.closed is False


def test_context_manager():
    hook = MagicMock()
    bucket = Bucket()

    with with_closer(bucket, close_hook(hook)) as closer:
        closer.write(b"data")

    assert closer.closed
    hook.assert_called_once_with(True, bucket)
    assert bucket.getvalue() == b"data"


def test_context_manager_after_explicit_close():
    with Closer(Bucket()) as closer:
        closer.close()
    assert closer.closed


def test_closer_does_not_clear_storage():
    bucket = Bucket(b"keep")
    closer = Closer(bucket)
    closer.close()
    assert bucket.getvalue() == b"keep"
    assert closer.inner is bucket


def test_close_from_hook_is_rejected():
    closer = None
    errors = []

    def hook(changed, inner):
        try:
            closer.close()
        except ClosedError as error:
            errors.append(error)

    hook_mock = MagicMock(side_effect=hook)
    closer = with_closer(Bucket(), close_hook(hook_mock))
    closer.close()

    assert hook_mock.call_count == 1
    assert len(errors) == 1
    assert closer.closed
