import errno
import io
import os

import pytest

from cubcaster.errors import RED, RESET, CubError, format_error, report


def test_format_message_only():
    assert format_error(0, "expected one argument") == "expected one argument"


def test_format_code_only():
    assert format_error(errno.EINVAL, None) == os.strerror(errno.EINVAL)


def test_format_code_and_message():
    text = format_error(errno.EINVAL, "invalid texture")
    assert text == os.strerror(errno.EINVAL) + ": invalid texture"


def test_format_nothing_is_empty():
    assert format_error(0, None) == ""


def test_cub_error_carries_fields():
    err = CubError("extension should be .cub", errno.EINVAL)
    assert err.error_code == errno.EINVAL
    assert err.message == "extension should be .cub"
    assert str(err) == format_error(errno.EINVAL, "extension should be .cub")


def test_cub_error_raised_and_caught():
    with pytest.raises(CubError) as excinfo:
        raise CubError("Error: missing element")
    assert excinfo.value.message == "Error: missing element"
    assert str(excinfo.value) == "Error: missing element"
    stream = io.StringIO()
    report(excinfo.value, stream)
    assert stream.getvalue() == f"{RED}Error: missing element\n{RESET}"


def test_report_writes_coloured_line():
    stream = io.StringIO()
    report(CubError("Error: invalid map"), stream)
    assert stream.getvalue() == f"{RED}Error: invalid map\n{RESET}"


def test_report_accepts_plain_text():
    stream = io.StringIO()
    report("oops", stream)
    assert stream.getvalue().startswith(RED)
    assert "oops\n" in stream.getvalue()


def test_report_empty_writes_nothing():
    stream = io.StringIO()
    report(CubError(), stream)
    assert stream.getvalue() == ""