import logging

import pytest

from versort.options import SortOptions
from versort.semver import MissingMajorError, UnrecognizedTextError
from versort.sort import UnparseableLineError, read_versions, render, sort_versions, versort
from tests.basetest import ExpectError, assert_in, assert_not_in


@pytest.mark.parametrize("lines,want", [
    (["1.0.0", "1.0.0-rc1", "1.0.0-alpha", "1.0.0p1"],
     ["1.0.0-alpha", "1.0.0-rc1", "1.0.0", "1.0.0p1"]),
    (["2.0", "1.9.9", "2.0.0"],
     ["1.9.9", "2.0", "2.0.0"]),
    (["1.0.0-beta10", "1.0.0-beta2"],
     ["1.0.0-beta2", "1.0.0-beta10"]),
    (["1.10", "1.9", "1.1"],
     ["1.1", "1.9", "1.10"]),
])
def test_versort(lines, want):
    assert versort(lines) == want


def test_versort_format():
    lines = ["1.0.0", "1.0.0_RC.1", "1.0.0-alpha", "1.0.0p1"]
    assert versort(lines, SortOptions(format=True)) == ["1.0.0-alpha1", "1.0.0-rc1", "1.0.0", "1.0.0p1"]


def test_versort_format_count_is_char():
    lines = ["1.2b", "1.2", "1.2a"]
    options = SortOptions(format=True, count_is_char=True)
    assert versort(lines, options) == ["1.2", "1.2a", "1.2b"]


def test_blank_lines_skipped():
    lines = ["1.0\n", "\n", "   \n", "\t\n", "0.5\n"]
    assert versort(lines) == ["0.5", "1.0"]


def test_line_endings_stripped():
    assert versort(["2.0\r\n", "1.0\n"]) == ["1.0", "2.0"]


def test_equal_versions_keep_input_order():
    assert versort(["1.0-rc1", "1.0-rc", "0.1"]) == ["0.1", "1.0-rc1", "1.0-rc"]
    assert versort(["1.0-rc", "1.0-rc1", "0.1"]) == ["0.1", "1.0-rc", "1.0-rc1"]


def test_failure_aborts():
    with ExpectError("Failed to parse 'garbage' into a semver: Unrecognized text",
                     "garbage should abort the run", UnparseableLineError):
        versort(["1.0", "garbage", "0.9"])


def test_failure_carries_cause():
    with pytest.raises(UnparseableLineError) as info:
        read_versions(["1.0", "-.-"])
    assert info.value.line == "-.-"
    assert isinstance(info.value.err, MissingMajorError)


def test_ignore_drops_lines(caplog):
    with caplog.at_level(logging.INFO, logger="versort"):
        got = versort(["1.0", "garbage", "0.9", "1.0.x"], SortOptions(ignore=True))
    assert got == ["0.9", "1.0"]
    assert_in("Ignoring 'garbage': Unrecognized text", caplog.text)


def test_lenient():
    options = SortOptions(lenient=True)
    assert versort(["1.1.x", "1.0"], options) == ["1.0", "1.1.x"]
    with pytest.raises(UnparseableLineError) as info:
        versort(["1.1.x", "1.0"])
    assert isinstance(info.value.err, UnrecognizedTextError)


def test_read_versions_pairs():
    parsed = read_versions(["1.0-beta2\n", "0.1\n"])
    assert [line for line, _ in parsed] == ["1.0-beta2", "0.1"]
    assert str(parsed[0][1]) == "1.0-beta2"


def test_render():
    parsed = sort_versions(read_versions(["1.0.0c1", "0.9"]))
    assert render(parsed) == ["0.9", "1.0.0c1"]
    assert render(parsed, SortOptions(format=True)) == ["0.9", "1.0.0-rc1"]
    assert_not_in("1.0.0c1", render(parsed, SortOptions(format=True)))


def test_empty():
    assert versort([]) == []
    assert versort(["", "  "]) == []
