import pytest

from mdiff.change import Change
from mdiff.diff_result import DiffResult


def walk(trace, a_size, b_size):
    return [
        (change.kind, change.a, change.b, change.header())
        for change in Change.filter(DiffResult(tuple(trace)), a_size, b_size)
    ]


def test_it_reports_nothing_when_everything_matches():
    assert walk([(0, 0), (1, 1)], 2, 2) == []


def test_it_reports_nothing_for_two_empty_inputs():
    assert walk([], 0, 0) == []


def test_it_reports_leading_and_trailing_changes():
    assert walk([(1, 1)], 3, 3) == [
        ("c", range(0, 1), range(0, 1), "1c1"),
        ("c", range(2, 3), range(2, 3), "3c3"),
    ]


def test_it_reports_an_addition_after_a_matched_line():
    assert walk([(0, 0), (1, 2)], 2, 3) == [("a", range(1, 1), range(1, 2), "1a2")]


def test_it_reports_a_deletion_between_matched_lines():
    assert walk([(0, 0), (2, 1)], 3, 2) == [("d", range(1, 2), range(1, 1), "2d1")]


def test_it_reports_everything_added_to_an_empty_input():
    assert walk([], 0, 3) == [("a", range(0, 0), range(0, 3), "0a1,3")]


def test_it_reports_everything_deleted_from_an_input():
    assert walk([], 2, 0) == [("d", range(0, 2), range(0, 0), "1,2d0")]


def test_it_reports_multi_line_changes():
    assert walk([(2, 3)], 3, 4) == [("c", range(0, 2), range(0, 3), "1,2c1,3")]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (range(4, 5), range(6, 6), "5d6"),
        (range(0, 0), range(3, 5), "0a4,5"),
        (range(9, 12), range(2, 3), "10,12c3"),
    ],
)
def test_header_notation(a: range, b: range, expected: str):
    assert Change(a, b).header() == expected
