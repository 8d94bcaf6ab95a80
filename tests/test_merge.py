from ordset import merge
import pytest


def test_canonicalize():
    assert merge.canonicalize([3, 1, 2, 3, 1]) == [1, 2, 3]
    assert merge.canonicalize([]) == []


def test_canonicalize_keeps_first_occurrence():
    assert merge.canonicalize(["B", "a", "b", "A"], key=str.lower) == ["a", "B"]


def test_canonicalize_treats_equal_values_as_duplicates():
    assert merge.canonicalize([1, 1.0, True]) == [1]


@pytest.mark.parametrize(
    "seq, item, expected",
    [
        ([], 1, (0, False)),
        ([1, 3, 5], 0, (0, False)),
        ([1, 3, 5], 3, (1, True)),
        ([1, 3, 5], 4, (2, False)),
        ([1, 3, 5], 6, (3, False)),
    ],
)
def test_bisect_position(seq, item, expected):
    assert merge.bisect_position(seq, item) == expected


def test_bisect_position_with_key():
    seq = [5, 3, 1]
    neg = lambda x: -x  # noqa: E731
    assert merge.bisect_position(seq, 3, key=neg) == (1, True)
    assert merge.bisect_position(seq, 4, key=neg) == (1, False)
    assert merge.bisect_position(seq, 0, key=neg) == (3, False)


def test_union_takes_left_element_on_tie():
    left = ["a", "B"]
    right = ["A", "b", "c"]
    assert merge.union(left, right, key=str.lower) == ["a", "B", "c"]


def test_set_operations_with_empty_operands():
    assert merge.union([], [1]) == [1]
    assert merge.intersection([1, 2], []) == []
    assert merge.difference([1, 2], []) == [1, 2]
    assert merge.difference([], [1, 2]) == []
    assert merge.symmetric_difference([], [1]) == [1]
    assert merge.is_disjoint([], [])
    assert merge.is_subset([], [])
    assert not merge.is_subset([1], [])


def test_inputs_are_not_modified():
    left, right = [1, 2, 3], [2, 4]
    merge.union(left, right)
    merge.difference(left, right)
    assert left == [1, 2, 3]
    assert right == [2, 4]


def test_is_disjoint_stops_at_first_shared_element():
    calls = []

    def key(x):
        calls.append(x)
        return x

    assert not merge.is_disjoint([1, 2, 3, 4, 5], [1, 2, 3, 4, 5], key=key)
    assert len(calls) == 2


def test_is_subset_fails_fast():
    calls = []

    def key(x):
        calls.append(x)
        return x

    assert not merge.is_subset([0, 10, 20, 30], [1, 2, 3, 4, 5, 6], key=key)
    assert len(calls) == 2
