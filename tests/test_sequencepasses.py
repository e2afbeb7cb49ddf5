import itertools

from hypothesis import given, strategies as st

from subsequencesearch.sequencepasses import (
    count_candidates,
    covers_candidates,
    delete_at,
    deletion_candidates,
)


def test_delete_at_keeps_type():
    assert delete_at([1, 2, 3], 1) == [1, 3]
    assert delete_at((1, 2, 3), 0) == (2, 3)
    assert delete_at(b"abc", 2) == b"ab"
    assert delete_at("abc", 1) == "ac"


def test_candidates_of_five_elements_in_order():
    candidates = list(deletion_candidates([0, 1, 2, 3, 4]))
    assert candidates[:5] == [
        [1, 2, 3, 4],
        [0, 2, 3, 4],
        [0, 1, 3, 4],
        [0, 1, 2, 4],
        [0, 1, 2, 3],
    ]
    assert candidates[5:10] == [
        [2, 3, 4],
        [1, 3, 4],
        [1, 2, 4],
        [1, 2, 3],
        [0, 3, 4],
    ]
    assert candidates[-5:] == [[4], [3], [2], [1], [0]]
    assert len(candidates) == 30


def test_no_candidates_for_short_sequences():
    assert list(deletion_candidates([])) == []
    assert list(deletion_candidates([7])) == []


def test_two_elements():
    assert list(deletion_candidates("ab")) == ["b", "a"]


def test_count_candidates():
    assert count_candidates(0) == 0
    assert count_candidates(1) == 1
    assert count_candidates(10) == 1023


@given(st.integers(min_value=0, max_value=8))
def test_matches_combinations_of_deleted_positions(n):
    sequence = list(range(n))
    expected = [
        [x for x in sequence if x not in deleted]
        for k in range(1, n)
        for deleted in itertools.combinations(sequence, k)
    ]
    assert list(deletion_candidates(sequence)) == expected


@given(st.integers(min_value=0, max_value=10))
def test_count_agrees_with_enumeration(n):
    assert count_candidates(n) == len(list(deletion_candidates(list(range(n))))) + (
        1 if n > 0 else 0
    )


def test_covers_candidates():
    assert covers_candidates(1023, 10)
    assert not covers_candidates(1022, 10)
    assert not covers_candidates(5, 20000)
    assert not covers_candidates(0, 1)
    assert not covers_candidates(-3, 2)
    assert covers_candidates(0, 0)


@given(st.integers(min_value=-5, max_value=300), st.integers(min_value=0, max_value=12))
def test_covers_candidates_agrees_with_count(max_evaluations, n):
    assert covers_candidates(max_evaluations, n) == (
        max_evaluations >= count_candidates(n)
    )
