import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.dynamic import (
    Direction,
    knapsack_01,
    lcs,
    matrix_chain_order,
)


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(any(c == w for w in it) for c in part)


# ---- LCS ----

@pytest.mark.parametrize("x, y", [("ABBCAAC", "ACCBCCA"), ("GXTXATB", "AGGTAB")])
def test_lcs_source_examples_are_common_and_match_length(x, y):
    result = lcs(x, y)
    sub = result.subsequence()
    assert _is_subsequence(sub, x)
    assert _is_subsequence(sub, y)
    assert len(sub) == result.length == result.lengths[len(x)][len(y)]


def test_lcs_table_shape_and_borders():
    result = lcs("ABBCAAC", "ACCBCCA")
    assert len(result.lengths) == 8
    assert all(len(row) == 8 for row in result.lengths)
    assert all(row[0] == 0 for row in result.lengths)
    assert set(result.lengths[0]) == {0}
    assert result.directions[0][0] is None


def test_lcs_identical_strings():
    result = lcs("AGGTAB", "AGGTAB")
    assert "".join(result.subsequence()) == "AGGTAB"
    assert all(result.directions[i][i] is Direction.DIAGONAL for i in range(1, 7))


def test_lcs_with_empty():
    assert lcs("ABC", "").subsequence() == []
    assert lcs("", "ABC").length == 0


def test_lcs_tie_prefers_up():
    result = lcs("A", "B")
    assert result.directions[1][1] is Direction.UP


@given(st.text(alphabet="ABC", max_size=12), st.text(alphabet="ABC", max_size=12))
def test_lcs_properties(x, y):
    result = lcs(x, y)
    sub = result.subsequence()
    assert _is_subsequence(sub, x) and _is_subsequence(sub, y)
    assert len(sub) == result.length
    assert result.length <= min(len(x), len(y))
    assert result.length == lcs(y, x).length


# ---- matrix chain ----

def test_matrix_chain_classic():
    result = matrix_chain_order([30, 35, 15, 5, 10, 20, 25])
    assert result.cost == 15125
    assert result.parenthesization() == "((A1(A2A3))((A4A5)A6))"


def test_matrix_chain_single_matrix():
    result = matrix_chain_order([4, 7])
    assert result.cost == 0
    assert result.parenthesization() == "A1"


def test_matrix_chain_two_matrices():
    dims = [3, 4, 5]
    result = matrix_chain_order(dims)
    assert result.cost == dims[0] * dims[1] * dims[2]
    assert result.parenthesization() == "(A1A2)"


@pytest.mark.parametrize("dims", [[], [5], [3, 0, 2]])
def test_matrix_chain_rejects_bad_dimensions(dims):
    with pytest.raises(ValueError):
        matrix_chain_order(dims)


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=2, max_size=8))
def test_matrix_chain_properties(dims):
    result = matrix_chain_order(dims)
    text = result.parenthesization()
    n = len(dims) - 1
    assert [int(m) for m in re.findall(r"A(\d+)", text)] == list(range(1, n + 1))
    assert text.count("(") == text.count(")") == n - 1
    # never worse than multiplying strictly left to right
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, n))
    assert result.cost <= left_to_right


# ---- 0/1 knapsack ----

def test_knapsack_backtrack_example():
    result = knapsack_01(8, [3, 4, 5, 6], [2, 3, 4, 1])
    assert result.best_value == 6
    chosen = result.selected()
    assert sum(result.weights[i] for i in chosen) <= 8
    assert sum(result.values[i] for i in chosen) == result.best_value


def test_knapsack_table_shape():
    result = knapsack_01(8, [3, 4, 5, 6], [2, 3, 4, 1])
    assert len(result.table) == 5
    assert all(len(row) == 9 for row in result.table)
    assert set(result.table[0]) == {0}


def test_knapsack_nothing_fits():
    result = knapsack_01(2, [3, 4], [10, 20])
    assert result.best_value == 0
    assert result.selected() == []


def test_knapsack_zero_capacity():
    assert knapsack_01(0, [1], [5]).selected() == []


@pytest.mark.parametrize(
    "capacity, weights, values",
    [(-1, [1], [1]), (5, [1, 2], [1]), (5, [-1], [3])],
)
def test_knapsack_rejects_bad_input(capacity, weights, values):
    with pytest.raises(ValueError):
        knapsack_01(capacity, weights, values)


@given(
    st.integers(min_value=0, max_value=30),
    st.lists(
        st.tuples(st.integers(min_value=1, max_value=10), st.integers(min_value=0, max_value=50)),
        max_size=8,
    ),
)
def test_knapsack_properties(capacity, items):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    result = knapsack_01(capacity, weights, values)
    chosen = result.selected()
    assert chosen == sorted(set(chosen))
    assert sum(weights[i] for i in chosen) <= capacity
    assert sum(values[i] for i in chosen) == result.best_value
    for w, v in items:
        if w <= capacity:
            assert result.best_value >= v