import math

import pytest

from learnkit.split_rules import (
    average_gini_index,
    base_entropy,
    gini,
    numeric_attribute_entropy,
    split_entropy,
)


@pytest.fixture
def outlook():
    return {
        "sunny": {"play": 2, "noplay": 3},
        "overcast": {"play": 4},
        "rain": {"play": 3, "noplay": 2},
    }


def test_split_entropy_outlook(outlook):
    assert split_entropy(outlook) == pytest.approx(0.694, abs=0.001)


def test_split_entropy_perfect_split_is_zero():
    assert split_entropy({"l": {"a": 3}, "r": {"b": 5}}) == pytest.approx(0.0)


def test_split_entropy_single_branch_is_base_entropy():
    assert split_entropy({"x": {"a": 1, "b": 1}}) == pytest.approx(1.0)


def test_split_entropy_empty_raises():
    with pytest.raises(ValueError):
        split_entropy({"x": {}})


def test_base_entropy_values():
    assert base_entropy({"a": 1, "b": 1}) == pytest.approx(1.0)
    assert base_entropy({"a": 4}) == pytest.approx(0.0)
    assert base_entropy({"yes": 9, "no": 5}) == pytest.approx(0.940, abs=0.001)


def test_base_entropy_empty_raises():
    with pytest.raises(ValueError):
        base_entropy({})


def test_numeric_entropy_clean_split():
    entropy, threshold = numeric_attribute_entropy(
        [1, 2, 3, 4, 5, 6], ["a", "a", "a", "b", "b", "b"]
    )
    assert entropy == pytest.approx(0.0)
    assert threshold == pytest.approx(3.5)


def test_numeric_entropy_unsorted_input():
    entropy, threshold = numeric_attribute_entropy([4, 1, 3, 2], ["b", "a", "b", "a"])
    assert entropy == pytest.approx(0.0)
    assert threshold == pytest.approx(2.5)


def test_numeric_entropy_keeps_first_best():
    entropy, threshold = numeric_attribute_entropy([1, 2, 3], ["a", "b", "a"])
    assert entropy == pytest.approx(2.0 / 3.0)
    assert threshold == pytest.approx(1.5)


def test_numeric_entropy_no_split_possible():
    entropy, threshold = numeric_attribute_entropy([1, 1], ["a", "b"])
    assert entropy == math.inf
    assert threshold == math.inf


def test_numeric_entropy_length_mismatch():
    with pytest.raises(ValueError):
        numeric_attribute_entropy([1, 2, 3], ["a", "b"])


def test_gini_values():
    assert gini({"a": 2, "b": 2}) == pytest.approx(0.5)
    assert gini({"a": 7}) == pytest.approx(0.0)


def test_gini_empty_raises():
    with pytest.raises(ValueError):
        gini({})


def test_average_gini_index_pure_branches():
    assert average_gini_index({"l": {"a": 2}, "r": {"b": 2}}) == pytest.approx(0.0)


def test_average_gini_index_mixed_branches():
    dist = {"l": {"a": 1, "b": 1}, "r": {"a": 1, "b": 1}}
    assert average_gini_index(dist) == pytest.approx(0.5)


def test_average_gini_index_weighted():
    dist = {"l": {"a": 2}, "r": {"a": 1, "b": 1}}
    assert average_gini_index(dist) == pytest.approx(0.25)


def test_average_gini_index_empty_raises():
    with pytest.raises(ValueError):
        average_gini_index({"l": {}, "r": {}})