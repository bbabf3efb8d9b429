from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.two_pointer import (
    ListNode,
    detect_cycle,
    judge_square_sum,
    merge,
    min_window,
    two_sum,
)


def _chain(values):
    nodes = [ListNode(v) for v in values]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return nodes


def test_judge_square_sum_example():
    assert judge_square_sum(5) is True


def test_judge_square_sum_zero():
    assert judge_square_sum(0) is True


def test_judge_square_sum_three_is_not_sum_of_squares():
    assert judge_square_sum(3) is False


@given(st.integers(min_value=0, max_value=3000), st.integers(min_value=0, max_value=3000))
def test_judge_square_sum_accepts_sums_of_squares(a, b):
    assert judge_square_sum(a * a + b * b) is True


def test_judge_square_sum_rejects_negative():
    with pytest.raises(ValueError):
        judge_square_sum(-1)


def test_detect_cycle_finds_entry():
    nodes = _chain([3, 2, 0, -4])
    nodes[-1].next = nodes[1]
    assert detect_cycle(nodes[0]) is nodes[1]


def test_detect_cycle_without_cycle():
    nodes = _chain([1, 2])
    assert detect_cycle(nodes[0]) is None


def test_detect_cycle_empty_list():
    assert detect_cycle(None) is None


def test_detect_cycle_self_loop():
    node = ListNode(7)
    node.next = node
    assert detect_cycle(node) is node


@given(st.integers(min_value=1, max_value=30), st.data())
def test_detect_cycle_any_entry(length, data):
    entry = data.draw(st.integers(min_value=0, max_value=length - 1))
    nodes = _chain(list(range(length)))
    nodes[-1].next = nodes[entry]
    assert detect_cycle(nodes[0]) is nodes[entry]


def test_merge_example():
    nums1 = [1, 2, 3, 0, 0, 0]
    merge(nums1, 3, [2, 5, 6], 3)
    assert nums1 == sorted([1, 2, 3, 2, 5, 6])


def test_merge_into_empty_prefix():
    nums1 = [0, 0, 0]
    merge(nums1, 0, [2, 5, 6], 3)
    assert nums1 == [2, 5, 6]


@given(
    st.lists(st.integers(-100, 100), max_size=20),
    st.lists(st.integers(-100, 100), max_size=20),
)
def test_merge_produces_sorted_union(first, second):
    first.sort()
    second.sort()
    nums1 = first + [0] * len(second)
    merge(nums1, len(first), second, len(second))
    assert nums1 == sorted(first + second)


def test_merge_rejects_short_target():
    with pytest.raises(ValueError):
        merge([1, 2], 2, [3], 1)


def test_min_window_example():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_min_window_missing_character():
    assert min_window("ADOBECODEBANC", "XYZ") == ""


def test_min_window_empty_pattern():
    assert min_window("ADOBECODEBANC", "") == ""


def test_min_window_respects_multiplicity():
    assert min_window("a", "aa") == ""


@given(st.text(alphabet="abc", max_size=30), st.text(alphabet="abc", min_size=1, max_size=4))
def test_min_window_covers_pattern(s, t):
    window = min_window(s, t)
    needed = Counter(t)
    if window:
        assert window in s
        assert not needed - Counter(window)
    else:
        assert needed - Counter(s)


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == [1, 2]


def test_two_sum_no_pair():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


def test_two_sum_empty():
    with pytest.raises(ValueError):
        two_sum([], 0)


@given(st.lists(st.integers(-50, 50), min_size=2, max_size=20), st.data())
def test_two_sum_finds_valid_pair(numbers, data):
    numbers.sort()
    i = data.draw(st.integers(0, len(numbers) - 2))
    j = data.draw(st.integers(i + 1, len(numbers) - 1))
    target = numbers[i] + numbers[j]
    first, second = two_sum(numbers, target)
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target