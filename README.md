# algodrills

A collection of classic algorithm exercises. Each one is a plain Python function
that takes ordinary lists, strings or linked-list nodes and returns a result.
The package depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.greedy`

| Function | What it answers |
| --- | --- |
| `max_profit(prices)` | Best total profit from any number of buy/sell trades, holding at most one share |
| `can_place_flowers(flowerbed, n)` | Whether `n` more flowers fit into a bed of 0s and 1s with no two adjacent |
| `find_min_arrow_shots(points)` | Fewest arrows that burst every `[start, end]` balloon interval |
| `check_possibility(nums)` | Whether changing at most one element makes `nums` non-decreasing |
| `partition_labels(s)` | Sizes of the most parts `s` splits into with each letter in one part only |
| `reconstruct_queue(people)` | Queue rebuilt from `[height, taller_or_equal_in_front]` pairs |
| `assign_cookies(children, cookies)` | How many children get a cookie at least as large as their greed |
| `candy(ratings)` | Fewest candies when each child gets one and more than lower-rated neighbours |

None of these functions changes the lists passed to it.
`reconstruct_queue` raises `ValueError` when a pair's count cannot be met.

```python
from algodrills.greedy import partition_labels, reconstruct_queue

partition_labels("ababcbacadefegdehijhklij")   # [9, 7, 8]
reconstruct_queue([[7, 0], [4, 4], [7, 1], [5, 0], [6, 1], [5, 2]])
# [[5, 0], [7, 0], [5, 2], [6, 1], [4, 4], [7, 1]]
```

### `algodrills.two_pointer`

| Name | What it does |
| --- | --- |
| `ListNode(val, next=None)` | Node of a singly linked list |
| `judge_square_sum(c)` | Whether `c` is a sum of two squares; `ValueError` for negative `c` |
| `detect_cycle(head)` | The node where a linked-list cycle starts, or `None` (Floyd's method) |
| `merge(nums1, m, nums2, n)` | Merges the sorted first `n` of `nums2` into the sorted first `m` of `nums1`, in place |
| `min_window(s, t)` | Shortest substring of `s` holding every character of `t`, counting repeats; `""` if none |
| `two_sum(numbers, target)` | 1-based positions of two entries of a sorted list that sum to `target` |

`merge` raises `ValueError` when `m` or `n` is negative or a list is too short;
`two_sum` raises `ValueError` when no pair adds up to `target`.

```python
from algodrills.two_pointer import ListNode, detect_cycle, min_window, two_sum

min_window("ADOBECODEBANC", "ABC")   # "BANC"
two_sum([2, 7, 11, 15], 9)           # [1, 2]

second = ListNode(2)
head = ListNode(3, second)
second.next = ListNode(0, ListNode(-4, second))
detect_cycle(head).val               # 2
```

### `algodrills.daily`

| Function | What it answers |
| --- | --- |
| `partition_array(nums, k)` | Fewest groups where each group's max and min differ by at most `k` |
| `minimize_max(nums, p)` | Smallest possible largest difference across `p` disjoint pairs; `ValueError` for empty `nums` |
| `max_distance(s, k)` | Largest Manhattan distance reached along a walk of `N`/`S`/`E`/`W` moves after changing at most `k` of them |

```python
from algodrills.daily import minimize_max, max_distance

minimize_max([10, 1, 2, 7, 1, 3], 2)   # 1
max_distance("NWSE", 1)                # 3
```

## What it does not do

The package is a library only. It has no command-line program, and it does not
read puzzle input from files or standard input; call the functions from Python.