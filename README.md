# algobox

Classic small algorithms written as plain Python functions and classes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algobox.text`

- `highest_occurring_char(text)`: the character that occurs most often; ties go
  to the character with the lowest code point. Raises `ValueError` for an empty string.
- `remove_consecutive_duplicates(text)`: collapses every run of a repeated character into one.
- `first_non_repeating_char(text)`: the first character that occurs exactly once,
  or `None` if there is none.
- `keep_alphabets(text)`: drops every character that is not an ASCII letter.

### `algobox.sorting`

- `insertion_sort(values)` and `selection_sort(values)` return new lists in
  ascending order; the input is left as it is.
- `sort_both_ways(values)` returns a tuple `(ascending, descending)`.

### `algobox.integers`

- `square_series(n)`: the text `1^2+2^2+...+n^2`, empty for `n < 1`.
- `digit_sum(n)`: the sum of the decimal digits, negative for a negative `n`.
- `is_palindrome_number(n)`: whether the decimal digits read the same both ways
  (the sign is ignored).
- `is_leap_year(year)`: the Gregorian leap-year rule.
- `to_binary(n)`: the binary digits of a positive `n`, empty for `n <= 0`.
- `fibonacci(count)`: the first `count` Fibonacci numbers, starting `0, 1`.
- `is_power_of_two(n)`: whether `n` is a positive power of two.
- `hanoi_moves(n, source="p", target="q", spare="r")`: a generator of
  `(disk, from_pole, to_pole)` tuples that solve the Tower of Hanoi.

```python
from algobox.integers import hanoi_moves

print(list(hanoi_moves(2)))  # [(1, 'p', 'r'), (2, 'p', 'q'), (1, 'r', 'q')]
```

### `algobox.arrays`

- `reversed_list(values)`, `squares(values)`, `total(values)`.
- `largest(values)` and `smallest(values)`: raise `ValueError` on an empty sequence.
- `merge_distinct(first, second)`: one ascending list holding each value of both once.
- `find_missing(values)`: the number missing from a shuffle of `1..n+1` with one left out.
- `knapsack(capacity, weights, values)`: the best value for the 0/1 knapsack
  problem. Raises `ValueError` if the lengths differ or the capacity is negative.
- `trapped_water(heights)`: the rain water held between bars.
- `binary_search(values, key)`: an index of `key` in an ascending list, or `-1`.
- `min_chocolate_difference(packets, students)`: the smallest spread between the
  largest and smallest packet when each student gets one. Returns `0` when there
  are no students or no packets; raises `ValueError` when there are more students
  than packets.
- `rotate_left(values, d)`: a new list rotated left by `d` places; `d` must lie
  between `0` and the length, otherwise `ValueError`.
- `tug_of_war(values)`: splits values into two lists of sizes `n // 2` and
  `n - n // 2` whose sums are as close as possible, each keeping the input order.

### `algobox.linkedlist`

`LinkedList(items=())` is a singly linked list. Positions are counted from 1.

- `append(value)`, `prepend(value)`.
- `insert_after(position, value)` and `insert_at(position, value)`: raise
  `IndexError` for a position out of range (and `insert_at` for an empty list).
- `remove(value)`: removes and returns the first equal element; `ValueError` if absent.
- `remove_at(position)`: removes and returns the element there; `IndexError` if out of range.
- `find(value)`: the position of the first equal element, or `None`.
- `reverse()`: reverses the list in place.
- Supports `len()` and iteration.

```python
from algobox.linkedlist import LinkedList

items = LinkedList([7, 1])
items.append(3)
items.reverse()
print(list(items))  # [3, 1, 7]
```

### `algobox.tree`

`TreeNode(val, left=None, right=None)` is a binary tree node. `inorder(root)`
lists the values in in-order, and `mirror(root)` builds a mirrored copy of a
tree, leaving the original untouched.

```python
from algobox.tree import TreeNode, inorder, mirror

root = TreeNode(5, TreeNode(3, TreeNode(2), TreeNode(4)), TreeNode(6))
print(inorder(root))          # [2, 3, 4, 5, 6]
print(inorder(mirror(root)))  # [6, 5, 4, 3, 2]
```

## What it does not do

algobox is a library only. It has no command-line program and reads no input
of its own: every function takes its data as arguments and returns its result
rather than printing it.