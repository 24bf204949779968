# algokit

A library of classic algorithms and small data structures, written as plain
Python functions and classes. It uses only the standard library.

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

| Module | Contents |
| --- | --- |
| `algokit.strings` | `compute_lps`, `kmp_search`, `longest_common_prefix`, `min_window`, `is_palindrome`, `longest_word` |
| `algokit.patterns` | `regex_match`, `wildcard_match` |
| `algokit.expressions` | `tokenize`, `infix_to_postfix`, `is_balanced`, `Token`, `TokenKind`, `InvalidExpressionError` |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `counting_sort` |
| `algokit.arrays` | `max_histogram_area`, `min_chocolates`, `largest_subarray_sum`, `linear_search`, `longest_arithmetic_subarray`, `longest_consecutive_sequence`, `kadane`, `max_circular_subarray_sum`, `maximum_xor_pair`, `median_of_sorted` |
| `algokit.matrix` | `multiply`, `staircase_search`, `rank`, `spiral_order`, `transpose` |
| `algokit.grids` | `largest_island`, `solve_n_queens`, `solve_sudoku` |
| `algokit.trees` | `TreeNode`, `min_depth`, `to_doubly_linked_list`, `iter_list` |
| `algokit.numbers` | `count_set_bits_up_to`, `is_even`, `to_binary`, `from_binary`, `fibonacci`, `factorial`, `is_number_palindrome`, `recursion_trace`, `reverse_number`, `primes_up_to`, `add_binary`, `digit_sum` |
| `algokit.queues` | `DoubleEndedQueue`, `CircularQueue`, `QueueOverflowError`, `QueueUnderflowError` |
| `algokit.sets` | `sorted_union`, `intersection`, `difference`, `symmetric_difference`, `is_subset`, `cartesian_product`, `complement` |

## Strings and patterns

```python
from algokit.strings import kmp_search, longest_common_prefix, min_window
from algokit.patterns import regex_match, wildcard_match

kmp_search("ABABCABAB", "ABABDABACDABABCABAB")   # [10]
longest_common_prefix(["flower", "flow", "flight"])  # "fl"
min_window("ADOBECODEBANC", "ABC")               # "BANC"

regex_match("aab", "c*a*b")        # True  ('.' any char, '*' repeats the element before it)
wildcard_match("adceb", "*a*b")    # True  ('?' any char, '*' any run)
```

`kmp_search` returns every start index, overlaps included, and raises
`ValueError` for an empty pattern. `regex_match` raises `ValueError` when the
pattern starts with `*`.

## Expressions

```python
from algokit.expressions import infix_to_postfix, is_balanced

infix_to_postfix("3 + 4 * 2")   # "3 4 2 * +"
is_balanced("{[()]}")           # True
is_balanced("(]")               # False
```

`infix_to_postfix` works on non-negative integer literals, parentheses and
the operators `^ / % * + -`. A `-` after an operator or `(`, or a leading `-`
directly followed by a number, becomes unary negation and is written `~` in
the output. Precedence, from highest: `~`, `^`, `/` and `%`, `*`, `+` and
`-`; `^` groups to the right. Characters outside this set are ignored. A
malformed or unbalanced expression raises `InvalidExpressionError` (a
`ValueError`).

## Sorting and arrays

```python
from algokit.sorting import merge_sort, counting_sort
from algokit.arrays import max_histogram_area, median_of_sorted

merge_sort([34, 1, 7, 98, 45])        # [1, 7, 34, 45, 98]
counting_sort([12, 5, -6, 3, 0])      # [-6, 0, 3, 5, 12]
max_histogram_area([6, 2, 5, 4, 5, 1, 6])  # 12
median_of_sorted([1, 3], [2])         # 2.0
```

Every sort returns a new list and leaves its input alone. `kadane` and
`max_circular_subarray_sum` floor their result at 0; `kadane` raises
`ValueError` for an empty sequence, and `median_of_sorted` raises
`ValueError` when both sequences are empty.

## Matrices and grids

```python
from algokit.matrix import rank, spiral_order
from algokit.grids import largest_island, solve_n_queens, solve_sudoku

rank([[10, 20, 10], [-20, -30, 10], [30, 50, 0]])   # 2
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])     # [1, 2, 3, 6, 9, 8, 7, 4, 5]
largest_island([[1, 0], [0, 1]])                    # 3
len(solve_n_queens(4))                              # 2
```

`rank` reduces exactly with fractions. Ragged matrices raise `ValueError`.
`solve_sudoku` takes a 9 x 9 board of digit strings with `"."` for blanks and
returns a solved copy; it raises `ValueError` for a malformed board or one
with no solution.

## Trees

```python
from algokit.trees import TreeNode, min_depth, to_doubly_linked_list, iter_list

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
min_depth(root)                                # 2
list(iter_list(to_doubly_linked_list(root)))   # [4, 2, 5, 1, 3]
```

`to_doubly_linked_list` rewires the tree in place: `left` becomes the link to
the previous node and `right` the link to the next.

## Numbers

```python
from algokit.numbers import count_set_bits_up_to, primes_up_to, add_binary, recursion_trace

count_set_bits_up_to(4)     # 5
primes_up_to(10)            # [2, 3, 5, 7]
add_binary("101", "11")     # "1000"
recursion_trace(3)          # [3, 2, 1, 1, 2, 3]
```

`to_binary(0)` and a zero sum from `add_binary` give an empty string.

## Queues and sets

```python
from algokit.queues import CircularQueue, DoubleEndedQueue
from algokit.sets import sorted_union, symmetric_difference

q = CircularQueue()          # capacity 4 by default
q.enqueue(1); q.enqueue(2)
q.dequeue()                  # 1

d = DoubleEndedQueue()       # capacity 5 by default
d.push_front(1); d.push_back(2)
list(d)                      # [1, 2]

sorted_union([1, 3, 5], [1, 2, 5])          # [1, 2, 3, 5]
symmetric_difference([1, 3, 5], [1, 2, 5])  # [2, 3]
```

Adding to a full queue raises `QueueOverflowError`; removing from an empty
one raises `QueueUnderflowError` (an `IndexError`). `sorted_union` and
`symmetric_difference` expect ascending inputs.

## What it does not do

algokit is a library only. It has no command-line program and no interactive
menus: nothing reads from standard input or prints results. Call the
functions and classes from your own code.