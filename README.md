# drills

Classic programming exercises as small Python functions and classes:
searching, sorting, array and matrix manipulation, number puzzles, string
exercises, linked lists, stacks, queues, binary trees and text patterns.

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

- `drills.searching`: `linear_search`, `binary_search` (index or `None`),
  `binary_search_recursive`, `linear_search_recursive`, `matrix_binary_search`
  (a `(row, column)` pair or `None`), `contains_2d`, `first_occurrence`,
  `last_occurrence`, `count_occurrences`, `mountain_peak`, `pivot_index`,
  `search_rotated`, `integer_sqrt`, `sqrt_with_precision`,
  `is_allocation_possible`, `allocate_books`, `is_sorted_and_rotated`,
  `is_sorted`.
- `drills.arithmetic`: `binary_to_decimal`, `decimal_to_binary`,
  `count_digits`, `reverse_number`, `is_palindrome_number`, `is_prime`,
  `digit_sum_and_product`, `sum_of_evens`, `factorial`, `n_choose_r`,
  `fibonacci`, `fibonacci_series`, `power_of_two`, `power`, `say_digits`,
  `count_notes` (greedy 500/50/20/1 breakdown), `calculate` (`+ - * /`) and
  `classify_char`.
- `drills.sorting`: `insertion_sort`, `selection_sort`, `bubble_sort`,
  `bubble_sort_recursive`, `merge_sort`, `quick_sort`, `merge_sorted` and
  `sort_colors` (values 0, 1 and 2 only). All return new lists and leave
  their input untouched.
- `drills.arrays`: `max_value`, `min_value`, `pair_sums`, `reverse_array`,
  `array_sum`, `sum_from`, `swap_alternate`, `find_unique`, `intersection`,
  `move_zeros`, `insert_at`, `delete_at`, `recursive_sum`,
  `remove_duplicates` and `rotate`.
- `drills.matrix`: `rotate_image` (quarter turn clockwise), `spiral_order`,
  `wave_order`, `row_sums`, `column_sums`, `total_sum`, `largest_row_sum`
  and `format_matrix`.
- `drills.singly`: `Node` and `SinglyLinkedList` with `push_front`,
  `push_back`, `insert_at`, `delete_at`, `pop_front`, `pop_back`, `reverse`
  and `reverse_in_groups`.
- `drills.doubly`: `DoublyNode` and `DoublyLinkedList`, iterable in both
  directions with `reversed()`.
- `drills.circular`: `CircularNode` and `CircularLinkedList` with
  `insert_after`, `remove`, `push_front`, `push_back` and `insert_at`.
- `drills.containers`: `BoundedStack`, `LinkedStack`, `BoundedQueue` and
  `LinkedQueue`, raising `StackOverflowError`, `StackUnderflowError`,
  `QueueFullError` and `QueueEmptyError`. A `BoundedQueue` does not reuse
  slots: once `size` values have been enqueued it stays full.
- `drills.trees`: `TreeNode`, `preorder`, `inorder`, `postorder`, `is_bst`,
  `search_bst`, `search_bst_iterative` and `insert_bst`, which raises
  `DuplicateKeyError` for a value already present.
- `drills.text`: `reverse_string`, `is_palindrome`,
  `is_palindrome_ignore_case`, `max_occurring_char` and `encode_spaces`
  (each space becomes `@40`).
- `drills.star_patterns`, `drills.number_patterns`: the classic printed
  patterns (pyramids, diamonds, triangles, Floyd's triangle, concentric
  squares and more), each returned as a list of lines.

Positions in the linked lists are 1-based. Invalid arguments raise
`ValueError` or `IndexError` rather than returning sentinel values.

## Examples

```python
from drills.searching import binary_search, first_occurrence, last_occurrence
from drills.sorting import merge_sort
from drills.singly import SinglyLinkedList
from drills.star_patterns import star_pyramid

binary_search([0, 1, 2, 4, 5, 6, 7], 0)               # 0
binary_search([1, 2, 3, 4, 5], 10)                    # None
first_occurrence([1, 2, 2, 3, 3, 3, 5], 3)            # 3
last_occurrence([1, 2, 2, 3, 3, 3, 5], 3)             # 5
merge_sort([42, 4, 13, 141, 23, 1])                   # [1, 4, 13, 23, 42, 141]

values = SinglyLinkedList([6, 7, 8, 9, 10])
values.reverse_in_groups(2)
list(values)                                          # [7, 6, 9, 8, 10]

print("\n".join(star_pyramid(4)))
#    *
#   ***
#  *****
# *******
```

## What it does not do

There is no command-line program and nothing reads from standard input or
prints: every exercise is a function or class that takes its input as
arguments and returns its result.