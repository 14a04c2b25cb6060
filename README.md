# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies. The sorting and array functions return new
lists and leave their input untouched.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `dsakit.sorting`     | `count_sort` (non-negative integers only), `insertion_sort`, `bubble_sort`, `merge_sort`, `quicksort`, `shell_sort` |
| `dsakit.searching`   | `binary_search`, `linear_search`: both return an index, or `None` when the value is absent |
| `dsakit.arrays`      | `find_least_greater`, `find_mid_sum`, `all_pairs`, `rearrange`, `wave_order`, `average`, `repeating_elements`, `fibonacci`, `min_max`, `array_sum`, `transpose`, `format_matrix` |
| `dsakit.strings`     | `reverse_number`, `is_number_palindrome`, `is_palindrome`, `string_length`, `reverse_string`, `simplify_path`, `permutations` |
| `dsakit.patterns`    | `floyd_triangle`, `inverted_right_angle`, `right_angle_letters`, `right_angle_numbers`, each returning the pattern as a string |
| `dsakit.linked_list` | `Node`, `LinkedList` (`add`, `remove_last`, `get`, `len()`, iteration), `merge_sorted` |
| `dsakit.queues`      | `ArrayQueue`, `CircularQueue`, `QueueFullError`, `QueueEmptyError`       |
| `dsakit.stacks`      | `LinkedStack`, `StackEmptyError`, `are_pair`, `is_balanced`, `is_same_stack` |
| `dsakit.primes`      | `sieve`, `primes_up_to`, `write_primes`, `sum_values`, `main`            |

## Examples

Sorting and searching:

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search

merge_sort([12, 11, 13, 5, 6, 7, 67])   # [5, 6, 7, 11, 12, 13, 67]
binary_search([1, 3, 5, 7], 5)          # 2
```

Path simplification and bracket matching:

```python
from dsakit.strings import simplify_path
from dsakit.stacks import is_balanced

simplify_path("/a/./b/../../c/")        # "/c"
is_balanced("{([a+b] * [c-d])/2}")      # True
```

Sequences:

```python
from dsakit.arrays import fibonacci

fibonacci(5)                            # [0, 1, 1, 2, 3]
```

Linked lists:

```python
from dsakit.linked_list import merge_sorted

list(merge_sorted([3, 5, 7], [4, 6]))   # [3, 4, 5, 6, 7]
```

## Stacks and queues

Stacks and queues raise exceptions instead of printing messages:

- popping or peeking an empty `LinkedStack` raises `StackEmptyError`;
- `ArrayQueue(capacity=20)` accepts at most `capacity` pushes over its whole
  life, since slots freed by `pop` are not reused; a further `push` raises
  `QueueFullError`, and `pop` or `peek` on an empty queue raises
  `QueueEmptyError`;
- `CircularQueue(size)` reuses its slots, raising `QueueFullError` when all
  `size` slots are occupied and `QueueEmptyError` when dequeuing from an
  empty queue.

## Command line

The prime sieve is also available as a command:

```
dsakit-primes 100
dsakit-primes 100 --mode print
dsakit-primes 100 --mode write --output primes.txt
```

It finds all primes up to the given limit (at most 2 billion) and always
reports how many there are. `--mode count` (the default) reports only the
total, `--mode print` also lists the primes separated by tabs, and
`--mode write` writes them one per line, followed by the total, to the file
named by `--output` (default `prime_numbers.txt`). The command exits with
status 1 if the limit is out of range or the file cannot be written.

## What it does not do

`dsakit-primes` is the only command. The other routines are library
functions: they take their input as arguments rather than prompting for it,
and return their results rather than printing them.