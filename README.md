# algodrills

Small algorithm drills, grouped by topic. The package has no dependencies
beyond the standard library.

## Modules

- `algodrills.numbers`: `is_armstrong`, `proper_divisors`, `divisors`,
  `gcd_brute`, `gcd_descending`, `gcd_subtraction`, `gcd_euclid`,
  `count_digits`, `count_digits_log`, `reverse_number`,
  `is_palindrome_number`, `is_palindrome_number_bounded`, `reverse_integer`
  (returns 0 when the reversed value leaves the signed 32-bit range),
  `is_prime` (trial division; numbers below 4 are reported prime),
  `factorial`, `factorial_recursive`, `fibonacci`, `fibonacci_recursive`,
  `fibonacci_sequence` and `sum_to`.
- `algodrills.strings`: `longest_common_prefix`, `reverse_chars` (in place),
  `is_palindrome`, and `is_alnum_palindrome`, which compares only ASCII
  letters (case-insensitively) and the control characters U+0000 to U+0009;
  digits and punctuation are skipped.
- `algodrills.recursion`: `count_from`, `greetings`, `count_up`,
  `count_down`, `reverse_in_place` and `reverse_recursive`.
- `algodrills.hashing`: `count_frequencies`, `count_bounded`,
  `count_letters`, `count_ascii`, `sorted_frequencies` and
  `highest_and_lowest_frequency`.
- `algodrills.sorting`: in-place `bubble_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `quick_sort`, `recursive_bubble_sort` and
  `recursive_insertion_sort`, plus `permutations_in_order` (a generator of
  the string and every lexicographically greater arrangement) and `popcount`.
- `algodrills.arrays`: `largest`, `second_largest`, `second_smallest`,
  `is_sorted`, `remove_duplicates`, `rotate_left`, `rotate_left_by`,
  `linear_search`, `move_zeroes`, `union_sorted`, `missing_number`,
  `max_consecutive_ones` and `single_number`.
- `algodrills.subarrays`: `two_sum`, `two_sum_sorted`, `alternate_signs`,
  `max_profit`, `longest_subarray_with_sum`,
  `longest_positive_subarray_with_sum`, `majority_element`, `majority_vote`,
  `max_subarray`, `max_subarray_sum_clamped` and `sort_colors`.
- `algodrills.patterns`: `render`, `available` and the `main` command.

Functions raise `ValueError` for input they cannot handle, such as an empty
sequence where a value is needed or a negative number where none makes sense.

## Installation

```
pip install .
```

## Usage

```python
from algodrills.numbers import gcd_euclid, is_prime
from algodrills.sorting import merge_sort
from algodrills.subarrays import two_sum

gcd_euclid(12, 18)           # 6
is_prime(13)                 # True

values = [1, 4, 3, 2]
merge_sort(values)           # sorts in place, returns None
values                       # [1, 2, 3, 4]

two_sum([1, 3, 2, 2, 9], 4)  # (0, 1)
```

### Text patterns

Patterns are numbered 1 to 6 and 8 to 22; `available()` lists them.
`render(number, size=None)` returns the pattern as text, one row per line,
each ending in a newline. Without a size the pattern's own default is used
(4 for patterns 12 and 22, 5 for the rest).

```python
from algodrills.patterns import render

print(render(2, 3), end="")
# *
# **
# ***
```

The same is available from the command line:

```
algodrills-pattern 22
algodrills-pattern 9 --size 3
```

## What it does not do

The drills are library functions. Apart from `algodrills-pattern`, there are
no commands and nothing reads from standard input.

## Tests

```
pip install .[test]
pytest
```