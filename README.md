# drillbook

Small, self-contained solutions to classic algorithm drills, grouped by
topic and usable as an ordinary Python library, with a command that runs
one drill over input read from standard input.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `drillbook.strings`: `length_of_longest_substring`, `longest_palindrome`,
  `zigzag_convert`, `reverse_integer` (0 when the result leaves the 32-bit
  range), `my_atoi` (clamped to the 32-bit range), `is_palindrome_number`,
  `is_match` (`.` and `*` patterns), `int_to_roman` (0 to 3999),
  `roman_to_int`, `longest_common_prefix`.
- `drillbook.textops`: `is_valid_brackets`, `generate_parenthesis`,
  `str_str`, `compare_version`.
- `drillbook.arrays`: `two_sum`, `median_of_two_sorted_arrays`, `max_area`,
  `three_sum`, `four_sum`, and the in-place `remove_duplicates` and
  `remove_element`, which return how many items are kept at the front.
- `drillbook.linked`: the `ListNode` type (iterable over its values) with
  `build_list` and `list_values`, plus `add_two_numbers`,
  `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`, `swap_pairs`.
- `drillbook.trees`: the `TreeNode` type, `level_order`, `max_depth`,
  `build_tree` (preorder + inorder) and `build_tree_from_postorder`
  (inorder + postorder).
- `drillbook.puzzles`: `shortest_tour` (shortest closed route from the
  origin through every given point and back) and `decode_words` (splits a
  string into nine-character groups; a group led by `0` holds its
  eight-character word reversed, any other lead holds it in order).
- `drillbook.objlist`: `tokenize_names` and `sorted_names` for splitting
  makefile-style lists of file names, backslash continuations included.
- `drillbook.process`: `spawn` (start a program, returning the
  `subprocess.Popen`), `write_messages` and `read_messages` for passing
  lines through a stream, and `capture_output` (run a command and return
  its standard output).

Invalid input, such as a Roman numeral with an unknown symbol or an
inconsistent pair of tree traversals, raises `ValueError`.

## Examples

    >>> from drillbook.strings import int_to_roman, roman_to_int
    >>> int_to_roman(1994)
    'MCMXCIV'
    >>> roman_to_int("MCMXCIV")
    1994

    >>> from drillbook.linked import build_list, list_values, add_two_numbers
    >>> list_values(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4])))
    [7, 0, 8]

    >>> from drillbook.textops import compare_version
    >>> compare_version("1.0.1", "1")
    1

## Command line

    drillbook [COMMAND] < input

The command reads all of standard input, splits it on whitespace and prints
one result per line. Without a command it runs `strstr`:

    echo "hello ll" | drillbook

prints `2`. The commands are:

- `strstr`: haystack/needle pairs; index of the first occurrence, or -1.
- `palindrome`: longest palindromic substring of each token.
- `zigzag`: text/row-count pairs; the zigzag reading.
- `reverse`, `atoi`, `palnum`: one integer result per token (`palnum`
  prints 1 or 0).
- `regex`: text/pattern pairs; 1 or 0.
- `toroman`, `fromroman`: Roman numeral conversion per token.
- `prefix`: words up to a `-1` token; their longest common prefix.
- `threesum`: integers in groups ended by `-100`; for each group, the
  zero-sum triplets as comma-separated values, separated by spaces.
- `valid`: 1 or 0 for each bracket string.
- `parens`: for each n, how many well-formed strings of n pairs exist.
- `version`: version pairs; -1, 0 or 1.
- `bees`: groups of ten numbers (five x/y points); the whole part of the
  shortest tour.
- `bigsmall`: a count, then a bit string; the decoded words on one line.

When input cannot be read as the command expects, the command prints an
error to standard error and exits with status 1.

## What it does not do

The command is not interactive: it does not prompt, and it reads all of
standard input before printing anything.