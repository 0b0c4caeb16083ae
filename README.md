# clings

A runner that walks you through a tree of small C exercises, plus worked
solutions to those exercises as Python functions.

The runner looks for a `Problems/` directory under the current working
directory. Each sub-directory of `Problems/` is one topic (for example
`arrays`, `strings`, `pointers`). Every file in a topic directory is an
exercise, except `hint.txt`. That file holds one hint per line: line 0 is
the hint for the first exercise in name order, line 1 for the second, and
so on.

## Installing

```
pip install .
```

A C compiler (`gcc`) must be on your `PATH`. It is run as `gcc <exercise>`,
so its output file is written to the current directory.

## Usage

Run these commands from the directory that contains `Problems/`.

```
clings watch
```

`watch` goes through the topic directories in name order and, within each
one, the exercises in name order. For each exercise:

- If it fails to compile, you are asked whether you want a hint. Type
  `problem.hint` to see the matching line of that topic's `hint.txt`. Then
  the exercise is compiled again.
- If it compiles but still contains the line marker `//I AM NOT DONE`, the
  runner waits. Edit the file, remove the marker and press Enter to have it
  checked again.
- Once it compiles and has no marker, the runner moves on to the next
  exercise.

```
clings verify
```

`verify` compiles every exercise once. It exits with status 0 if all of
them compiled and 1 otherwise.

Both commands exit with status 1 in these cases:

- no command was given;
- the command is not `watch` or `verify`;
- `Problems/` cannot be read;
- input ends or is interrupted.

## Library

The helpers behind the runner can also be used from Python.

- `clings.exercises`:
  - `problems_root(cwd)` returns the `Problems` directory under `cwd`.
  - `list_entries(path)` returns a directory's entries sorted by name.
  - `is_complete(path)` is `False` while a file contains `//I AM NOT DONE`.
  - `hint_file(directory)` returns the directory's `hint.txt`.
  - `read_hint(path, index)` returns line `index`, or `None` if there is no
    such line.
- `clings.runner`:
  - `Runner(root, compiler="gcc", ask=input, out=print)` has the methods
    `compile(path)`, `offer_hint(directory, index)`, `watch()` and
    `verify()`. `verify()` returns a dict that maps each exercise path to
    whether it compiled.
  - `main(argv=None)` is the `clings` command.

Worked solutions to the exercises:

- `clings.matrices`: `row_sums`, `column_sums`, `best_index`, `multiply`,
  `mark_upper`, `mark_lower`.
- `clings.arrays`: `aggregate`, `insert_at`, `selection_sort`,
  `merge_sorted`, `has_mark_at_least`, `remark`, `special_series`,
  `bump_marks`.
- `clings.text`: `count_length`, `join_sentences`, `same_sequence`,
  `find_occurrences`, `replace_gene`, `count_text`, `write_names`,
  `read_names`.
- `clings.records`:
  - classes `Captain`, `SchoolCaptain` (with `show()`), `Month` and
    `TransgenicPlant`;
  - functions `month_name`, `triangle_area`, `swap`, `positive_shares`,
    `decode_marks`, `format_grid`, `resize`.

```python
>>> from clings.arrays import merge_sorted, special_series
>>> merge_sorted([1, 4], [2, 3])
[1, 2, 3, 4]
>>> special_series(6)
[0, 1, 1, 2, 3, 5]
>>> from clings.records import month_name
>>> month_name(3)
'March'
```

## What it does not do

The package does not ship the C exercise files or their `hint.txt` files.
You supply the `Problems/` tree yourself. The runner does not track
progress between runs; `watch` always starts again from the first exercise.

## Tests

```
pip install .[test]
pytest
```