# eqset

`eqset` provides a set where an equality function you supply decides membership. It does
not use hashing. You can store values that are not hashable, such as lists, or values that
need their own rule for what counts as "the same". The package also has a small
command-line tool that counts characters, words, sentences and paragraphs in a text file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `Set` collection (`eqset.linked`)

```python
from eqset.linked import Set, filter_out

s = Set([8, 34], equals=lambda a, b: a == b)
s.add(17)
s.add(17)          # duplicates are ignored
len(s)             # 3
17 in s            # True
s.find(99)         # False
s[1]               # 17 - positions start at 1
s.remove(34)       # removing a missing value does nothing
print(s)           # [ 17  8 ]

evens = filter_out(s, lambda x: x % 2 == 0)
union = s + Set([1, 2])
common = s - Set([8, 99])
```

- `equals` defaults to `operator.eq`. The predicate a set was built with is available as
  `s.equals`. Results of `+`, `-` and `filter_out` use the predicate of the left-hand or
  source set.
- A new value goes in front of the values already there. Iteration and indexing therefore
  return the most recently added value first.
- `s[i]` takes a 1-based integer position. A position outside `1..len(s)` raises
  `IndexError`, and an index that is not an integer raises `TypeError`.
- Two sets are equal when they have the same size and every value of one is found in the
  other, whatever the order. Sets are not hashable.
- `s + t` is the union. `s - t` holds the values the two sets have in common.
- `filter_out(source, predicate)` returns a new set with the values for which
  `predicate(value)` is true.
- `clear()` empties the set.

## Demonstration

```
eqset-demo
```

This runs through the features of `Set` with integers, strings, 2D points
(`eqset.demo.Point`) and lists of integers, and prints the results. Lists are printed with
`eqset.demo.format_vector`, for example `{2 6 9 }`.

## Text statistics (`eqset.textstats`)

```
eqset-textstats notes.txt
eqset-textstats notes.txt --export
```

The first command prints a table of counts for `notes.txt`. With `--export`, the tool also
writes the counts as `Label;value` lines to a file whose path is the given path with every
`txt` replaced by `csv` (here `notes.csv`). A warning is printed if the file name does not
contain `.txt`, but the file is still counted.

How the counts are made:

- Every line is one paragraph.
- Characters are all characters on a line. The line terminator is not counted.
- A word is counted for each non-space character that is followed by a space, plus one
  per line. An empty line therefore counts as one word.
- A sentence is counted for each `.`, `?` or `!` that follows a character that is not one
  of those three.
- Files are read as UTF-8. A byte-order mark switches to UTF-8, UTF-16 or UTF-32.

In code:

```python
from eqset.textstats import read_lines, count_lines, csv_path, export_csv

stats = count_lines(read_lines("notes.txt"))
print(stats.words, stats.sentences)
print(stats.to_csv())
export_csv(stats, csv_path("notes.txt"))
```

### What it does not do

The text statistics tool runs only on the command line. It has no graphical window, no
file picker and no bar chart of the counts. It prints a plain table and can write the CSV
file.