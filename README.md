# coursealgo

A small collection of classic algorithms, usable as a library and through
two command-line tools:

- an insert-only red-black tree keyed by `(student id, subject)` that backs
  a course registration registry;
- Prim's algorithm choosing which roads between cities to maintain;
- KMP and Boyer-Moore substring search.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Course registration

`coursealgo-enrollment` reads whitespace-separated tokens from standard
input: a query count followed by that many queries. Each query prints one
line.

| Query | Output |
|-------|--------|
| `I sid subject sname semester phone timestamp` | the depth of the node holding the record, then `1` if the `(sid, subject)` pair was already registered (only its timestamp is updated) or `0` if it is new |
| `L sid` | the student's subjects in dictionary order, each followed by its node colour (`R` or `B`), or `No records found` |
| `C subject` | the number of applicants for the subject and the sum of their node depths |
| `M subject K` | up to K student ids with the earliest timestamps, each followed by its node colour |

A `C` or `M` query for a subject nobody applied for prints
`Algorithm error! You must solve this problem.`. Unknown query letters are
skipped; running out of input or a malformed number stops the command with
a `ValueError`.

```
coursealgo-enrollment < queries.txt
```

From Python:

```python
from coursealgo.registry import CourseRegistry

registry = CourseRegistry()
registry.register(12210795, "Algorithm", "Kim", 5, "none", 100)  # (0, False)
registry.register(12200795, "Algorithm", "Lee", 4, "none", 50)   # (1, False)
registry.count_subject("Algorithm")           # (2, 1)
registry.earliest_applicants("Algorithm", 1)  # [(12200795, Color.RED)]
registry.subjects_of(12210795)                # [("Algorithm", Color.BLACK)]
```

`register` returns the node depth and whether the record already existed.
`subjects_of` returns an empty list for an unknown student;
`count_subject` and `earliest_applicants` raise `KeyError` for an unknown
subject. Each record is kept as an `Enrollment` dataclass.

`coursealgo.run_queries` is not exported at the top level; use
`coursealgo.enrollment.run_queries(tokens)`, which yields the output lines
for an iterable of tokens.

### The tree

`coursealgo.rbtree.RedBlackTree` supports `insert(key, payload)`, which
returns the node holding the key and whether the key was already present,
`len()`, and iteration over its nodes in ascending key order.

`coursealgo.rbnode` holds the `Node` dataclass (with `flip()` to swap its
colour), the `Color` and `Direction` enums, and the helpers `compare_keys`,
`is_black`, `is_double_red`, `sibling`, `node_depth` and
`search_parent_or_self`.

## Road maintenance with Prim's algorithm

`coursealgo-prim` reads from standard input a count of cities followed by
`city elevation` pairs (a city listed twice keeps its first elevation), a
count of roads followed by `city city length YYYY-MM` entries, and finally
the starting city.

Roads are taken in ascending order of timestamp, then length, then
elevation difference between their ends, then the two city names in
dictionary order. The command prints each city pair as it joins the tree,
then the total length of the chosen roads, then every chosen road as
`timestamp city city length`, sorted by city names.

```
coursealgo-prim < roads.txt
```

A road to a city with no known elevation, or a starting city with no roads,
raises `ValueError`.

From Python, use `coursealgo.prim.parse_input`, `build_spanning_tree` and
`format_report`. `build_spanning_tree` returns a `SpanningTree` whose
`bridges` are in the order they were chosen, with `total_length` and
`sorted_bridges` properties. Single roads can be built with `make_bridge`;
`Bridge.priority()` gives the key they are ordered by.

## String matching

```python
from coursealgo.matching import kmp_match, boyer_moore_match

kmp_match("abacaabaccabacabaabb", "abacab")          # 10
boyer_moore_match("abacaabadcabacabaabb", "abacab")  # 10
```

Both return the index of the first match, or -1 when there is none.
`kmp_match` raises `ValueError` for an empty pattern; `boyer_moore_match`
returns -1 for an empty text or pattern, or a pattern longer than the text.
`failure_function` and `last_occurrence` expose the tables each search uses.

## What the package does not do

The red-black tree only inserts: there is no deletion or lookup beyond
insertion and in-order iteration. Registrations and road networks live in
memory only; nothing is stored between runs. There is no command for the
string-matching functions.