# structlab

Classic data structures and recursive algorithms in plain Python, with no
third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `structlab.primes` | `is_prime`, `next_prime` |
| `structlab.recursion` | `swap_pairs`, `factorial`, `sine` (Taylor series), `merge_sort_string`, `main` |
| `structlab.memo` | `child_steps`, `child_steps_naive`, `fib`, `fib_naive`, `counting_sort_string`, `parse_steps` |
| `structlab.matrix` | `determinant` by cofactor expansion, `cofactor`, `parse_matrix`, `format_matrix`, `check_inputs`, `MatrixInputError`, `main` |
| `structlab.accumulator` | `Accumulator` (`add`, `concatenate`), `accumulate`, `main` |
| `structlab.dynarray` | `DynArr` (doubles its capacity when full, halves it on shrinking), `SortedDynArr` |
| `structlab.hashing` | `LinearProbeTable`, `DoubleHashTable`, `SeparateChain`, `EntryState`, `hash_func`, `hash_func2` |
| `structlab.sllist` | `SLList`, `SortedSLL`, `bucket_sort` |
| `structlab.dllist` | `DLList`, including an interleaving `merge` |
| `structlab.bst` | `BST` with `insert`, `remove`, `find_min`, `find_max`, `in_order` |
| `structlab.cycle` | `Node`, `Loop`, `find_loop_hash`, `find_loop_race`, `race_meeting` |
| `structlab.benchmark` | `Timing`, `time_sorted_structures`, `run_experiment`, `main` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library examples

```python
from structlab.primes import next_prime
from structlab.memo import child_steps, fib, counting_sort_string
from structlab.hashing import LinearProbeTable
from structlab.bst import BST

next_prime(14)                   # 17
child_steps(4)                   # 7: ways to climb four steps taking 1, 2 or 3 at a time
fib(10)                          # 89 (fib(0) == fib(1) == 1)
counting_sort_string("banana")   # "aaabnn"

table = LinearProbeTable(7)
table.insert(76, "First")
table.insert(93, "Second")
table[76]                        # "First"
table.remove(93)
print(table.format())            # element count, capacity and every slot

tree = BST([12, 10, 8, 11, 14])
tree.remove(12)
tree.in_order()                  # [8, 10, 11, 14]
```

Some behaviour worth knowing:

- `LinearProbeTable` keeps a prime capacity and grows to the next prime after
  twice its size once more than half of the slots are used. Removal is lazy:
  the slot is marked `EntryState.DELETED`. A missing key raises `KeyError`.
  `DoubleHashTable` is the same table with the probe step taken from
  `hash_func2`. Keys must be `int` or `str`: an integer hashes to itself, a
  string to its length.
- `SeparateChain` has a fixed number of buckets (7 by default) and appends
  each value to the end of its bucket.
- `DynArr.erase` ignores an index out of range; indexing out of range raises
  `IndexError`.
- `SLList.delete` and `DLList.delete` return `False` when the value is absent
  and raise `IndexError` on an empty list. `DLList.merge` raises `ValueError`
  if either list is empty.
- `BST.insert` returns `False` for a duplicate; `find_min` and `find_max`
  raise `ValueError` on an empty tree.
- `merge_sort_string` never compares the first two characters on their own,
  so its result is fully ordered only when `text[0] <= text[1]`.

Sorted containers can be used for bucket sort of values below
`10 * num_buckets`:

```python
from structlab.dynarray import SortedDynArr
from structlab.sllist import SortedSLL, bucket_sort

bucket_sort([78, 17, 39, 26, 72, 94, 21, 12, 23, 68], 10, SortedSLL)
bucket_sort([78, 17, 39, 26, 72, 94, 21, 12, 23, 68], 10, SortedDynArr)
```

Loops in a chain of `Node`s are found either with a set of visited nodes or
with two pointers:

```python
from structlab.cycle import Node, find_loop_race

a, b, c = Node(10), Node(20), Node(30)
a.next, b.next, c.next = b, c, a
loop = find_loop_race(a)         # Loop(origin=c, destination=a)
```

## Command-line tools

Installing the package provides four commands.

Run the recursion examples: swap adjacent pairs of `0 2 4 6 8 10`, approximate
sin(x) with 20 Taylor terms, or merge-sort a string:

```
structlab-recursion swap
structlab-recursion sine 1.5
structlab-recursion sort dcba
```

Print an `n`-by-`n` matrix of `int`, `float` or `double` values, given row by
row, and its determinant:

```
structlab-determinant int 2 1 2 3 4
```

Add up values of one type (`int`, `float`, `double`), or join words with
`std::string`:

```
structlab-accumulate int 1 2 3 4
```

Time inserting into and emptying a sorted dynamic array and a sorted singly
linked list; prints `length,array seconds,list seconds,ratio` averaged over
`--runs` runs (100 by default), with an optional `--seed`:

```
structlab-benchmark 1000 --runs 10 --seed 1
```

## What it does not do

The linked lists, hash tables, dynamic arrays, binary search tree and loop
finders are library classes and functions only; there is no command or
interactive prompt for them. `BST` offers in-order traversal only, with no
pre-order or post-order walk and no height or diameter queries.