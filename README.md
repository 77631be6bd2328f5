# practicum

A collection of small, self-contained algorithms and data structures, plus
three command-line tools built on top of them. Only the standard library is
used.

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

| Module | Contents |
| --- | --- |
| `practicum.dijkstra` | `shortest_distances(graph, top)` over a weighted adjacency matrix (zero means no edge, unreachable vertices get `UNREACHABLE` = 10000, a start past the end is clamped to the last vertex); `random_graph(count)` builds a reproducible symmetric graph with weights below 100 |
| `practicum.components` | `AdjacencyMatrix` (indexed as `matrix[i, j]`, `len()` gives the vertex count) with `reachable(start)`, `component_count()` and the `AdjacencyMatrix.random(size)` constructor; `random_edge()` returns 0 or 1 |
| `practicum.triangle` | `Point`, `Triangle` (`exists()`, `contains(point)`; raises `TriangleError` for degenerate points), `side_length(a, b)` |
| `practicum.min_stack` | `MinStack`, an integer stack whose capacity doubles when full and that reports its minimum in constant time (`push`, `pop`, `top`, `min`, `clear`, `copy`) |
| `practicum.stochastic` | `StochasticVariable` with `raw_moment(k)`, `mean()`, `central_moment(k)`, `variance()` |
| `practicum.segments` | `segments_intersect(...)` for two line segments given by their end points |
| `practicum.pseudographics` | `render(number)` returns a three-row picture of a non-negative integer; `print_number(number)` prints it |
| `practicum.primes` | `primes_between(start, stop)` (inclusive, sieve of Eratosthenes) and `print_primes(start, stop)` |
| `practicum.bounded_stack` | `BoundedStack`, a fixed-capacity stack (`push` raises `OverflowError` when full, `pop`/`peek` raise `IndexError` when empty) |
| `practicum.binary_search` | `binary_search(key, array, left, right)` returning an index or -1, and `SearchBoundsError` for bad borders |
| `practicum.hashmap` | `HashMap`, an open-addressing hash table with linear probing that doubles when more than three quarters full (`insert`, `erase`, `map[key]`, `resize`), and `HashMapError` |
| `practicum.ratio` | `Ratio`, an always-reduced fraction with arithmetic, comparisons, `div()`, `mod()`, `set()` and `float()` |
| `practicum.binary_tree` | `BinaryTree`, an unbalanced binary search tree of distinct integers (`insert`, `delete`, `find`, `in`, `len()`, iteration in increasing order) |

## Library examples

Shortest distances from vertex 0:

```python
from practicum.dijkstra import shortest_distances

graph = [
    [0, 7, 9, 0, 0, 14],
    [7, 0, 10, 15, 0, 0],
    [9, 10, 0, 11, 0, 2],
    [0, 15, 11, 0, 6, 0],
    [0, 0, 0, 6, 0, 9],
    [14, 0, 2, 0, 9, 0],
]
print(shortest_distances(graph, 0))   # [0, 7, 9, 20, 20, 11]
```

Fractions:

```python
from practicum.ratio import Ratio

r = Ratio(4, 10)
print(r.numerator, r.denominator)      # 2 5
print(Ratio(1, 21) + Ratio(20, 7) == Ratio(61, 21))   # True
print(float(Ratio(2, 5)))              # 0.4
```

A zero denominator raises `ZeroDivisionError`.

Primes in a range:

```python
from practicum.primes import primes_between

print(primes_between(0, 11))           # [2, 3, 5, 7, 11]
```

A stack that knows its minimum:

```python
from practicum.min_stack import MinStack

stack = MinStack(10)
for value in (7, 2, 5):
    stack.push(value)
print(stack.top(), stack.min())        # 5 2
```

Binary search over part of a sorted list:

```python
from practicum.binary_search import binary_search

print(binary_search(3, list(range(11)), 1, 8))   # 3
```

## Command-line tools

Installing the package provides three commands. Each prints a usage message
when started without arguments, and a short message for arguments it cannot
use.

### practicum-primes

Prints the primes between two borders, separated by spaces. Both borders
must be integers greater than 1, the first not greater than the second.

```
$ practicum-primes 2 11
2 3 5 7 11
```

### practicum-ratio

Applies one of `+`, `-`, `*`, `/` to two fractions given as
`<first_numerator> <first_denominator> <second_numerator> <second_denominator> <operation>`.

```
$ practicum-ratio 1 2 1 3 +
Numerator = 5 Denominator = 6
```

Dividing by a zero fraction prints `Error! Division by ZERO`; a fraction
given with a zero denominator stops the command with a `ZeroDivisionError`.
Quote `*` in most shells so it is not expanded.

### practicum-tree

Builds a binary search tree from the given values, then applies one operation
(`add`, `delete` or `find`) with the last argument as operand. The tree lives
only for that one run.

```
$ practicum-tree 1 5 4 find 4
Operand 4 was founded!
```