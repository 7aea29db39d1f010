# contestkit

A small toolkit for competitive programming. It has data structures, some
integer geometry and graph routines, token-based input and buffered output,
and a runner that checks a solution against local test files.

## Installation

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `contestkit.compress` | `SparseIndex`: coordinate compression |
| `contestkit.dsu` | `DSU`: union–find with union by rank and component sizes |
| `contestkit.dsu_r` | `DSUR`: union–find with one level of `save()` / `restore()` |
| `contestkit.xor_set` | `XorSet`: a bit set of small integers with XOR translation |
| `contestkit.seg_tree` | `SegTree`: segment tree over caller-defined nodes |
| `contestkit.geo` | `Point`, `PointOrientation`, `convex_hull`, `diameter` |
| `contestkit.graph` | `Graph`, `LowLink` (bridge finding), `Edge`, `EdgeGraph` |
| `contestkit.input` | `Input`: token reader over a byte stream; `InputExhausted` |
| `contestkit.output` | `Output`, plus the `set_output`, `output`, `out`, `out_line` helpers |
| `contestkit.tester` | `check`, `Mismatch`, `run_tests` and the `run_*` drivers |

## Examples

Coordinate compression. `compress` raises `KeyError` for a value that was
not indexed; `position` gives the insertion point instead:

```python
from contestkit.compress import SparseIndex

index = SparseIndex([2, 54, 4, 2, 1, 7, 9])
index.compress(54)   # 5
index.position(3)    # 2
index.max()          # 5
```

Disjoint sets:

```python
from contestkit.dsu import DSU

sets = DSU(5)
sets.union(0, 1)
sets.union(2, 4)
[sets.find(x) for x in range(5)]   # [1, 1, 4, 3, 4]
sets.find_with_size(0)             # (1, 2)
```

Union–find with one level of undo; every set is represented by its smallest
element:

```python
from contestkit.dsu_r import DSUR

sets = DSUR(5)
sets.union(1, 4)
sets.save()
sets.union(0, 4)
sets.restore()
[sets.find(x) for x in range(len(sets))]   # [0, 1, 2, 3, 1]
```

Calling `save` twice, or `restore` without `save`, raises `RuntimeError`.

A bit set with XOR translation (members 0 to 575; iteration yields 0 to 512
in ascending order):

```python
from contestkit.xor_set import XorSet

s = XorSet([1, 2, 4, 8])
list(s.range_add(3))   # [1, 2, 7, 11]
```

A sum segment tree. `zero` is the neutral node itself; `query(start, stop)`
covers `start` up to, not including, `stop`:

```python
from contestkit.seg_tree import SegTree

tree = SegTree(
    [4, 1, 7, 2, 6, 3, 2, 4],
    combine=lambda a, b: a + b,
    zero=0,
    leaf=lambda value: value,
)
tree.build()
tree.query(2, 5)                       # 15
tree.query()                           # 29
tree.update_data(0, lambda x: x + 1)   # item 0 becomes 5
```

Geometry on integer points. `convex_hull` keeps collinear boundary points
and returns three points or fewer unchanged; `diameter` returns the smallest
width of a convex polygon given by its hull:

```python
from contestkit.geo import Point, PointOrientation, convex_hull, diameter

Point.orientation(Point(-1, -1), Point(1, 1), Point(2, -2))   # PointOrientation.RIGHT
points = [Point(0, 0), Point(10, 0), Point(0, 10), Point(8, 6), Point(4, 8)]
diameter(convex_hull(points))   # 8.94427190999916
```

Bridges in an undirected graph; `add_edge` numbers edges from 0 in the order
they are added and returns the graph:

```python
from contestkit.graph import Graph

g = Graph()
g.add_edge(0, 1).add_edge(1, 2).add_edge(2, 0).add_edge(2, 3)
g.build_low_link(range(4)).bridges()   # [3]
```

`EdgeGraph` stores `Edge(start, end, id)` objects themselves:
`add_directed_edge` files an edge under its start only, `add_edge` under
both endpoints, and `edges_from(vertex)` lists them.

## Writing and checking a solution

A solution reads from an `Input` and writes through the shared output:

```python
from contestkit.input import Input
from contestkit.output import out_line

def solve(inp: Input, test_case: int) -> None:
    a, b = inp.read(int), inp.read(int)
    out_line(a + b)
```

`Input` accepts a binary stream, `bytes` or `str`. `read(kind)` takes `int`,
`float`, `str`, `bytes`, `chr` (one non-whitespace character), a tuple of
kinds, `[kind]` (a count followed by that many values) or any callable
applied to the token text; reading past the end raises `InputExhausted`.

`run_single`, `run_multi_number` (the input starts with the number of
cases) and `run_multi_eof` (cases continue while any byte is left) call
`solve(input, case)` with cases numbered from 1. `run_solution(input, invoke)`
calls `invoke(input)`, flushes the shared output and returns whether only
whitespace was left.

`run_tests(tests_dir, run, time_limit_ms=2000, out=None)` goes through every
`NAME.in` file in a directory in sorted order. For each one it installs a
fresh shared `Output`, prints the input, the expected answer from `NAME.out`
if that file exists, and the solution's output, then a verdict: OK, Wrong
Answer, Time Limit or RuntimeError. It returns True when every test passed.
`check(expected, actual)` compares two outputs token by token, returns the
number of tokens, and raises `Mismatch` at the first difference.

## What it does not do

There is no command-line program: `run_tests` is called from Python with the
solution's `run` function. The package does not create task directories,
fetch problems from contest sites or generate solution files.