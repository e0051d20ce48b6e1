# algokit

A toolbox of classic algorithms and data structures of the kind kept close at
hand for programming contests, written as plain Python.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest for the test suite
```

The package depends only on `sortedcontainers` and supports Python 3.10 and
later.

## A taste

```python
from algokit.strings import prefix_function
from algokit.primes import is_prime, factorize
from algokit.fenwick import FenwickTree

prefix_function("aabaaab")   # [0, 1, 0, 1, 2, 2, 3]
is_prime(97)                 # True
factorize(360)               # [2, 2, 2, 3, 3, 5]

fw = FenwickTree([1, 2, 3, 4])
fw.range_sum(1, 2)           # 5
```

## What is inside

### Range structures

- `algokit.segtree.SegTree(n, op, identity, values=None)`: iterative segment
  tree over a monoid, with `set(p, value)`, `get(p)` and
  `prod(left, right)` over the half-open range `[left, right)`.
- `algokit.lazy_segtree.LazySegTree(values, merge, identity, apply, compose,
  lazy_identity)`: point assignment `update`, `range_query(ql, qr)` and
  `range_apply(ql, qr, lazy)` on half-open ranges. `min_add_tree(values)`
  builds a range-minimum tree with range-add updates.
- `algokit.persistent_segtree.PersistentSegTree(n)`: `build(init)` returns a
  root; `update(root, idx, value)` returns a new root and leaves old versions
  intact; `query(root, left, right)` sums an inclusive range.
- `algokit.fenwick.FenwickTree`: `add`, `prefix_sum(right)` and
  `range_sum(left, right)` with inclusive bounds.
- `algokit.sparse_table.SparseTable(values, func)`: O(1) `query(left, right)`
  (inclusive) for idempotent functions such as `min`, `max` or `gcd`;
  `log_floor(x)` is exposed too.
- `algokit.merge_sort_tree.MergeSortTree`: `lower_bound_val(left, right, x)`
  (smallest value `>= x`, or `None`) and `count_less_equal(left, right, x)`
  over inclusive index ranges.

### Sets and miscellany

- `algokit.dsu`: `RollbackDSU` (vertices `1 .. n`, `find`, `unite`,
  `rollback`, `components`), `DynamicConnectivity(n, q)` for edges alive over
  time intervals, and `offline_components(n, operations)`, which takes
  `("+", v, u)`, `("-", v, u)` and `("?",)` operations and returns the
  component count at each query.
- `algokit.intervals.IntervalSet`: disjoint half-open intervals; `add` merges
  touching or overlapping ones, `remove` splits them.
- `algokit.mex`: `calc_mex(values)` and `Mex`, which keeps the mex under
  point `update`s.
- `algokit.venice.VeniceSet`: a multiset with `add`, `remove`, `get_min` and
  an O(1) `decrement_all`.
- `algokit.sorted_block.SortedBlock`: one sorted block for sqrt
  decomposition, with `make_add`, `first_index` and `last_index`.
- `algokit.ordered_set.OrderedSet`: `find_by_order(k)` and
  `order_of_key(value)`.
- `algokit.xor_basis.XorBasis`: linear basis over GF(2) with `insert` and
  `query`.
- `algokit.cht`: `MonotoneCHT` (lines with non-increasing slopes, minimum
  queries) and `LineContainer` (lines in any order, maximum queries).
- `algokit.hungarian.hungarian(cost)`: minimum-cost assignment for a square
  matrix; `result[i]` is the task given to worker `i`.
- `algokit.fastio.iter_ints(stream)`: yield the integers found in a text or
  binary stream.

### Graphs

- `algokit.maxflow.MaxFlow`: Dinic's algorithm with `add_edge`, `max_flow`
  and `min_cut(s)` (the source side of a minimum cut).
- `algokit.mincost.MinCostFlow`: `flow(s, t)` returns `(flow, cost)`;
  `edges()` lists `FlowEdge` records with the flow each carries. Edge costs
  must be non-negative.
- `algokit.trees`: `LCA` (binary lifting, `lca`, `is_ancestor`),
  `build_virtual_tree(lca, nodes)`, `find_centroid(adj)` and
  `centroid_decomposition(adj)`.
- `algokit.tree_hash`: `Tree` with `centroids()` and `hash_from(root)`, and
  `are_isomorphic(first, second)` for unrooted trees.
- `algokit.hld.HeavyLightDecomposition`: vertices `1 .. n`; after `run(root)`
  it offers `set_value`, `path_query`, `kth_ancestor`, `child_towards` and
  `is_ancestor`.
- `algokit.euler.euler_circuit(n, edges)`: closed walk from vertex `0` using
  every undirected edge once; raises `ValueError` when none exists.
- `algokit.scc`: `kosaraju` and `tarjan` component labellings,
  `condensation(adj, comp, count)` and `longest_chain(adj)`.
- `algokit.connectivity`: `bridges(adj)` and `articulation_points(adj)`.
- `algokit.shortest_paths`: `topo_sort`, `bellman_ford`, `dijkstra` (returns
  distances and parents) and `floyd_warshall`.
- `algokit.twosat.TwoSat`: `add_or`, `add_xor`, `add_equal` and `solve()`,
  which returns an assignment or `None`.

### Strings

- `algokit.strings`: `PolyHash` substring hashes, `manacher_odd`, `manacher`,
  `manacher_pairs` and `prefix_function`.
- `algokit.suffix_array.SuffixArray`: `sa` and `lcp` arrays (the empty suffix
  is included and comes first).
- `algokit.binary_trie.BinaryTrie`: `insert`, `remove`, `min_xor` (value and
  ident) and `max_xor`.

### Mathematics

- `algokit.sieve`: `Sieve(limit)` with `spf`, `phi`, `mu` and `primes`
  tables; `phi(n)`, `phi_table(n)`, `simple_sieve(limit)` and
  `segmented_sieve(low, high)`.
- `algokit.primes`: `is_prime` (deterministic Miller-Rabin), `pollard_rho`,
  `factorize` (sorted, with multiplicity) and `extended_gcd(a, b)` returning
  `(g, x, y)`.
- `algokit.modint`: `ModInt` (arithmetic modulo `10**9 + 7` by default,
  mixing with plain ints) and `Combinatorics(n)` with `ncr(n, r)`.
- `algokit.matrix`: immutable `Matrix`, multiplied with `a @ b`,
  `Matrix.identity(n)` and `mat_pow(a, p)`.
- `algokit.geometry`: `Vec` of any dimension and
  `segment_distance(p, a, b)`.
- `algokit.bitmask`: `sos_counts(values, bits)`, `subsets(mask)`,
  `is_pow2`, `lowest_bit` and `clear_lowest_bit`.
- `algokit.gf2`: `gf2_eliminate`, `gf2_consistent` and `can_balance`.

## Conventions

Ranges follow the structure that takes them: the segment trees and the
interval set work with half-open ranges `[left, right)`, while the Fenwick
tree, sparse table, persistent segment tree and merge sort tree take
inclusive bounds. Invalid indices and impossible inputs raise the usual
Python exceptions (`IndexError`, `ValueError`, `KeyError`).

## What it does not do

This is a library only: there is no command-line program, and nothing reads
contest input or prints answers for you beyond `iter_ints`.