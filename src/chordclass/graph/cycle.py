from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

Edge = Tuple[int, int]
Adjacency = Dict[int, List[int]]


def edge_key(a: int, b: int) -> Edge:
    """Canonical (min, max) key of an undirected edge."""
    if a == b:
        raise ValueError(f"self-loop {a}-{b} is not an edge")
    return (a, b) if a < b else (b, a)


def is_cycle_edge(a: int, b: int, n: int) -> bool:
    """True iff {a, b} lies on the base n-cycle 1-2-...-n-1."""
    d = abs(a - b)
    return d == 1 or d == n - 1


def cycle_edges(n: int) -> List[Edge]:
    """Edges of the n-cycle, (i, i+1) for i < n plus (1, n)."""
    return sorted(edge_key(i, i % n + 1) for i in range(1, n + 1))


def chord_candidates(n: int) -> List[Edge]:
    """All pairs that may be toggled as chords, in lexicographic order."""
    return [
        (a, b)
        for a in range(1, n + 1)
        for b in range(a + 1, n + 1)
        if not is_cycle_edge(a, b, n)
    ]


def build_adjacency(n: int, added_edges: Iterable[Sequence[int]] = ()) -> Adjacency:
    """
    Adjacency mapping of the n-cycle united with *added_edges*.

    Every edge is inserted at both endpoints, duplicates are dropped and
    neighbor lists come back sorted ascending. Added edges that coincide
    with cycle edges are harmless.
    """
    if n < 3:
        raise ValueError(f"a cycle needs at least 3 vertices, got n={n}")

    nbrs: Dict[int, set] = {v: set() for v in range(1, n + 1)}
    for i in range(1, n + 1):
        j = i % n + 1
        nbrs[i].add(j)
        nbrs[j].add(i)

    for e in added_edges:
        a, b = edge_key(*e)
        if a < 1 or b > n:
            raise ValueError(f"edge {a}-{b} is outside vertices 1..{n}")
        nbrs[a].add(b)
        nbrs[b].add(a)

    return {v: sorted(nbrs[v]) for v in range(1, n + 1)}


def added_edges(adjacency: Mapping[int, Sequence[int]], n: int) -> List[Edge]:
    """Non-cycle edges of *adjacency*, sorted."""
    out = set()
    for u, neigh in adjacency.items():
        for v in neigh:
            if u != v and not is_cycle_edge(u, v, n):
                out.add(edge_key(u, v))
    return sorted(out)
