"""Backtracking search for one vertex bijection between two small graphs."""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from chordclass.graph.adjacency import Matrix, edge_count, to_matrix

log = logging.getLogger(__name__)

# Worst case is n! complete permutations.
MAX_VERTICES = 10

Bijection = Tuple[int, ...]


def _partial_ok(p: List[int], idx: int, A: Matrix, B: Matrix) -> bool:
    """Adjacency agrees on every pair among the first idx+1 assigned vertices."""
    k = idx + 1
    for u in range(1, k + 1):
        Au = A[u]
        Bu = B[p[u - 1]]
        for v in range(1, k + 1):
            if Au[v] != Bu[p[v - 1]]:
                return False
    return True


def _search(p: List[int], A: Matrix, B: Matrix) -> Optional[Bijection]:
    """
    Swap-based DFS over permutations of p, position by position.

    Position idx tries p[idx], p[idx+1], ... in turn by swapping each into
    place, pruning as soon as the assigned prefix disagrees with A. With no
    prune firing every one of the n! orderings is visited, so no isomorphism
    is missed. *p* is the single working buffer of this call.
    """
    n = len(p)
    nodes = 0

    def permute(idx: int) -> Optional[Bijection]:
        nonlocal nodes
        nodes += 1
        if idx == n:
            for u in range(1, n + 1):
                for v in range(1, n + 1):
                    if A[u][v] != B[p[u - 1]][p[v - 1]]:
                        return None
            return tuple(p)

        for i in range(idx, n):
            p[idx], p[i] = p[i], p[idx]
            if _partial_ok(p, idx, A, B):
                got = permute(idx + 1)
                if got is not None:
                    return got
            p[idx], p[i] = p[i], p[idx]
        return None

    found = permute(0)
    log.debug("search visited %d nodes, found=%s", nodes, found is not None)
    return found


def find_isomorphism(
    adj_a: Mapping[int, Sequence[int]],
    adj_b: Mapping[int, Sequence[int]],
    n: Optional[int] = None,
) -> Optional[Bijection]:
    """
    Return pi with A[u][v] == B[pi(u)][pi(v)] for all u, v, or None.

    pi is returned as a tuple whose position i-1 holds pi(i). Graphs with
    different vertex or edge counts are rejected before any search. The
    witness is the first one met in the fixed traversal order, so it is
    deterministic for a given ordered pair but not canonical.

    Raises ValueError for n > MAX_VERTICES.
    """
    n_a = len(adj_a)
    n_b = len(adj_b)
    if n is None:
        n = n_a
    if n_a != n or n_b != n:
        return None
    if n > MAX_VERTICES:
        raise ValueError(
            f"Backtracking isomorphism search is impractical for n={n} "
            f"(limit {MAX_VERTICES})."
        )

    if edge_count(adj_a) != edge_count(adj_b):
        return None

    A = to_matrix(adj_a, n)
    B = to_matrix(adj_b, n)
    return _search(list(range(1, n + 1)), A, B)


def is_isomorphism(
    adj_a: Mapping[int, Sequence[int]],
    adj_b: Mapping[int, Sequence[int]],
    bijection: Sequence[int],
) -> bool:
    """True iff *bijection* is a permutation of 1..n preserving adjacency both ways."""
    n = len(bijection)
    if len(adj_a) != n or len(adj_b) != n:
        return False
    if sorted(bijection) != list(range(1, n + 1)):
        return False
    A = to_matrix(adj_a, n)
    B = to_matrix(adj_b, n)
    return all(
        A[u][v] == B[bijection[u - 1]][bijection[v - 1]]
        for u in range(1, n + 1)
        for v in range(1, n + 1)
    )


def invert_bijection(bijection: Sequence[int]) -> Bijection:
    """Inverse permutation: position pi(i)-1 of the result holds i."""
    inv = [0] * len(bijection)
    for i, t in enumerate(bijection, start=1):
        inv[t - 1] = i
    return tuple(inv)
