from __future__ import annotations

from functools import lru_cache
from itertools import permutations
from typing import Sequence

from chordclass.external.nauty import nauty_available, canon_g6, edgelist_to_g6
from chordclass.graph.cycle import Edge

# n! relabelings per graph; 6! = 720 keeps a full n=6 catalog in seconds.
BRUTEFORCE_MAX_N = 6


@lru_cache(maxsize=None)
def _pair_index(n: int) -> tuple[tuple[int, ...], ...]:
    idx = [[-1] * (n + 1) for _ in range(n + 1)]
    t = 0
    for i in range(1, n + 1):
        for j in range(i + 1, n + 1):
            idx[i][j] = t
            t += 1
    return tuple(tuple(row) for row in idx)


@lru_cache(maxsize=None)
def _all_perms(n: int) -> list[tuple[int, ...]]:
    # perm[v] is the image of v; index 0 is padding
    return [(0,) + p for p in permutations(range(1, n + 1))]


def canonical_key_bruteforce(edges: Sequence[Edge], n: int) -> int:
    """Canonical key under S_n: min edge-bitset over all relabelings of 1..n.

    Raises ValueError for n > BRUTEFORCE_MAX_N; use nauty instead.
    """
    if n > BRUTEFORCE_MAX_N:
        raise ValueError(
            f"Brute-force canonicalization is impractical for n={n}. "
            "Install nauty (shortg) to build larger catalogs."
        )
    if not edges:
        return 0

    idx = _pair_index(n)
    best = None
    for p in _all_perms(n):
        bits = 0
        for u, v in edges:
            pu, pv = p[u], p[v]
            if pu > pv:
                pu, pv = pv, pu
            bits |= 1 << idx[pu][pv]
        if best is None or bits < best:
            best = bits
    return best or 0


def canonical_key(edges: Sequence[Edge], n: int, use_nauty: bool | None = None) -> object:
    """Canonical key for a graph on {1..n}.

    Uses nauty when available (canonical graph6 string), otherwise the
    brute-force bitset. Keys from the two methods are not comparable.
    """
    if use_nauty is None:
        use_nauty = nauty_available()
    if use_nauty:
        return canon_g6(edgelist_to_g6(list(edges), n))
    return canonical_key_bruteforce(edges, n)
