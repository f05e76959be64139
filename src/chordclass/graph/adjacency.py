from __future__ import annotations

from typing import List, Mapping, Sequence

import networkx as nx

from .cycle import Edge

Matrix = List[List[bool]]


def edge_count(adjacency: Mapping[int, Sequence[int]]) -> int:
    """
    Number of undirected edges: half the sum of neighbor-list lengths.

    An odd degree sum means the mapping is not symmetric.
    """
    total = sum(len(neigh) for neigh in adjacency.values())
    if total % 2:
        raise ValueError(f"odd degree sum {total}: adjacency is not symmetric")
    return total // 2


def edges_from_adjacency(adjacency: Mapping[int, Sequence[int]]) -> List[Edge]:
    """
    Return undirected edges as (u,v) with u < v.
    """
    eds = set()
    for u, neigh in adjacency.items():
        for v in neigh:
            if v > u:
                eds.add((u, v))
            elif v < u:
                eds.add((v, u))
    return sorted(eds)


def to_matrix(adjacency: Mapping[int, Sequence[int]], n: int) -> Matrix:
    """
    1-indexed (n+1) x (n+1) boolean adjacency matrix; row/column 0 unused.

    M[u][v] is set for every arc u -> v listed in *adjacency*. Symmetry is
    not checked here: an asymmetric matrix simply fails every comparison.
    """
    M = [[False] * (n + 1) for _ in range(n + 1)]
    for u, neigh in adjacency.items():
        if not 1 <= u <= n:
            raise ValueError(f"vertex {u} is outside 1..{n}")
        for v in neigh:
            if not 1 <= v <= n:
                raise ValueError(f"neighbor {v} of {u} is outside 1..{n}")
            M[u][v] = True
    return M


def adjacency_to_nx(adjacency: Mapping[int, Sequence[int]]) -> nx.Graph:
    """NetworkX graph on the keys of *adjacency*, isolated vertices kept."""
    G = nx.Graph()
    G.add_nodes_from(sorted(adjacency))
    G.add_edges_from(edges_from_adjacency(adjacency))
    return G
