from .cycle import (
    Edge,
    Adjacency,
    edge_key,
    is_cycle_edge,
    cycle_edges,
    chord_candidates,
    build_adjacency,
    added_edges,
)
from .adjacency import (
    Matrix,
    edge_count,
    edges_from_adjacency,
    to_matrix,
    adjacency_to_nx,
)

__all__ = [
    "Edge",
    "Adjacency",
    "Matrix",
    "edge_key",
    "is_cycle_edge",
    "cycle_edges",
    "chord_candidates",
    "build_adjacency",
    "added_edges",
    "edge_count",
    "edges_from_adjacency",
    "to_matrix",
    "adjacency_to_nx",
]
