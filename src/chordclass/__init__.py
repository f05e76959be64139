"""
chordclass: classify a cycle-plus-chords graph against a catalog of known
classes and exhibit the vertex bijection that proves the match.
"""

from .graph import (
    build_adjacency,
    edge_count,
    to_matrix,
    is_cycle_edge,
    added_edges,
)
from .iso import find_isomorphism, is_isomorphism, invert_bijection
from .classify import NotAttempted, Novel, Matched, classify
from .mapping import format_mapping, mapping_text, describe_result
from .catalog import (
    Catalog,
    CatalogError,
    load_catalog,
    save_catalog,
    build_catalog,
)
from .builder import GraphBuilder

__all__ = [
    # Graph
    "build_adjacency",
    "edge_count",
    "to_matrix",
    "is_cycle_edge",
    "added_edges",
    # Search
    "find_isomorphism",
    "is_isomorphism",
    "invert_bijection",
    # Classification
    "NotAttempted",
    "Novel",
    "Matched",
    "classify",
    # Mapping
    "format_mapping",
    "mapping_text",
    "describe_result",
    # Catalog
    "Catalog",
    "CatalogError",
    "load_catalog",
    "save_catalog",
    "build_catalog",
    # Builder
    "GraphBuilder",
]
