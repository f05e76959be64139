from .store import (
    CATALOG_PATH,
    Catalog,
    CatalogError,
    FrozenAdjacency,
    freeze_adjacency,
    parse_graph,
    parse_catalog,
    load_catalog,
    save_catalog,
)
from .canonical import BRUTEFORCE_MAX_N, canonical_key, canonical_key_bruteforce
from .build import cycle_chord_classes, build_catalog

__all__ = [
    "CATALOG_PATH",
    "Catalog",
    "CatalogError",
    "FrozenAdjacency",
    "freeze_adjacency",
    "parse_graph",
    "parse_catalog",
    "load_catalog",
    "save_catalog",
    "BRUTEFORCE_MAX_N",
    "canonical_key",
    "canonical_key_bruteforce",
    "cycle_chord_classes",
    "build_catalog",
]
