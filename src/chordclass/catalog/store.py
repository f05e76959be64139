"""
Immutable catalog of reference graphs, bucketed by (vertex count, edge count).

On disk the catalog is JSON:

    {"<n>": {"<edge count>": [{"<v>": ["<u>", ...], ...}, ...]}}

where the edge count is the total number of edges (cycle plus chords) and
each bucket lists reference graphs in match-precedence order.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from chordclass.graph.cycle import Adjacency
from chordclass.graph.adjacency import edge_count

log = logging.getLogger(__name__)

CATALOG_PATH = os.environ.get("CHORDCLASS_CATALOG", "iso_db.json")

BucketKey = Tuple[int, int]
FrozenAdjacency = Mapping[int, Tuple[int, ...]]


class CatalogError(ValueError):
    """Malformed catalog data."""


def freeze_adjacency(adjacency: Mapping[int, Any]) -> FrozenAdjacency:
    """Read-only copy: vertex -> tuple of neighbors, vertices ascending."""
    return MappingProxyType({v: tuple(adjacency[v]) for v in sorted(adjacency)})


@dataclass(frozen=True)
class Catalog:
    """
    Read-only mapping (n, edge_count) -> ordered tuple of adjacency mappings.

    Absent keys are empty buckets.
    """

    buckets: Mapping[BucketKey, Tuple[FrozenAdjacency, ...]]

    @classmethod
    def empty(cls) -> "Catalog":
        return cls(MappingProxyType({}))

    @classmethod
    def from_buckets(cls, buckets: Mapping[BucketKey, Any]) -> "Catalog":
        frozen = {
            key: tuple(freeze_adjacency(adj) for adj in graphs)
            for key, graphs in buckets.items()
            if graphs
        }
        return cls(MappingProxyType(dict(sorted(frozen.items()))))

    @classmethod
    def from_json_obj(cls, obj: Any) -> "Catalog":
        return parse_catalog(obj)

    def bucket(self, n: int, m: int) -> Tuple[FrozenAdjacency, ...]:
        return self.buckets.get((n, m), ())

    def keys(self) -> List[BucketKey]:
        return list(self.buckets)

    def __len__(self) -> int:
        return sum(len(b) for b in self.buckets.values())

    def to_json_obj(self) -> Dict[str, Dict[str, List[Dict[str, List[str]]]]]:
        out: Dict[str, Dict[str, List[Dict[str, List[str]]]]] = {}
        for (n, m), graphs in self.buckets.items():
            out.setdefault(str(n), {})[str(m)] = [
                {str(v): [str(u) for u in adj[v]] for v in sorted(adj)}
                for adj in graphs
            ]
        return out


def _as_int(label: Any, what: str) -> int:
    if isinstance(label, bool):
        raise CatalogError(f"{what} {label!r} is not an integer label")
    if isinstance(label, int):
        return label
    if isinstance(label, str):
        s = label.strip()
        if s.isascii() and s.isdigit():
            return int(s)
    raise CatalogError(f"{what} {label!r} is not an integer label")


def parse_graph(obj: Any, n: int) -> Adjacency:
    """
    Parse one string-keyed adjacency mapping and check it is a simple
    graph on exactly 1..n.
    """
    if not isinstance(obj, Mapping):
        raise CatalogError(f"graph entry must be an object, got {type(obj).__name__}")

    adj: Adjacency = {}
    for key, neigh in obj.items():
        v = _as_int(key, "vertex")
        if not isinstance(neigh, (list, tuple)):
            raise CatalogError(f"neighbors of {v} must be a list")
        adj[v] = sorted({_as_int(u, "neighbor") for u in neigh})

    if set(adj) != set(range(1, n + 1)):
        raise CatalogError(f"vertex labels {sorted(adj)} are not 1..{n}")
    for v, neigh in adj.items():
        for u in neigh:
            if u == v:
                raise CatalogError(f"self-loop at vertex {v}")
            if u not in adj:
                raise CatalogError(f"neighbor {u} of {v} is outside 1..{n}")
            if v not in adj[u]:
                raise CatalogError(f"edge {v}-{u} is not symmetric")
    return {v: adj[v] for v in sorted(adj)}


def parse_catalog(obj: Any) -> Catalog:
    """Validate a decoded JSON catalog and freeze it. Raises CatalogError."""
    if not isinstance(obj, Mapping):
        raise CatalogError("catalog root must be an object")

    buckets: Dict[BucketKey, List[Adjacency]] = {}
    for n_key, by_m in obj.items():
        n = _as_int(n_key, "vertex count")
        if not isinstance(by_m, Mapping):
            raise CatalogError(f"entry for n={n} must be an object")
        for m_key, graphs in by_m.items():
            m = _as_int(m_key, "edge count")
            if not isinstance(graphs, list):
                raise CatalogError(f"bucket (n={n}, edges={m}) must be a list")
            parsed = []
            for i, g in enumerate(graphs):
                adj = parse_graph(g, n)
                if edge_count(adj) != m:
                    raise CatalogError(
                        f"graph {i} in bucket (n={n}, edges={m}) has {edge_count(adj)} edges"
                    )
                parsed.append(adj)
            buckets[(n, m)] = parsed
    return Catalog.from_buckets(buckets)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load and validate the catalog at *path* (default CATALOG_PATH).

    Any failure degrades to an empty catalog, so every graph then reports
    as novel.
    """
    path = path or CATALOG_PATH
    try:
        with open(path, "r", encoding="utf-8") as fh:
            obj = json.load(fh)
        catalog = parse_catalog(obj)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and CatalogError
        log.warning("catalog %s unavailable, using empty catalog: %s", path, exc)
        return Catalog.empty()

    log.info("loaded %d graphs in %d buckets from %s", len(catalog), len(catalog.keys()), path)
    return catalog


def save_catalog(catalog: Catalog, path: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(catalog.to_json_obj(), fh, indent=1)
        fh.write("\n")
