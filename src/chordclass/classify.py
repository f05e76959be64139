"""Classification of a cycle-plus-chords graph against a catalog bucket."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence, Tuple, Union

from chordclass.catalog.store import Catalog, FrozenAdjacency, freeze_adjacency
from chordclass.graph.adjacency import edge_count
from chordclass.graph.cycle import Edge, added_edges
from chordclass.iso.search import Bijection, find_isomorphism

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotAttempted:
    """The graph has no chords, so no classification was run."""


@dataclass(frozen=True)
class Novel:
    """No graph in bucket (n, edge_count) is isomorphic to the input."""

    n: int
    edge_count: int


@dataclass(frozen=True)
class Matched:
    """
    First isomorphic catalog entry.

    index:       0-based position within the bucket
    adjacency:   the catalog graph (cycle plus chords), read-only
    added_edges: its chords, for drawing
    bijection:   position i-1 holds the catalog vertex that vertex i maps to
    """

    index: int
    n: int
    edge_count: int
    adjacency: FrozenAdjacency = field(hash=False)
    added_edges: Tuple[Edge, ...]
    bijection: Bijection

    @property
    def class_number(self) -> int:
        return self.index + 1


Result = Union[NotAttempted, Novel, Matched]


def classify(
    current_adjacency: Mapping[int, Sequence[int]],
    n: int,
    catalog: Catalog,
) -> Result:
    """
    Classify *current_adjacency* (cycle plus chords on 1..n).

    The bucket for (n, edge count) is tried in stored order and the first
    entry with an isomorphism wins.
    """
    if not added_edges(current_adjacency, n):
        return NotAttempted()

    m = edge_count(current_adjacency)
    bucket = catalog.bucket(n, m)
    for i, cand in enumerate(bucket):
        perm = find_isomorphism(current_adjacency, cand, n)
        if perm is not None:
            log.debug("n=%d edges=%d matched class %d", n, m, i + 1)
            return Matched(
                index=i,
                n=n,
                edge_count=m,
                adjacency=freeze_adjacency(cand),
                added_edges=tuple(added_edges(cand, n)),
                bijection=perm,
            )

    log.debug("n=%d edges=%d novel after %d candidates", n, m, len(bucket))
    return Novel(n=n, edge_count=m)
