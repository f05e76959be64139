"""
Interactive graph state: the n-cycle plus a set of toggled chords.

GraphBuilder owns the only mutable state. Every change re-runs
classification and notifies subscribers.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Set

from chordclass.catalog.store import Catalog
from chordclass.classify import Result, classify
from chordclass.graph.adjacency import edge_count
from chordclass.graph.cycle import Adjacency, Edge, build_adjacency, edge_key, is_cycle_edge

log = logging.getLogger(__name__)

MIN_VERTICES = 3
MAX_VERTICES = 8


class GraphBuilder:
    def __init__(self, n: int = 5, catalog: Optional[Catalog] = None) -> None:
        self._check_n(n)
        self.n = n
        self.catalog = catalog if catalog is not None else Catalog.empty()
        self.selected: Optional[int] = None
        self._edges: Set[Edge] = set()
        self._listeners: List[Callable[["GraphBuilder"], None]] = []
        self.result: Result = classify(self.adjacency, self.n, self.catalog)

    @staticmethod
    def _check_n(n: int) -> None:
        if not MIN_VERTICES <= n <= MAX_VERTICES:
            raise ValueError(f"n={n} is outside {MIN_VERTICES}..{MAX_VERTICES}")

    def _check_vertex(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise ValueError(f"vertex {v} is outside 1..{self.n}")

    @property
    def added_edges(self) -> List[Edge]:
        return sorted(self._edges)

    @property
    def adjacency(self) -> Adjacency:
        return build_adjacency(self.n, self._edges)

    @property
    def edge_count(self) -> int:
        return edge_count(self.adjacency)

    def subscribe(self, callback: Callable[["GraphBuilder"], None]) -> None:
        self._listeners.append(callback)

    def _changed(self) -> None:
        self.result = classify(self.adjacency, self.n, self.catalog)
        for cb in self._listeners:
            cb(self)

    def set_n(self, n: int) -> None:
        """
        Resize the cycle. Chords touching removed vertices, or lying on the
        new cycle, are dropped along with a stale selection.
        """
        self._check_n(n)
        self.n = n
        dropped = {e for e in self._edges if e[1] > n or is_cycle_edge(e[0], e[1], n)}
        self._edges -= dropped
        if dropped:
            log.debug("n=%d dropped chords %s", n, sorted(dropped))
        if self.selected is not None and self.selected > n:
            self.selected = None
        self._changed()

    def toggle_edge(self, a: int, b: int) -> bool:
        """
        Add or remove chord {a, b}. Loops and cycle edges are ignored.

        Returns True iff the chord set changed.
        """
        self._check_vertex(a)
        self._check_vertex(b)
        if a == b or is_cycle_edge(a, b, self.n):
            return False
        e = edge_key(a, b)
        if e in self._edges:
            self._edges.remove(e)
        else:
            self._edges.add(e)
        self._changed()
        return True

    def click_vertex(self, v: int) -> None:
        """First click selects *v*; the next click toggles the chord to it."""
        self._check_vertex(v)
        if self.selected is None:
            self.selected = v
            self._changed()
            return

        a, self.selected = self.selected, None
        if not self.toggle_edge(a, v):
            self._changed()

    def deselect(self) -> None:
        self.selected = None
        self._changed()

    def clear(self) -> None:
        self._edges.clear()
        self.selected = None
        self._changed()
