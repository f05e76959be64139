from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, Iterable, List

from chordclass.external.nauty import nauty_available
from chordclass.graph.cycle import Adjacency, build_adjacency, chord_candidates, cycle_edges
from chordclass.iso.search import MAX_VERTICES
from .canonical import canonical_key
from .store import BucketKey, Catalog

log = logging.getLogger(__name__)


def cycle_chord_classes(n: int, k: int, *, use_nauty: bool) -> List[Adjacency]:
    """
    One representative per isomorphism class of C_n plus k chords.

    Chord sets are visited in itertools.combinations order over
    chord_candidates(n); the first member of each class is kept, so the
    bucket order is stable across runs.
    """
    base = cycle_edges(n)
    seen = set()
    reps: List[Adjacency] = []
    for chords in combinations(chord_candidates(n), k):
        key = canonical_key(base + list(chords), n, use_nauty=use_nauty)
        if key in seen:
            continue
        seen.add(key)
        reps.append(build_adjacency(n, chords))
    return reps


def build_catalog(ns: Iterable[int], *, use_nauty: bool | None = None) -> Catalog:
    """
    Catalog of every cycle-plus-chords graph on each n in *ns*, up to
    isomorphism, bucketed by (n, total edge count).

    Graphs without chords are not cataloged.
    """
    if use_nauty is None:
        use_nauty = nauty_available()

    buckets: Dict[BucketKey, List[Adjacency]] = {}
    for n in ns:
        if not 3 <= n <= MAX_VERTICES:
            raise ValueError(f"n={n} is outside 3..{MAX_VERTICES}")
        n_chords = len(chord_candidates(n))
        total = 0
        for k in range(1, n_chords + 1):
            reps = cycle_chord_classes(n, k, use_nauty=use_nauty)
            buckets[(n, n + k)] = reps
            total += len(reps)
        log.info("n=%d: %d classes over %d chord counts", n, total, n_chords)

    return Catalog.from_buckets(buckets)
