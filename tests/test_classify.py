"""Tests for catalog classification."""
from itertools import combinations

import pytest

from chordclass.catalog.build import build_catalog
from chordclass.catalog.store import Catalog
from chordclass.classify import Matched, NotAttempted, Novel, classify
from chordclass.graph.cycle import build_adjacency, chord_candidates, edge_key
from chordclass.iso.search import is_isomorphism


def _catalog(n, m, *chord_sets):
    return Catalog.from_buckets({(n, m): [build_adjacency(n, c) for c in chord_sets]})


# --- not attempted ---

def test_no_chords_not_attempted():
    catalog = _catalog(4, 4, ())
    assert classify(build_adjacency(4), 4, catalog) == NotAttempted()


def test_no_chords_ignores_catalog_contents():
    catalog = build_catalog([4, 5], use_nauty=False)
    for n in (4, 5):
        assert isinstance(classify(build_adjacency(n), n, catalog), NotAttempted)


# --- matched ---

def test_c5_single_chord_matches_class_0():
    catalog = _catalog(5, 6, [(2, 5)])
    res = classify(build_adjacency(5, [(1, 3)]), 5, catalog)
    assert isinstance(res, Matched)
    assert res.index == 0
    assert res.class_number == 1
    assert res.edge_count == 6
    assert res.added_edges == ((2, 5),)
    pi = res.bijection
    assert edge_key(pi[0], pi[2]) in res.added_edges
    assert is_isomorphism(build_adjacency(5, [(1, 3)]), res.adjacency, pi)


def test_first_match_wins():
    catalog = _catalog(6, 7, [(1, 3)], [(2, 4)])
    res = classify(build_adjacency(6, [(3, 5)]), 6, catalog)
    assert isinstance(res, Matched)
    assert res.index == 0


def test_later_entry_matches_when_earlier_fails():
    catalog = _catalog(6, 7, [(1, 4)], [(1, 3)])
    res = classify(build_adjacency(6, [(2, 6)]), 6, catalog)
    assert isinstance(res, Matched)
    assert res.index == 1
    assert res.class_number == 2
    assert res.added_edges == ((1, 3),)


# --- novel ---

def test_c6_two_chords_novel():
    catalog = _catalog(6, 8, [(1, 4), (2, 5)])
    res = classify(build_adjacency(6, [(1, 3), (1, 5)]), 6, catalog)
    assert res == Novel(n=6, edge_count=8)


def test_empty_catalog_novel():
    res = classify(build_adjacency(5, [(1, 3)]), 5, Catalog.empty())
    assert res == Novel(n=5, edge_count=6)


def test_bucket_key_uses_total_edge_count():
    # same chord count, but bucket stored under the chord count only
    catalog = Catalog.from_buckets({(5, 1): [build_adjacency(5, [(1, 3)])]})
    assert isinstance(classify(build_adjacency(5, [(1, 3)]), 5, catalog), Novel)


# --- against a generated catalog ---

@pytest.mark.parametrize("n", [4, 5])
def test_every_chord_set_matches_generated_catalog(n):
    catalog = build_catalog([n], use_nauty=False)
    chords = chord_candidates(n)
    for k in range(1, len(chords) + 1):
        for subset in combinations(chords, k):
            adj = build_adjacency(n, subset)
            res = classify(adj, n, catalog)
            assert isinstance(res, Matched)
            assert is_isomorphism(adj, res.adjacency, res.bijection)
            # nothing earlier in the bucket may also match
            for earlier in catalog.bucket(n, n + k)[: res.index]:
                assert classify(adj, n, Catalog.from_buckets({(n, n + k): [earlier]})) == Novel(n, n + k)


# --- result values ---

def test_matched_result_cannot_change_catalog():
    catalog = build_catalog([5], use_nauty=False)
    before = dict(catalog.bucket(5, 6)[0])
    res = classify(build_adjacency(5, [(1, 3)]), 5, catalog)
    with pytest.raises(AttributeError):
        res.adjacency[1].append(99)
    with pytest.raises(TypeError):
        res.adjacency[1] = (99,)
    assert dict(catalog.bucket(5, 6)[0]) == before
    again = classify(build_adjacency(5, [(2, 4)]), 5, catalog)
    assert isinstance(again, Matched)
    assert again.adjacency[1] == before[1]


def test_results_hashable():
    catalog = build_catalog([5], use_nauty=False)
    res = classify(build_adjacency(5, [(1, 3)]), 5, catalog)
    same = classify(build_adjacency(5, [(1, 3)]), 5, catalog)
    assert hash(res) == hash(same)
    assert len({res, same, Novel(5, 6), NotAttempted()}) == 3
