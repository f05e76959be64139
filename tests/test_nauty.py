"""Tests for nauty integration."""
import pytest

import chordclass.external.nauty as nauty
from chordclass.catalog.build import build_catalog
from chordclass.catalog.canonical import canonical_key
from chordclass.external.nauty import nauty_available, edgelist_to_g6, canon_g6
from chordclass.graph.cycle import cycle_edges


# --- edgelist_to_g6 (always works, uses networkx) ---

def test_edgelist_to_g6_c4():
    g6 = edgelist_to_g6(cycle_edges(4), 4)
    assert isinstance(g6, str)
    assert len(g6) > 0


def test_edgelist_to_g6_keeps_isolated_vertices():
    assert edgelist_to_g6([], 5) != edgelist_to_g6([], 4)


def test_canonical_key_without_nauty():
    assert canonical_key(cycle_edges(4), 4, use_nauty=False) == canonical_key(
        [(1, 3), (3, 2), (2, 4), (4, 1)], 4, use_nauty=False
    )


# --- canon_g6 (requires nauty) ---

@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_canon_g6_relabeled_cycle():
    a = edgelist_to_g6(cycle_edges(5), 5)
    b = edgelist_to_g6([(1, 3), (3, 5), (5, 2), (2, 4), (4, 1)], 5)
    assert canon_g6(a) == canon_g6(b)


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_nauty_catalog_matches_bruteforce_counts():
    a = build_catalog([5, 6], use_nauty=True)
    b = build_catalog([5, 6], use_nauty=False)
    assert a.keys() == b.keys()
    for n, m in a.keys():
        assert a.bucket(n, m) == b.bucket(n, m)


def test_canon_g6_missing_shortg(monkeypatch):
    monkeypatch.setattr(nauty, "NAUTY_SHORTG", "chordclass-no-such-shortg")
    assert nauty.nauty_available() is False
    with pytest.raises(RuntimeError, match="use_nauty=False"):
        canon_g6(edgelist_to_g6(cycle_edges(4), 4))
