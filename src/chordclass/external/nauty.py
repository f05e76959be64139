from __future__ import annotations

import os
import shutil
import subprocess

import networkx as nx


NAUTY_SHORTG = os.environ.get("NAUTY_SHORTG", "shortg")


def nauty_available() -> bool:
    """Returns True iff shortg appears runnable."""
    return shutil.which(NAUTY_SHORTG) is not None


def edgelist_to_g6(edges: list[tuple[int, int]], n: int) -> str:
    """Convert an edge list on vertices {1..n} to a graph6 string."""
    G = nx.Graph()
    G.add_nodes_from(range(1, n + 1))
    G.add_edges_from(edges)
    return nx.to_graph6_bytes(G, nodes=list(range(1, n + 1)), header=False).decode("ascii").strip()


def _graph6_lines(out: bytes) -> list[str]:
    """Graph6 lines of shortg output; headers, blanks and status lines skipped."""
    lines = []
    for ln in out.decode("ascii", errors="replace").splitlines():
        s = ln.strip()
        if s and not s.startswith(">") and " " not in s and "\t" not in s:
            lines.append(s)
    return lines


def canon_g6(g6: str) -> str:
    """Canonical graph6 form of *g6*, as computed by shortg.

    Raises RuntimeError when shortg is missing; catalogs up to n=6 can be
    built without it (build_catalog(..., use_nauty=False)).
    """
    if not nauty_available():
        raise RuntimeError(
            f"shortg not found as {NAUTY_SHORTG!r}: install nauty, point "
            "NAUTY_SHORTG at it, or build the catalog with use_nauty=False."
        )
    p = subprocess.run(
        [NAUTY_SHORTG, "-q"],
        input=(g6.strip() + "\n").encode("ascii"),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )
    lines = _graph6_lines(p.stdout)
    if not lines:
        raise RuntimeError(f"shortg returned no canonical form for {g6!r}: stderr={p.stderr!r}")
    return lines[-1]
