from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from chordclass.classify import Matched, Novel, Result


def format_mapping(bijection: Sequence[int], n: Optional[int] = None) -> List[str]:
    """
    Correspondences "i ↦ pi(i)" for i = 1..n.

    Raises ValueError if the length is not n or the targets are not a
    permutation of 1..n.
    """
    if n is None:
        n = len(bijection)
    if len(bijection) != n:
        raise ValueError(f"bijection has length {len(bijection)}, expected {n}")

    seen = set()
    for t in bijection:
        if not 1 <= t <= n:
            raise ValueError(f"target {t} is outside 1..{n}")
        if t in seen:
            raise ValueError(f"target {t} is used twice")
        seen.add(t)

    return [f"{i} ↦ {t}" for i, t in enumerate(bijection, start=1)]


def mapping_text(bijection: Optional[Sequence[int]]) -> str:
    if not bijection:
        return ""
    return ", ".join(format_mapping(bijection))


def describe_result(result: Result) -> Tuple[str, str]:
    """(status, key) lines for a classification result."""
    if isinstance(result, Matched):
        return f"Class {result.class_number}", f"n={result.n}, edges={result.edge_count}"
    if isinstance(result, Novel):
        return "None: new class found.", f"n={result.n}, edges={result.edge_count}"
    return "", ""
