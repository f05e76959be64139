from __future__ import annotations

import math
from typing import Dict, Tuple


def circle_positions(n: int, radius: float = 1.0) -> Dict[int, Tuple[float, float]]:
    """
    Vertices 1..n evenly on a circle, vertex 1 at the top, clockwise.
    """
    pos = {}
    for i in range(1, n + 1):
        ang = math.radians(90 - 360 * (i - 1) / n)
        pos[i] = (radius * math.cos(ang), radius * math.sin(ang))
    return pos
