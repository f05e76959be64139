from .layouts import circle_positions
from .draw import THEMES, next_theme, draw_cycle_graph, draw_classification

__all__ = [
    "circle_positions",
    "THEMES",
    "next_theme",
    "draw_cycle_graph",
    "draw_classification",
]
