from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.patches import Circle

from chordclass.builder import GraphBuilder
from chordclass.classify import Matched
from chordclass.graph.adjacency import adjacency_to_nx
from chordclass.graph.cycle import Edge, build_adjacency
from chordclass.mapping import describe_result, mapping_text
from .layouts import circle_positions


THEMES = {
    "light": {
        "palette": [
            "#e6194b", "#f58231", "#ffe119", "#3cb44b",
            "#42d4f4", "#4363d8", "#911eb4", "#f032e6",
        ],
        "rim": "#9a9a9a",
        "edge": "#333333",
        "vStroke": "#222222",
        "fg": "#111111",
        "bg": "#ffffff",
    },
    "dark": {
        "palette": [
            "#a3122f", "#b85c1c", "#b39d10", "#2a7d34",
            "#2b94aa", "#2f4597", "#65157d", "#a8239f",
        ],
        "rim": "#6b6b6b",
        "edge": "#d0d0d0",
        "vStroke": "#e0e0e0",
        "fg": "#f2f2f2",
        "bg": "#1b1b1f",
    },
}

RIM_W = 8
EDGE_W = 6
V_SIZE = 900
V_STROKE_W = 2.2
LABEL_FONT = 14


def next_theme(name: str) -> str:
    return "light" if name == "dark" else "dark"


def draw_cycle_graph(
    ax,
    n: int,
    added_edges: Sequence[Edge],
    *,
    selected: Optional[int] = None,
    theme: str = "light",
):
    """
    Draw the n-cycle as a rim circle, chords as straight lines and the
    vertices as numbered discs coloured from the theme palette.
    """
    t = THEMES[theme]
    pos = circle_positions(n)
    G = adjacency_to_nx(build_adjacency(n, added_edges))

    ax.set_axis_off()
    ax.set_aspect("equal")
    ax.set_facecolor(t["bg"])
    ax.add_patch(Circle((0.0, 0.0), 1.0, fill=False, edgecolor=t["rim"], linewidth=RIM_W, zorder=0))

    if added_edges:
        nx.draw_networkx_edges(
            G,
            pos=pos,
            ax=ax,
            edgelist=list(added_edges),
            edge_color=t["edge"],
            width=EDGE_W,
        )

    nodes = list(range(1, n + 1))
    widths = [V_STROKE_W * 2 if v == selected else V_STROKE_W for v in nodes]
    nx.draw_networkx_nodes(
        G,
        pos=pos,
        ax=ax,
        nodelist=nodes,
        node_size=V_SIZE,
        node_color=[t["palette"][(v - 1) % len(t["palette"])] for v in nodes],
        edgecolors=t["vStroke"],
        linewidths=widths,
    )
    nx.draw_networkx_labels(
        G,
        pos=pos,
        ax=ax,
        font_size=LABEL_FONT,
        font_weight="bold",
        font_color=t["fg"],
    )
    ax.set_xlim(-1.25, 1.25)
    ax.set_ylim(-1.25, 1.25)


def draw_classification(
    builder: GraphBuilder,
    *,
    theme: str = "light",
    save_path: str | None = None,
):
    """
    Side-by-side panels: the user's graph and, when classified, the
    matching catalog graph with the witness mapping underneath.

    If save_path is set the figure is written there and closed; otherwise
    it is returned open.
    """
    t = THEMES[theme]
    n = builder.n
    result = builder.result
    status, key = describe_result(result)

    fig, (axL, axR) = plt.subplots(1, 2, figsize=(12, 6.5))
    fig.patch.set_facecolor(t["bg"])

    count = len(builder.added_edges)
    axL.set_title(
        f"Cycle (outer rim), n = {n}   {count} edge{'' if count == 1 else 's'}",
        color=t["fg"],
    )
    draw_cycle_graph(axL, n, builder.added_edges, selected=builder.selected, theme=theme)

    axR.set_axis_off()
    axR.set_facecolor(t["bg"])
    axR.set_title(f"{status}   {key}".strip(), color=t["fg"])
    if isinstance(result, Matched):
        draw_cycle_graph(axR, n, result.added_edges, theme=theme)
        fig.text(0.5, 0.04, mapping_text(result.bijection), ha="center", color=t["fg"], fontsize=12)

    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
        plt.close(fig)
        return None
    return fig
