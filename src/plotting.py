"""Visualization of a path on the two-column kinship grid."""

from pathlib import Path

import networkx as nx
import pydot

from graph import get_generations


FILL_COLORS = {
    "male": "lightblue",
    "female": "lightpink",
}


def build_trace_dot(G: nx.DiGraph, title: str | None = None) -> pydot.Dot:
    """
    Lay out a trace or grid graph (see graph.py) as a Graphviz chart.

    Creates a chart where:
    - Older generations appear above younger ones (one rank per grid row)
    - Column A is kept to the left of column B within each row
    - People are coloured by gender, the final person gets a bold outline

    Args:
        G: Graph from build_trace_graph or build_grid_graph
        title: Optional caption, typically the resolved kinship term

    Returns:
        The pydot graph, ready to write or render
    """
    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")  # Top-to-bottom (ancestors at top)
    P.set("nodesep", "0.4")  # Horizontal spacing between nodes
    P.set("ranksep", "0.6")  # Vertical spacing between ranks
    if title:
        P.set("label", f'"{title}"')
        P.set("labelloc", "t")

    final = G.graph.get("final")

    for node, data in G.nodes(data=True):
        cell = data.get("cell", str(node))
        label = cell
        if isinstance(node, int):
            label = "You" if node == 0 else f"{node}: {cell}"
        elif data.get("visits", 1) > 1:
            label = f"{cell} (x{data['visits']})"

        P.add_node(
            pydot.Node(
                str(node),
                label=f'"{label}"',
                shape="box",
                style="rounded,filled,bold" if node == final else "rounded,filled",
                fillcolor=FILL_COLORS.get(data.get("gender"), "lightgray"),
                fontsize="10",
            )
        )

    for u, v, data in G.edges(data=True):
        label = data.get("step_label")
        if label is None and data.get("count", 1) > 1:
            label = f"x{data['count']}"
        if label:
            P.add_edge(pydot.Edge(str(u), str(v), label=f'"{label}"', fontsize="9"))
        else:
            P.add_edge(pydot.Edge(str(u), str(v)))

    # One rank per grid row, column A before column B via invisible edges
    for row, members in get_generations(G).items():
        sg = pydot.Subgraph(f"row_{row}".replace("-", "m"), rank="same")
        for node in members:
            sg.add_node(pydot.Node(str(node)))
        for a, b in zip(members, members[1:]):
            sg.add_edge(pydot.Edge(str(a), str(b), style="invis"))
        P.add_subgraph(sg)

    return P


def plot_trace(G: nx.DiGraph, output_path: Path | None = None, title: str | None = None):
    """
    Render the chart to a file, or display it when no path is given.

    Args:
        G: Graph from build_trace_graph or build_grid_graph
        output_path: Path to save the output image (PNG, SVG or PDF). If None, displays
            interactively.
        title: Optional caption for the chart
    """
    P = build_trace_dot(G, title)

    if output_path:
        # Determine format from extension
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
        print(f"Graph saved to {output_path}")
    else:
        # Save to temporary file and display
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            P.write(f.name, format="png")
            img = mpimg.imread(f.name)
            plt.figure(figsize=(8, 10))
            plt.imshow(img)
            plt.axis("off")
            plt.tight_layout()
            plt.show()
