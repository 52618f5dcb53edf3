"""NetworkX views of a simulated path."""

import networkx as nx

from models import Position, Step
from parsing import format_step


def build_trace_graph(trace: list[Position], steps: list[Step]) -> nx.DiGraph:
    """
    Build a directed graph with one node per trace entry and one edge per step.

    Node i is the person reached after i steps (node 0 is self). Nodes carry the
    grid placement of the person; edges carry the step that was taken.
    """
    if len(trace) != len(steps) + 1:
        raise ValueError(f"Trace has {len(trace)} entries for {len(steps)} steps")

    G = nx.DiGraph(final=len(trace) - 1)

    for i, position in enumerate(trace):
        G.add_node(
            i,
            column=position.column,
            row=position.row,
            gender=position.gender,
            cell=position.cell,
            direct=position.no_sibling_in_generation,
        )

    for i, step in enumerate(steps):
        G.add_edge(i, i + 1, step_kind=step.kind, step_label=format_step(step, i))

    return G


def build_grid_graph(trace: list[Position]) -> nx.DiGraph:
    """
    Collapse a trace onto the grid: one node per cell visited, one edge per move.

    Revisiting a cell (e.g. a parallel cousin landing back on A2) increments the
    cell's `visits` counter; repeated moves between the same cells increment the
    edge `count`.
    """
    G = nx.DiGraph(final=trace[-1].cell if trace else None)

    for i, position in enumerate(trace):
        cell = position.cell
        if cell in G:
            G.nodes[cell]["visits"] += 1
        else:
            G.add_node(cell, column=position.column, row=position.row, visits=1)
        # Last person seen in the cell decides its colour
        G.nodes[cell]["gender"] = position.gender

        if i == 0:
            continue
        prev = trace[i - 1].cell
        if G.has_edge(prev, cell):
            G.edges[prev, cell]["count"] += 1
        else:
            G.add_edge(prev, cell, count=1)

    return G


def get_generations(G: nx.DiGraph) -> dict[int, list]:
    """Group node ids by grid row, each row ordered column A before B."""
    rows: dict[int, list] = {}
    for node, data in G.nodes(data=True):
        rows.setdefault(data["row"], []).append(node)
    for row in rows:
        rows[row].sort(key=lambda n: (G.nodes[n]["column"], n))
    return dict(sorted(rows.items()))
