# utils/tree_visualizer.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Graphviz rendering of a truth tree

import os
from typing import TYPE_CHECKING, Optional
from utils.logger import get_logger

# Conditional import of graphviz
try:
    from graphviz import Digraph

    GRAPHVIZ_AVAILABLE = True
except ImportError:
    GRAPHVIZ_AVAILABLE = False

if TYPE_CHECKING:
    from tableau.tableau import Tableau, TraversalEntry

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"

CLOSED_COLOR = "lightcoral"
EXPANDED_COLOR = "lightgrey"
OPEN_LEAF_COLOR = "palegreen"


def _node_label(entry: "TraversalEntry") -> str:
    label = f"[{entry.id}] {entry.formula}"
    if entry.expanded:
        label += " ✓"
    return label


def _node_color(entry: "TraversalEntry") -> str:
    if entry.closed:
        return CLOSED_COLOR
    if entry.is_leaf:
        return OPEN_LEAF_COLOR
    if entry.expanded:
        return EXPANDED_COLOR
    return "white"


def build_tree_graph(tableau: "Tableau", fmt: str = "png") -> Optional["Digraph"]:
    """Build a Graphviz graph of the tree without rendering it.

    Closed statements are red, open leaves green and expanded statements grey.
    Fork edges are labelled with the side of the branch.

    Returns:
        The graph, or None when the graphviz package is missing
    """
    if not GRAPHVIZ_AVAILABLE:
        logger.warning("Graphviz library not installed. Skipping truth tree visualization. "
                       "To enable, install graphviz: pip install graphviz")
        return None

    dot = Digraph(comment="Truth tree", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.4")
    dot.attr("node", shape="box", style="filled", fontname="Helvetica")

    for entry in tableau.traverse():
        node_name = f"N{entry.id}"
        dot.node(node_name, _node_label(entry), fillcolor=_node_color(entry))

        if entry.parent_id is not None:
            edge_label = ""
            if entry.branch_origin_id == entry.parent_id:
                edge_label = entry.branch_side.value
            dot.edge(f"N{entry.parent_id}", node_name, label=edge_label)

        if entry.closed and entry.is_leaf:
            marker = f"X{entry.id}"
            dot.node(marker, "X", shape="plaintext", style="", fontcolor="red")
            dot.edge(node_name, marker, arrowhead="none")

    return dot


def visualize_tableau(tableau: "Tableau", base_filename: str, fmt: str = "png") -> Optional[str]:
    """Render the tree to an image in the 'tree_visualizations' folder.

    Args:
        tableau: Tree to render
        base_filename: Base name for the output file
        fmt: Output format for the image (e.g. "png", "svg")

    Returns:
        Path of the rendered file, or None if rendering was skipped or failed
    """
    dot = build_tree_graph(tableau, fmt)
    if dot is None:
        return None

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for tree visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Truth tree visualization saved to {rendered}")
        return rendered
    except Exception as e:
        logger.warning(f"Failed to render truth tree visualization to {output_path}.{fmt}: {e}. "
                       "Ensure Graphviz executables (dot) are in your system's PATH.")
        return None
