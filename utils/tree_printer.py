# utils/tree_printer.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Plain-text rendering of a truth tree

"""Plain-text layout of a truth tree, one statement per line.

    [1] P v Q	[O]
    [2] ~P
     - 2l [3] P
     - 2l [X]
     - 2r [4] Q

Nodes below a fork are indented with one dash per fork and tagged with the
fork they split from and the side they are on. ``[O]`` marks an expanded
statement; a closed branch below a fork ends with an ``[X]`` line.
"""

import sys
from typing import List, TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from tableau.tableau import Tableau, TraversalEntry

EXPANDED_MARK = "[O]"
CLOSED_MARK = "[X]"

LEGEND = (
    f"Key: {EXPANDED_MARK} next to a statement indicates that it's already been expanded, "
    f"and {CLOSED_MARK} indicates that the branch it's listed next to is closed"
)


def _branch_prefix(entry: "TraversalEntry") -> str:
    prefix = ""
    if entry.branch_depth > 0:
        prefix += " " + "-" * entry.branch_depth
    if entry.branch_origin_id > 0:
        prefix += f" {entry.branch_origin_id}{entry.branch_side.value}"
    return prefix


def format_entry(entry: "TraversalEntry") -> List[str]:
    """Format one traversal entry, plus its closed-branch marker if it ends one."""
    prefix = _branch_prefix(entry)
    line = f"{prefix} [{entry.id}] {entry.formula}"
    if entry.expanded:
        line += f"\t{EXPANDED_MARK}"

    lines = [line]
    if entry.branch_origin_id > 0 and entry.closed and entry.is_leaf:
        lines.append(f"{prefix} {CLOSED_MARK}")
    return lines


def render_tree(tableau: "Tableau") -> str:
    """Render the whole tree in depth-first order.

    Args:
        tableau: Tree to render

    Returns:
        Multi-line text, one statement per line
    """
    lines: List[str] = []
    for entry in tableau.traverse():
        lines.extend(format_entry(entry))
    return "\n".join(lines)


def print_tree(tableau: "Tableau", stream: TextIO = sys.stdout, legend: bool = True) -> None:
    """Write the rendered tree, optionally preceded by the legend."""
    if legend:
        print(LEGEND, file=stream)
    print(render_tree(tableau), file=stream)
