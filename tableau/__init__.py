# tableau/__init__.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Truth tree engine public API

"""Truth tree (semantic tableau) construction for propositional logic.

A tree starts from one or more premises and grows as the user expands
statements by number. Branches close when a statement and its literal
negation lie on the same path from the root. A tree is finished when every
branch is closed, or when every open statement has been expanded and no
available closure is left unused.

Primary Components:
    Tableau: Node arena with expand / close_branch / check_done / traverse
    TableauNode: A statement with closure flags and branch lineage
    TableauStatus: CLOSED, OPEN or INCOMPLETE summary of a tree
    TableauFailure: Why an operation was refused
    TableauSession: Interactive command loop over a Tableau

Example:
    >>> from tableau import Tableau
    >>> tree = Tableau.from_strings(["P", "(not P)"])
    >>> tree.close_branch(1, 2)
    True
    >>> tree.check_done()
    True
"""

from .node import BranchSide, TableauNode
from .status import TableauFailure, TableauStatus
from .tableau import Tableau, TraversalEntry
from .session import TableauSession, collect_premises

__all__ = [
    "Tableau",
    "TableauNode",
    "TraversalEntry",
    "BranchSide",
    "TableauStatus",
    "TableauFailure",
    "TableauSession",
    "collect_premises",
]

__version__ = "1.0.0"
__description__ = "Truth tree construction for propositional logic"
