# tableau/node.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Truth tree node with closure and branch lineage bookkeeping

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from parser.formula import Formula


class BranchSide(Enum):
    """Side of the fork a node descends from."""

    NONE = "?"
    LEFT = "l"
    RIGHT = "r"

    def __str__(self) -> str:
        return self.value


@dataclass
class TableauNode:
    """A single statement placed in a truth tree.

    Nodes live in the arena of their owning :class:`tableau.Tableau` and refer
    to each other by id. Only the parent-to-child links own structure; the
    parent id is a plain back reference. A node has no children, one child
    (chain continuation, always ``left_child``) or two (a fork).

    Attributes:
        id: Creation-ordered identifier, starting at 1
        formula: Statement at this position
        parent: Id of the parent node, None for the root
        left_child: Id of the chain continuation or left fork child
        right_child: Id of the right fork child
        closed: Set once the branch through this node is closed
        expanded: Set once the statement has been decomposed
        branch_origin_id: Id of the fork node this branch split from, 0 on the trunk
        branch_depth: Number of forks between the root and this node
        branch_side: Which side of its originating fork this node is on
    """

    id: int
    formula: Formula
    parent: Optional[int] = None
    left_child: Optional[int] = None
    right_child: Optional[int] = None
    closed: bool = False
    expanded: bool = False
    branch_origin_id: int = 0
    branch_depth: int = 0
    branch_side: BranchSide = BranchSide.NONE

    @property
    def children(self) -> Tuple[int, ...]:
        return tuple(
            child for child in (self.left_child, self.right_child) if child is not None
        )

    def is_leaf(self) -> bool:
        return self.left_child is None

    def is_fork(self) -> bool:
        return self.right_child is not None

    def is_open(self) -> bool:
        return not self.closed

    def mark_closed(self) -> None:
        self.closed = True

    def mark_expanded(self) -> None:
        self.expanded = True

    def continue_lineage(self, child: TableauNode) -> None:
        """Put ``child`` on the same branch as this node."""
        child.branch_origin_id = self.branch_origin_id
        child.branch_depth = self.branch_depth
        child.branch_side = self.branch_side

    def fork_lineage(self, child: TableauNode, side: BranchSide) -> None:
        """Put ``child`` on a new branch that splits off at this node."""
        child.branch_origin_id = self.id
        child.branch_depth = self.branch_depth + 1
        child.branch_side = side

    def __str__(self) -> str:
        return f"[{self.id}] {self.formula}"
