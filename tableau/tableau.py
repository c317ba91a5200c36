# tableau/tableau.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Truth tree engine: expansion, branch closure and completion checks

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from parser import parse, parse_strict
from parser.formula import Formula, Not
from .node import BranchSide, TableauNode
from .status import TableauFailure, TableauStatus
from utils.logger import get_logger


def is_negation_of(candidate: Formula, formula: Formula) -> bool:
    """Check whether ``candidate`` is literally ``(not <formula>)``."""
    return isinstance(candidate, Not) and candidate.operand == formula


def contradicts(first: Formula, second: Formula) -> bool:
    """Check whether either formula is the syntactic negation of the other."""
    return is_negation_of(first, second) or is_negation_of(second, first)


@dataclass(frozen=True)
class TraversalEntry:
    """Snapshot of one node as reported by :meth:`Tableau.traverse`.

    Attributes:
        id: Node identifier
        formula: Infix rendering of the node's statement
        expanded: Whether the statement has been decomposed
        closed: Whether the branch through this node is closed
        branch_origin_id: Fork node this branch split from, 0 on the trunk
        branch_depth: Number of forks above this node
        branch_side: Side of the originating fork
        parent_id: Id of the parent node, None for the root
        is_leaf: Whether the node ends its branch
    """

    id: int
    formula: str
    expanded: bool
    closed: bool
    branch_origin_id: int
    branch_depth: int
    branch_side: BranchSide
    parent_id: Optional[int]
    is_leaf: bool


class Tableau:
    """Interactive truth tree over a set of premises.

    The first premise becomes the root (id 1) and the remaining premises are
    chained below it. The tree then grows only through :meth:`expand`; nodes
    are never removed, only closed. Each instance owns its node arena and id
    counter, so independent trees can coexist.

    Operations never raise for refused requests. They return False and record
    the reason in :attr:`last_failure`.

    Attributes:
        last_failure: Why the most recent operation was refused, None if it succeeded
    """

    def __init__(self, premises: Sequence[Formula]):
        if not premises:
            raise ValueError("A truth tree needs at least one premise")

        self._nodes: List[TableauNode] = []
        self._next_id = 1
        self.last_failure: Optional[TableauFailure] = None

        self._new_node(premises[0])
        for premise in premises[1:]:
            self.add_premise(premise)

        get_logger().tableau_start(str(premise) for premise in premises)

    @classmethod
    def from_strings(cls, premises: Iterable[str], strict: bool = False) -> Tableau:
        """Build a tableau from prefix-notation premise strings.

        Args:
            premises: Premise texts
            strict: Validate and normalize each premise first

        Raises:
            ParseError: A premise failed strict validation
        """
        reader = parse_strict if strict else parse
        return cls([reader(text) for text in premises])

    # Node arena
    @property
    def root(self) -> TableauNode:
        return self._nodes[0]

    @property
    def nodes(self) -> Sequence[TableauNode]:
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, node_id: int) -> Optional[TableauNode]:
        """Look up a node by id.

        Returns:
            The node, or None when no node has that id
        """
        if 1 <= node_id < self._next_id:
            return self._nodes[node_id - 1]
        return None

    def _new_node(self, formula: Formula) -> TableauNode:
        node = TableauNode(id=self._next_id, formula=formula)
        self._next_id += 1
        self._nodes.append(node)
        return node

    def _attach(
        self, parent: TableauNode, formula: Formula, side: BranchSide = BranchSide.NONE
    ) -> TableauNode:
        """Create a node for ``formula`` as a child of ``parent``."""
        child = self._new_node(formula)
        child.parent = parent.id

        if side is BranchSide.RIGHT:
            parent.right_child = child.id
            parent.fork_lineage(child, side)
        elif side is BranchSide.LEFT:
            parent.left_child = child.id
            parent.fork_lineage(child, side)
        else:
            parent.left_child = child.id
            parent.continue_lineage(child)

        return child

    def _ancestors(self, node: TableauNode) -> Iterator[TableauNode]:
        """Yield the ancestors of ``node``, nearest first."""
        current = node
        while current.parent is not None:
            current = self._nodes[current.parent - 1]
            yield current

    def _is_ancestor(self, ancestor: TableauNode, node: TableauNode) -> bool:
        return any(candidate is ancestor for candidate in self._ancestors(node))

    def _subtree(self, node: TableauNode, skip_closed: bool = False) -> Iterator[TableauNode]:
        """Yield ``node`` and its descendants in pre-order, left before right."""
        stack = [node]
        while stack:
            current = stack.pop()
            if skip_closed and current.closed:
                continue
            yield current
            for child_id in reversed(current.children):
                stack.append(self._nodes[child_id - 1])

    def _open_leaves(self, node: TableauNode) -> List[TableauNode]:
        return [
            candidate
            for candidate in self._subtree(node, skip_closed=True)
            if candidate.is_leaf()
        ]

    def _reject(self, operation: str, failure: TableauFailure) -> bool:
        self.last_failure = failure
        get_logger().operation_rejected(operation, str(failure))
        return False

    # Construction
    def add_premise(self, premise: Formula) -> int:
        """Append a premise to the end of the root's left-only chain.

        Meant for construction time. Once expansion has begun the premise
        only lands on the leftmost branch; it takes over that branch's lineage
        and closure state.

        Args:
            premise: Formula to add

        Returns:
            Id of the new node
        """
        logger = get_logger()

        if any(node.expanded for node in self._nodes):
            logger.warning(
                f"Premise {premise} added after expansion began; "
                "it only joins the leftmost branch"
            )

        tail = self.root
        while tail.left_child is not None:
            tail = self._nodes[tail.left_child - 1]

        node = self._attach(tail, premise)
        if tail.closed:
            node.mark_closed()

        logger.debug(f"Premise [{node.id}] {premise} added")
        return node.id

    def expand(self, node_id: int) -> bool:
        """Decompose the statement with the given id.

        The results are added below every open leaf of the node's subtree;
        closed branches are skipped. Double negation adds one node per leaf,
        non-branching rules add a two-node chain, branching rules add a fork
        whose children record the leaf they split from.

        Args:
            node_id: Id of the statement to expand

        Returns:
            True if the statement was expanded; False if the id is unknown,
            the statement was already expanded, or it is a literal
        """
        logger = get_logger()
        self.last_failure = None

        target = self.node(node_id)
        if target is None:
            return self._reject(f"expand({node_id})", TableauFailure.OUT_OF_RANGE)
        if target.expanded:
            return self._reject(f"expand({node_id})", TableauFailure.ALREADY_EXPANDED)

        formula = target.formula
        left = formula.left_expansion()
        right = formula.right_expansion()

        if left is None and right is None:
            return self._reject(f"expand({node_id})", TableauFailure.NOTHING_TO_EXPAND)

        first_new_id = self._next_id
        for leaf in self._open_leaves(target):
            if right is None:
                self._attach(leaf, left)
            elif formula.branches():
                self._attach(leaf, left, BranchSide.LEFT)
                self._attach(leaf, right, BranchSide.RIGHT)
            else:
                upper = self._attach(leaf, left)
                self._attach(upper, right)

        target.mark_expanded()
        logger.node_expanded(node_id, str(formula), range(first_new_id, self._next_id))
        return True

    # Closure
    def close_branch(self, first_id: int, second_id: int) -> bool:
        """Close the branch on which one statement contradicts the other.

        The two statements must be on one branch (the lower-numbered one an
        ancestor of the other) and one must be literally the negation of the
        other. The lower statement and everything below it close; closure then
        moves up through chain parents and through forks whose children are
        both closed.

        Args:
            first_id: Id of one statement
            second_id: Id of the other statement

        Returns:
            True if the branch was closed
        """
        logger = get_logger()
        self.last_failure = None
        operation = f"close({first_id}, {second_id})"

        first = self.node(first_id)
        second = self.node(second_id)
        if first is None or second is None:
            return self._reject(operation, TableauFailure.OUT_OF_RANGE)

        if not isinstance(first.formula, Not) and not isinstance(second.formula, Not):
            return self._reject(operation, TableauFailure.NO_NEGATION)

        upper, lower = (first, second) if first.id <= second.id else (second, first)
        if upper is not lower and not self._is_ancestor(upper, lower):
            return self._reject(operation, TableauFailure.DIFFERENT_BRANCHES)

        if not contradicts(first.formula, second.formula):
            return self._reject(operation, TableauFailure.NOT_CONTRADICTORY)

        closed_count = self._close_downward(lower) + self._close_upward(lower)
        logger.branch_closed(lower.id, upper.id, closed_count)
        return True

    def _close_downward(self, node: TableauNode) -> int:
        count = 0
        for current in self._subtree(node):
            if current.is_open():
                current.mark_closed()
                count += 1
        return count

    def _close_upward(self, node: TableauNode) -> int:
        count = 0
        for ancestor in self._ancestors(node):
            if ancestor.is_fork() and not all(
                self._nodes[child_id - 1].closed for child_id in ancestor.children
            ):
                break
            if ancestor.is_open():
                ancestor.mark_closed()
                count += 1
        return count

    # Completion
    def check_done(self) -> bool:
        """Check whether the truth tree is finished.

        A tree is finished when the root is closed, or when no open statement
        is left unexpanded and no open statement contradicts one of its
        ancestors.

        Returns:
            True if nothing remains to be done
        """
        logger = get_logger()

        if self.root.closed:
            logger.debug("Tree is done: every branch is closed")
            return True

        for node in self._nodes:
            if node.is_open() and node.formula.can_expand() and not node.expanded:
                logger.debug(f"Tree not done: [{node.id}] {node.formula} can still be expanded")
                return False

        for node in reversed(self._nodes):
            if node.closed:
                continue
            for ancestor in self._ancestors(node):
                if contradicts(node.formula, ancestor.formula):
                    logger.debug(
                        f"Tree not done: [{node.id}] and [{ancestor.id}] close a branch"
                    )
                    return False

        logger.debug("Tree is done: open branches are fully expanded")
        return True

    def status(self) -> TableauStatus:
        """Summarize the tree as closed, open or still incomplete."""
        if self.root.closed:
            return TableauStatus.CLOSED
        if self.check_done():
            return TableauStatus.OPEN
        return TableauStatus.INCOMPLETE

    # Presentation support
    def traverse(self) -> Iterator[TraversalEntry]:
        """Yield every node in depth-first pre-order, left branch first."""
        for node in self._subtree(self.root):
            yield TraversalEntry(
                id=node.id,
                formula=str(node.formula),
                expanded=node.expanded,
                closed=node.closed,
                branch_origin_id=node.branch_origin_id,
                branch_depth=node.branch_depth,
                branch_side=node.branch_side,
                parent_id=node.parent,
                is_leaf=node.is_leaf(),
            )
