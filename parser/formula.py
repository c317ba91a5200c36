# parser/formula.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Formula node classes for truth-functional statements

"""Formula classes for representing parsed propositional statements.

This module defines immutable node classes, one per statement kind, used to
build tree representations of premises written in fully parenthesized prefix
notation, e.g. ``(not (if (and P Q) (iff (or A B) R)))``.

Node Types:
    Atom: Atomic statement letters
    Not: Negation (unary)
    And, Or, If, Iff: Binary connectives

Every node keeps the exact source text it was parsed from. Two formulas are
equal iff their texts are identical; this is syntactic equality, not logical
equivalence, and it is whitespace sensitive.

All nodes support the visitor design pattern for traversal and for the
tableau decomposition rules in :mod:`parser.decomposition`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Protocol


class FormulaKind(Enum):
    """Kind of a truth-functional statement, fixed by its leading token."""

    ATOM = "atom"
    NOT = "not"
    AND = "and"
    OR = "or"
    IF = "if"
    IFF = "iff"


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern."""

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_if(self, n: If): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True, eq=False)
class Formula:
    """Base class for all formula nodes.

    Attributes:
        text: The exact prefix-notation substring that produced this node
    """

    text: str

    kind: ClassVar[FormulaKind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def is_atomic(self) -> bool:
        return False

    def branches(self) -> bool:
        """Check whether decomposing this formula splits the branch in two."""
        return False

    def can_expand(self) -> bool:
        """Check whether this formula has a tableau decomposition.

        Only literals (atoms and negated atoms) are irreducible.
        """
        return True

    def left_expansion(self) -> Optional[Formula]:
        """Return the first formula produced by one decomposition step, if any."""
        from .decomposition import decompose

        return decompose(self).left

    def right_expansion(self) -> Optional[Formula]:
        """Return the second formula produced by one decomposition step, if any."""
        from .decomposition import decompose

        return decompose(self).right

    def __str__(self) -> str:
        """Return the infix rendering of the formula.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


def _grouped(f: Formula) -> str:
    """Render a sub-formula, parenthesized unless it is atomic."""
    if f.is_atomic():
        return str(f)
    return f"({f})"


@dataclass(frozen=True, slots=True, eq=False)
class Atom(Formula):
    """Atomic statement letter, e.g. ``P`` or ``raining``."""

    kind: ClassVar[FormulaKind] = FormulaKind.ATOM

    @property
    def name(self) -> str:
        return self.text

    @property
    def left_operand(self) -> str:
        """An atom is its own operand text."""
        return self.text

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def is_atomic(self) -> bool:
        return True

    def can_expand(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True, eq=False)
class Not(Formula):
    """Negation of a single operand.

    Attributes:
        operand: The negated formula
    """

    operand: Formula

    kind: ClassVar[FormulaKind] = FormulaKind.NOT

    @property
    def left(self) -> Formula:
        """The negated formula, under the name binary nodes use for their first child."""
        return self.operand

    @property
    def left_operand(self) -> str:
        """Source text of the negated formula."""
        return self.operand.text

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def branches(self) -> bool:
        # De Morgan on a conjunction and the negated biconditional fork;
        # negated disjunctions and conditionals stack on one branch.
        return isinstance(self.operand, (And, Iff))

    def can_expand(self) -> bool:
        return not self.operand.is_atomic()

    def __str__(self) -> str:
        return f"~{_grouped(self.operand)}"


@dataclass(frozen=True, slots=True, eq=False)
class BinaryFormula(Formula):
    """Common shape of the four binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Formula
    right: Formula

    symbol: ClassVar[str]

    @property
    def left_operand(self) -> str:
        """Source text of the left operand."""
        return self.left.text

    @property
    def right_operand(self) -> str:
        """Source text of the right operand."""
        return self.right.text

    def __str__(self) -> str:
        return f"{_grouped(self.left)} {self.symbol} {_grouped(self.right)}"


@dataclass(frozen=True, slots=True, eq=False)
class And(BinaryFormula):
    """Conjunction; decomposes onto a single branch."""

    kind: ClassVar[FormulaKind] = FormulaKind.AND
    symbol: ClassVar[str] = "^"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True, eq=False)
class Or(BinaryFormula):
    """Disjunction; decomposes into a fork."""

    kind: ClassVar[FormulaKind] = FormulaKind.OR
    symbol: ClassVar[str] = "v"

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def branches(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, eq=False)
class If(BinaryFormula):
    """Material conditional; decomposes into a fork."""

    kind: ClassVar[FormulaKind] = FormulaKind.IF
    symbol: ClassVar[str] = "->"

    def accept(self, v: Visitor):
        return v.visit_if(self)

    def branches(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, eq=False)
class Iff(BinaryFormula):
    """Biconditional; decomposes into a fork of two conjunctions."""

    kind: ClassVar[FormulaKind] = FormulaKind.IFF
    symbol: ClassVar[str] = "<->"

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def branches(self) -> bool:
        return True
