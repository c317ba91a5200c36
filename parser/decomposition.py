# parser/decomposition.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Tableau decomposition rules for truth-functional statements

"""Classical tableau decomposition of propositional formulas.

Each expandable formula decomposes into one or two formulas:

    (and A B)        ->  A, B                      same branch
    (or A B)         ->  A | B                     fork
    (if A B)         ->  (not A) | B               fork
    (iff A B)        ->  (and A B) | (and (not A) (not B))    fork
    (not (not A))    ->  A
    (not (and A B))  ->  (not A) | (not B)         fork
    (not (or A B))   ->  (not A), (not B)          same branch
    (not (if A B))   ->  A, (not B)                same branch
    (not (iff A B))  ->  (and A (not B)) | (and (not A) B)    fork

New formulas are synthesized by building their prefix text from the operand
texts and parsing it again, so they compare equal to premises written the
same way.

The biconditional rules put a single conjunction on each side of the fork;
that conjunction has to be expanded in a later step to reach its conjuncts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from . import formula as fm
from .prefix import parse_prefix


@dataclass(frozen=True, slots=True)
class Decomposition:
    """Result of one decomposition step.

    Attributes:
        left: First resulting formula, None for literals
        right: Second resulting formula, None for literals and double negation
    """

    left: Optional[fm.Formula] = None
    right: Optional[fm.Formula] = None


def _negation(text: str) -> fm.Formula:
    return parse_prefix(f"(not {text})")


def _conjunction(left_text: str, right_text: str) -> fm.Formula:
    return parse_prefix(f"(and {left_text} {right_text})")


class TableauRules(fm.Visitor):
    """Computes the decomposition of a formula with the visitor pattern."""

    def decompose(self, node: fm.Formula) -> Decomposition:
        return node.accept(self)

    def visit_atom(self, n: fm.Atom) -> Decomposition:
        return Decomposition()

    def visit_and(self, n: fm.And) -> Decomposition:
        return Decomposition(n.left, n.right)

    def visit_or(self, n: fm.Or) -> Decomposition:
        return Decomposition(n.left, n.right)

    def visit_if(self, n: fm.If) -> Decomposition:
        return Decomposition(_negation(n.left_operand), n.right)

    def visit_iff(self, n: fm.Iff) -> Decomposition:
        a, b = n.left_operand, n.right_operand
        return Decomposition(
            _conjunction(a, b),
            _conjunction(f"(not {a})", f"(not {b})"),
        )

    def visit_not(self, n: fm.Not) -> Decomposition:
        inner = n.operand

        if isinstance(inner, fm.Not):
            return Decomposition(inner.operand)

        if isinstance(inner, (fm.And, fm.Or)):
            return Decomposition(
                _negation(inner.left_operand), _negation(inner.right_operand)
            )

        if isinstance(inner, fm.If):
            return Decomposition(inner.left, _negation(inner.right_operand))

        if isinstance(inner, fm.Iff):
            a, b = inner.left_operand, inner.right_operand
            return Decomposition(
                _conjunction(a, f"(not {b})"),
                _conjunction(f"(not {a})", b),
            )

        # Negated atom: a literal
        return Decomposition()


def decompose(node: fm.Formula) -> Decomposition:
    """Decompose a formula by one tableau step.

    Args:
        node: Formula to decompose

    Returns:
        The left/right results; both None when the formula is a literal
    """
    return TableauRules().decompose(node)
