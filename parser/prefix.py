# parser/prefix.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Recursive-descent reader for fully parenthesized prefix statements

"""Recursive-descent parser for prefix-notation premises.

Statements are read by progressively stripping parentheses:

    (if (and P Q) R)  ->  If(left=(and P Q), right=R)

The reader assumes its input is well formed. Malformed input (unbalanced
parentheses, missing operands, stray whitespace) gives unspecified results;
use :func:`parser.parse_strict` when the input has not been checked.
"""

from __future__ import annotations
from typing import Dict, Type

from .exceptions import ParseError
from .formula import And, Atom, BinaryFormula, Formula, If, Iff, Not, Or

NOT_KEYWORD = "not"

_BINARY_CONNECTIVES: Dict[str, Type[BinaryFormula]] = {
    "and": And,
    "or": Or,
    "if": If,
    "iff": Iff,
}


def first_argument(text: str) -> str:
    """Return the leading argument of an operand list.

    A parenthesized argument runs to its matching close parenthesis; an
    atomic one runs to the next space, close parenthesis or end of string.

    Args:
        text: Operand list such as ``"(or A B) C"``

    Returns:
        The first argument, e.g. ``"(or A B)"``
    """
    if not text.startswith("("):
        end = 0
        while end < len(text) and text[end] not in " )":
            end += 1
        return text[:end]

    depth = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return text[: index + 1]

    # Unbalanced input; precondition violated
    return text


def connective_keyword(text: str) -> str:
    """Return the keyword right after the opening parenthesis."""
    return first_argument(text[1:])


def parse_prefix(text: str) -> Formula:
    """Parse a well-formed prefix statement into a formula tree.

    Args:
        text: Fully parenthesized prefix statement

    Returns:
        Root formula node; every node keeps its exact source substring

    Raises:
        ParseError: The connective after ``(`` is not one of
            ``not``, ``and``, ``or``, ``if``, ``iff``
    """
    if not text.startswith("("):
        return Atom(text)

    keyword = connective_keyword(text)

    if keyword == NOT_KEYWORD:
        # Operand sits between "(not " and the final ")"
        operand = text[len(NOT_KEYWORD) + 2 : -1]
        return Not(text, parse_prefix(operand))

    node_class = _BINARY_CONNECTIVES.get(keyword)
    if node_class is None:
        raise ParseError(f"Unknown connective '{keyword}' in: {text}")

    operands = text[len(keyword) + 2 : -1]
    left = first_argument(operands)
    right = first_argument(operands[len(left) + 1 :])

    return node_class(text, parse_prefix(left), parse_prefix(right))
