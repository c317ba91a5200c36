# parser/__init__.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Premise parsing components for truth-functional statements

"""Premise parsing for propositional truth trees.

Premises use fully parenthesized prefix notation, e.g.
``(not (if (and P Q) (iff (or A B) R)))``. ``not`` is unary; ``and``, ``or``,
``if`` and ``iff`` are binary.

Core Functions:
    parse: Reads a well-formed premise into a formula tree
    normalize: Checks a premise with the SLY grammar and returns canonical text
    parse_strict: normalize + parse, for unchecked user input

``parse`` assumes its input is well formed and does not validate it; results
on malformed text are unspecified. ``parse_strict`` is the optional checking
layer on top of it. Formula equality is syntactic on the parsed text, so
``parse("(not  P)")`` and ``parse("(not P)")`` differ while their strict
counterparts are equal.

Example:
    >>> from parser import parse
    >>> f = parse("(and P (or Q R))")
    >>> str(f)
    'P ^ (Q v R)'
"""

from .exceptions import ParseError
from .formula import Formula, FormulaKind
from .prefix import parse_prefix
from .grammar import _PrefixParser
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse a well-formed prefix premise into a formula tree.

    Args:
        source: Fully parenthesized prefix statement

    Returns:
        Root formula node

    Raises:
        ParseError: The statement starts with an unknown connective
    """
    logger = get_logger()
    logger.debug(f"Parsing premise: {source}")

    result = parse_prefix(source)

    logger.debug(f"Premise parsed into {result.kind.name} formula: {result}")
    return result


def normalize(source: str) -> str:
    """Validate a premise and return its canonical prefix text.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Premise string, possibly with irregular whitespace

    Returns:
        Canonical single-spaced prefix text

    Raises:
        ParseError: The premise is not well formed
    """
    parser = _PrefixParser()

    try:
        return parser.parse(source)

    except ParseError:
        raise

    except Exception as exc:
        get_logger().debug(f"Unexpected validation error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_strict(source: str) -> Formula:
    """Validate, normalize and parse a premise.

    Args:
        source: Premise string to check and parse

    Returns:
        Root formula node of the canonical premise text

    Raises:
        ParseError: The premise is not well formed
    """
    return parse(normalize(source))


__all__ = ["parse", "parse_strict", "normalize", "ParseError", "Formula", "FormulaKind"]

__version__ = "1.0.0"
__description__ = "Prefix premise parsing for propositional truth trees"
