# parser/exceptions.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Custom exceptions for premise parsing

"""Domain-specific exceptions for propositional formula processing.

The core prefix parser assumes well-formed input and only raises when it
cannot tell which connective a parenthesized formula starts with. The strict
front-end raises on every syntax error it detects.
"""


class ParseError(RuntimeError):
    """Exception raised when a premise cannot be parsed.

    Used by the strict front-end for any syntax error and by the core parser
    for an unknown connective keyword.
    """

    pass
