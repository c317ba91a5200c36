# parser/grammar.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# LALR(1) grammar for prefix premises using SLY

"""Prefix premise grammar implemented with the SLY parser generator.

The grammar accepts exactly the fully parenthesized prefix notation:

    formula : ATOM
            | ( not formula )
            | ( and formula formula )
            | ( or formula formula )
            | ( if formula formula )
            | ( iff formula formula )

Instead of building nodes, every rule returns the canonical text of what it
matched: single spaces between tokens and no padding inside parentheses.
Feeding that text to :func:`parser.prefix.parse_prefix` is always safe.
"""

from sly import Parser
from .lexer import PrefixLexer
from .exceptions import ParseError
from utils.logger import get_logger


class _PrefixParser(Parser):
    """SLY-based LALR(1) parser that validates and normalizes premises.

    Attributes:
        tokens: Token types from PrefixLexer
    """

    tokens = PrefixLexer.tokens

    @_("formula")
    def start(self, p) -> str:
        """Start rule: a premise is a single formula."""
        return p.formula

    @_("ATOM")
    def formula(self, p) -> str:
        """Atomic statement letter."""
        return p.ATOM

    @_("LPAREN NOT formula RPAREN")
    def formula(self, p) -> str:
        """Negation."""
        return f"(not {p.formula})"

    @_("LPAREN AND formula formula RPAREN")
    def formula(self, p) -> str:
        """Conjunction."""
        return f"(and {p.formula0} {p.formula1})"

    @_("LPAREN OR formula formula RPAREN")
    def formula(self, p) -> str:
        """Disjunction."""
        return f"(or {p.formula0} {p.formula1})"

    @_("LPAREN IF formula formula RPAREN")
    def formula(self, p) -> str:
        """Conditional."""
        return f"(if {p.formula0} {p.formula1})"

    @_("LPAREN IFF formula formula RPAREN")
    def formula(self, p) -> str:
        """Biconditional."""
        return f"(iff {p.formula0} {p.formula1})"

    def parse(self, text: str) -> str:
        """Validate premise text and return its canonical form.

        Args:
            text: Premise string to check

        Returns:
            Canonical prefix text of the premise

        Raises:
            ParseError: If the premise is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Validating premise: {text}")

        try:
            result = super().parse(PrefixLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input premise is empty.")

            if result is None:
                raise ParseError("Failed to parse premise (syntax error).")

            logger.debug(f"Premise is well formed: {result}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}")

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of premise"

        raise ParseError(error_msg)
