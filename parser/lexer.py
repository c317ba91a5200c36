# parser/lexer.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Lexical analyzer for prefix premises using SLY

"""Lexical analyzer for prefix-notation premise strings.

Used by the strict front-end only; the core reader in :mod:`parser.prefix`
works directly on the raw text.

Supported Tokens:
- Punctuation: (, )
- Keywords: not, and, or, if, iff
- Atoms: letters, digits, underscores and primes, e.g. P, q2, rain_today, A'
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class PrefixLexer(Lexer):
    """SLY-based lexer for prefix premise tokenization.

    Keywords are only recognized as whole tokens, so ``iffy`` or ``nota``
    are atoms.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ATOM: Atom pattern with keyword mapping
    """

    tokens = {
        "NOT",
        "AND",
        "OR",
        "IF",
        "IFF",
        "ATOM",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"

    ATOM = r"[A-Za-z0-9_']+"

    # Keyword mapping: reassign token types for reserved words
    ATOM["not"] = "NOT"
    ATOM["and"] = "AND"
    ATOM["or"] = "OR"
    ATOM["if"] = "IF"
    ATOM["iff"] = "IFF"

    def error(self, t):
        """Handle characters that match no token pattern.

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
