# tests/parser_tests/test_strict_grammar.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Test suite for premise validation and normalization

"""Test suite for the strict premise front-end.

Checks that well-formed premises normalize to canonical text, that malformed
ones raise ParseError, and how strict parsing relates to the whitespace
sensitive core reader.
"""

import pytest
from parser import ParseError, normalize, parse, parse_strict


class TestNormalize:
    """Test cases for canonicalizing well-formed premises."""

    CANONICAL_CASES = [
        ("P", "P"),
        ("  P  ", "P"),
        ("(not P)", "(not P)"),
        ("(not  P)", "(not P)"),
        ("( and  P   Q )", "(and P Q)"),
        ("(or\tP\nQ)", "(or P Q)"),
        ("(not(if P Q))", "(not (if P Q))"),
        ("(iff(and A B)(not C))", "(iff (and A B) (not C))"),
        (
            "(not (if (and P Q) (iff (or A B) R)))",
            "(not (if (and P Q) (iff (or A B) R)))",
        ),
    ]

    @pytest.mark.parametrize("source, expected", CANONICAL_CASES)
    def test_canonical_text(self, source, expected):
        assert normalize(source) == expected

    def test_canonical_text_is_a_fixed_point(self):
        once = normalize("(  if (and P   Q)R )")
        assert normalize(once) == once


class TestInvalidPremises:
    """Test cases for premises the strict front-end rejects."""

    INVALID_CASES = [
        "",
        "   ",
        "(and P)",
        "(not P Q)",
        "(not)",
        "(xor P Q)",
        "(and P Q",
        "and P Q)",
        "P Q",
        "()",
        "(and P Q))",
        "(P)",
        "(and P Q R)",
        "(or (not P) (and Q))",
    ]

    @pytest.mark.parametrize("source", INVALID_CASES)
    def test_rejected(self, source):
        with pytest.raises(ParseError):
            normalize(source)

    @pytest.mark.parametrize("source", ["(and P ~Q)", "(if P -> Q)", "P & Q", "(or P Q);"])
    def test_illegal_characters(self, source):
        with pytest.raises(ParseError) as exc_info:
            normalize(source)

        assert "Illegal character" in str(exc_info.value)

    def test_empty_premise_message(self):
        with pytest.raises(ParseError) as exc_info:
            normalize("")

        assert "empty" in str(exc_info.value) or "end of premise" in str(exc_info.value)

    def test_parse_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            normalize("(and P)")


class TestStrictParsing:
    """parse_strict compared with the core reader."""

    def test_same_result_on_canonical_input(self):
        text = "(iff (or A B) (not C))"
        assert parse_strict(text) == parse(text)

    def test_irregular_spacing_is_normalized(self):
        assert parse_strict("(not  P)") == parse("(not P)")
        assert parse("(not  P)") != parse("(not P)")

    def test_strict_results_are_structured(self):
        formula = parse_strict("( if ( and P Q )  R )")

        assert formula.text == "(if (and P Q) R)"
        assert formula.left_operand == "(and P Q)"
        assert formula.right_operand == "R"

    def test_rejects_what_core_reader_would_accept(self):
        # The core reader does not validate operand counts
        parse("(and P)")
        with pytest.raises(ParseError):
            parse_strict("(and P)")
