# tests/tableau_tests/test_closure.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Test suite for branch closure

"""Test suite for closing branches on contradictory statements.

Verifies the acceptance rules (range, negation present, same branch,
syntactic contradiction), downward closure of the lower statement's subtree,
and upward propagation through chains and fully closed forks.
"""

import pytest
from tableau import Tableau, TableauFailure
from tableau.tableau import contradicts, is_negation_of
from parser import parse


def build(*premises: str) -> Tableau:
    return Tableau.from_strings(premises)


def closed_ids(tableau: Tableau) -> set[int]:
    return {node.id for node in tableau.nodes if node.closed}


class TestNegationHelpers:
    """Syntactic negation checks."""

    @pytest.mark.parametrize("first, second, expected", [
        ("(not P)", "P", True),
        ("P", "(not P)", True),
        ("(not (and P Q))", "(and P Q)", True),
        ("(not (not P))", "(not P)", True),
        ("(not (not P))", "P", False),
        ("(not (and P Q))", "(and Q P)", False),
        ("(not P)", "(not P)", False),
        ("P", "Q", False),
    ])
    def test_contradicts(self, first, second, expected):
        assert contradicts(parse(first), parse(second)) is expected

    def test_is_negation_of_is_directional(self):
        assert is_negation_of(parse("(not P)"), parse("P"))
        assert not is_negation_of(parse("P"), parse("(not P)"))


class TestSuccessfulClosure:
    """Accepted closures and how far they reach."""

    def test_trunk_contradiction_closes_everything(self):
        tableau = build("P", "(not P)", "(and Q R)")

        assert tableau.close_branch(1, 2)

        assert closed_ids(tableau) == {1, 2, 3}
        assert tableau.root.closed
        assert tableau.last_failure is None

    def test_argument_order_does_not_matter(self):
        first = build("P", "(not P)")
        second = build("P", "(not P)")

        assert first.close_branch(1, 2)
        assert second.close_branch(2, 1)

        assert closed_ids(first) == closed_ids(second) == {1, 2}

    def test_closure_stops_at_fork_with_open_side(self):
        tableau = build("(or P Q)", "(not P)")
        tableau.expand(1)

        assert tableau.close_branch(2, 3)

        assert closed_ids(tableau) == {3}
        assert not tableau.root.closed

    def test_closure_climbs_fork_once_both_sides_close(self, modus_tollens_premises):
        tableau = build(*modus_tollens_premises)
        tableau.expand(3)
        tableau.expand(1)

        assert tableau.close_branch(4, 5)
        assert closed_ids(tableau) == {5}

        assert tableau.close_branch(2, 6)
        assert closed_ids(tableau) == {1, 2, 3, 4, 5, 6}

    def test_closure_closes_subtree_of_lower_statement(self):
        tableau = build("(not Q)", "(or P R)", "Q")
        tableau.expand(2)

        assert tableau.close_branch(1, 3)

        assert closed_ids(tableau) == {1, 2, 3, 4, 5}

    def test_closure_inside_one_branch(self):
        tableau = build("(or (and P (not P)) Q)")
        tableau.expand(1)
        tableau.expand(2)

        assert tableau.close_branch(4, 5)

        assert closed_ids(tableau) == {2, 4, 5}
        assert not tableau.node(3).closed
        assert not tableau.root.closed

    def test_both_sides_closed_propagates_to_root(self):
        tableau = build("(or P Q)", "(not P)", "(not Q)")
        tableau.expand(1)

        assert tableau.close_branch(2, 4)
        assert not tableau.root.closed

        assert tableau.close_branch(3, 5)
        assert tableau.root.closed
        assert closed_ids(tableau) == {1, 2, 3, 4, 5}

    def test_reclosing_a_closed_branch_is_accepted(self):
        tableau = build("P", "(not P)")
        tableau.close_branch(1, 2)

        assert tableau.close_branch(1, 2)
        assert closed_ids(tableau) == {1, 2}


class TestRefusedClosure:
    """close_branch() returns False, changes nothing and records why."""

    @pytest.mark.parametrize("ids", [(0, 1), (1, 3), (7, 2)])
    def test_out_of_range(self, ids):
        tableau = build("P", "(not P)")

        assert not tableau.close_branch(*ids)
        assert tableau.last_failure is TableauFailure.OUT_OF_RANGE
        assert closed_ids(tableau) == set()

    def test_neither_is_a_negation(self):
        tableau = build("(or P Q)", "(and P Q)")

        assert not tableau.close_branch(1, 2)
        assert tableau.last_failure is TableauFailure.NO_NEGATION

    def test_different_branches(self):
        tableau = build("(or P (not P))")
        tableau.expand(1)

        assert not tableau.close_branch(2, 3)
        assert tableau.last_failure is TableauFailure.DIFFERENT_BRANCHES
        assert closed_ids(tableau) == set()

    def test_not_contradictory(self, modus_tollens_premises):
        tableau = build(*modus_tollens_premises)

        assert not tableau.close_branch(1, 2)
        assert tableau.last_failure is TableauFailure.NOT_CONTRADICTORY

    def test_double_negation_is_not_a_contradiction(self):
        tableau = build("P", "(not (not P))")

        assert not tableau.close_branch(1, 2)
        assert tableau.last_failure is TableauFailure.NOT_CONTRADICTORY

    def test_same_statement_twice(self):
        tableau = build("(not P)")

        assert not tableau.close_branch(1, 1)
        assert tableau.last_failure is TableauFailure.NOT_CONTRADICTORY

    @pytest.mark.parametrize("premises, expansions, ids, failure", [
        (["(or P (not P))"], [1], (2, 3), TableauFailure.DIFFERENT_BRANCHES),
        (["(or (not Q) R)", "(or Q S)"], [1, 2], (3, 7), TableauFailure.DIFFERENT_BRANCHES),
        (["(or P Q)", "(and P Q)"], [], (1, 2), TableauFailure.NO_NEGATION),
        (["(if P Q)", "(not Q)"], [], (1, 2), TableauFailure.NOT_CONTRADICTORY),
        (["P", "Q"], [], (1, 9), TableauFailure.OUT_OF_RANGE),
    ])
    def test_refusal_does_not_depend_on_argument_order(
        self, premises, expansions, ids, failure
    ):
        results = []
        for first, second in (ids, ids[::-1]):
            tableau = build(*premises)
            for node_id in expansions:
                tableau.expand(node_id)

            results.append((tableau.close_branch(first, second), tableau.last_failure))
            assert not any(node.closed for node in tableau.nodes)

        assert results == [(False, failure), (False, failure)]

    def test_whitespace_variant_does_not_close(self):
        tableau = build("P ", "(not P)")

        assert not tableau.close_branch(1, 2)
        assert tableau.last_failure is TableauFailure.NOT_CONTRADICTORY
