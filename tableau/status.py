# tableau/status.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Status and failure enumerations for truth tree operations

from enum import Enum, auto


class TableauStatus(Enum):
    """Overall state of a truth tree.

    Values:
        CLOSED: Every branch is closed; the premises are jointly unsatisfiable
        OPEN: Construction is complete and at least one branch stays open
        INCOMPLETE: Expansions or closures are still available
    """

    CLOSED = auto()
    OPEN = auto()
    INCOMPLETE = auto()

    def __str__(self) -> str:
        return self.name

    def is_conclusive(self) -> bool:
        """Determine if the tree is finished, closed or saturated open."""
        return self in (TableauStatus.CLOSED, TableauStatus.OPEN)


class TableauFailure(Enum):
    """Reason a tableau operation was refused."""

    OUT_OF_RANGE = "no statement has that number"
    ALREADY_EXPANDED = "statement has already been expanded"
    NOTHING_TO_EXPAND = "statement is a literal and cannot be expanded"
    NO_NEGATION = "neither statement is a negation"
    DIFFERENT_BRANCHES = "statements are not on the same branch"
    NOT_CONTRADICTORY = "neither statement is the negation of the other"

    def __str__(self) -> str:
        return self.value
