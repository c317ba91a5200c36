# utils/__init__.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Utility module exports

from .premise_reader import read_premises, PremiseFormatError
from .tree_printer import render_tree, print_tree

__all__ = [
    "read_premises",
    "PremiseFormatError",
    "render_tree",
    "print_tree",
]
