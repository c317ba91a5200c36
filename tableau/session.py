# tableau/session.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Interactive command loop driving a truth tree

"""
TableauSession: glue code that reads user commands, drives a Tableau and
explains refused operations. Input and output are injectable callables so
the loop can be scripted.

Commands:
    help                 list commands
    print                show the tree
    expand [n]           expand statement n
    close [n1 n2]        close a branch with statement n1 and its negation n2
    done                 check whether the tree is complete
    status               report closed / open / incomplete
    render [name]        write a Graphviz image of the tree
    quit                 leave the session
"""

from typing import Callable, List, Optional

from parser import ParseError, normalize
from utils.logger import get_logger
from utils.tree_printer import LEGEND, render_tree
from utils.tree_visualizer import visualize_tableau
from .tableau import Tableau
from .status import TableauStatus

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

CANCEL = -1

HELP_TEXT = [
    "help - Show this list of commands and descriptions",
    "print - Display the truth tree's current state",
    "quit - Exit the program",
    "expand [n] - Try to expand a statement of the truth tree (you'll be "
    "prompted for its number if you leave it out)",
    "close [n1 n2] - Try to close a branch by specifying a statement and its negation",
    "done - Validate that the truth tree has been completed (this will not quit the program)",
    "status - Report whether the tree is closed, open or still incomplete",
    "render [name] - Save a Graphviz picture of the tree",
]


def collect_premises(
    read: InputFn = input, write: OutputFn = print, strict: bool = False
) -> List[str]:
    """Ask for premises until the user declines to continue.

    Args:
        read: Prompting input function
        write: Output function
        strict: Re-ask for a premise until it passes syntax validation

    Returns:
        Premise strings, at least one. End of input finishes the entry
        early once a premise has been given.

    Raises:
        EOFError: Input ended before the first premise was entered
    """
    premises: List[str] = []
    write("Enter premises for the truth tree using Slate-style prefix syntax:")

    try:
        while True:
            text = read(f"Premise {len(premises) + 1}: ")
            if strict:
                try:
                    text = normalize(text)
                except ParseError as e:
                    write(f"Invalid premise: {e}")
                    continue
            premises.append(text)

            answer = read("Continue entering premises? (y/n) ")
            while answer.strip().lower() not in ("y", "n"):
                answer = read("Invalid input. Type Y/y to continue, N/n to quit: ")
            if answer.strip().lower() == "n":
                return premises

    except EOFError:
        if not premises:
            raise
        get_logger().debug(f"Input ended after {len(premises)} premise(s)")
        return premises


class TableauSession:
    """Interactive command loop over a single truth tree."""

    PROMPT = "> "

    def __init__(
        self,
        tableau: Tableau,
        read: InputFn = input,
        write: OutputFn = print,
        render_format: str = "png",
    ):
        self.tableau = tableau
        self._read = read
        self._write = write
        self._render_format = render_format

    def run(self) -> None:
        """Read and execute commands until ``quit`` or end of input."""
        self._write(
            "Enter commands to build the truth tree. Type help for a list of commands "
            "and their descriptions"
        )
        while True:
            try:
                line = self._read(self.PROMPT)
            except EOFError:
                break
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False when the session should end
        """
        words = line.split()
        if not words:
            self._write("Invalid input. Try again.")
            return True

        command, args = words[0].lower(), words[1:]
        get_logger().debug(f"Session command: {command} {args}")

        if command == "quit":
            return False

        handler = {
            "help": self._help,
            "print": self._print,
            "expand": self._expand,
            "close": self._close,
            "done": self._done,
            "status": self._status,
            "render": self._render,
        }.get(command)

        if handler is None:
            self._write("Invalid input. Try again.")
        else:
            handler(args)
        return True

    def _number(self, args: List[str], index: int, prompt: str) -> int:
        """Take a statement number from the command line or ask for it.

        End of input while prompting counts as cancelling.
        """
        if index < len(args):
            try:
                return int(args[index])
            except ValueError:
                self._write(f"'{args[index]}' is not a statement number.")

        while True:
            try:
                answer = self._read(prompt)
            except EOFError:
                return CANCEL
            try:
                return int(answer.strip())
            except ValueError:
                self._write("Please enter a whole number.")

    def _help(self, args: List[str]) -> None:
        for line in HELP_TEXT:
            self._write(line)

    def _print(self, args: List[str]) -> None:
        self._write(LEGEND)
        self._write(render_tree(self.tableau))

    def _expand(self, args: List[str]) -> None:
        n = self._number(
            args, 0, "Enter the number of the statement to expand (-1 to cancel): "
        )
        if n == CANCEL:
            return

        if not self.tableau.expand(n):
            self._write("Unable to expand the specified statement.")
            self._write(f"Reason: {self.tableau.last_failure}.")
            self._write("Try using the print command to double-check.")

    def _close(self, args: List[str]) -> None:
        n1 = self._number(
            args, 0, "Enter the number of the first statement (-1 to cancel):  "
        )
        if n1 == CANCEL:
            return
        n2 = self._number(
            args, 1, "Enter the number of the second statement (-1 to cancel): "
        )
        if n2 == CANCEL:
            return

        if not self.tableau.close_branch(n1, n2):
            self._write("Unable to close any branches with the specified statements.")
            self._write(f"Reason: {self.tableau.last_failure}.")
            self._write(
                "Use the print command to verify that the statements are in "
                "the same branch and one is the negation of the other."
            )

    def _done(self, args: List[str]) -> None:
        if self.tableau.check_done():
            self._write("The tree appears to be complete.")
        else:
            self._write(
                "There are still some operations to be performed before the tree is done"
            )

    def _status(self, args: List[str]) -> None:
        status = self.tableau.status()
        messages = {
            TableauStatus.CLOSED: "Every branch is closed: the premises are inconsistent.",
            TableauStatus.OPEN: "The tree is complete with at least one open branch: "
            "the premises are consistent.",
            TableauStatus.INCOMPLETE: "The tree is not finished yet.",
        }
        get_logger().final_status(str(status))
        self._write(messages[status])

    def _render(self, args: List[str]) -> None:
        name = args[0] if args else "truth_tree"
        path: Optional[str] = visualize_tableau(self.tableau, name, self._render_format)
        if path is None:
            self._write("Rendering skipped; see the log for details.")
        else:
            self._write(f"Tree picture written to {path}")
