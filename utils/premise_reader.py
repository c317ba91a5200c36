# utils/premise_reader.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Reader for premise files, one prefix statement per line

from pathlib import Path
from typing import List, Union
from utils.logger import get_logger


class PremiseFormatError(Exception):
    """Exception raised when a premise file is missing or holds no premises."""

    pass


def read_premises(filepath: Union[str, Path]) -> List[str]:
    """Read premises from a text file.

    Each non-blank line is one premise in prefix notation. Lines starting
    with ``#`` are comments. Surrounding whitespace is stripped; the premise
    text itself is returned unchanged.

    Example file:
        # modus tollens
        (if P Q)
        (not Q)
        (not (not P))

    Args:
        filepath: Path to the premise file

    Returns:
        Premise strings in file order

    Raises:
        PremiseFormatError: If the file cannot be read or contains no premises
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise PremiseFormatError(f"Premise file not found: {filepath}")

    logger.debug(f"Reading premise file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            lines = file.readlines()
    except OSError as e:
        raise PremiseFormatError(f"Error reading premise file: {e}")

    premises = []
    for line_num, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        logger.debug(f"Read premise {len(premises) + 1} from line {line_num}: {text}")
        premises.append(text)

    if not premises:
        raise PremiseFormatError(f"No premises found in: {filepath}")

    return premises
