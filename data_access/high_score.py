"""
High score persistence.

The high score lives in a small text file holding a single non-negative
integer. Reading never fails: a missing or unreadable file counts as 0.
Writing failures are logged and reported through the return value so the
game can carry on.
"""

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)


def load_high_score(path: Union[str, Path]) -> int:
    """
    Read the stored high score.

    Args:
        path: Location of the high score file

    Returns:
        The stored value, or 0 if the file is missing, unreadable,
        not an integer, or negative
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No high score file at %s, starting from 0", path)
        return 0
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read high score file %s: %s", path, e)
        return 0

    try:
        value = int(text.strip())
    except ValueError:
        logger.warning("Ignoring corrupt high score file %s: %r", path, text[:50])
        return 0

    if value < 0:
        logger.warning("Ignoring negative high score %d in %s", value, path)
        return 0
    return value


def save_high_score(path: Union[str, Path], value: int) -> bool:
    """
    Overwrite the high score file with `value`.

    Returns:
        True if the file was written, False otherwise
    """
    path = Path(path)
    try:
        path.write_text(str(value), encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to save high score to %s: %s", path, e)
        return False
    logger.info("Saved high score %d to %s", value, path)
    return True
