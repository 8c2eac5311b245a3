"""Front ingestion.

Fronts reach the indicators either from evaluated candidates held in memory
or from delimited text files with one solution per line:

    f1,f2,f3
    0.10,0.80,0.30
    0.25,0.60,0.40

A first line whose first token is not a number is a header and is skipped.
Every line must have as many values as the first line. Malformed files raise
FrontFormatError with the offending line number; nothing here exits the
process.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import numpy as np

from front_gauge.exceptions import FrontFormatError
from front_gauge.fronts import as_front

logger = logging.getLogger(__name__)


def front_from_candidates(candidates: Iterable[Any]) -> np.ndarray:
    """Build a front from evaluated candidate solutions.

    Args:
        candidates: Each item is either a sequence of objective values or an
            object exposing them through an ``objectives`` attribute.

    Returns:
        FrontMatrix of shape (n_candidates, n_objectives), or (0, 0) when there
        are no candidates.

    Raises:
        FrontShapeError: If candidates have different numbers of objectives.

    Example:
        >>> front_from_candidates([[1.0, 2.0], [3.0, 4.0]]).shape
        (2, 2)
    """
    rows = [np.asarray(getattr(c, "objectives", c), dtype=np.float64).ravel() for c in candidates]
    return as_front(rows, "candidates")


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def load_front(path: str | Path, delimiter: str = ",") -> np.ndarray:
    """Read a front from a delimited text file.

    Args:
        path: File to read.
        delimiter: Separator between objective values.

    Returns:
        FrontMatrix of shape (n_solutions, n_objectives).

    Raises:
        FileNotFoundError: If the file does not exist.
        FrontFormatError: If the file is empty, a line has the wrong number of
            values, or a value is not a finite number.
    """
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()

    numbered = [(lineno, line) for lineno, line in enumerate(lines, start=1) if line.strip()]
    if not numbered:
        raise FrontFormatError(f"{path} contains no solutions", details={"path": str(path)})

    n_obj = len(numbered[0][1].split(delimiter))
    if not _is_number(numbered[0][1].split(delimiter)[0]):
        logger.debug("Skipping header line of %s: %r", path, numbered[0][1])
        numbered = numbered[1:]

    rows: list[list[float]] = []
    for lineno, line in numbered:
        tokens = line.split(delimiter)
        if len(tokens) != n_obj:
            raise FrontFormatError(
                f"{path}:{lineno}: expected {n_obj} values, got {len(tokens)}",
                suggestion="Missing solution or wrong format.",
                details={"path": str(path), "line": lineno, "expected": n_obj, "got": len(tokens)},
            )
        try:
            values = [float(token) for token in tokens]
        except ValueError as exc:
            raise FrontFormatError(
                f"{path}:{lineno}: wrong format of objective values: {line!r}",
                details={"path": str(path), "line": lineno},
            ) from exc
        if not np.isfinite(values).all():
            raise FrontFormatError(
                f"{path}:{lineno}: objective values must be finite: {line!r}",
                details={"path": str(path), "line": lineno},
            )
        rows.append(values)

    front = as_front(rows, str(path)) if rows else np.empty((0, n_obj), dtype=np.float64)
    logger.debug("Loaded %d solutions with %d objectives from %s", front.shape[0], n_obj, path)
    return front
