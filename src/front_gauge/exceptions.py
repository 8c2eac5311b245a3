"""Exception hierarchy for front-gauge.

All errors raised on purpose by this package inherit from IndicatorError, so a
batch runner can isolate one failing indicator without catching unrelated bugs.

Precondition failures that the indicator contract defines as "not computed"
(for example an empty front) are NOT exceptions: they leave the result at the
-1.0 sentinel. Exceptions are reserved for malformed input and configuration.

Example:
    >>> try:
    ...     load_front("broken.csv")
    ... except FrontFormatError as e:
    ...     print(e.details["line"])
"""

from __future__ import annotations

from typing import Any


class IndicatorError(Exception):
    """Base exception for all front-gauge errors.

    Attributes:
        message: Human-readable error description.
        suggestion: Optional hint for fixing the error.
        details: Additional context (file names, line numbers, shapes).
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


class FrontShapeError(IndicatorError, ValueError):
    """Raised when a front is not a rectangular numeric matrix, or when two
    fronts handed to the same indicator disagree on the number of objectives."""


class FrontFormatError(IndicatorError, ValueError):
    """Raised when a front file cannot be parsed."""


class MissingFrontError(IndicatorError):
    """Raised when an indicator is calculated without a front it requires."""

    def __init__(self, indicator: str, role: str) -> None:
        super().__init__(
            f"{indicator} requires a {role} but none is attached.",
            suggestion=f"Attach it with set_{role.replace(' ', '_')}() or pass a FrontSet to calculate().",
            details={"indicator": indicator, "role": role},
        )


class ConfigurationError(IndicatorError, ValueError):
    """Raised when indicator settings are invalid or incomplete."""


class HypervolumeError(IndicatorError):
    """Raised when the hypervolume recursion cannot proceed."""


class HypervolumeBudgetExceeded(HypervolumeError):
    """Raised when the hypervolume computation exceeds its step budget."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(
            f"Hypervolume computation exceeded the budget of {max_steps} steps.",
            suggestion="Raise max_steps, or reduce the number of solutions or objectives.",
            details={"max_steps": max_steps},
        )


__all__ = [
    "IndicatorError",
    "FrontShapeError",
    "FrontFormatError",
    "MissingFrontError",
    "ConfigurationError",
    "HypervolumeError",
    "HypervolumeBudgetExceeded",
]
