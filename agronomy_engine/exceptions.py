"""Error kinds raised by the agronomy calculators."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = [
    "AgronomyError",
    "InvalidInput",
    "ConflictingFertilizerSource",
    "DivisionByZero",
]


class AgronomyError(ValueError):
    """Base class for calculator errors."""


class InvalidInput(AgronomyError):
    """One or more parameters have the wrong type or are out of range.

    ``type_errors`` and ``range_errors`` are kept apart so callers can tell a
    non-numeric value from a numeric value outside its domain.
    """

    def __init__(
        self,
        type_errors: Sequence[str] = (),
        range_errors: Sequence[str] = (),
    ) -> None:
        self.type_errors = list(type_errors)
        self.range_errors = list(range_errors)
        super().__init__("; ".join(self.type_errors + self.range_errors))

    @property
    def parameters(self) -> list[str]:
        """Return offending parameter names in reporting order."""
        names: list[str] = []
        for entry in self.type_errors + self.range_errors:
            name = entry.split(":", 1)[0]
            if name not in names:
                names.append(name)
        return names


class ConflictingFertilizerSource(AgronomyError):
    """More than one of DAP, TSP or complete fertilizer was selected."""

    def __init__(self, conflicts: Iterable[tuple[str, str]], message: str) -> None:
        self.conflicts = tuple(conflicts)
        pairs = ", ".join(f"{a}+{b}" for a, b in self.conflicts)
        super().__init__(f"{message} (conflicting: {pairs})")


class DivisionByZero(AgronomyError, ZeroDivisionError):
    """A percentage used as a divisor is zero."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter} must be greater than 0")
