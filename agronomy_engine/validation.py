"""Domain checks shared by the fertilizer, seed and herbicide calculators."""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import Any, Mapping

from .exceptions import DivisionByZero, InvalidInput

__all__ = ["Constraint", "validate_inputs", "require_nonzero"]


class Constraint(str, Enum):
    """Domain a parameter must fall into."""

    NON_NEGATIVE = "non-negative"
    POSITIVE = "positive"
    PERCENT = "percentage between 0 and 100"
    FLAG = "boolean"


def _is_number(value: Any) -> bool:
    # ``bool`` is a ``Real`` subclass but never a valid quantity
    return isinstance(value, Real) and not isinstance(value, bool)


def _range_error(name: str, value: Any, constraint: Constraint) -> str | None:
    try:
        number = float(value)
    except OverflowError:
        return f"{name}: must be finite"
    if not math.isfinite(number):
        return f"{name}: must be finite"
    if constraint is Constraint.NON_NEGATIVE:
        ok = number >= 0
    elif constraint is Constraint.POSITIVE:
        ok = number > 0
    else:
        ok = 0 <= number <= 100
    return None if ok else f"{name}: must be {constraint.value}"


def validate_inputs(
    values: Mapping[str, Any], constraints: Mapping[str, Constraint]
) -> None:
    """Check every entry of ``values`` against its constraint.

    All parameters are inspected before raising so a single
    :class:`InvalidInput` lists every wrong type in ``type_errors`` and every
    out of range value in ``range_errors``. Entries are formatted as
    ``"<name>: must be <constraint>"``. NaN, infinity and integers too large
    for a float are reported as ``"<name>: must be finite"``.
    """

    type_errors: list[str] = []
    range_errors: list[str] = []
    for name, constraint in constraints.items():
        value = values.get(name)
        if constraint is Constraint.FLAG:
            if not isinstance(value, bool):
                type_errors.append(f"{name}: must be {constraint.value}")
            continue
        if not _is_number(value):
            type_errors.append(f"{name}: must be numeric")
            continue
        error = _range_error(name, value, constraint)
        if error is not None:
            range_errors.append(error)

    if type_errors or range_errors:
        raise InvalidInput(type_errors, range_errors)


def require_nonzero(**divisors: float) -> None:
    """Raise :class:`DivisionByZero` for the first divisor equal to zero."""
    for name, value in divisors.items():
        if value == 0:
            raise DivisionByZero(name)
