"""Herbicide product amount for a recommended active ingredient rate."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .constants import PERCENT
from .validation import Constraint, require_nonzero, validate_inputs

_LOGGER = logging.getLogger(__name__)

__all__ = ["HerbicideRate", "HerbicidePlan", "compute_herbicide_rate"]


@dataclass(slots=True)
class HerbicideRate:
    """Liters or kilograms of formulated product for ``area_ha``."""

    amount: float
    area_ha: float
    product: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"The required amount of herbicide is {self.amount} liter/Kg "
            f"for {self.area_ha} ha"
        )


@dataclass(slots=True)
class HerbicidePlan:
    recommended_rate: float
    active_ingredient_pct: float
    area_ha: float = 1
    product: str | None = None

    def compute(self) -> HerbicideRate:
        result = compute_herbicide_rate(
            self.recommended_rate,
            self.area_ha,
            active_ingredient_pct=self.active_ingredient_pct,
        )
        result.product = self.product
        return result


def compute_herbicide_rate(
    recommended_rate: float,
    area: float = 1,
    *,
    active_ingredient_pct: float,
) -> HerbicideRate:
    """Return product amount delivering ``recommended_rate`` kg or L a.i./ha.

    ``active_ingredient_pct`` is the share of active ingredient in the
    formulated product. A value of ``0`` raises
    :class:`~agronomy_engine.exceptions.DivisionByZero`.
    """

    validate_inputs(
        {
            "recommended_rate": recommended_rate,
            "area": area,
            "active_ingredient_pct": active_ingredient_pct,
        },
        {
            "recommended_rate": Constraint.NON_NEGATIVE,
            "area": Constraint.POSITIVE,
            "active_ingredient_pct": Constraint.PERCENT,
        },
    )
    require_nonzero(active_ingredient_pct=active_ingredient_pct)

    amount = recommended_rate * PERCENT * area / active_ingredient_pct
    _LOGGER.debug(
        "Herbicide amount %.4f for %s ha at %s%% a.i.",
        amount,
        area,
        active_ingredient_pct,
    )
    return HerbicideRate(amount=round(amount, 2), area_ha=area)
