"""Fertilizer product masses for target nitrogen, phosphorus and potassium rates."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Any, Dict

from .constants import FERTILIZER_GRADES, PERCENT
from .exceptions import ConflictingFertilizerSource, InvalidInput
from .validation import Constraint, validate_inputs

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "SourceMode",
    "NutrientPlan",
    "FertilizerDose",
    "select_source_mode",
    "compute_dose",
    "compute_dose_for_mode",
    "NITROGEN_COVERED_MESSAGE",
]

NITROGEN_COVERED_MESSAGE = "All nitrogen will be supplied by DAP"

PRODUCT_LABELS = {
    "urea": "Urea",
    "dap": "DAP",
    "tsp": "TSP",
    "ssp": "SSP",
    "muriate_of_potash": "Muriate of potash",
    "complete": "Complete fertilizer",
}

_NUTRIENT_NAMES = {"N": "nitrogen", "P": "phosphorus", "K": "potassium"}

# Keyed by (dap, tsp, complete)
_CONFLICT_MESSAGES = {
    (True, True, True): "Choose only one source of phosphate and nitrogen fertilizer.",
    (True, True, False): "Choose only one source of phosphate fertilizer.",
    (True, False, True): "Choose only one source of nitrogen and phosphate fertilizer.",
    (False, True, True): "Choose only one source of phosphate fertilizer.",
}

_NUTRIENT_CONSTRAINTS = {
    "nitrogen": Constraint.NON_NEGATIVE,
    "phosphorus": Constraint.NON_NEGATIVE,
    "potassium": Constraint.NON_NEGATIVE,
    "area": Constraint.POSITIVE,
}

_FLAG_CONSTRAINTS = {
    "use_dap": Constraint.FLAG,
    "use_tsp": Constraint.FLAG,
    "use_complete": Constraint.FLAG,
}


class SourceMode(str, Enum):
    """Combination of products used to supply N, P and K."""

    SSP_UREA = "ssp_urea"
    DAP = "dap"
    TSP = "tsp"
    COMPLETE = "complete"


@dataclass(slots=True)
class FertilizerDose:
    """Product masses in kilograms for the whole area.

    ``products_kg`` holds one entry per product to apply. In complete mode it
    contains the single ``"complete"`` entry and ``limiting_nutrient`` names
    the nutrient that determines the mass.
    """

    mode: SourceMode
    area_ha: float
    products_kg: Dict[str, float] = field(default_factory=dict)
    nitrogen_from_dap_kg: float | None = None
    nitrogen_covered_by_dap: bool = False
    limiting_nutrient: str | None = None

    @property
    def complete_kg(self) -> float | None:
        return self.products_kg.get("complete")

    def as_dict(self) -> Dict[str, Any]:
        """Return the dose as a plain mapping."""
        data: Dict[str, Any] = {"mode": self.mode.value, **self.products_kg}
        if self.nitrogen_from_dap_kg is not None:
            data["nitrogen_from_dap"] = self.nitrogen_from_dap_kg
        if self.nitrogen_covered_by_dap:
            data["message"] = NITROGEN_COVERED_MESSAGE
        if self.limiting_nutrient is not None:
            data["limiting_nutrient"] = self.limiting_nutrient
        return data

    def summary(self) -> str:
        """Return a one line description of the dose."""
        if self.mode is SourceMode.COMPLETE:
            return f"The amount of complete fertilizer required is {self.complete_kg}"
        parts = [f"{PRODUCT_LABELS[k]}: {v} kg" for k, v in self.products_kg.items()]
        if self.nitrogen_from_dap_kg is not None:
            parts.append(f"N supplied by DAP: {self.nitrogen_from_dap_kg} kg")
        text = ", ".join(parts)
        if self.nitrogen_covered_by_dap:
            text = f"{text}. {NITROGEN_COVERED_MESSAGE}"
        return text


@dataclass(slots=True)
class NutrientPlan:
    """Target nutrient rates in kg/ha for ``area_ha`` hectares."""

    nitrogen_kg_per_ha: float
    phosphorus_kg_per_ha: float
    potassium_kg_per_ha: float
    area_ha: float = 1
    source_mode: SourceMode = SourceMode.SSP_UREA

    def compute(self) -> FertilizerDose:
        return compute_dose_for_mode(
            self.nitrogen_kg_per_ha,
            self.phosphorus_kg_per_ha,
            self.potassium_kg_per_ha,
            self.area_ha,
            mode=self.source_mode,
        )


def select_source_mode(
    use_dap: bool = False, use_tsp: bool = False, use_complete: bool = False
) -> SourceMode:
    """Resolve the three product flags into a single :class:`SourceMode`.

    Selecting more than one of DAP, TSP and complete fertilizer raises
    :class:`ConflictingFertilizerSource` naming each conflicting pair.
    """

    validate_inputs(
        {"use_dap": use_dap, "use_tsp": use_tsp, "use_complete": use_complete},
        _FLAG_CONSTRAINTS,
    )
    return _resolve_mode(use_dap, use_tsp, use_complete)


def _resolve_mode(use_dap: bool, use_tsp: bool, use_complete: bool) -> SourceMode:
    flags = (use_dap, use_tsp, use_complete)
    message = _CONFLICT_MESSAGES.get(flags)
    if message is not None:
        selected = [
            name for name, on in zip(("DAP", "TSP", "complete"), flags) if on
        ]
        raise ConflictingFertilizerSource(combinations(selected, 2), message)
    if use_dap:
        return SourceMode.DAP
    if use_tsp:
        return SourceMode.TSP
    if use_complete:
        return SourceMode.COMPLETE
    return SourceMode.SSP_UREA


def _product_mass(rate: float, area: float, grade_pct: float) -> float:
    """Return kg of product delivering ``rate`` kg/ha at ``grade_pct``."""
    return rate * PERCENT * area / grade_pct


def _dap_dose(n: float, p: float, k: float, area: float) -> FertilizerDose:
    dap = _product_mass(p, area, FERTILIZER_GRADES["dap"]["P"])
    n_from_dap = dap * FERTILIZER_GRADES["dap"]["N"] / PERCENT
    remaining = n - n_from_dap
    mop = _product_mass(k, area, FERTILIZER_GRADES["muriate_of_potash"]["K"])
    if remaining <= 0:
        return FertilizerDose(
            mode=SourceMode.DAP,
            area_ha=area,
            products_kg={"dap": round(dap, 2), "muriate_of_potash": round(mop, 2)},
            nitrogen_from_dap_kg=round(n_from_dap, 2),
            nitrogen_covered_by_dap=True,
        )
    urea = _product_mass(remaining, area, FERTILIZER_GRADES["urea"]["N"])
    return FertilizerDose(
        mode=SourceMode.DAP,
        area_ha=area,
        products_kg={
            "urea": round(urea, 2),
            "dap": round(dap, 2),
            "muriate_of_potash": round(mop, 2),
        },
        nitrogen_from_dap_kg=round(n_from_dap, 2),
    )


def _straight_dose(
    mode: SourceMode, n: float, p: float, k: float, area: float
) -> FertilizerDose:
    phosphate = "tsp" if mode is SourceMode.TSP else "ssp"
    products = {
        "urea": _product_mass(n, area, FERTILIZER_GRADES["urea"]["N"]),
        phosphate: _product_mass(p, area, FERTILIZER_GRADES[phosphate]["P"]),
        "muriate_of_potash": _product_mass(k, area, FERTILIZER_GRADES["muriate_of_potash"]["K"]),
    }
    return FertilizerDose(
        mode=mode,
        area_ha=area,
        products_kg={name: round(kg, 2) for name, kg in products.items()},
    )


def _complete_dose(n: float, p: float, k: float, area: float) -> FertilizerDose:
    grade = FERTILIZER_GRADES["complete"]
    candidates = {
        "N": _product_mass(n, area, grade["N"]),
        "P": _product_mass(p, area, grade["P"]),
        "K": _product_mass(k, area, grade["K"]),
    }
    # Applying less than the largest candidate under-supplies that nutrient
    limiting = max(candidates, key=candidates.get)
    return FertilizerDose(
        mode=SourceMode.COMPLETE,
        area_ha=area,
        products_kg={"complete": round(candidates[limiting], 2)},
        limiting_nutrient=_NUTRIENT_NAMES[limiting],
    )


def _dispatch(
    mode: SourceMode, n: float, p: float, k: float, area: float
) -> FertilizerDose:
    _LOGGER.debug(
        "Computing %s dose for N=%s P=%s K=%s over %s ha", mode.value, n, p, k, area
    )
    if mode is SourceMode.DAP:
        return _dap_dose(n, p, k, area)
    if mode is SourceMode.COMPLETE:
        return _complete_dose(n, p, k, area)
    return _straight_dose(mode, n, p, k, area)


def compute_dose_for_mode(
    nitrogen: float,
    phosphorus: float,
    potassium: float,
    area: float = 1,
    *,
    mode: SourceMode | str = SourceMode.SSP_UREA,
) -> FertilizerDose:
    """Return product masses for the already resolved source ``mode``."""

    validate_inputs(
        {
            "nitrogen": nitrogen,
            "phosphorus": phosphorus,
            "potassium": potassium,
            "area": area,
        },
        _NUTRIENT_CONSTRAINTS,
    )
    try:
        mode = SourceMode(mode)
    except ValueError:
        choices = ", ".join(m.value for m in SourceMode)
        raise InvalidInput(range_errors=[f"mode: must be one of {choices}"]) from None
    return _dispatch(mode, nitrogen, phosphorus, potassium, area)


def compute_dose(
    nitrogen: float,
    phosphorus: float,
    potassium: float,
    area: float = 1,
    use_dap: bool = False,
    use_tsp: bool = False,
    use_complete: bool = False,
) -> FertilizerDose:
    """Return fertilizer masses needed for the recommended N, P and K rates.

    Parameters
    ----------
    nitrogen, phosphorus, potassium : float
        Recommended nutrient rates in kg/ha.
    area : float
        Cultivated area in hectares.
    use_dap : bool
        Supply phosphorus and part of the nitrogen with DAP.
    use_tsp : bool
        Supply phosphorus with TSP instead of SSP.
    use_complete : bool
        Supply all three nutrients with a 19-19-10 complete fertilizer.

    With no flag set urea, SSP and muriate of potash are used. Numbers and
    flags are checked together, so one :class:`InvalidInput` reports every
    bad argument. Conflicting flags are only reported once all arguments are
    valid.
    """

    validate_inputs(
        {
            "nitrogen": nitrogen,
            "phosphorus": phosphorus,
            "potassium": potassium,
            "area": area,
            "use_dap": use_dap,
            "use_tsp": use_tsp,
            "use_complete": use_complete,
        },
        {**_NUTRIENT_CONSTRAINTS, **_FLAG_CONSTRAINTS},
    )
    mode = _resolve_mode(use_dap, use_tsp, use_complete)
    return _dispatch(mode, nitrogen, phosphorus, potassium, area)
