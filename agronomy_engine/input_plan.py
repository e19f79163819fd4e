"""Seasonal input plan combining fertilizer, seed and herbicide calculations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping

from jsonschema import Draft202012Validator

from .exceptions import InvalidInput
from .fertilizer_dose import FertilizerDose, NutrientPlan, SourceMode
from .herbicide_rate import HerbicidePlan, HerbicideRate
from .seed_rate import SeedRate, SeedSowingPlan
from .utils import PathType, load_data, load_json

_LOGGER = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).resolve().parent / "data" / "input_plan.schema.json"

__all__ = [
    "InputPlan",
    "InputPlanReport",
    "validate_plan_dict",
    "load_input_plan",
    "generate_input_plan",
]


@lru_cache(maxsize=1)
def _plan_schema() -> dict[str, Any]:
    return load_json(SCHEMA_FILE)


def validate_plan_dict(data: Mapping[str, Any]) -> list[str]:
    """Return a list of human-readable schema errors (empty if valid)."""

    validator = Draft202012Validator(_plan_schema())
    issues: list[str] = []
    for err in validator.iter_errors(data):
        location = ".".join(str(part) for part in err.absolute_path) or "<root>"
        issues.append(f"{location}: {err.message}")
    return issues


@dataclass(slots=True)
class InputPlan:
    """Inputs for one field and season. Every part is optional."""

    name: str | None = None
    fertilizer: NutrientPlan | None = None
    seed: SeedSowingPlan | None = None
    herbicides: List[HerbicidePlan] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InputPlan":
        """Build a plan from a parsed JSON/YAML document.

        A top level ``area`` applies to every part that does not set its own.
        Structural problems raise :class:`InvalidInput` with the schema
        messages in ``type_errors``.
        """

        if not isinstance(data, Mapping):
            raise InvalidInput(type_errors=["<root>: expected an object"])
        issues = validate_plan_dict(data)
        if issues:
            raise InvalidInput(type_errors=issues)

        area = data.get("area", 1)
        fertilizer = None
        if "fertilizer" in data:
            fert = data["fertilizer"]
            fertilizer = NutrientPlan(
                nitrogen_kg_per_ha=fert["nitrogen"],
                phosphorus_kg_per_ha=fert["phosphorus"],
                potassium_kg_per_ha=fert["potassium"],
                area_ha=fert.get("area", area),
                source_mode=SourceMode(fert.get("source", SourceMode.SSP_UREA)),
            )
        seed = None
        if "seed" in data:
            s = data["seed"]
            seed = SeedSowingPlan(
                thousand_seed_weight_g=s["tsw"],
                row_spacing_cm=s["row_spacing"],
                plant_spacing_cm=s["plant_spacing"],
                area_ha=s.get("area", area),
                germination_pct=s.get("germination", 100),
                purity_pct=s.get("purity", 100),
                plants_per_hill=s.get("plants_per_hill", 1),
                gap_filling_pct=s.get("gap_filling", 0),
            )
        herbicides = [
            HerbicidePlan(
                recommended_rate=h["recommended_rate"],
                active_ingredient_pct=h["active_ingredient_pct"],
                area_ha=h.get("area", area),
                product=h.get("product"),
            )
            for h in data.get("herbicides", [])
        ]
        return cls(
            name=data.get("name"),
            fertilizer=fertilizer,
            seed=seed,
            herbicides=herbicides,
        )


@dataclass(slots=True)
class InputPlanReport:
    """Computed quantities for every part of an :class:`InputPlan`."""

    name: str | None
    fertilizer: FertilizerDose | None = None
    seed: SeedRate | None = None
    herbicides: List[HerbicideRate] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fertilizer": self.fertilizer.as_dict() if self.fertilizer else None,
            "seed": self.seed.as_dict() if self.seed else None,
            "herbicides": [h.as_dict() for h in self.herbicides],
        }

    def summary(self) -> str:
        lines: list[str] = []
        if self.name:
            lines.append(self.name)
        if self.fertilizer:
            lines.append(self.fertilizer.summary())
        if self.seed:
            lines.append(self.seed.summary())
        for herbicide in self.herbicides:
            text = herbicide.summary()
            lines.append(f"{herbicide.product}: {text}" if herbicide.product else text)
        return "\n".join(lines)


def load_input_plan(path: PathType) -> InputPlan:
    """Return the :class:`InputPlan` stored in a JSON or YAML file."""
    return InputPlan.from_dict(load_data(path))


def generate_input_plan(plan: InputPlan | Mapping[str, Any]) -> InputPlanReport:
    """Run every calculator present in ``plan``.

    The first calculator error propagates and no partial report is returned.
    """

    if not isinstance(plan, InputPlan):
        plan = InputPlan.from_dict(plan)

    report = InputPlanReport(
        name=plan.name,
        fertilizer=plan.fertilizer.compute() if plan.fertilizer else None,
        seed=plan.seed.compute() if plan.seed else None,
        herbicides=[h.compute() for h in plan.herbicides],
    )
    _LOGGER.info(
        "Generated input plan %s with %d herbicide application(s)",
        plan.name or "<unnamed>",
        len(report.herbicides),
    )
    return report
