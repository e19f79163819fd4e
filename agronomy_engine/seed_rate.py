"""Seed rate and plant population for row sown crops."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .constants import GRAMS_PER_KILOGRAM, PERCENT, SQUARE_METERS_PER_HECTARE
from .validation import Constraint, require_nonzero, validate_inputs

_LOGGER = logging.getLogger(__name__)

__all__ = ["SeedRate", "SeedSowingPlan", "compute_seed_rate"]

_CONSTRAINTS = {
    "area": Constraint.POSITIVE,
    "tsw": Constraint.POSITIVE,
    "row_spacing": Constraint.POSITIVE,
    "plant_spacing": Constraint.POSITIVE,
    "germination": Constraint.PERCENT,
    "purity": Constraint.PERCENT,
    "plants_per_hill": Constraint.POSITIVE,
    "gap_filling": Constraint.PERCENT,
}


@dataclass(slots=True)
class SeedRate:
    """Seed mass and plant population for the whole sown area."""

    seed_mass_kg: float
    plant_population: float
    area_ha: float
    gap_filling_pct: float = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        subject = "seed" if self.gap_filling_pct > 0 else "seed rate"
        return (
            f"The required {subject} is {self.seed_mass_kg} per {self.area_ha} ha "
            f"and the plant population is {self.plant_population} per ha"
        )


@dataclass(slots=True)
class SeedSowingPlan:
    """Seed lot properties and sowing geometry for ``area_ha`` hectares."""

    thousand_seed_weight_g: float
    row_spacing_cm: float
    plant_spacing_cm: float
    area_ha: float = 1
    germination_pct: float = 100
    purity_pct: float = 100
    plants_per_hill: float = 1
    gap_filling_pct: float = 0

    def compute(self) -> SeedRate:
        return compute_seed_rate(
            self.area_ha,
            tsw=self.thousand_seed_weight_g,
            row_spacing=self.row_spacing_cm,
            plant_spacing=self.plant_spacing_cm,
            germination=self.germination_pct,
            purity=self.purity_pct,
            plants_per_hill=self.plants_per_hill,
            gap_filling=self.gap_filling_pct,
        )


def compute_seed_rate(
    area: float = 1,
    *,
    tsw: float,
    row_spacing: float,
    plant_spacing: float,
    germination: float = 100,
    purity: float = 100,
    plants_per_hill: float = 1,
    gap_filling: float = 0,
) -> SeedRate:
    """Return seed kilograms and plant population for ``area`` hectares.

    Parameters
    ----------
    area : float
        Sown area in hectares.
    tsw : float
        Thousand seed weight in grams.
    row_spacing, plant_spacing : float
        Spacing between rows and between plants in centimeters.
    germination, purity : float
        Seed lot germination and purity in percent. A value of ``0`` raises
        :class:`~agronomy_engine.exceptions.DivisionByZero`.
    plants_per_hill : float
        Seeds sown per hill.
    gap_filling : float
        Extra seed in percent reserved for replacing missing plants.

    The plant population keeps two decimals without gap filling and is a whole
    number when gap filling is requested.
    """

    validate_inputs(
        {
            "area": area,
            "tsw": tsw,
            "row_spacing": row_spacing,
            "plant_spacing": plant_spacing,
            "germination": germination,
            "purity": purity,
            "plants_per_hill": plants_per_hill,
            "gap_filling": gap_filling,
        },
        _CONSTRAINTS,
    )
    require_nonzero(germination=germination, purity=purity)

    spacing_m2 = row_spacing * plant_spacing / SQUARE_METERS_PER_HECTARE
    area_m2 = area * SQUARE_METERS_PER_HECTARE
    population = area_m2 / spacing_m2
    # germination * purity is in percent squared (/ 10000) and tsw covers a
    # thousand seeds (/ 1000), leaving a net factor of 10
    seed_kg = (area_m2 * tsw * 10 * plants_per_hill) / (
        germination * purity * spacing_m2 * GRAMS_PER_KILOGRAM
    )

    if gap_filling == 0:
        result = SeedRate(
            seed_mass_kg=round(seed_kg, 2),
            plant_population=round(population, 2),
            area_ha=area,
        )
    else:
        seed_kg *= 1 + gap_filling / PERCENT
        result = SeedRate(
            seed_mass_kg=round(seed_kg, 2),
            plant_population=round(population),
            area_ha=area,
            gap_filling_pct=gap_filling,
        )
    _LOGGER.debug("Seed rate for %s ha: %s", area, result)
    return result
