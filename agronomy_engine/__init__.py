"""Convenient access to agronomy engine functionality."""

from __future__ import annotations

from .constants import FERTILIZER_GRADES
from .exceptions import (AgronomyError, ConflictingFertilizerSource,
                         DivisionByZero, InvalidInput)
from .fertilizer_dose import (FertilizerDose, NutrientPlan, SourceMode,
                              compute_dose, compute_dose_for_mode,
                              select_source_mode)
from .herbicide_rate import HerbicidePlan, HerbicideRate, compute_herbicide_rate
from .input_plan import (InputPlan, InputPlanReport, generate_input_plan,
                         load_input_plan)
from .seed_rate import SeedRate, SeedSowingPlan, compute_seed_rate
from .validation import Constraint, require_nonzero, validate_inputs

__all__ = [
    "AgronomyError",
    "InvalidInput",
    "ConflictingFertilizerSource",
    "DivisionByZero",
    "Constraint",
    "validate_inputs",
    "require_nonzero",
    "SourceMode",
    "NutrientPlan",
    "FertilizerDose",
    "select_source_mode",
    "compute_dose",
    "compute_dose_for_mode",
    "SeedSowingPlan",
    "SeedRate",
    "compute_seed_rate",
    "HerbicidePlan",
    "HerbicideRate",
    "compute_herbicide_rate",
    "InputPlan",
    "InputPlanReport",
    "load_input_plan",
    "generate_input_plan",
    "FERTILIZER_GRADES",
]
