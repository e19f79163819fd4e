"""Central constants used across the agronomy engine."""

from __future__ import annotations

from typing import Mapping

SQUARE_METERS_PER_HECTARE = 10000
GRAMS_PER_KILOGRAM = 1000
# Converts a percentage nutrient grade into a kg product per kg nutrient factor
PERCENT = 100

# Nutrient content of each product in percent (N, P2O5 and K2O basis)
FERTILIZER_GRADES: Mapping[str, Mapping[str, float]] = {
    "urea": {"N": 46.0},
    "ssp": {"P": 16.0},
    "tsp": {"P": 48.0},
    "dap": {"N": 18.0, "P": 46.0},
    "muriate_of_potash": {"K": 60.0},
    "complete": {"N": 19.0, "P": 19.0, "K": 10.0},
}

__all__ = [
    "SQUARE_METERS_PER_HECTARE",
    "GRAMS_PER_KILOGRAM",
    "PERCENT",
    "FERTILIZER_GRADES",
]
