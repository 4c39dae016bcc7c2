"""
Static unit and density tables.

Both tables are ordered; suggestion ranking relies on that order for ties.
"""

import logging

from ..errors import UnknownSubstanceError, UnknownUnitError
from ..schemas import Substance, Unit
from .suggest import rank_suggestions

logger = logging.getLogger("kitchenconv.registry")

# --- Data Tables ---

# Normalized unit -> Unit
# Base units: kg (weight), l (volume)
UNITS_DB = {
    # Weight (base: kg)
    "kg": Unit(to_si=1.0, kind="weight"),
    "g": Unit(to_si=1e-3, kind="weight"),
    "mg": Unit(to_si=1e-6, kind="weight"),
    "lb": Unit(to_si=4.536e-1, kind="weight"),
    "oz": Unit(to_si=2.835e-2, kind="weight"),

    # Volume (base: l)
    "l": Unit(to_si=1.0, kind="volume"),
    "dl": Unit(to_si=1e-1, kind="volume"),
    "cl": Unit(to_si=1e-2, kind="volume"),
    "ml": Unit(to_si=1e-3, kind="volume"),
    "gal": Unit(to_si=3.785, kind="volume"),
    "cup": Unit(to_si=2.366e-1, kind="volume"),  # US cup
    "floz": Unit(to_si=2.957e-2, kind="volume"),
    "tbs": Unit(to_si=1.479e-2, kind="volume"),
    "ts": Unit(to_si=4.93e-3, kind="volume"),

    # Temperature (affine, factor is a sentinel)
    "c": Unit(to_si=1.0, kind="temperature"),  # 1: celsius
    "f": Unit(to_si=0.0, kind="temperature"),  # 0: fahrenheit
}

# Density Table: kg/l
HERB_DENSITY = 0.10566  # fresh leafy herbs, loosely packed

DENSITY_DB = {
    "flour": 0.5283,
    "butter": 0.9586,
    "sugar": 0.8453,
    "salt": 1.1548,
    "parsley": HERB_DENSITY,
    "basil": HERB_DENSITY,
    "cilantro": HERB_DENSITY,
    "dill": HERB_DENSITY,
    "herbs": HERB_DENSITY,
}


def lookup_unit(name: str) -> Unit:
    """Return the Unit for a lowercased name or raise UnknownUnitError."""
    unit = UNITS_DB.get(name)
    if unit is None:
        suggestions = rank_suggestions(name, UNITS_DB)
        logger.info(f"Unknown unit '{name}', closest: {suggestions[:3]}")
        raise UnknownUnitError(f"unknown unit '{name}'", name, suggestions)
    return unit


def lookup_substance(name: str) -> Substance:
    """Return the Substance for a lowercased name or raise UnknownSubstanceError."""
    density = DENSITY_DB.get(name)
    if density is None:
        suggestions = rank_suggestions(name, DENSITY_DB)
        logger.info(f"Unknown substance '{name}', closest: {suggestions[:3]}")
        raise UnknownSubstanceError(
            f"the density of '{name}' is unknown", name, suggestions
        )
    return Substance(name=name, density=density)
