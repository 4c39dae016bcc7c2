"""
Unit Conversion Service for kitchenconv.

Handles weight, volume and temperature conversions, bridging weight and
volume through the density of a named substance.
"""

import logging
from typing import Optional

from ..errors import KindMismatchError, MissingSubstanceError, SubstanceMismatchError
from ..parsing.quantity import parse_quantity
from ..schemas import ConversionResult, ParsedRequest, Unit
from .registry import lookup_substance, lookup_unit

logger = logging.getLogger("kitchenconv.conversion")

CELSIUS = 1.0
FAHRENHEIT = 0.0


def convert_temperature(qty: float, from_unit: Unit, to_unit: Unit) -> float:
    """Affine temperature conversion between the Celsius/Fahrenheit sentinels."""
    if from_unit.to_si == to_unit.to_si:
        return qty
    if from_unit.to_si == CELSIUS:
        return (9.0 / 5.0) * qty + 32.0
    return (5.0 / 9.0) * (qty - 32.0)


def apply_density(from_unit: Unit, to_unit: Unit, substance: Optional[str],
                  unit_from: str, unit_to: str) -> tuple[Unit, Unit]:
    """
    Rescale the volume side of a weight/volume pair into a weight unit.

    Mass (kg) = Volume (l) * Density (kg/l), so the volume factor is
    multiplied by the density and the unit becomes a weight.
    """
    if not substance:
        raise MissingSubstanceError(
            f"converting '{unit_from}' (a {from_unit.kind}) into '{unit_to}' "
            f"(a {to_unit.kind}) requires knowing the substance which is converted"
        )

    density = lookup_substance(substance).density

    if from_unit.kind == "volume":
        from_unit = Unit(to_si=from_unit.to_si * density, kind="weight")
    else:
        to_unit = Unit(to_si=to_unit.to_si * density, kind="weight")

    return from_unit, to_unit


def convert(req: ParsedRequest) -> ConversionResult:
    """
    Convert a tokenized request.

    Raises a KitchenConvError subclass on any failure.
    """
    if req.substance_from and req.substance_to and req.substance_from != req.substance_to:
        raise SubstanceMismatchError(
            f"cannot convert a quantity of '{req.substance_from}' "
            f"into one of '{req.substance_to}'"
        )
    substance = req.substance

    from_unit = lookup_unit(req.unit_from)
    to_unit = lookup_unit(req.unit_to)

    qty = parse_quantity(req.quantity)

    # Case 1: Cross kind (Weight <-> Volume)
    if {from_unit.kind, to_unit.kind} == {"weight", "volume"}:
        from_unit, to_unit = apply_density(
            from_unit, to_unit, substance, req.unit_from, req.unit_to
        )

    # Case 2: Incompatible (Temperature <-> Weight/Volume)
    if from_unit.kind != to_unit.kind:
        raise KindMismatchError(
            f"cannot convert from '{req.unit_from}' (a {from_unit.kind}) "
            f"into '{req.unit_to}' (a {to_unit.kind})"
        )

    # Case 3: Temperature is affine, not a factor
    if from_unit.kind == "temperature":
        result = convert_temperature(qty, from_unit, to_unit)
    # Case 4: Same kind, base conversion
    else:
        result = qty * from_unit.to_si / to_unit.to_si

    logger.debug(f"{qty} {req.unit_from} -> {result} {req.unit_to} (substance={substance})")

    return ConversionResult(
        quantity=req.quantity,
        value=qty,
        unit_from=req.unit_from,
        unit_to=req.unit_to,
        substance=substance,
        result=result,
    )
