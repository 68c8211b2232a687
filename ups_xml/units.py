"""Measurement serialization for package dimensions and weight.

Pure functions with no XML or transport dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from .constants import IMPERIAL_COUNTRY_CODES, MEASURE_DECIMALS, MINIMUM_MEASURE
from .models import AXES, Package, UnitSystem

_QUANTUM = Decimal(1).scaleb(-MEASURE_DECIMALS)


@dataclass(frozen=True)
class UnitsOfMeasurement:
    system: UnitSystem
    length_unit: str
    weight_unit: str


IMPERIAL_UNITS = UnitsOfMeasurement(UnitSystem.IMPERIAL, "IN", "LBS")
METRIC_UNITS = UnitsOfMeasurement(UnitSystem.METRIC, "CM", "KGS")

# First matching predicate on the origin country wins.
UNIT_POLICY: tuple[tuple[Callable[[str], bool], UnitsOfMeasurement], ...] = (
    (lambda country: country in IMPERIAL_COUNTRY_CODES, IMPERIAL_UNITS),
    (lambda country: True, METRIC_UNITS),
)


def units_for_origin(country_code: str | None) -> UnitsOfMeasurement:
    country = (country_code or "").upper()
    for predicate, units in UNIT_POLICY:
        if predicate(country):
            return units
    return METRIC_UNITS


def serialize_measure(value: float) -> float:
    """Round half-up to three decimals, then clamp to the 0.1 floor."""
    rounded = Decimal(str(float(value))).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    return max(float(rounded), MINIMUM_MEASURE)


def format_measure(value: float) -> str:
    return str(serialize_measure(value))


def package_dimensions(package: Package, units: UnitsOfMeasurement) -> dict[str, float]:
    """Serialized length/width/height in the given unit system, keyed by axis."""
    if units.system is UnitSystem.IMPERIAL:
        return {axis: serialize_measure(package.inches(axis)) for axis in AXES}
    return {axis: serialize_measure(package.centimetres(axis)) for axis in AXES}


def package_weight(package: Package, units: UnitsOfMeasurement) -> float:
    if units.system is UnitSystem.IMPERIAL:
        return serialize_measure(package.pounds())
    return serialize_measure(package.kilograms())
