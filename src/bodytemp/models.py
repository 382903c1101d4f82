# models and tiny stats helpers to keep data shapes explicit and reusable across the app

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union
from .errors import InvalidConfiguration

# inclusive human body temperature bounds
# the two ranges are not exact conversions of each other (93F is ~33.9C, 105F is ~40.6C)
MIN_HUMAN_TEMP_F = 93.0
MAX_HUMAN_TEMP_F = 105.0
MIN_HUMAN_TEMP_C = 34.0
MAX_HUMAN_TEMP_C = 40.5


class TemperatureUnit(str, Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"

    @classmethod
    def parse(cls, value: Union["TemperatureUnit", str, None]) -> Optional["TemperatureUnit"]:
        # accepts the tag or the full name, case-insensitive
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            aliases = {"F": cls.FAHRENHEIT, "FAHRENHEIT": cls.FAHRENHEIT,
                       "C": cls.CELSIUS, "CELSIUS": cls.CELSIUS}
            if key in aliases:
                return aliases[key]
        raise InvalidConfiguration(f"Unsupported temperature unit: {value!r}")


def in_fahrenheit_range(value: float) -> bool:
    return MIN_HUMAN_TEMP_F <= value <= MAX_HUMAN_TEMP_F


def in_celsius_range(value: float) -> bool:
    return MIN_HUMAN_TEMP_C <= value <= MAX_HUMAN_TEMP_C


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32


@dataclass(frozen=True)
class StatsOptions:
    # immutable per-call configuration, nothing is shared between calls
    input_unit: Optional[TemperatureUnit] = None
    force_convert_if_mismatch: bool = False
    convert_mixed_values: bool = False

    def __post_init__(self):
        # allow StatsOptions(input_unit="C") from callers holding plain strings
        object.__setattr__(self, "input_unit", TemperatureUnit.parse(self.input_unit))


@dataclass(frozen=True)
class TemperatureStats:
    # output value object, always reported in Fahrenheit
    average: float
    min: float
    max: float
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT

    @property
    def is_empty(self) -> bool:
        return math.isnan(self.average) and math.isnan(self.min) and math.isnan(self.max)


def summarize(values: Iterable[float]) -> TemperatureStats:
    # single pass over the values; empty input returns the NaN sentinel instead of dividing by zero
    total = 0.0
    count = 0
    lo = math.inf
    hi = -math.inf
    for v in values:
        total += v
        count += 1
        lo = min(lo, v)
        hi = max(hi, v)
    if not count:
        nan = float("nan")
        return TemperatureStats(average=nan, min=nan, max=nan)
    return TemperatureStats(average=total / count, min=lo, max=hi)
