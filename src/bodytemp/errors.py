# typed error taxonomy for the statistics computer
# every failure rejects the whole batch, callers never get partial results

from __future__ import annotations
from typing import Iterable, List


class TemperatureStatsError(ValueError):
    # common base so callers (and the cli) can catch one type
    pass


class InvalidInput(TemperatureStatsError, TypeError):
    # input is not a sequence of finite real numbers
    pass


class InvalidConfiguration(TemperatureStatsError):
    pass


class MissingUnit(TemperatureStatsError):
    # unit not given and no option resolves the ambiguity
    def __init__(self, message: str = "input_unit must be specified when other options are omitted."):
        super().__init__(message)


class AmbiguousUnit(MissingUnit):
    # unit not given, forced conversion requested, but data fits both ranges or neither
    pass


class UnitMismatch(TemperatureStatsError):
    def __init__(self, unit):
        self.unit = unit
        tag = getattr(unit, "value", unit)
        other = "Fahrenheit" if tag == "C" else "Celsius"
        super().__init__(f'input_unit "{tag}" mismatch; values only fit {other} range.')


class OutOfHumanRange(TemperatureStatsError):
    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        super().__init__(
            "Input values must result in valid human temperatures (93F-105F); "
            f"got {', '.join(f'{v:.2f}' for v in self.values)}"
        )
