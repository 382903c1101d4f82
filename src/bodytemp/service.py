# orchestration and business rules.
# validate -> resolve units -> check human range -> reduce, all pure and per-call
# the unit decision table lives in resolve_action so every branch is visible in one place

from __future__ import annotations
import logging
import math
import numbers
from collections.abc import Sequence
from enum import Enum
from typing import List, Optional
from .errors import AmbiguousUnit, InvalidInput, MissingUnit, OutOfHumanRange, UnitMismatch
from .models import (
    StatsOptions,
    TemperatureStats,
    TemperatureUnit,
    celsius_to_fahrenheit,
    in_celsius_range,
    in_fahrenheit_range,
    summarize,
)

logger = logging.getLogger(__name__)


class Action(Enum):
    KEEP_ALL = "keep_all"
    CONVERT_ALL = "convert_all"
    CONVERT_CELSIUS_RANGE = "convert_celsius_range"


def _as_finite_float(value) -> Optional[float]:
    # bool is an int subclass but never a reading
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except OverflowError:
        # huge ints/fractions are finite but have no float form
        return None
    return f if math.isfinite(f) else None


def validate_readings(temperatures) -> List[float]:
    # strict runtime contract: a real sequence (not a string) of finite numbers
    if not isinstance(temperatures, Sequence) or isinstance(temperatures, (str, bytes, bytearray)):
        raise InvalidInput("Input must be an array of finite numbers.")
    readings = [_as_finite_float(t) for t in temperatures]
    if any(r is None for r in readings):
        raise InvalidInput("Input must be an array of finite numbers.")
    return readings


def resolve_action(
    unit: Optional[TemperatureUnit], any_f: bool, any_c: bool, options: StatsOptions
) -> Action:
    force = options.force_convert_if_mismatch
    mixed = options.convert_mixed_values

    if unit is TemperatureUnit.CELSIUS:
        if any_f and not any_c:
            if force:
                return Action.KEEP_ALL  # declared C but data is F, take it as F
            raise UnitMismatch(unit)
        if any_f and any_c and mixed:
            return Action.CONVERT_CELSIUS_RANGE
        return Action.CONVERT_ALL

    if unit is TemperatureUnit.FAHRENHEIT:
        if any_c and not any_f:
            if force:
                return Action.CONVERT_ALL
            raise UnitMismatch(unit)
        if any_f and any_c and mixed:
            return Action.CONVERT_CELSIUS_RANGE
        return Action.KEEP_ALL

    # no declared unit
    if any_f and any_c and mixed:
        return Action.CONVERT_CELSIUS_RANGE
    if force:
        if any_c and not any_f:
            return Action.CONVERT_ALL
        if any_f and not any_c:
            return Action.KEEP_ALL
        if any_f and any_c:
            raise AmbiguousUnit("input_unit must be specified for mixed values unless convert_mixed_values is set.")
        raise AmbiguousUnit("input_unit must be specified; values fit neither human range.")
    raise MissingUnit()


def to_fahrenheit(readings: List[float], options: StatsOptions) -> List[float]:
    # readings must already be validated and non-empty
    any_f = any(in_fahrenheit_range(t) for t in readings)
    any_c = any(in_celsius_range(t) for t in readings)
    action = resolve_action(options.input_unit, any_f, any_c, options)
    logger.debug(
        "unit=%s any_f=%s any_c=%s -> %s",
        options.input_unit.value if options.input_unit else None, any_f, any_c, action.value,
    )

    if action is Action.CONVERT_ALL:
        resolved = [celsius_to_fahrenheit(t) for t in readings]
    elif action is Action.CONVERT_CELSIUS_RANGE:
        resolved = [celsius_to_fahrenheit(t) if in_celsius_range(t) else t for t in readings]
    else:
        resolved = list(readings)

    # whichever branch produced them, the final values must be human temperatures
    bad = [t for t in resolved if not in_fahrenheit_range(t)]
    if bad:
        raise OutOfHumanRange(bad)
    return resolved


def compute_statistics(temperatures, options: Optional[StatsOptions] = None) -> TemperatureStats:
    readings = validate_readings(temperatures)
    if not readings:
        # empty input is not an error and ignores the options entirely
        return summarize([])
    return summarize(to_fahrenheit(readings, options or StatsOptions()))
