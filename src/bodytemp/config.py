# default options come from the environment (and an optional .env file)
# all env parsing lives here, the service only ever sees a StatsOptions

from __future__ import annotations
import os
from typing import Mapping, Optional
from dotenv import load_dotenv
from .errors import InvalidConfiguration
from .models import StatsOptions, TemperatureUnit

load_dotenv()  # a local .env is optional, real deployments inject env vars directly

ENV_INPUT_UNIT = "BODYTEMP_INPUT_UNIT"
ENV_FORCE_CONVERT = "BODYTEMP_FORCE_CONVERT_IF_MISMATCH"
ENV_CONVERT_MIXED = "BODYTEMP_CONVERT_MIXED_VALUES"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _get(name: str, environ: Optional[Mapping[str, str]]) -> Optional[str]:
    raw = os.getenv(name) if environ is None else environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def parse_bool(name: str, raw: Optional[str], default: bool = False) -> bool:
    if raw is None:
        return default
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidConfiguration(f"{name} must be a boolean (got {raw!r})")


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> StatsOptions:
    # environ=None reads the process environment (after .env has been loaded)
    unit = _get(ENV_INPUT_UNIT, environ)
    try:
        input_unit = TemperatureUnit.parse(unit)
    except InvalidConfiguration as exc:
        raise InvalidConfiguration(f"{ENV_INPUT_UNIT}: {exc}") from exc

    return StatsOptions(
        input_unit=input_unit,
        force_convert_if_mismatch=parse_bool(ENV_FORCE_CONVERT, _get(ENV_FORCE_CONVERT, environ)),
        convert_mixed_values=parse_bool(ENV_CONVERT_MIXED, _get(ENV_CONVERT_MIXED, environ)),
    )
