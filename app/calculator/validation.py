# app/calculator/validation.py

import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic.alias_generators import to_camel

from .schemas import FIELD_LIMITS, CalculatorInput

RawInput = Union[CalculatorInput, Mapping[str, Any]]


class ValidationError(Exception):
    """Raised when one or more calculator inputs violate their constraints.

    ``errors`` holds one entry per offending field, each a dict with
    ``field`` (camelCase identifier), ``message`` and ``code``.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__("Calculator input validation failed")
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


def _fmt_bound(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,}"


def _is_finite(value: Any) -> bool:
    """Finite check that tolerates integers and decimals too large for a float."""
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Integral):
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # e.g. a Fraction beyond float range; still finite, the range check rejects it
        return True


def _lookup(raw: Mapping[str, Any], name: str) -> Tuple[bool, Any]:
    """Finds a field under its camelCase alias or its snake_case name."""
    alias = to_camel(name)
    if alias in raw:
        return True, raw[alias]
    if name in raw:
        return True, raw[name]
    return False, None


def _check_field(name: str, present: bool, value: Any) -> Optional[Dict[str, Any]]:
    alias = to_camel(name)
    low, high = FIELD_LIMITS[name]

    if not present or value is None:
        return {"field": alias, "message": f"{alias} is required.", "code": "FIELD_REQUIRED"}

    # bool is an int subclass; a checkbox value is not a number
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return {"field": alias, "message": f"{alias} must be a number.", "code": "NOT_A_NUMBER"}

    if not _is_finite(value):
        return {"field": alias, "message": f"{alias} must be a finite number.", "code": "NOT_FINITE"}

    if value < low or value > high:
        return {
            "field": alias,
            "message": f"{alias} must be between {_fmt_bound(low)} and {_fmt_bound(high)}.",
            "code": "OUT_OF_RANGE",
        }

    return None


def validate_input(raw: Any) -> Tuple[bool, List[Dict[str, Any]]]:
    """
    Check every calculator field and collect all violations.

    Does not stop at the first bad field so callers can highlight
    everything the user needs to fix in one pass.
    """
    if isinstance(raw, CalculatorInput):
        raw = raw.model_dump()

    if not isinstance(raw, Mapping):
        return False, [{"field": "__root__", "message": "Input must be an object.", "code": "NOT_AN_OBJECT"}]

    errors: List[Dict[str, Any]] = []
    for name in FIELD_LIMITS:
        present, value = _lookup(raw, name)
        error = _check_field(name, present, value)
        if error:
            errors.append(error)

    return (len(errors) == 0), errors


def is_valid(raw: Any) -> bool:
    ok, _ = validate_input(raw)
    return ok


def validate_or_raise(raw: RawInput) -> CalculatorInput:
    """Returns the input as a CalculatorInput, or raises ValidationError."""
    ok, errors = validate_input(raw)
    if not ok:
        raise ValidationError(errors)

    if isinstance(raw, CalculatorInput):
        return raw

    values = {}
    for name in FIELD_LIMITS:
        _, value = _lookup(raw, name)
        values[name] = float(value)
    return CalculatorInput(**values)
