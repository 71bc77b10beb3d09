"""Decimal helpers shared by the valuation and recommendation engines.

All money is carried as `Decimal` so repeated add/remove of claims and costs
never drifts. Derived figures are quantized to cents, counter-offers to whole
units, both half-up.
"""

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Annotated, Any

from pydantic import PlainSerializer

from settlewise.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

# Serialized as a JSON number; Python callers keep the Decimal.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Percentage = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Ratio = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
    return value.quantize(ONE, rounding=ROUND_HALF_UP)


def clamp_percentage(value: Decimal, field: str = "probability") -> Decimal:
    clamped = max(ZERO, min(HUNDRED, value))
    if clamped != value:
        logger.debug(f"Clamped {field} {value} to {clamped}")
    return clamped


def to_decimal(value: Any, field: str) -> Decimal:
    """Coerce a numeric input to Decimal, raising ValidationError naming `field`."""
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number, not a boolean")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(field, "must be a finite number")
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(field, f"must be a number, got {value!r}")
    if not result.is_finite():
        raise ValidationError(field, "must be a finite number")
    return result


def require_non_negative(value: Any, field: str) -> Decimal:
    result = to_decimal(value, field)
    if result < 0:
        raise ValidationError(field, f"must be non-negative, got {result}")
    return result
