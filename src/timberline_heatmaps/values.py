"""Raw numeric values -> integer score buckets."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

from .errors import ConfigError


@dataclass(frozen=True)
class ValueRange:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ConfigError(f"value_min ({self.min}) must not exceed value_max ({self.max})")


def check_value(value: object, where: str) -> float | None:
    """Accept a real number or ``None``; reject everything else.

    NaN (the usual gap marker in numpy arrays) counts as missing; infinities
    have no bucket and are rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigError(f"{where} must be a number or None, got {value!r}")
    if math.isnan(value):
        return None
    if math.isinf(value):
        raise ConfigError(f"{where} must be finite, got {value!r}")
    return value


def value_range(
    values: Iterable[float | None],
    value_min: float | None = None,
    value_max: float | None = None,
) -> ValueRange:
    """Range for bucketing: explicit bounds win, otherwise the data's extent.

    An all-missing dataset yields ``ValueRange(0, 0)``.
    """
    present = [v for v in values if v is not None]
    data_lo, data_hi = (min(present), max(present)) if present else (0, 0)

    if value_min is not None and value_max is None and value_min > data_hi:
        raise ConfigError(f"value_min ({value_min}) exceeds the data's maximum ({data_hi})")
    if value_max is not None and value_min is None and value_max < data_lo:
        raise ConfigError(f"value_max ({value_max}) is below the data's minimum ({data_lo})")

    lo = value_min if value_min is not None else data_lo
    hi = value_max if value_max is not None else data_hi
    return ValueRange(lo, hi)


def value_to_score(
    value: float | None,
    rng: ValueRange,
    bucket_count: int,
    custom: Callable[..., Any] | None = None,
    **context: Any,
) -> int:
    """Bucket ``value`` into ``[0, bucket_count - 1]``.

    ``None`` counts as ``rng.min``. A ``custom`` mapper is called with
    ``value``, ``min``, ``max``, ``bucket_count`` and the caller's context
    (``index=`` for linear strips, ``date=`` for calendars); whatever it
    returns must be an in-range integer.
    """
    if value is None:
        value = rng.min

    if custom is not None:
        score = custom(value=value, min=rng.min, max=rng.max, bucket_count=bucket_count, **context)
        if (
            isinstance(score, bool)
            or not isinstance(score, Integral)
            or not 0 <= score < bucket_count
        ):
            raise ConfigError(
                f"value_to_score must return an integer between 0 and {bucket_count - 1}, "
                f"got {score!r}"
            )
        return int(score)

    if rng.min == rng.max:
        return 0

    clamped = min(max(value, rng.min), rng.max)
    normalized = (clamped - rng.min) / (rng.max - rng.min)
    return int(math.floor(normalized * (bucket_count - 1)))
