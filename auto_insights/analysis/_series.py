"""
Shared helpers for turning raw samples into clean numeric arrays
and computing centered rolling-window statistics.
"""

import logging
import math
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def is_finite_number(value: Any) -> bool:
    """
    True for real, finite numbers that fit in a float.

    Booleans are not samples. Decimals (as returned for NUMERIC database
    columns) count when finite. Integers too large for a float are dropped.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite() and math.isfinite(float(value))
    if not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def finite_or_none(value: Optional[float]) -> Optional[float]:
    """Pass finite floats through; overflowed or undefined results become None."""
    if value is None or not math.isfinite(value):
        return None
    return value


def finite_values(values: Optional[Iterable[Any]]) -> np.ndarray:
    """Keep only finite numeric samples, preserving order."""
    if values is None:
        return np.empty(0, dtype=float)
    try:
        kept = [float(v) for v in values if is_finite_number(v)]
    except TypeError:
        # Not iterable
        return np.empty(0, dtype=float)
    return np.asarray(kept, dtype=float)


def clean_series(
    values: Optional[Iterable[Any]],
    timestamps: Optional[Sequence[Any]] = None,
) -> Tuple[np.ndarray, Optional[List[Any]]]:
    """
    Drop non-finite samples together with their timestamps.

    Timestamps that do not line up one-to-one with the values are ignored.
    """
    if values is None:
        return np.empty(0, dtype=float), None
    try:
        raw = list(values)
    except TypeError:
        return np.empty(0, dtype=float), None

    if timestamps is not None:
        stamps = list(timestamps)
        if len(stamps) != len(raw):
            logger.debug(
                f"Ignoring timestamps: {len(stamps)} labels for {len(raw)} values"
            )
            stamps = None
    else:
        stamps = None

    kept_values: List[float] = []
    kept_stamps: List[Any] = []
    for i, v in enumerate(raw):
        if not is_finite_number(v):
            continue
        kept_values.append(float(v))
        if stamps is not None:
            kept_stamps.append(stamps[i])

    return np.asarray(kept_values, dtype=float), (kept_stamps if stamps is not None else None)


def window_radius(n: int, max_radius: int) -> int:
    """Radius of the centered rolling window for a series of length n."""
    return min(max_radius, n // 3)


def rolling_stats(values: np.ndarray, radius: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Mean and population stddev of the window [i - radius, i + radius]
    around every index, clipped at the series edges.
    """
    n = len(values)
    means = np.zeros(n, dtype=float)
    stds = np.zeros(n, dtype=float)
    # Windows near the float limit overflow to inf/nan; callers skip those.
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(n):
            window = values[max(0, i - radius):min(n, i + radius + 1)]
            mean = float(np.mean(window))
            means[i] = mean
            stds[i] = math.sqrt(float(np.mean((window - mean) ** 2)))
    return means, stds


def timestamp_at(timestamps: Optional[List[Any]], index: int) -> Any:
    if timestamps is None:
        return None
    return timestamps[index]
