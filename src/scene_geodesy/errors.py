from __future__ import annotations
import math
from typing import Sequence

import numpy as np


class InvalidInputError(ValueError):
    """
    Raised when a coordinate violates the input contract: NaN or infinite
    components, latitude outside [-90, 90], or a vector of the wrong shape.
    """


class ReducedPrecisionWarning(UserWarning):
    """
    Issued when an inverse transform falls in a degenerate region (on or near
    the polar axis) and returns a best-effort result.
    """


def check_finite(name: str, value: float) -> float:
    """
    Validates that a scalar is a finite real number.

    Args:
        name (str): Name used in the error message.
        value (float): Value to check.

    Returns:
        float: The value converted to float.

    Raises:
        InvalidInputError: If the value is not a number, NaN or infinite.
    """
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from e
    if not math.isfinite(v):
        raise InvalidInputError(f"{name} must be finite, got {v}")
    return v


def check_latitude(lat_deg: float) -> float:
    """
    Validates a latitude in degrees.

    Args:
        lat_deg (float): Latitude in degrees.

    Returns:
        float: The latitude as float.

    Raises:
        InvalidInputError: If the latitude is not finite or lies outside [-90, 90].
    """
    lat = check_finite("lat_deg", lat_deg)
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(f"lat_deg must be within [-90, 90], got {lat}")
    return lat


def as_vector3(v: Sequence[float] | np.ndarray, name: str = "vector") -> np.ndarray:
    """Converts a 3-sequence to a finite float64 numpy vector."""
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise InvalidInputError(f"{name} must have shape (3,), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must be finite, got {arr.tolist()}")
    return arr
