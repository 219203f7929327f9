# src/decayengine/curves.py
import math
import numpy as np

from .helpers import validate_positive


def percent_remaining_at(hours, half_life_hours: float):
    """
    Vectorised decay: 100 * 0.5 ** (t / t_half).
    hours may be a scalar or an array of elapsed times (h, >= 0).
    """
    validate_positive("half_life_hours", half_life_hours)
    return 100.0 * np.power(0.5, np.asarray(hours, dtype=float) / half_life_hours)


def decay_curve(half_life_hours: float, t_end_h: float | None = None, dt_h: float = 1.0):
    """
    Sample the single-dose decay curve from the dose (t=0) up to t_end_h.

    t_end_h defaults to seven half-lives (< 1 % left).

    Returns:
      t   : array of time points (hours since dose)
      pct : array of percentages remaining
    """
    validate_positive("half_life_hours", half_life_hours)
    validate_positive("dt_h", dt_h)
    if t_end_h is None:
        t_end_h = 7.0 * half_life_hours
    validate_positive("t_end_h", t_end_h)

    t = np.arange(0.0, t_end_h + dt_h, dt_h)
    t = t[t <= t_end_h + 1e-9]
    return t, percent_remaining_at(t, half_life_hours)


def hours_until(percent: float, half_life_hours: float) -> float:
    """
    Hours after the dose at which `percent` remains.
    Inverse of the decay law: t = t_half * log2(100 / percent).
    """
    validate_positive("half_life_hours", half_life_hours)
    if not (0 < percent <= 100):
        raise ValueError(f"percent must be in (0, 100] (got {percent}).")
    return half_life_hours * math.log2(100.0 / percent)