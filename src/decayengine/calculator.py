# src/decayengine/calculator.py
import logging
from datetime import datetime

from .helpers import validate_positive
from .types import DecayOutcome, FutureDose, Remaining

logger = logging.getLogger(__name__)

# Average elimination half-life of vortioxetine.
VORTIOXETINE_HALF_LIFE_HOURS = 66.0


def elapsed_hours(last_dose: datetime, now: datetime) -> float:
    """Fractional hours from last_dose to now (negative if last_dose is later)."""
    return (now - last_dose).total_seconds() / 3600.0


def percentage_remaining(last_dose: datetime | None, now: datetime | None,
                         half_life_hours: float = VORTIOXETINE_HALF_LIFE_HOURS) -> DecayOutcome:
    """
    Percentage of a single dose still present at `now`.

    First-order elimination:
      N(t) = N0 * (1/2)^(t / t_half),  with N0 = 100 (%)

    Returns Remaining for doses at or before `now` and FutureDose otherwise.
    Raises ValueError when either timestamp is missing or the half-life is not positive.
    """
    if last_dose is None or now is None:
        raise ValueError("Dose time and current time cannot be None.")
    validate_positive("half_life_hours", half_life_hours)

    if last_dose > now:
        lead = elapsed_hours(now, last_dose)
        logger.debug("dose %s is %.3f h after %s", last_dose, lead, now)
        return FutureDose(lead_hours=lead)

    hours = elapsed_hours(last_dose, now)
    pct = 100.0 * 0.5 ** (hours / half_life_hours)
    logger.debug("%.3f h elapsed, t_half %.1f h -> %.6f %%", hours, half_life_hours, pct)
    return Remaining(percentage=pct, elapsed_hours=hours)