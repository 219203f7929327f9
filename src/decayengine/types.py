# src/decayengine/types.py
from dataclasses import dataclass
from typing import Union

# All durations are in HOURS. Timestamps are naive datetimes (local wall clock).

@dataclass(frozen=True)
class Compound:
    """
    A drug modeled with first-order elimination.

    name            : display name (e.g., "Vortioxetine")
    half_life_hours : elimination half-life, hours (must be > 0)
    """
    name: str
    half_life_hours: float


@dataclass(frozen=True)
class Remaining:
    """
    Valid result: the dose lies at or before the evaluation time.

    percentage    : modeled amount still present, in [0, 100] (0.0 only once the float underflows)
    elapsed_hours : fractional hours between dose and evaluation time
    """
    percentage: float
    elapsed_hours: float


@dataclass(frozen=True)
class FutureDose:
    """
    The dose timestamp lies after the evaluation time; no percentage exists.

    lead_hours : how far in the future the dose is, hours (> 0)
    """
    lead_hours: float


DecayOutcome = Union[Remaining, FutureDose]
