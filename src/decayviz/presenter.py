# src/decayviz/presenter.py
"""
GUI-free half of the tracker window.

TrackerPresenter owns the application state (field text, last status, last outcome)
and turns "Set to Now" / "Calculate" events into StatusMessages. The window only
renders what comes back, so everything here runs without a display.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Literal

from decayengine.calculator import percentage_remaining
from decayengine.curves import hours_until
from decayengine.timefmt import TIMESTAMP_PATTERN, TimestampFormatError, format_timestamp, parse_timestamp
from decayengine.types import Compound, DecayOutcome, FutureDose, Remaining

from .config import COMPOUND, NEGLIGIBLE_PERCENT, PREF_LAST_DOSE_TIME, REPORT_BELOW_PERCENT
from .settings import SettingsStore

logger = logging.getLogger(__name__)

# idle: nothing calculated yet, prompt: waiting for input, error: rejected input, result: a percentage
Severity = Literal["idle", "prompt", "error", "result"]


@dataclass(frozen=True)
class StatusMessage:
    text: str
    severity: Severity


INITIAL_STATUS = StatusMessage("Result: - %", "idle")
EMPTY_INPUT = StatusMessage("Result: Please enter dose time.", "prompt")
INVALID_FORMAT = StatusMessage(f"Result: Invalid date/time format. Use {TIMESTAMP_PATTERN}", "error")
FUTURE_DOSE = StatusMessage("Result: Dose time cannot be in the future.", "error")
NEGLIGIBLE = StatusMessage(f"Result: < {NEGLIGIBLE_PERCENT} % (Essentially negligible)", "result")


@dataclass
class TrackerState:
    dose_text: str = ""
    status: StatusMessage = INITIAL_STATUS
    last_dose: datetime | None = None
    outcome: DecayOutcome | None = None


def describe_outcome(outcome: DecayOutcome) -> StatusMessage:
    """Map a calculator outcome to the text shown in the result label."""
    if isinstance(outcome, FutureDose):
        return FUTURE_DOSE
    if outcome.percentage < NEGLIGIBLE_PERCENT:
        return NEGLIGIBLE
    return StatusMessage(f"Result: {outcome.percentage:.2f} % remaining.", "result")


class TrackerPresenter:
    def __init__(self, store: SettingsStore, compound: Compound = COMPOUND,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.compound = compound
        self.clock = clock
        self.state = TrackerState(dose_text=store.get(PREF_LAST_DOSE_TIME) or "")

    def half_life_text(self) -> str:
        return f"Using {self.compound.name} half-life: {self.compound.half_life_hours} hours."

    def set_to_now(self) -> str:
        """Overwrite the field with the current time; returns the new field text."""
        self.state.dose_text = format_timestamp(self.clock())
        return self.state.dose_text

    def calculate(self, text: str | None = None) -> StatusMessage:
        """
        Validate the field, persist it once it parses, then compute and describe the result.
        Every failure ends up as a StatusMessage; nothing is raised to the event loop.
        """
        if text is not None:
            self.state.dose_text = text
        text = self.state.dose_text
        self.state.last_dose = None
        self.state.outcome = None

        if not text.strip():
            return self._show(EMPTY_INPUT)

        try:
            last_dose = parse_timestamp(text)
        except TimestampFormatError as e:
            logger.warning("rejected dose time: %s", e)
            return self._show(INVALID_FORMAT)

        # saved before the future check so the user can fix a typo next session
        self.store.set(PREF_LAST_DOSE_TIME, text)

        try:
            outcome = percentage_remaining(last_dose, self.clock(), self.compound.half_life_hours)
        except ValueError as e:
            logger.error("calculation failed: %s", e)
            return self._show(StatusMessage(f"Result: Error - {e}", "error"))

        self.state.last_dose = last_dose
        self.state.outcome = outcome
        return self._show(describe_outcome(outcome))

    def threshold_report(self, percent: float = REPORT_BELOW_PERCENT) -> str | None:
        """
        One-line summary for the status bar, e.g. when the level drops below 1 %.
        None unless the last calculation produced a percentage.
        """
        outcome = self.state.outcome
        if not isinstance(outcome, Remaining) or self.state.last_dose is None:
            return None
        t_cross = hours_until(percent, self.compound.half_life_hours)
        if outcome.elapsed_hours >= t_cross:
            return f"{outcome.elapsed_hours:.1f} h since dose | already below {percent:g} %"
        when = self.state.last_dose + timedelta(hours=t_cross)
        return (f"{outcome.elapsed_hours:.1f} h since dose | below {percent:g} % "
                f"in {t_cross - outcome.elapsed_hours:.1f} h ({format_timestamp(when)})")

    def _show(self, status: StatusMessage) -> StatusMessage:
        self.state.status = status
        return status
