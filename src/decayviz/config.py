# src/decayviz/config.py
from decayengine.calculator import VORTIOXETINE_HALF_LIFE_HOURS
from decayengine.types import Compound

# The tracked compound is compiled in; there is no UI to change it.
COMPOUND = Compound(name="Vortioxetine", half_life_hours=VORTIOXETINE_HALF_LIFE_HOURS)

WINDOW_TITLE = f"{COMPOUND.name} Tracker"

# QSettings scope (per user) and the single persisted key
SETTINGS_ORGANIZATION = "DoseDecay"
SETTINGS_APPLICATION = "VortioxetineTracker"
PREF_LAST_DOSE_TIME = "lastDoseTime"

# Results below this percentage are reported as negligible
NEGLIGIBLE_PERCENT = 0.01

# Status bar reports when the level drops under this percentage
REPORT_BELOW_PERCENT = 1.0

LOG_LEVEL_ENV = "DOSE_DECAY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
