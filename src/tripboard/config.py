"""Default configuration values for TripBoard."""

from __future__ import annotations

from pathlib import Path
from typing import Final

# ---------------------------------------------------------------------------
# Busy gate timings
# ---------------------------------------------------------------------------

# Reactions that finish faster than the lower limit never freeze the UI.  Once
# the freeze is shown it stays up until the upper limit, measured from the
# moment ``block()`` was called, and is always released at that point even if
# ``unblock()`` never arrives.
BUSY_GATE_LOWER_LIMIT_MS: Final[int] = 350
BUSY_GATE_UPPER_LIMIT_MS: Final[int] = 1000

# ---------------------------------------------------------------------------
# UI interaction constants
# ---------------------------------------------------------------------------

SHAKE_DURATION_MS: Final[int] = 600
WINDOW_DEFAULT_SIZE: Final[tuple[int, int]] = (960, 720)

# ---------------------------------------------------------------------------
# In-memory API
# ---------------------------------------------------------------------------

API_LATENCY_MS: Final[int] = 200
API_FAILURE_RATE: Final[float] = 0.0

DATA_DIR: Final[Path] = Path(__file__).resolve().parent / "data"
SAMPLE_SEED_PATH: Final[Path] = DATA_DIR / "sample_trip.json"

SETTINGS_DIR_NAME: Final[str] = "tripboard"
SETTINGS_FILE_NAME: Final[str] = "settings.json"
