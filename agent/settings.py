# agent/settings.py
# ------------------------------------------------------------
# Settings & logging
# Everything is read from the environment at call time, so a
# test (or a redeploy) can change it without re-importing.
#   APP_LOG_LEVEL            DEBUG / INFO / WARNING ...  (default INFO)
#   DIAGNOSIS_DELAY_SECONDS  simulated "thinking" time  (default 1.5)
# ------------------------------------------------------------

import logging
import os

logger = logging.getLogger(__name__)

# How many ranked diagnoses the screen ever shows
MAX_RESULTS = 5

DEFAULT_DELAY_SECONDS = 1.5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_log_level() -> int:
    name = os.getenv("APP_LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def get_diagnosis_delay() -> float:
    """Seconds to wait before showing results. Bad values fall back to the default."""
    raw = os.getenv("DIAGNOSIS_DELAY_SECONDS")
    if raw is None or not raw.strip():
        return DEFAULT_DELAY_SECONDS
    try:
        delay = float(raw)
    except ValueError:
        logger.warning("Invalid DIAGNOSIS_DELAY_SECONDS=%r, using %.1f", raw, DEFAULT_DELAY_SECONDS)
        return DEFAULT_DELAY_SECONDS
    return max(delay, 0.0)


def configure_logging():
    # basicConfig is a no-op once the root logger has handlers (Streamlit reruns)
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
