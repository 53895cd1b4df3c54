"""Runtime settings read from the environment (and .env via python-dotenv)."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_LANGS = ("en", "ar")


@dataclass(frozen=True)
class Settings:
    lang: str = "en"
    latitude: float | None = None  # Fixed observer; None = ask the browser
    longitude: float | None = None
    solar_times: bool = False  # Use sun-position times instead of the fixed defaults
    log_level: str = "INFO"


def _float_env(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return None


def load_settings() -> Settings:
    """Build Settings from ADHAN_* environment variables.

    Call ``load_dotenv()`` first if a .env file should be honoured.
    """
    lang = os.environ.get("ADHAN_LANG", "en").strip().lower()
    if lang not in _LANGS:
        logger.warning("Unsupported ADHAN_LANG=%r, using 'en'", lang)
        lang = "en"
    return Settings(
        lang=lang,
        latitude=_float_env("ADHAN_LATITUDE"),
        longitude=_float_env("ADHAN_LONGITUDE"),
        solar_times=os.environ.get("ADHAN_SOLAR_TIMES", "").strip().lower() in _TRUE,
        log_level=os.environ.get("ADHAN_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the package logger."""
    pkg_logger = logging.getLogger("adhantimes")
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        pkg_logger.addHandler(handler)
    level_no = logging.getLevelName(level)
    pkg_logger.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
