"""Runtime settings read from the environment.

Entry points call ``load_dotenv()`` first so a local ``.env`` file can
provide these values.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from worldline.i18n import SUPPORTED_LOCALES, normalize_locale
from worldline.models import CMBReference

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Invalid environment setting."""


@dataclass(frozen=True)
class Settings:
    locale: str = "en"
    cmb_reference: CMBReference = CMBReference.SSB
    uncertainty_threshold: float = 1e-3  # Relative sigma/value, CMB frame only
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from WORLDLINE_* environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigError: If a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ

    raw_locale = env.get("WORLDLINE_LOCALE", "en")
    locale = normalize_locale(raw_locale)
    if raw_locale and locale == "en" and not raw_locale.lower().startswith("en"):
        logger.warning(
            "Unsupported locale %r, using 'en' (supported: %s)",
            raw_locale,
            ", ".join(SUPPORTED_LOCALES),
        )

    raw_reference = env.get("WORLDLINE_CMB_REFERENCE", CMBReference.SSB.value)
    try:
        reference = CMBReference(raw_reference.strip().lower())
    except ValueError as e:
        raise ConfigError(
            f"WORLDLINE_CMB_REFERENCE must be 'ssb' or 'local-group', got {raw_reference!r}"
        ) from e

    raw_threshold = env.get("WORLDLINE_UNCERTAINTY_THRESHOLD", "1e-3")
    try:
        threshold = float(raw_threshold)
    except ValueError as e:
        raise ConfigError(
            f"WORLDLINE_UNCERTAINTY_THRESHOLD must be a number, got {raw_threshold!r}"
        ) from e
    if not threshold > 0:
        raise ConfigError(
            f"WORLDLINE_UNCERTAINTY_THRESHOLD must be positive, got {threshold}"
        )

    log_level = env.get("WORLDLINE_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"WORLDLINE_LOG_LEVEL must be one of {_LOG_LEVELS}")

    settings = Settings(
        locale=locale,
        cmb_reference=reference,
        uncertainty_threshold=threshold,
        log_level=log_level,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
