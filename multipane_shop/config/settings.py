# multipane_shop/config/settings.py

"""Central configuration for the multipane_shop browser."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from multipane_shop.services.presentation import Orientation

load_dotenv()

logger = logging.getLogger("multipane_shop.settings")


class Settings:
    """Central configuration for the multipane_shop browser."""

    # --- Display ---
    APP_TITLE: str = "Multi-Pane Shopping"
    CELL_ASPECT_RATIO: float = 2.0      # Terminal cell height / width

    # --- Orientation override ---
    ORIENTATION_ENV_VAR: str = "MULTIPANE_SHOP_ORIENTATION"
    ORIENTATION_CHOICES: list[str] = ["auto", "landscape", "portrait"]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"

    @classmethod
    def orientation_override(cls) -> Orientation | None:
        """Return the orientation forced through the environment, if any."""
        raw = os.getenv(cls.ORIENTATION_ENV_VAR, "auto")
        return parse_orientation(raw)


def parse_orientation(raw: str) -> Orientation | None:
    """Map an ``auto``/``landscape``/``portrait`` choice to an Orientation.

    ``auto`` (and anything unrecognised) yields ``None``, meaning the
    terminal size decides.
    """
    value = raw.strip().lower()
    if value == "landscape":
        return Orientation.LANDSCAPE
    if value == "portrait":
        return Orientation.PORTRAIT
    if value not in ("", "auto"):
        logger.warning(
            "Ignoring unknown orientation override '%s' (expected one of %s)",
            raw,
            ", ".join(Settings.ORIENTATION_CHOICES),
        )
    return None
