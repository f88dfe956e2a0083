"""Persistent JSON config helpers.

Stores mouse gesture thresholds and the split-pane divider position.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..mouse.handler import MouseSettings

logger = logging.getLogger(__name__)

APP_NAME = "lazydash"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged at debug level and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_int(value: object, default: int, minimum: int) -> int:
    """Accept plain ints ``>= minimum``; booleans and other types fall back."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum:
        return default
    return value


def load_mouse_settings() -> MouseSettings:
    """Build ``MouseSettings`` from the ``mouse`` config section.

    Each field is validated independently; invalid entries keep their default.
    """
    defaults = MouseSettings()
    section = load_config().get("mouse")
    if not isinstance(section, dict):
        return defaults

    default_ms = round(defaults.double_click_seconds * 1000)
    double_click_ms = _coerce_int(section.get("double_click_ms"), default_ms, 1)
    return MouseSettings(
        double_click_seconds=double_click_ms / 1000.0,
        double_click_distance=_coerce_int(
            section.get("double_click_distance"), defaults.double_click_distance, 0
        ),
        scroll_delta=_coerce_int(section.get("scroll_delta"), defaults.scroll_delta, 1),
        horizontal_scroll_delta=_coerce_int(
            section.get("horizontal_scroll_delta"), defaults.horizontal_scroll_delta, 1
        ),
    )


def load_left_pane_percent() -> float | None:
    """Read the divider position as a percentage in the open interval (0, 100)."""
    value = load_config().get("left_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def save_left_pane_percent(total_width: int, left_width: int) -> None:
    """Store the divider position as a bounded percentage.

    ``left_width / total_width`` is clamped to ``[1.0, 99.0]`` and rounded to
    two decimals before persisting.
    """
    if total_width <= 0:
        return
    percent = max(1.0, min(99.0, (left_width / total_width) * 100.0))
    config = load_config()
    config["left_pane_percent"] = round(percent, 2)
    save_config(config)
