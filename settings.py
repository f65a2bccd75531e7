"""
settings.py

Persistent settings management for casteljau.

Handles cross-platform settings storage using TOML format with platformdirs
for proper user config directory detection.

Settings file location:
    - Windows: %APPDATA%/casteljau/settings.toml
    - macOS: ~/Library/Application Support/casteljau/settings.toml
    - Linux: ~/.config/casteljau/settings.toml

Only appearance and startup behavior live here. Curve state (control point
positions, t) is never persisted.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

# TOML reading - use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

APP_NAME = "casteljau"

log = logging.getLogger(__name__)

# Global settings manager instance (singleton)
_settings_manager: Optional["SettingsManager"] = None


def get_settings() -> "SettingsManager":
    """Get the global settings manager instance.

    Returns:
        The singleton SettingsManager instance.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


# =============================================================================
# Curve Settings
# =============================================================================

@dataclass
class CurveSettings:
    """Curve and control polygon appearance.

    Defaults:
        total_steps: 200
        curve_color: "#0000FF"
        curve_width: 5.0
        control_line_color: "#888888"
        control_line_width: 1.0
    """
    total_steps: int = 200                  # Default: 200 steps per sweep (t += 0.005)
    curve_color: str = "#0000FF"            # Default: blue
    curve_width: float = 5.0                # Default: 5 pixels
    control_line_color: str = "#888888"     # Default: gray
    control_line_width: float = 1.0         # Default: 1 pixel


@dataclass
class PointSettings:
    """Control point and marker appearance.

    Defaults:
        control_radius: 12.0
        marker_radius: 3.0
        default_color: "#E0E0E0"
        hover_color: "#6666AA"
        drag_color: "#0000FF"
        marker_color: "#000000"
        label_color: "#333333"
        label_font_family: "sans-serif"
        label_font_size: 24
    """
    control_radius: float = 12.0            # Default: 12 pixels
    marker_radius: float = 3.0              # Default: 3 pixels
    default_color: str = "#E0E0E0"          # Default: light gray
    hover_color: str = "#6666AA"            # Default: slate blue
    drag_color: str = "#0000FF"             # Default: blue
    marker_color: str = "#000000"           # Default: black
    label_color: str = "#333333"            # Default: dark gray
    label_font_family: str = "sans-serif"   # Default: "sans-serif"
    label_font_size: int = 24               # Default: 24 pixels


@dataclass
class OverlaySettings:
    """De Casteljau construction overlay appearance.

    Defaults:
        q_line_color: "#FF00FF"
        r_line_color: "#00FF00"
        line_width: 2.0
    """
    q_line_color: str = "#FF00FF"   # Default: magenta
    r_line_color: str = "#00FF00"   # Default: lime
    line_width: float = 2.0         # Default: 2 pixels


@dataclass
class AnimationSettings:
    """Frame driver settings.

    Defaults:
        frame_interval_ms: 16
        start_interpolating: False
        start_paused: False
    """
    frame_interval_ms: int = 16         # Default: 16 ms (~60 fps)
    start_interpolating: bool = False   # Default: overlay hidden
    start_paused: bool = False          # Default: running


# =============================================================================
# Main App Settings
# =============================================================================

@dataclass
class AppSettings:
    """Application settings with default values.

    Attributes:
        theme: The UI theme name (must match a key in styles.STYLES).
        curve: Curve appearance and step count.
        points: Control point and marker appearance.
        overlay: Construction overlay appearance.
        animation: Frame driver settings.
    """
    # UI Settings
    theme: str = "Tailwind"  # Default: "Tailwind"

    # Nested settings categories
    curve: CurveSettings = field(default_factory=CurveSettings)
    points: PointSettings = field(default_factory=PointSettings)
    overlay: OverlaySettings = field(default_factory=OverlaySettings)
    animation: AnimationSettings = field(default_factory=AnimationSettings)


# =============================================================================
# TOML value checking
# =============================================================================

def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        log.warning("Ignoring [%s]: expected a table, got %r", name, section)
        return {}
    return section


def _coerce(raw: Dict[str, Any], key: str, default: Any, section: str = "general") -> Any:
    """Return ``raw[key]`` converted to the type of ``default``, or ``default``.

    Booleans must be booleans. Integers accept integral floats. Numbers must
    be finite and positive. Strings must be non-empty.
    """
    if key not in raw:
        return default
    value = raw[key]
    kind = type(default)

    if kind is bool:
        if isinstance(value, bool):
            return value
    elif kind in (int, float) and isinstance(value, (int, float)) and not isinstance(value, bool):
        if kind is int and isinstance(value, float) and value.is_integer():
            value = int(value)
        if (kind is float or isinstance(value, int)) and math.isfinite(value) and value > 0:
            return kind(value)
    elif kind is str:
        if isinstance(value, str) and value.strip():
            return value

    log.warning("Invalid %s.%s = %r in settings; using default %r", section, key, value, default)
    return default


# =============================================================================
# Settings Manager
# =============================================================================

class SettingsManager:
    """Manages loading, saving, and accessing application settings.

    Settings are stored in a TOML file at the platform-appropriate location.
    If the settings file doesn't exist, defaults are used and the file is
    created on first save.

    Args:
        app_name: Application name used for the config directory.
        settings_dir: Override for the config directory (used by tests).
    """

    def __init__(self, app_name: str = APP_NAME, settings_dir: Optional[Path] = None):
        if settings_dir is None:
            settings_dir = Path(platformdirs.user_config_dir(app_name))
        self.settings_dir = Path(settings_dir)
        self.settings_file = self.settings_dir / "settings.toml"
        self.settings = self.load()
        self._needs_save = not self.settings_file.exists()  # Save if file didn't exist

    def ensure_file_complete(self) -> None:
        """Ensure settings file exists with all sections. Call once at startup."""
        if self._needs_save or not self.settings_file.exists():
            self.save()
            self._needs_save = False

    def load(self) -> AppSettings:
        """Load settings from the TOML file.

        Returns:
            AppSettings instance with values from file or defaults if file
            doesn't exist or is invalid.
        """
        if not self.settings_file.exists():
            return AppSettings()

        try:
            with open(self.settings_file, "rb") as f:
                data = tomllib.load(f)

            return self._parse_toml(data)
        except (OSError, tomllib.TOMLDecodeError, AttributeError, TypeError):
            # If file is corrupted or invalid, return defaults
            return AppSettings()

    def _parse_toml(self, data: Dict[str, Any]) -> AppSettings:
        """Parse TOML data into AppSettings.

        Each known key is checked against the type of its default. Values of
        the wrong type, non-positive numbers and empty strings are replaced
        by the default, so a hand-edited file can never stop the app from
        starting. Unknown keys are ignored.

        Args:
            data: Parsed TOML dictionary.

        Returns:
            AppSettings instance populated from TOML data.
        """
        settings = AppSettings()

        # General section
        general = _section(data, "general")
        settings.theme = _coerce(general, "theme", settings.theme)

        # Nested sections share the same field-by-field treatment
        for name in ("curve", "points", "overlay", "animation"):
            target = getattr(settings, name)
            raw = _section(data, name)
            for f in fields(target):
                setattr(target, f.name, _coerce(raw, f.name, getattr(target, f.name), name))

        return settings

    def save(self) -> None:
        """Save current settings to the TOML file.

        Creates the settings directory if it doesn't exist.
        """
        self.settings_dir.mkdir(parents=True, exist_ok=True)

        data = self._to_toml_dict()

        with open(self.settings_file, "wb") as f:
            tomli_w.dump(data, f)

    def _to_toml_dict(self) -> Dict[str, Any]:
        """Convert settings to a TOML-compatible dictionary structure.

        Returns:
            Dictionary organized by TOML sections.
        """
        s = self.settings
        return {
            "general": {
                "theme": s.theme,
            },
            "curve": {
                "total_steps": s.curve.total_steps,
                "curve_color": s.curve.curve_color,
                "curve_width": s.curve.curve_width,
                "control_line_color": s.curve.control_line_color,
                "control_line_width": s.curve.control_line_width,
            },
            "points": {
                "control_radius": s.points.control_radius,
                "marker_radius": s.points.marker_radius,
                "default_color": s.points.default_color,
                "hover_color": s.points.hover_color,
                "drag_color": s.points.drag_color,
                "marker_color": s.points.marker_color,
                "label_color": s.points.label_color,
                "label_font_family": s.points.label_font_family,
                "label_font_size": s.points.label_font_size,
            },
            "overlay": {
                "q_line_color": s.overlay.q_line_color,
                "r_line_color": s.overlay.r_line_color,
                "line_width": s.overlay.line_width,
            },
            "animation": {
                "frame_interval_ms": s.animation.frame_interval_ms,
                "start_interpolating": s.animation.start_interpolating,
                "start_paused": s.animation.start_paused,
            },
        }

    def to_toml(self) -> str:
        """Convert current settings to a TOML-formatted string."""
        return tomli_w.dumps(self._to_toml_dict())

    def get_settings_path(self) -> Path:
        """Get the path to the settings file."""
        return self.settings_file
