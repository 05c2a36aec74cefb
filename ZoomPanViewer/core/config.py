"""Viewer configuration.

The framing constants from :mod:`ZoomPanViewer.core.constants` are the
defaults of :class:`ViewerConfig`. A configuration can be overridden from a
JSON file whose top-level object uses the field names as keys:

    {
        "min_scale": 0.25,
        "max_scale": 2.0,
        "start_zoom": 1.0,
        "start_offset_y": 0
    }
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Union

from .constants import (
    MIN_SCALE,
    MAX_SCALE,
    START_ZOOM,
    START_OFFSET_X,
    START_OFFSET_Y,
    WHEEL_ZOOM_STEP,
    BUTTON_ZOOM_STEP,
)


class ConfigError(ValueError):
    """Raised when a viewer configuration is malformed or out of range."""


@dataclass(frozen=True)
class ViewerConfig:
    """Zoom range, initial framing and zoom steps of the viewer.

    Attributes:
        min_scale: Smallest allowed scale
        max_scale: Largest allowed scale
        start_zoom: Multiplier applied on top of the contain-fit scale
        start_offset_x: Horizontal pixel nudge applied after centering
        start_offset_y: Vertical pixel nudge applied after centering
        wheel_zoom_step: Factor applied per wheel notch
        button_zoom_step: Factor applied per zoom button click
    """

    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    start_zoom: float = START_ZOOM
    start_offset_x: float = START_OFFSET_X
    start_offset_y: float = START_OFFSET_Y
    wheel_zoom_step: float = WHEEL_ZOOM_STEP
    button_zoom_step: float = BUTTON_ZOOM_STEP

    def validate(self) -> "ViewerConfig":
        """Check value ranges and return self.

        Raises:
            ConfigError: If any value is out of range
        """
        if not self.min_scale > 0:
            raise ConfigError(f"min_scale must be positive, got {self.min_scale}")
        if self.max_scale < self.min_scale:
            raise ConfigError(f"max_scale ({self.max_scale}) must not be below min_scale ({self.min_scale})")
        if not self.start_zoom > 0:
            raise ConfigError(f"start_zoom must be positive, got {self.start_zoom}")
        if not self.wheel_zoom_step > 1:
            raise ConfigError(f"wheel_zoom_step must be greater than 1, got {self.wheel_zoom_step}")
        if not self.button_zoom_step > 1:
            raise ConfigError(f"button_zoom_step must be greater than 1, got {self.button_zoom_step}")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ViewerConfig":
        """Build a validated config from a mapping, defaults filling the gaps.

        Raises:
            ConfigError: On unknown keys, non-numeric values or invalid ranges
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number, got {value!r}")
            values[key] = float(value)
        return cls(**values).validate()

    def with_overrides(self, **overrides) -> "ViewerConfig":
        """Return a validated copy with some fields replaced."""
        try:
            updated = replace(self, **overrides)
        except TypeError as e:
            raise ConfigError(str(e)) from e
        return updated.validate()


def load_config(path: Union[str, Path]) -> ViewerConfig:
    """Load a ViewerConfig from a JSON file.

    Args:
        path: Path to a JSON file containing a single object

    Returns:
        Validated ViewerConfig

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid
    """
    path_obj = Path(path)
    try:
        with path_obj.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path_obj}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path_obj}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path_obj} must contain a JSON object")
    return ViewerConfig.from_dict(data)
