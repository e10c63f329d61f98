"""core.config
---------------

Configuration loader/manager for geobuffer. Provides a central API for
loading settings from YAML/TOML/JSON and retrieving them via
:py:meth:`ConfigManager.get`, plus :class:`BufferOptions`, the resolved
per-call parameters handed to the buffering routines.
"""

import os
import json
from dataclasses import dataclass

import yaml
import toml

from geobuffer.core.errors import InvalidArgument
from geobuffer.geo.measure import FACTORS


class ConfigValidationError(Exception):
    """Raised when configuration loading or validation fails."""


class ConfigManager:
    """
    Loads and manages configuration from file or defaults.
    """

    SUPPORTED_INPUT_FORMATS: tuple[str, ...] = (
        ".geojson",
        ".json",
        ".shp",
        ".gpkg",
    )

    DEFAULT_RESOLUTION: int = 64
    MIN_RESOLUTION: int = 3
    DEFAULT_UNITS: str = "kilometers"

    def __init__(self, config_path=None):
        self.config = {
            "default_resolution": self.DEFAULT_RESOLUTION,
            "default_units": self.DEFAULT_UNITS,
        }
        self.supported_input_formats = list(self.SUPPORTED_INPUT_FORMATS)
        if config_path:
            self.load(config_path)

    def load(self, path: str) -> None:
        """
        Load configuration from a file (YAML, TOML, or JSON).
        Overwrites existing keys in self.config.
        """
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path, "r", encoding="utf-8") as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                elif ext == ".toml":
                    data = toml.load(f)
                elif ext == ".json":
                    data = json.load(f)
                else:
                    raise ConfigValidationError(f"Unsupported config format: {ext}")
        except ConfigValidationError:
            raise
        except Exception as e:
            raise ConfigValidationError(
                f"Failed to load config from {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigValidationError(f"Config file {path} did not produce a dict")
        self.config.update(data)

    def get(self, key, default=None):
        """
        Retrieve a configuration value by key, or return `default` if not present.
        Falls back to instance attributes such as `supported_input_formats`.
        """
        if key in self.config:
            return self.config.get(key, default)
        if hasattr(self, key):
            return getattr(self, key)
        return default

    def merge(self, other: "ConfigManager") -> None:
        """
        Merge another ConfigManager into this one.
        Values in other.config override this.config.
        """
        if not isinstance(other, ConfigManager):
            raise TypeError("Can only merge ConfigManager instances")
        self.config.update(other.config)
        self.supported_input_formats = list(
            dict.fromkeys(self.supported_input_formats + other.supported_input_formats)
        )


@dataclass(frozen=True)
class BufferOptions:
    """Validated radius, units and resolution for one buffer call."""

    radius: float
    units: str = ConfigManager.DEFAULT_UNITS
    resolution: int = ConfigManager.DEFAULT_RESOLUTION

    @classmethod
    def resolve(
        cls,
        radius: float | None,
        units: str | None = None,
        resolution: int | None = None,
        config: ConfigManager | None = None,
    ) -> "BufferOptions":
        """
        Apply defaults and validate the arguments of a buffer call.

        A missing radius is an error while zero is a valid radius. A falsy
        resolution (``None`` or ``0``) means "use the configured default".
        """
        if radius is None:
            raise InvalidArgument("radius is required")
        cfg = config or ConfigManager()

        units = units or cfg.get("default_units", ConfigManager.DEFAULT_UNITS)
        if units not in FACTORS:
            raise InvalidArgument(
                f"Unknown units '{units}'. Choose from: {sorted(FACTORS)}"
            )

        resolution = resolution or cfg.get(
            "default_resolution", ConfigManager.DEFAULT_RESOLUTION
        )
        if isinstance(resolution, bool) or not isinstance(resolution, int):
            raise InvalidArgument(f"resolution must be an integer, got {resolution!r}")
        if resolution < ConfigManager.MIN_RESOLUTION:
            raise InvalidArgument(
                f"resolution must be at least {ConfigManager.MIN_RESOLUTION}, "
                f"got {resolution}"
            )

        return cls(radius=radius, units=units, resolution=resolution)
