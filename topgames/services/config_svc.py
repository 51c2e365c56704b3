#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from built-in defaults, YAML files and env vars
#  - Caches composed config
#  - Builds validated layout settings at the service boundary
# ======================================================================

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from topgames.components.layout.section_composer_comp import validate_slot_table
from topgames.components.layout.tier_classifier_comp import parse_tier, validate_breakpoints
from topgames.components.scheduling.frame_scheduler_comp import DEFAULT_FRAME_INTERVAL_S
from topgames.helpers.dto.layout_dto import LayoutConfig, LayoutTier, TierBreakpoints
from topgames.helpers.exceptions import LayoutConfigurationError

ENV_PREFIX = "TOPGAMES_"
SYSTEM_CONFIG_PATH = "/etc/topgames/config.yaml"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, config_path: str | None = None, overrides: dict[str, Any] | None = None) -> None:
        """
        Args:
            config_path: Extra YAML file merged after the standard locations
            overrides: Values merged after all YAML files, before env vars
        """
        self._config_path = config_path
        self._overrides = overrides
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("layout.large_min_width")
            800
            >>> service.get("layout.missing", 3)
            3
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Boundary builders
    # ----------------------------------------------------------------------

    def make_layout_config(self) -> LayoutConfig:
        """
        Build validated layout settings from the current configuration.

        Raises:
            LayoutConfigurationError: If breakpoints or the slot table are unusable
        """
        layout = self.get("layout", {})
        if not isinstance(layout, dict):
            raise LayoutConfigurationError(f"'layout' config must be a mapping, got {type(layout).__name__}")

        breakpoints = validate_breakpoints(
            TierBreakpoints(
                large_min_width=layout.get("large_min_width"),
                medium_min_width=layout.get("medium_min_width"),
            )
        )
        slots = validate_slot_table(self._parse_slot_table(layout.get("slots_above_banner")))
        return LayoutConfig(breakpoints=breakpoints, slots_above_banner=slots)

    def frame_interval_s(self) -> float:
        """Interval between frames for the asyncio frame clock."""
        value = self.get("scheduler.frame_interval_s", DEFAULT_FRAME_INTERVAL_S)
        try:
            interval = float(value)
        except (TypeError, ValueError) as e:
            raise LayoutConfigurationError(f"scheduler.frame_interval_s must be a number, got {value!r}") from e
        if interval <= 0:
            raise LayoutConfigurationError(f"scheduler.frame_interval_s must be positive, got {interval}")
        return interval

    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/topgames/config.yaml (if present)
          3) ./config/config.yaml (if present)
          4) $TOPGAMES_CONFIG_PATH (if set)
          5) config_path passed to the constructor
          6) overrides passed to the constructor
          7) Environment variables (TOPGAMES_<SECTION>_<KEY>)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(SYSTEM_CONFIG_PATH))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._config_path:
            self._deep_merge(cfg, self._load_yaml(self._config_path, required=True))

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "layout": {
                "large_min_width": 800,
                "medium_min_width": 600,
                "slots_above_banner": {"large": 2, "medium": 1, "small": 0},
            },
            "scheduler": {
                "frame_interval_s": DEFAULT_FRAME_INTERVAL_S,
            },
            "logging": {
                "level": "INFO",
            },
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str, required: bool = False) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if the file is absent.

        Raises:
            LayoutConfigurationError: If the file is unreadable or not a mapping,
                or if required and missing
        """
        if not path or not os.path.exists(path):
            if required:
                raise LayoutConfigurationError(f"Config file not found: {path}")
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LayoutConfigurationError(f"Failed to load config file {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise LayoutConfigurationError(f"Config file {path} must contain a mapping")
        self._logger.info("Loaded config file %s", path)
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          TOPGAMES_LAYOUT_LARGE_MIN_WIDTH=1024
          TOPGAMES_SCHEDULER_FRAME_INTERVAL_S=0.033
          TOPGAMES_LOGGING_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == f"{ENV_PREFIX}CONFIG_PATH":
                continue

            key = k[len(ENV_PREFIX) :].lower()
            parts = key.split("_", 1)
            if len(parts) == 1:
                continue
            section, field = parts
            if not isinstance(cfg.get(section), dict):
                self._logger.warning("Ignoring %s: unknown config section '%s'", k, section)
                continue

            cfg[section][field] = self._parse_scalar(v)

    @staticmethod
    def _parse_scalar(value: str) -> Any:
        lowered = value.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value

    @staticmethod
    def _parse_slot_table(raw: Any) -> dict[LayoutTier, int]:
        """Convert ``{"large": 2, ...}`` into a LayoutTier-keyed table."""
        if not isinstance(raw, Mapping):
            raise LayoutConfigurationError(f"layout.slots_above_banner must be a mapping, got {raw!r}")
        return {parse_tier(name): count for name, count in raw.items()}
