"""
Configuration Service

Loads plan rule overrides from YAML files.
Allows changing business rules without code changes.

Usage:
    rules = ConfigService.get_rules()

    # Single value
    cap = ConfigService.get("plan_rules.beginner_caps.max_weekly_mileage")

    # Reload config without restart
    ConfigService.reload()
"""

import copy
import logging
from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .constants import PLAN_RULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanRules:
    """Resolved numeric rules consumed by the generator components."""
    beginner_max_weekly_mileage: float
    beginner_weekly_workouts: int
    beginner_weekly_running_days: int

    beginner_starting_ratio: float
    beginner_starting_ceiling: float
    intermediate_starting_ratio: float
    advanced_starting_ratio: float

    base_fraction: float
    peak_fraction: float

    buildup_fraction: float
    taper_fraction: float
    taper_reduction: float

    long_run_fraction: float
    beginner_long_run_fraction: float
    quality_fraction: float
    min_distance: int

    min_running_days: int
    max_running_days: int

    @classmethod
    def from_config(cls, rules: Dict[str, Any]) -> "PlanRules":
        caps = rules["beginner_caps"]
        starting = rules["starting_mileage"]
        phases = rules["phases"]
        curve = rules["mileage_curve"]
        workouts = rules["workouts"]
        days = rules["running_days"]
        return cls(
            beginner_max_weekly_mileage=caps["max_weekly_mileage"],
            beginner_weekly_workouts=caps["weekly_workouts"],
            beginner_weekly_running_days=caps["weekly_running_days"],
            beginner_starting_ratio=starting["beginner_ratio"],
            beginner_starting_ceiling=starting["beginner_ceiling"],
            intermediate_starting_ratio=starting["intermediate_ratio"],
            advanced_starting_ratio=starting["advanced_ratio"],
            base_fraction=phases["base_fraction"],
            peak_fraction=phases["peak_fraction"],
            buildup_fraction=curve["buildup_fraction"],
            taper_fraction=curve["taper_fraction"],
            taper_reduction=curve["taper_reduction"],
            long_run_fraction=workouts["long_run_fraction"],
            beginner_long_run_fraction=workouts["beginner_long_run_fraction"],
            quality_fraction=workouts["quality_fraction"],
            min_distance=workouts["min_distance"],
            min_running_days=days["min"],
            max_running_days=days["max"],
        )


DEFAULT_RULES = PlanRules.from_config(PLAN_RULES)


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigService:
    """
    Load and cache plan configuration.

    Defaults come from constants.PLAN_RULES; plan_rules.yaml (if present)
    overrides any subset of them.
    """

    _config: Optional[Dict[str, Any]] = None
    _config_dir: Path = Path(__file__).parent.parent.parent / "config"

    CONFIG_FILES = ["plan_rules.yaml"]

    @classmethod
    def configure(cls, config_dir: Union[str, Path]):
        """Point the service at a different config directory and reload."""
        cls._config_dir = Path(config_dir)
        cls._config = None

    @classmethod
    def get(cls, key: str = None, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Dot-separated key (e.g., "plan_rules.workouts.quality_fraction")
            default: Default value if key not found

        Returns:
            Configuration value or entire config if no key provided
        """
        if cls._config is None:
            cls._load()

        if key is None:
            return cls._config

        try:
            return reduce(lambda d, k: d[k], key.split("."), cls._config)
        except (KeyError, TypeError):
            return default

    @classmethod
    def reload(cls):
        """Reload configuration from files."""
        cls._config = None
        cls._load()
        logger.info("Configuration reloaded")

    @classmethod
    def _load(cls):
        """Load defaults, then merge every config file found."""
        cls._config = {"plan_rules": copy.deepcopy(PLAN_RULES)}

        for filename in cls.CONFIG_FILES:
            filepath = cls._config_dir / filename
            if not filepath.exists():
                logger.debug(f"Config file not found: {filepath}")
                continue

            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Error loading {filename}: {e}")
                continue

            if isinstance(data, dict):
                namespace = filename.rsplit(".", 1)[0]
                _deep_merge(cls._config.setdefault(namespace, {}), data)
                logger.debug(f"Loaded config: {filename}")

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set a configuration value (in memory only).
        Useful for testing.
        """
        if cls._config is None:
            cls._load()

        keys = key.split(".")
        d = cls._config
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value

    @classmethod
    def get_rules(cls) -> PlanRules:
        """Resolve the current plan rules."""
        try:
            return PlanRules.from_config(cls.get("plan_rules"))
        except (KeyError, TypeError) as e:
            logger.error(f"Invalid plan_rules config, using defaults: {e}")
            return DEFAULT_RULES
