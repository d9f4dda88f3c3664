from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass(frozen=True)
class ConversionConfig:
    """
    Configuration for tree conversion.

    Defaults live in config.yaml next to this module and reproduce the plain
    conversion behaviour: only the literal "Family" role marks a marriage and
    lookup misses are silent.

    Attributes:
        marriage_event_roles: Role labels that mark a family's marriage event.
        unknown_label: Fallback label for missing event/place/family types.
        report_lookup_misses: Record unresolved event/place handles in report.warnings.
    """
    marriage_event_roles: Tuple[str, ...] = ("Family",)
    unknown_label: str = "Unknown"
    report_lookup_misses: bool = False

    def __post_init__(self) -> None:
        roles = self.marriage_event_roles
        if isinstance(roles, str):
            roles = (roles,)
        object.__setattr__(self, 'marriage_event_roles', tuple(roles or ()))

    def is_marriage_role(self, role: Optional[str]) -> bool:
        return role is not None and role in self.marriage_event_roles

    @classmethod
    def default(cls) -> ConversionConfig:
        """
        Load the packaged default configuration.

        Returns:
            ConversionConfig: Configuration read from the bundled config.yaml.
        """
        return cls.from_yaml(DEFAULT_CONFIG_PATH)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> ConversionConfig:
        """
        Load configuration from a specific YAML file.

        Keys missing from the file keep their defaults.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            ConversionConfig: Configuration instance loaded from YAML.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid YAML or not a mapping.
        """
        yaml_path = Path(yaml_path) if yaml_path else None
        if not yaml_path or not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Error parsing {yaml_path}: expected a mapping at top level")

        logger.debug(f"Loaded conversion config from {yaml_path}")
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> ConversionConfig:
        """
        Create configuration from a dictionary.

        Args:
            config_dict (Dict[str, Any]): Dictionary with configuration values.

        Returns:
            ConversionConfig: Configuration instance.
        """
        known = {f.name for f in fields(cls)}
        for key in config_dict:
            if key not in known:
                logger.warning(f"Ignoring unknown conversion config key '{key}'")
        valid_fields = {k: v for k, v in config_dict.items() if k in known}
        return cls(**valid_fields)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'marriage_event_roles': list(self.marriage_event_roles),
            'unknown_label': self.unknown_label,
            'report_lookup_misses': self.report_lookup_misses,
        }
