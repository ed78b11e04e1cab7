"""
Configuration Loader - YAML Files to Validated PipelineConfig.

Every failure while loading (missing or unreadable file, malformed YAML,
values rejected by the models) surfaces as a ConfigurationError naming the
offending file, so callers handle one error type.

Profiles are YAML overlays stored as <base>/config/profiles/<name>.yaml and
deep-merged over the main file before validation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from number_pipeline.config.models import PipelineConfig
from number_pipeline.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROFILE_DIR = Path("config") / "profiles"


class ConfigLoader:
    """Loads pipeline configuration files relative to a base directory."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative config paths and profiles live in
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> PipelineConfig:
        """
        Load a configuration file, optionally overlaid with a profile.

        Args:
            config_path: YAML file, absolute or relative to the base path
            profile: Optional profile name to merge over the file

        Returns:
            Validated PipelineConfig

        Raises:
            ConfigurationError: If any file cannot be read or the result is invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        settings = self._read_mapping(path)
        if profile:
            profile_path = self._base_path / PROFILE_DIR / f"{profile}.yaml"
            if not profile_path.is_file():
                raise ConfigurationError(
                    f"Profile not found: {profile} ({profile_path})", profile_path
                )
            settings = _deep_merge(settings, self._read_mapping(profile_path))
            logger.debug(f"Merged profile {profile} over {path}")

        return self._validate(settings, path)

    def load_from_dict(self, settings: Dict[str, Any]) -> PipelineConfig:
        """
        Validate an in-memory configuration mapping.

        Raises:
            ConfigurationError: If the values are invalid
        """
        return self._validate(settings, None)

    def _read_mapping(self, path: Path) -> Dict[str, Any]:
        """Parse a YAML file whose root must be a mapping (empty file -> {})."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration not found: {path}", path) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration {path}: {e.strerror or e}", path
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed configuration {path}: {e}", path) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid configuration {path}: root must be a mapping", path
            )
        return data

    def _validate(self, settings: Dict[str, Any], path: Optional[Path]) -> PipelineConfig:
        try:
            return PipelineConfig.model_validate(settings)
        except ValidationError as e:
            source = path if path is not None else "<dict>"
            raise ConfigurationError(f"Invalid configuration {source}: {e}", path) from e


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return base with overlay merged in; nested mappings merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged
