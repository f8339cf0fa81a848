# quadindex/config/config.py
"""Settings for the spatial index: defaults plus an optional YAML overlay."""

import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union
from . import defaults

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration values are invalid."""
    pass


def is_positive_int(value: Any) -> bool:
    """True for ints >= 1; bools are not counted as ints."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def is_depth_limit(value: Any) -> bool:
    """True for a non-negative int depth limit; bools are not counted as ints."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _overlay(target: dict, overrides: dict):
    """Copy ``overrides`` into ``target``, descending into nested sections."""
    for key, value in overrides.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _overlay(current, value)
        else:
            target[key] = value


class Config:
    """Configuration manager with YAML override support.

    Lookup order for the YAML file: the ``config_file`` argument, then
    ``$QUADINDEX_CONFIG``, then ``config.yml`` in the project root, the
    working directory or ``~/.quadindex``. Under pytest only an explicit
    argument is honoured.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        self.settings: Dict[str, Any] = {
            'quadtree': copy.deepcopy(defaults.QUADTREE),
            'logging': copy.deepcopy(defaults.LOGGING),
            'paths': copy.deepcopy(defaults.PATHS),
        }
        self.source: Optional[Path] = None

        path = Path(config_file) if config_file is not None else self._discover()
        if path is not None:
            self._apply_file(path)

        self._validate()

    def _discover(self) -> Optional[Path]:
        if os.environ.get('PYTEST_CURRENT_TEST') or os.environ.get('FORCE_TEST_MODE', '').lower() == 'true':
            return None

        if os.environ.get('QUADINDEX_CONFIG'):
            return Path(os.environ['QUADINDEX_CONFIG'])

        for candidate in (defaults.PROJECT_ROOT / 'config.yml',
                          Path.cwd() / 'config.yml',
                          Path.home() / '.quadindex' / 'config.yml'):
            if candidate.is_file():
                return candidate
        return None

    def _apply_file(self, path: Path):
        if not path.exists():
            logger.warning(f"Config file {path} not found - using defaults")
            return

        try:
            with open(path, 'r') as f:
                overrides = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Could not parse {path}: {e} - using defaults")
            return

        if overrides is None:
            return
        if not isinstance(overrides, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(overrides).__name__}")

        _overlay(self.settings, overrides)
        self.source = path
        logger.debug(f"Loaded configuration from {path}")

    def _validate(self):
        capacity = self.get('quadtree.node_capacity')
        if not is_positive_int(capacity):
            raise ConfigError(f"quadtree.node_capacity must be a positive integer, got {capacity!r}")

        max_depth = self.get('quadtree.max_depth')
        if max_depth is not None and not is_depth_limit(max_depth):
            raise ConfigError(f"quadtree.max_depth must be null or a non-negative integer, got {max_depth!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        node: Any = self.settings
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @property
    def quadtree(self) -> Dict[str, Any]:
        return self.settings['quadtree']

    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings['logging']

    @property
    def paths(self) -> Dict[str, Any]:
        return self.settings['paths']

# Global configuration instance
config = Config()
