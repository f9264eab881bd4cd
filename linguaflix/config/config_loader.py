"""
Configuration loader for Linguaflix

Handles loading and merging of YAML configuration files with environment variable overrides.
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List

logger = logging.getLogger(__name__)

ENV_PREFIX = 'LINGUAFLIX_'


class ConfigLoader:
    """
    Loads and manages configuration from YAML files with cascading priority:
    1. Default configuration (linguaflix/config/default.yaml)
    2. User configuration (config/config.yaml at project root)
    3. Environment variable overrides (LINGUAFLIX_SECTION_KEY format)
    """

    def __init__(self, user_config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize configuration loader

        Args:
            user_config_path: Path to user config file (default: config/config.yaml at project root)
            environ: Environment mapping used for overrides (default: os.environ)
        """
        self.package_dir = Path(__file__).parent
        self.default_config_path = self.package_dir / "default.yaml"

        if user_config_path:
            self.user_config_path = Path(user_config_path)
        else:
            project_root = self.package_dir.parent.parent
            self.user_config_path = project_root / "config" / "config.yaml"

        self.environ = os.environ if environ is None else environ
        self.config = self._load_config()

    def _load_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML file and return as dictionary"""
        if not file_path.exists():
            logger.debug(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error loading config from {file_path}: {e}")
            return {}

        return config or {}

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Recursively merge two configuration dictionaries

        Args:
            base: Base configuration
            override: Configuration to merge on top

        Returns:
            Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse an override as int, float, bool or keep it as a string"""
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        if value.lower() in ('true', 'yes'):
            return True
        if value.lower() in ('false', 'no'):
            return False
        return value

    @staticmethod
    def _resolve_path(config: Dict[str, Any], parts: List[str]) -> Optional[List[str]]:
        """
        Map underscore-separated parts onto existing config keys.

        Keys may contain underscores themselves (cache.default_ttl), so the
        longest existing key is matched at each level. An unmatched tail is
        kept as a single new key; at the top level its first part becomes a
        new section.
        """
        path = []
        current: Any = config
        index = 0

        while index < len(parts):
            if not isinstance(current, dict):
                return None

            for end in range(len(parts), index, -1):
                candidate = '_'.join(parts[index:end])
                if candidate in current:
                    path.append(candidate)
                    current = current[candidate]
                    index = end
                    break
            else:
                if not path and len(parts) - index > 1:
                    path.append(parts[index])
                    index += 1
                path.append('_'.join(parts[index:]))
                return path

        return path

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration

        Environment variables should be in format: LINGUAFLIX_SECTION_KEY
        Example: LINGUAFLIX_CACHE_DEFAULT_TTL=600

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with environment overrides applied
        """
        result = config.copy()

        for env_key, env_value in self.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            parts = env_key[len(ENV_PREFIX):].lower().split('_')
            if len(parts) < 2:
                continue

            path = self._resolve_path(result, parts)
            if not path or len(path) < 2:
                continue

            current = result
            for part in path[:-1]:
                nested = current.get(part)
                if nested is None:
                    nested = {}
                elif not isinstance(nested, dict):
                    break
                else:
                    nested = nested.copy()
                current[part] = nested
                current = nested
            else:
                current[path[-1]] = self._parse_env_value(env_value)
                logger.debug(f"Applied env override: {env_key} = {env_value}")

        return result

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with cascading priority

        Returns:
            Merged configuration dictionary
        """
        logger.debug(f"Loading default config from: {self.default_config_path}")
        config = self._load_yaml(self.default_config_path)

        if self.user_config_path.exists():
            logger.info(f"Loading user config from: {self.user_config_path}")
            config = self._merge_configs(config, self._load_yaml(self.user_config_path))
        else:
            logger.debug(f"No user config found at: {self.user_config_path}")

        return self._apply_env_overrides(config)

    def get(self, *keys, default: Any = None) -> Any:
        """
        Get configuration value using dot notation or multiple keys

        Examples:
            config.get('cache', 'default_ttl')
            config.get('cache.default_ttl')
            config.get('analysis', 'spacy_model', default='en_core_web_sm')
        """
        if len(keys) == 1 and isinstance(keys[0], str) and '.' in keys[0]:
            keys = keys[0].split('.')

        current = self.config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section, or an empty dict if not found"""
        return self.get(section, default={})

    def reload(self) -> None:
        """Reload configuration from files"""
        self.config = self._load_config()
        logger.info("Configuration reloaded")

    def __repr__(self) -> str:
        return f"ConfigLoader(default={self.default_config_path}, user={self.user_config_path})"
