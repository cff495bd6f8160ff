"""
Unified Configuration System
Loads and merges simulation configuration from multiple JSON files
Every simulation default (round count, stay flag, seed, rounding) lives here
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class UnifiedConfig:
    """
    Unified configuration system that loads from multiple JSON files and provides
    structured access to all configuration parameters
    """

    # Load order: base files first, environment overrides last
    CONFIG_FILES = [
        "base.json",
        "simulation.json",
    ]

    def __init__(self, config_path: Optional[str] = None, environment: str = "prod"):
        """
        Initialize UnifiedConfig with automatic path detection

        Args:
            config_path: Optional path to config file/directory. If None, auto-detects.
            environment: Environment to load (dev/prod/test). Default is "prod".
        """
        self.environment = environment
        self.config_path = config_path or self._find_config_path()

        if os.path.isfile(self.config_path):
            self.config = self._load_single_config()
            self.multi_file_mode = False
        else:
            self.config = self._load_multi_file_config()
            self.multi_file_mode = True

        self._cache_config_sections()

    def _find_config_path(self) -> str:
        """
        Auto-detect config file path relative to project root
        """
        current_path = Path(__file__).resolve()

        for parent in [current_path.parent] + list(current_path.parents):
            config_dir = parent / "config"
            if config_dir.is_dir() and (config_dir / "base.json").exists():
                return str(config_dir)

            config_file = parent / "config" / "default.json"
            if config_file.exists():
                return str(config_file)

        fallback_paths = [
            "config",
            "config/default.json",
            "../config",
            "../config/default.json",
        ]

        for path in fallback_paths:
            if os.path.exists(path):
                return path

        raise FileNotFoundError(
            "Could not find config directory or default.json config file. "
            "Please ensure config files exist in a 'config' directory."
        )

    def _load_single_config(self) -> Dict[str, Any]:
        """
        Load configuration from a single JSON file
        """
        try:
            with open(self.config_path, 'r') as f:
                config = json.load(f)

            logger.info(f"Loaded single-file configuration from: {self.config_path}")
            return config

        except FileNotFoundError:
            logger.error(f"Configuration file not found: {self.config_path}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file: {e}")
            raise

    def _load_multi_file_config(self) -> Dict[str, Any]:
        """
        Load configuration from multiple JSON files and merge them
        """
        config_dir = Path(self.config_path)
        merged_config = {}

        for config_file in self.CONFIG_FILES:
            file_path = config_dir / config_file
            if file_path.exists():
                self._deep_update(merged_config, self._read_json(file_path))
                logger.debug(f"Loaded config from: {file_path}")
            else:
                logger.warning(f"Config file not found: {file_path}")

        env_file = config_dir / "environments" / f"{self.environment}.json"
        if env_file.exists():
            self._deep_update(merged_config, self._read_json(env_file))
            logger.info(f"Applied {self.environment} environment overrides from: {env_file}")
        else:
            logger.info(f"No environment config found for: {self.environment}")

        if not merged_config:
            raise FileNotFoundError(
                f"No configuration files found in directory: {config_dir}"
            )

        logger.info(f"Loaded multi-file configuration from: {config_dir} (environment: {self.environment})")
        return merged_config

    @staticmethod
    def _read_json(file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, 'r') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {file_path}: {e}")
            raise

    def _deep_update(self, base_dict: Dict, update_dict: Dict):
        """
        Deep update nested dictionary
        """
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def _cache_config_sections(self):
        """
        Cache frequently accessed configuration sections
        """
        self.general = self.config.get('general', {})
        self.game = self.config.get('game', {})
        self.simulation = self.config.get('simulation', {})

    # ========================================
    # SECTION ACCESS METHODS
    # ========================================

    def get_section(self, section_name: str, default: Any = None) -> Any:
        """
        Get a configuration section by name

        Args:
            section_name: Name of the configuration section
            default: Default value if section not found

        Returns:
            Configuration section or default value
        """
        return self.config.get(section_name, default)

    def update_config(self, updates: Dict[str, Any]):
        """
        Update configuration with new values

        Args:
            updates: Dictionary of configuration updates
        """
        self._deep_update(self.config, updates)
        self._cache_config_sections()

    def get_config_info(self) -> Dict[str, Any]:
        """
        Get information about the current configuration setup
        """
        return {
            'config_path': self.config_path,
            'multi_file_mode': self.multi_file_mode,
            'environment': self.environment,
            'sections_loaded': list(self.config.keys()),
            'total_sections': len(self.config)
        }

    def validate_config(self) -> Dict[str, list]:
        """
        Validate configuration and return any issues found

        Returns:
            Dictionary with validation results
        """
        issues = {
            'missing_sections': [],
            'invalid_values': [],
            'warnings': []
        }

        for section in ['general', 'game', 'simulation']:
            if section not in self.config:
                issues['missing_sections'].append(section)

        seed = self.general.get('random_seed')
        if seed is None:
            issues['warnings'].append("No random_seed set - results may not be reproducible")
        elif isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            issues['invalid_values'].append(f"Invalid general.random_seed: {seed}")

        default_stay = self.game.get('default_stay')
        if default_stay is None:
            issues['missing_sections'].append("game.default_stay is required")
        elif not isinstance(default_stay, bool):
            issues['invalid_values'].append(f"Invalid game.default_stay: {default_stay}")

        default_rounds = self.simulation.get('default_rounds')
        if default_rounds is None:
            issues['missing_sections'].append("simulation.default_rounds is required")
        elif isinstance(default_rounds, bool) or not isinstance(default_rounds, int) or default_rounds <= 0:
            issues['invalid_values'].append(f"Invalid simulation.default_rounds: {default_rounds}")

        decimals = self.simulation.get('summary_decimals')
        if decimals is None:
            issues['missing_sections'].append("simulation.summary_decimals is required")
        elif isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            issues['invalid_values'].append(f"Invalid simulation.summary_decimals: {decimals}")

        log_every = self.simulation.get('log_every_n_rounds', 0)
        if isinstance(log_every, bool) or not isinstance(log_every, int) or log_every < 0:
            issues['invalid_values'].append(f"Invalid simulation.log_every_n_rounds: {log_every}")

        return issues

    def __repr__(self) -> str:
        mode = "multi-file" if self.multi_file_mode else "single-file"
        return f"UnifiedConfig(config_path='{self.config_path}', mode='{mode}', environment='{self.environment}', sections={len(self.config)})"
