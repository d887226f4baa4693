"""
Configuration Management System for the Crossword Master Dictionary Builder.

This module provides centralized configuration management for the dictionary build.
It loads parameters from lexicon_config.txt with type-safe parsing, hierarchical
fallbacks, and default values for every build parameter.

Key Features:
- Type-safe getters (string, int, bool, path)
- Hierarchical configuration: CLI args → Config file → Defaults
- Grouped accessors for build parameters and CLI defaults

Architecture:
- ConfigLoader: Main configuration management class
- Global config singleton via get_config()
- Automatic project root detection (searches upward for the config file)

File format:
    # comment
    KEY=value
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

__all__ = ["ConfigLoader", "get_config", "reload_config", "DEFAULT_CONFIG"]

DEFAULT_CONFIG_FILE = "lexicon_config.txt"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Input and output locations (relative paths resolve against the project root)
    "SOURCE_DIR": "database/new-crossword-generator/word-lists",
    "OUTPUT_FILE": "database/crossword-master.dict",
    # Admissible word lengths
    "MIN_WORD_LENGTH": 2,
    "MAX_WORD_LENGTH": 5,
    # Parsing
    "PARSE_WORKERS": 1,
    # Report
    "SAMPLE_SCORE_THRESHOLD": 75,
    "SAMPLES_PER_LENGTH": 10,
    "REGENERATE_COMMAND": "python build_master_dictionary.py",
    # Frequency list generation
    "WORD_LIST_DIR": "database",
    "FREQUENCY_OUTPUT_DIR": "database/word_frequencies",
}


class ConfigLoader:
    """
    Loads and manages configuration parameters for the dictionary build.

    Provides type-safe access to configuration values with defaults.
    """

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        """
        Initialize configuration loader.

        Args:
            config_file: Config file name searched upward from the package, or an
                explicit path to a config file
        """
        self.config_file = config_file
        self.config_path: Optional[Path] = None
        self.config: Dict[str, Any] = {}
        self._load_config()

    @property
    def base_dir(self) -> Path:
        """Directory that relative paths in the configuration resolve against."""
        if self.config_path is not None:
            return self.config_path.parent
        return Path.cwd()

    def _find_config_file(self) -> Optional[Path]:
        explicit = Path(self.config_file)
        if explicit.is_absolute() or explicit.parent != Path("."):
            return explicit if explicit.exists() else None

        # Search up the directory tree
        current_path = Path(__file__).parent
        for _ in range(5):
            potential_path = current_path / self.config_file
            if potential_path.exists():
                return potential_path
            current_path = current_path.parent
        return None

    def _load_config(self):
        """Load configuration from file."""
        config_path = self._find_config_file()

        if config_path is None:
            logger.warning(f"Config file {self.config_file} not found, using defaults")
            self._load_defaults()
            return

        self.config_path = config_path
        logger.info(f"Loading configuration from {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    # Skip comments and empty lines
                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        logger.warning(f"Invalid config line {line_num}: {line}")
                        continue

                    key, value = line.split("=", 1)
                    self.config[key.strip()] = self._parse_value(value.strip())

            logger.info(f"Loaded {len(self.config)} configuration parameters")

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load config: {e}")
            self._load_defaults()

    def _parse_value(self, value: str) -> Union[str, int, float, bool]:
        """Parse string value to appropriate Python type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        if value.replace(".", "").replace("-", "").isdigit():
            if "." in value:
                return float(value)
            else:
                return int(value)

        return value

    def _load_defaults(self):
        """Load default configuration values."""
        self.config = dict(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration parameter name
            default: Default value if key not found (falls back to DEFAULT_CONFIG)

        Returns:
            Configuration value or default
        """
        if key in self.config:
            return self.config[key]
        if default is not None:
            return default
        return DEFAULT_CONFIG.get(key)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return default

    def get_string(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_path(self, key: str, default: str = "") -> Path:
        """Get a path value, resolving relative paths against the config directory."""
        path = Path(self.get_string(key, default))
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def get_build_config(self) -> Dict[str, Any]:
        """Get master dictionary build parameters."""
        return {
            "source_dir": self.get_path("SOURCE_DIR"),
            "output_file": self.get_path("OUTPUT_FILE"),
            "min_length": self.get_int("MIN_WORD_LENGTH", 2),
            "max_length": self.get_int("MAX_WORD_LENGTH", 5),
            "parse_workers": self.get_int("PARSE_WORKERS", 1),
            "sample_threshold": self.get_int("SAMPLE_SCORE_THRESHOLD", 75),
            "samples_per_length": self.get_int("SAMPLES_PER_LENGTH", 10),
            "regenerate_command": self.get_string(
                "REGENERATE_COMMAND", "python build_master_dictionary.py"
            ),
        }

    def get_cli_defaults(self) -> Dict[str, Any]:
        """Get CLI default values."""
        build = self.get_build_config()
        return {
            "source_dir": str(build["source_dir"]),
            "output": str(build["output_file"]),
            "min_length": build["min_length"],
            "max_length": build["max_length"],
            "workers": build["parse_workers"],
            "word_list_dir": str(self.get_path("WORD_LIST_DIR")),
            "frequency_output_dir": str(self.get_path("FREQUENCY_OUTPUT_DIR")),
        }


# Global configuration instance
_config = None


def get_config() -> ConfigLoader:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = ConfigLoader()
    return _config


def reload_config(config_file: str = DEFAULT_CONFIG_FILE) -> ConfigLoader:
    """Reload configuration from file."""
    global _config
    _config = ConfigLoader(config_file)
    return _config
