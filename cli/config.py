"""Configuration management for the binsplit CLI."""

import json
import os
import shutil
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_CHUNK_SIZE, DEFAULT_PREFIX
from common.logging_config import get_logger
from cli.constants import CONFIG_DIR_NAME, CONFIG_ENV_VAR, CONFIG_FILE_NAME

logger = get_logger(__name__)


def default_config_path() -> Path:
    """
    Get the config file location.

    Returns:
        $BINSPLIT_CONFIG if set, else ~/.binsplit/config.json
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class Config:
    """Manages CLI defaults stored in a JSON file."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.binsplit/config.json)
        """
        self.config_path = Path(config_path) if config_path is not None else default_config_path()
        self.data = self._load()

    @staticmethod
    def defaults() -> dict:
        """Default settings, with environment overrides applied."""
        return {
            "chunk_size": os.environ.get("BINSPLIT_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            "prefix": os.environ.get("BINSPLIT_PREFIX", DEFAULT_PREFIX),
        }

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create config directory {self.config_path.parent}: {e}")
            return self.defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root must be a JSON object")
                config = self.defaults()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                logger.warning(f"Ignoring unreadable config file {self.config_path}: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Cannot back up config file to {backup_path}: {copy_error}")
                return self.defaults()
        else:
            config = self.defaults()
            self._write(config)
            return config

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning(f"Cannot write config file {self.config_path}: {e}")

    def get_chunk_size(self) -> str:
        """
        Get default chunk size expression.

        Returns:
            Size string such as "1MB"
        """
        return str(self.data.get('chunk_size', DEFAULT_CHUNK_SIZE))

    def get_prefix(self) -> str:
        """
        Get default chunk file name prefix.

        Returns:
            Prefix string such as "chunk_"
        """
        return str(self.data.get('prefix', DEFAULT_PREFIX))
