"""
Loader settings
Loads and validates loader options from a YAML file using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger("InfiniteLoader.Settings")

DEFAULT_THRESHOLD = 10
DEFAULT_MINIMUM_BATCH_SIZE = 1


class LoaderSettings(BaseModel):
    """Options recognized by InfiniteLoader"""
    threshold: int = Field(
        default=DEFAULT_THRESHOLD,
        description="Items to scan beyond each side of the visible range"
    )
    minimum_batch_size: int = Field(
        default=DEFAULT_MINIMUM_BATCH_SIZE,
        description="Smallest number of items requested per load"
    )
    item_count: int = Field(
        default=0,
        description="Number of items in the list; valid indices are 0..item_count-1"
    )

    @field_validator('threshold')
    @classmethod
    def validate_threshold(cls, v: int) -> int:
        """Negative thresholds scan only the visible range"""
        if v < 0:
            logger.warning(f"threshold {v} is negative, using 0")
            return 0
        return v

    @field_validator('minimum_batch_size')
    @classmethod
    def validate_minimum_batch_size(cls, v: int) -> int:
        """Batches hold at least one item"""
        if v <= 0:
            logger.warning(f"minimum_batch_size {v} is not positive, using 1")
            return 1
        return v

    @field_validator('item_count')
    @classmethod
    def validate_item_count(cls, v: int) -> int:
        if v < 0:
            logger.warning(f"item_count {v} is negative, using 0")
            return 0
        return v


class Settings(BaseModel):
    """Main settings model"""
    loader: LoaderSettings = Field(default_factory=LoaderSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to the YAML settings file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing settings YAML: {e}")
            return Settings()

        if not isinstance(config_data, dict):
            logger.info("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(
            f"  - threshold: {settings.loader.threshold}, "
            f"minimum_batch_size: {settings.loader.minimum_batch_size}"
        )
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def loader(self) -> LoaderSettings:
        return self.settings.loader

    @property
    def threshold(self) -> int:
        """Get the overscan threshold setting"""
        return self.settings.loader.threshold

    @property
    def minimum_batch_size(self) -> int:
        """Get the minimum batch size setting"""
        return self.settings.loader.minimum_batch_size

    @property
    def item_count(self) -> int:
        return self.settings.loader.item_count
