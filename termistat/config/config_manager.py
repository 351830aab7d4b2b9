"""Configuration loading and management."""
import os
import yaml
from .config import Config
from .threshold_config import ThresholdConfig
from .display_config import DisplayConfig
from .collection_config import CollectionConfig


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default_config.yaml')


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        # Parse sections, each falling back to its defaults when absent
        thresholds = ThresholdConfig(**config_data.get('thresholds', {}))
        collection = CollectionConfig(**config_data.get('collection', {}))
        display = DisplayConfig(**config_data.get('display', {}))

        return Config(
            refresh_rate=config_data.get('refresh_rate', 1.0),
            poll_interval=config_data.get('poll_interval', 0.1),
            bar_width=config_data.get('bar_width', 40),
            thresholds=thresholds,
            collection=collection,
            display=display
        )
