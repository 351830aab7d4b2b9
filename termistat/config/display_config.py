"""Display configuration data structure."""
from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Display preferences configuration."""
    show_colors: bool = True
    show_temperature: bool = True
    show_fan: bool = True
    show_wifi: bool = True
