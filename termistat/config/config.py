"""Main configuration data structure."""
from dataclasses import dataclass, field
from .threshold_config import ThresholdConfig
from .display_config import DisplayConfig
from .collection_config import CollectionConfig


@dataclass
class Config:
    """Main configuration class."""
    refresh_rate: float = 1.0
    poll_interval: float = 0.1
    bar_width: int = 40
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    collection: CollectionConfig = field(default_factory=CollectionConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        """Fix invalid values."""
        if self.refresh_rate <= 0:
            self.refresh_rate = 1.0
        if self.poll_interval <= 0 or self.poll_interval > self.refresh_rate:
            self.poll_interval = min(0.1, self.refresh_rate)
        if self.bar_width <= 0:
            self.bar_width = 40

    @property
    def poll_ticks(self) -> int:
        """Number of keystroke checks in one refresh window."""
        return max(1, round(self.refresh_rate / self.poll_interval))
