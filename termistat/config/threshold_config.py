"""Threshold configuration data structure."""
from dataclasses import dataclass


@dataclass
class ThresholdConfig:
    """Progress bar color band boundaries, in percent."""
    normal_warn: float = 60.0
    normal_error: float = 85.0
    inverted_error: float = 30.0
    inverted_warn: float = 75.0

    def __post_init__(self):
        """Fix invalid values."""
        if self.normal_warn <= 0 or self.normal_warn >= 100:
            self.normal_warn = 60.0
        if self.normal_error <= self.normal_warn or self.normal_error > 100:
            self.normal_warn, self.normal_error = 60.0, 85.0
        if self.inverted_error <= 0 or self.inverted_error >= 100:
            self.inverted_error = 30.0
        if self.inverted_warn <= self.inverted_error or self.inverted_warn > 100:
            self.inverted_error, self.inverted_warn = 30.0, 75.0
