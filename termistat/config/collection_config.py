"""Collection sources configuration."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class CollectionConfig:
    """Where the collectors read from and how long they may wait."""
    proc_root: str = "/proc"
    sys_root: str = "/sys"
    battery_device: str = "BAT0"
    max_fans: int = 5
    excluded_mount_substrings: List[str] = field(default_factory=lambda: ["/dev", "/sys"])
    wifi_command: List[str] = field(default_factory=lambda: ["iwconfig"])
    wifi_timeout: float = 2.0

    def __post_init__(self):
        """Fix invalid values."""
        if not self.proc_root:
            self.proc_root = "/proc"
        if not self.sys_root:
            self.sys_root = "/sys"
        if not self.battery_device:
            self.battery_device = "BAT0"
        if self.max_fans <= 0:
            self.max_fans = 5
        if self.wifi_timeout <= 0:
            self.wifi_timeout = 2.0
        if self.wifi_command is None:
            self.wifi_command = []
        if isinstance(self.wifi_command, str):
            self.wifi_command = self.wifi_command.split()
