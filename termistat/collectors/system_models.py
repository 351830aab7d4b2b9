"""System data models for the collectors."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MemoryStats:
    total_kb: int = 0
    available_kb: int = 0

    @property
    def used_kb(self) -> int:
        return self.total_kb - self.available_kb

    @property
    def percent(self) -> float:
        """Used share of total memory, 0.0 when total is unknown."""
        if self.total_kb == 0:
            return 0.0
        return 100.0 * self.used_kb / self.total_kb


@dataclass
class CpuStats:
    usage_percent: float
    temperature: Optional[float]  # degrees Celsius
    fan_rpm: Optional[int]


@dataclass
class BatteryInfo:
    """Battery charge and state as reported by the power supply class."""
    capacity: int = -1
    status: str = "Unknown"  # Charging, Discharging, Full, ...
    available: bool = False


@dataclass
class DiskUsage:
    mountpoint: str
    total_bytes: int
    used_bytes: int

    @property
    def percent(self) -> float:
        return 100.0 * self.used_bytes / self.total_bytes


@dataclass
class InterfaceCounters:
    name: str
    rx_bytes: int
    tx_bytes: int


@dataclass
class NetworkStats:
    interfaces: List[InterfaceCounters] = field(default_factory=list)
    wifi_signal: Optional[str] = None
