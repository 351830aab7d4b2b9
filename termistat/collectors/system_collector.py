"""System metrics collector for memory, CPU, battery and disk usage."""
import logging
import os
import re
import psutil
from typing import List, Optional, Tuple
from ..config.config import Config
from .system_models import BatteryInfo, CpuStats, DiskUsage, MemoryStats


logger = logging.getLogger(__name__)

# Fields of the aggregate cpu line: user nice system idle iowait irq softirq
CPU_FIELDS = 7
OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


class SystemCollector:
    """Collects system-level metrics from /proc and /sys."""

    def __init__(self, config: Config):
        """Initialize the system collector."""
        self.config = config
        self.proc_root = config.collection.proc_root
        self.sys_root = config.collection.sys_root
        # Cumulative counters from the previous sample
        self.prev_idle = 0
        self.prev_total = 0

    def collect_memory(self) -> MemoryStats:
        """Read total and available memory from meminfo."""
        stats = MemoryStats()
        try:
            with open(os.path.join(self.proc_root, 'meminfo'), 'r') as f:
                for line in f:
                    if line.startswith('MemTotal:'):
                        stats.total_kb = int(line.split()[1])
                    elif line.startswith('MemAvailable:'):
                        stats.available_kb = int(line.split()[1])
        except (OSError, ValueError, IndexError) as e:
            logger.debug("meminfo unavailable: %s", e)
        return stats

    def read_cpu_times(self) -> Tuple[int, int]:
        """Return cumulative (idle, total) jiffies for the aggregate cpu line."""
        with open(os.path.join(self.proc_root, 'stat'), 'r') as f:
            fields = f.readline().split()
        user, nice, system, idle, iowait, irq, softirq = map(int, fields[1:1 + CPU_FIELDS])
        idle_time = idle + iowait
        total_time = user + nice + system + idle_time + irq + softirq
        return idle_time, total_time

    def cpu_usage(self, idle_time: int, total_time: int) -> float:
        """Usage since the previous sample; updates the stored counters."""
        delta_idle = idle_time - self.prev_idle
        delta_total = total_time - self.prev_total
        usage = 0.0
        if delta_total != 0:
            usage = 100.0 * (delta_total - delta_idle) / delta_total

        self.prev_idle = idle_time
        self.prev_total = total_time
        return usage

    def collect_cpu(self) -> CpuStats:
        """Collect CPU usage, temperature and fan speed."""
        try:
            usage = self.cpu_usage(*self.read_cpu_times())
        except (OSError, ValueError) as e:
            logger.debug("cpu stat unavailable: %s", e)
            usage = 0.0
        return CpuStats(
            usage_percent=usage,
            temperature=self.read_temperature(),
            fan_rpm=self.read_fan_rpm()
        )

    def read_temperature(self) -> Optional[float]:
        """Get CPU temperature in degrees Celsius from the first thermal zone."""
        path = os.path.join(self.sys_root, 'class', 'thermal', 'thermal_zone0', 'temp')
        try:
            with open(path, 'r') as f:
                return int(f.read().strip()) / 1000.0
        except (OSError, ValueError):
            return None

    def read_fan_rpm(self) -> Optional[int]:
        """Get the first positive fan reading from the hwmon devices."""
        base = os.path.join(self.sys_root, 'class', 'hwmon')
        try:
            devices = sorted(os.listdir(base))
        except OSError:
            return None

        for device in devices:
            device_path = os.path.join(base, device)
            # Devices without a chip name are not sensors
            try:
                with open(os.path.join(device_path, 'name'), 'r') as f:
                    f.readline()
            except OSError:
                continue

            for i in range(1, self.config.collection.max_fans + 1):
                try:
                    with open(os.path.join(device_path, f'fan{i}_input'), 'r') as f:
                        rpm = int(f.read().strip())
                except (OSError, ValueError):
                    continue
                if rpm > 0:
                    return rpm
        return None

    def collect_battery(self) -> BatteryInfo:
        """Get battery capacity and status if the device exists."""
        info = BatteryInfo()
        battery_path = os.path.join(
            self.sys_root, 'class', 'power_supply', self.config.collection.battery_device
        )
        try:
            with open(os.path.join(battery_path, 'capacity'), 'r') as cap_file, \
                    open(os.path.join(battery_path, 'status'), 'r') as status_file:
                info.available = True
                info.status = status_file.readline().rstrip('\n')
                info.capacity = int(cap_file.read().strip())
        except OSError:
            return BatteryInfo()
        except ValueError as e:
            logger.debug("unreadable battery capacity: %s", e)
        return info

    def is_excluded_mount(self, mountpoint: str) -> bool:
        """Device and system mounts are matched anywhere in the path."""
        return any(s in mountpoint for s in self.config.collection.excluded_mount_substrings)

    def collect_disks(self) -> List[DiskUsage]:
        """Collect usage for every mounted filesystem that is not excluded."""
        disks = []
        try:
            with open(os.path.join(self.proc_root, 'mounts'), 'r') as f:
                lines = f.readlines()
        except OSError as e:
            logger.debug("mounts unavailable: %s", e)
            return disks

        for line in lines:
            parts = line.split()
            if len(parts) < 2:
                continue
            mountpoint = decode_mount_path(parts[1])
            if self.is_excluded_mount(mountpoint):
                continue

            try:
                usage = psutil.disk_usage(mountpoint)
            except OSError as e:
                logger.debug("statvfs failed for %s: %s", mountpoint, e)
                continue
            # Pseudo filesystems report no blocks
            if usage.total == 0:
                continue
            disks.append(DiskUsage(mountpoint, usage.total, usage.used))
        return disks


def decode_mount_path(raw: str) -> str:
    """Undo the octal escapes the kernel uses for spaces and tabs in mounts."""
    return OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), raw)
