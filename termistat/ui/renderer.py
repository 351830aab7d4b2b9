"""Terminal rendering of the dashboard sections using Rich."""
import math
from typing import List, Optional
from rich.console import Console
from rich.text import Text
from ..collectors.system_models import BatteryInfo, CpuStats, DiskUsage, MemoryStats, NetworkStats
from ..config.config import Config
from ..config.threshold_config import ThresholdConfig


EMPTY_STYLE = "on bright_black"
MB = 1024 * 1024


def filled_cells(percent: float, width: int) -> int:
    """Number of colored cells for a bar, kept within the bar."""
    return min(max(math.floor(percent * width / 100), 0), width)


def bar_color(percent: float, invert: bool = False,
              thresholds: Optional[ThresholdConfig] = None) -> str:
    """Pick the band color.

    Normal bars go green, yellow, red as usage rises. Inverted bars (battery)
    go red, yellow, green as charge rises.
    """
    t = thresholds or ThresholdConfig()
    if not invert:
        if percent < t.normal_warn:
            return "green"
        if percent < t.normal_error:
            return "yellow"
        return "red"
    if percent < t.inverted_error:
        return "red"
    if percent < t.inverted_warn:
        return "yellow"
    return "green"


def progress_bar(percent: float, width: int = 30, invert: bool = False,
                 thresholds: Optional[ThresholdConfig] = None) -> Text:
    """Build `[<cells>] 42.0%` with one background-colored space per cell."""
    filled = filled_cells(percent, width)
    style = f"on {bar_color(percent, invert, thresholds)}"

    bar = Text("[")
    bar.append(" " * filled, style=style)
    bar.append(" " * (width - filled), style=EMPTY_STYLE)
    bar.append(f"] {percent:.1f}%")
    return bar


class Renderer:
    """Prints the dashboard sections to a Rich console."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize the renderer."""
        self.config = config
        if console is None:
            color_system = "standard" if config.display.show_colors else None
            console = Console(color_system=color_system, highlight=False, markup=False, emoji=False)
        self.console = console

    def _bar(self, percent: float, invert: bool = False) -> Text:
        return progress_bar(percent, self.config.bar_width, invert, self.config.thresholds)

    def clear_screen(self):
        """Erase the screen and move the cursor home."""
        self.console.file.write("\033[2J\033[1;1H")

    def banner(self):
        self.console.print("*** TermiStat ***", style="bold green")
        self.console.print()

    def draw_title(self, title: str):
        self.console.print(f"==== {title} ====", style="bold blue")

    def render_memory(self, memory: MemoryStats):
        self.draw_title("Memory")
        self.console.print(f"Used: {memory.used_kb // 1024} MB / {memory.total_kb // 1024} MB")
        self.console.print(self._bar(memory.percent))
        self.console.print()

    def render_cpu(self, cpu: CpuStats):
        self.draw_title("CPU")
        self.console.print(Text("Usage: ").append_text(self._bar(cpu.usage_percent)))

        display = self.config.display
        if display.show_temperature and cpu.temperature is not None and cpu.temperature > 0:
            self.console.print(f"Temp: {cpu.temperature:.1f} °C")
        if display.show_fan and cpu.fan_rpm is not None and cpu.fan_rpm > 0:
            self.console.print(f"Fan:  {cpu.fan_rpm} RPM")
        self.console.print()

    def render_battery(self, battery: BatteryInfo):
        self.draw_title("Battery")
        if battery.available:
            self.console.print(battery.status)
            self.console.print(self._bar(battery.capacity, invert=True))
        else:
            self.console.print("Battery info not available")
        self.console.print()

    def render_disks(self, disks: List[DiskUsage]):
        self.draw_title("Disks")
        for disk in disks:
            self.console.print(
                f"{disk.mountpoint}: {disk.used_bytes // MB} MB / "
                f"{disk.total_bytes // MB} MB ({disk.percent:.1f}%)"
            )
        self.console.print()

    def render_network(self, network: NetworkStats):
        self.draw_title("Network")
        for iface in network.interfaces:
            self.console.print(
                f"{iface.name} → RX: {iface.rx_bytes // 1024} KB, TX: {iface.tx_bytes // 1024} KB"
            )
        if network.wifi_signal:
            self.console.print()
            self.console.print(f"WiFi Signal: {network.wifi_signal}")
        self.console.print()
