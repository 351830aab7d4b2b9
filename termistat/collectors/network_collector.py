"""Network collector for interface counters and wireless signal."""
import logging
import os
import subprocess
from typing import List, Optional
from ..config.config import Config
from .system_models import InterfaceCounters, NetworkStats


logger = logging.getLogger(__name__)

SIGNAL_MARKER = "Signal level="


class NetworkCollector:
    """Collects per-interface byte counters and WiFi signal strength."""

    def __init__(self, config: Config):
        """Initialize the network collector."""
        self.config = config

    def collect(self) -> NetworkStats:
        """Perform one collection cycle."""
        wifi_signal = None
        if self.config.display.show_wifi:
            wifi_signal = self.read_wifi_signal()
        return NetworkStats(interfaces=self.read_interfaces(), wifi_signal=wifi_signal)

    def read_interfaces(self) -> List[InterfaceCounters]:
        """Parse RX and TX byte counters from net/dev."""
        interfaces = []
        try:
            with open(os.path.join(self.config.collection.proc_root, 'net', 'dev'), 'r') as f:
                f.readline()  # header
                f.readline()  # header
                for line in f:
                    counters = self._parse_dev_line(line)
                    if counters:
                        interfaces.append(counters)
        except OSError as e:
            logger.debug("net/dev unavailable: %s", e)
        return interfaces

    def _parse_dev_line(self, line: str) -> Optional[InterfaceCounters]:
        """RX bytes is the first field, TX bytes follows seven more RX fields."""
        if ':' not in line:
            return None
        iface, data = line.split(':', 1)
        fields = data.split()
        try:
            return InterfaceCounters(
                name=iface.replace(' ', ''),
                rx_bytes=int(fields[0]),
                tx_bytes=int(fields[8])
            )
        except (IndexError, ValueError):
            logger.debug("skipping malformed net/dev line: %r", line)
            return None

    def read_wifi_signal(self) -> Optional[str]:
        """Run the wireless tool and return the text from the signal marker on."""
        command = self.config.collection.wifi_command
        if not command:
            return None
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.config.collection.wifi_timeout,
                text=True
            )
        except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError) as e:
            logger.debug("wireless status unavailable: %s", e)
            return None

        return self._parse_signal(result.stdout)

    def _parse_signal(self, output: str) -> Optional[str]:
        """Last matching line wins."""
        signal = None
        for line in output.splitlines():
            pos = line.find(SIGNAL_MARKER)
            if pos != -1:
                signal = line[pos:].rstrip()
        return signal
