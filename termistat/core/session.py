"""Refresh loop tying the collectors, renderer and keyboard together."""
import enum
import logging
import time
from typing import Optional
from ..collectors.network_collector import NetworkCollector
from ..collectors.system_collector import SystemCollector
from ..config.config import Config
from ..ui.renderer import Renderer
from .keyboard_handler import KeyboardHandler


logger = logging.getLogger(__name__)


class State(enum.Enum):
    RUNNING = "running"
    QUIT = "quit"


class Session:
    """Owns all state that lives across refresh cycles."""

    def __init__(self, config: Config, renderer: Optional[Renderer] = None,
                 keyboard: Optional[KeyboardHandler] = None):
        """Initialize the session and its collectors."""
        self.config = config
        self.renderer = renderer or Renderer(config)
        self.keyboard = keyboard or KeyboardHandler()
        self.system_collector = SystemCollector(config)
        self.network_collector = NetworkCollector(config)
        self.state = State.RUNNING
        self.cycles = 0

    def run(self) -> int:
        """Redraw every refresh period until Enter is pressed."""
        self.renderer.console.print("Press ENTER to quit")
        try:
            with self.keyboard as keys:
                while self.state is State.RUNNING:
                    self.draw()
                    self.wait_for_quit(keys)
        except KeyboardInterrupt:
            self.state = State.QUIT
        logger.info("quit after %d refresh cycles", self.cycles)
        return 0

    def draw(self):
        """Sample everything and redraw the full screen."""
        renderer = self.renderer
        renderer.clear_screen()
        renderer.banner()
        renderer.render_memory(self.system_collector.collect_memory())
        renderer.render_cpu(self.system_collector.collect_cpu())
        renderer.render_battery(self.system_collector.collect_battery())
        renderer.render_disks(self.system_collector.collect_disks())
        renderer.render_network(self.network_collector.collect())
        self.cycles += 1

    def wait_for_quit(self, keys: KeyboardHandler):
        """Sleep through one refresh window, checking for Enter on each tick."""
        for _ in range(self.config.poll_ticks):
            time.sleep(self.config.poll_interval)
            if keys.quit_requested():
                self.state = State.QUIT
                return
