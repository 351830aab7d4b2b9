"""Keyboard input handler for the quit key."""
import logging
import os
import select
import sys
import termios
from typing import Optional


logger = logging.getLogger(__name__)

QUIT_KEYS = (b'\n', b'\r')


class KeyboardHandler:
    """Puts the terminal in non-canonical, no-echo mode while in use.

    Use as a context manager so the original settings are restored on
    every exit path:

        with KeyboardHandler() as keys:
            if keys.quit_requested():
                ...
    """

    def __init__(self, fd: Optional[int] = None):
        """Initialize the keyboard handler."""
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disable()
        return False

    def set_raw_mode(self, enabled: bool):
        """Switch raw mode on or off."""
        if enabled:
            self.enable()
        else:
            self.disable()

    def enable(self):
        """Disable line buffering and echo."""
        self._setup_terminal()

    def disable(self):
        """Restore the terminal settings saved by enable()."""
        self._restore_terminal()

    def _setup_terminal(self):
        """Setup terminal for unbuffered input."""
        try:
            if os.isatty(self.fd):
                if self.old_settings is None:
                    self.old_settings = termios.tcgetattr(self.fd)
                new_settings = termios.tcgetattr(self.fd)
                new_settings[3] &= ~(termios.ICANON | termios.ECHO)  # lflags
                termios.tcsetattr(self.fd, termios.TCSANOW, new_settings)
        except termios.error as e:
            # Not a TTY or termios not available
            logger.debug("could not enter raw mode: %s", e)

    def _restore_terminal(self):
        """Restore terminal to original settings."""
        try:
            if self.old_settings and os.isatty(self.fd):
                termios.tcsetattr(self.fd, termios.TCSANOW, self.old_settings)
        except termios.error as e:
            logger.debug("could not restore terminal: %s", e)

    def read_key(self) -> Optional[bytes]:
        """Read one pending byte, or None when nothing is waiting."""
        try:
            # Check if input is available without blocking
            if not select.select([self.fd], [], [], 0)[0]:
                return None
            key = os.read(self.fd, 1)
        except OSError as e:
            logger.debug("input read failed: %s", e)
            return None
        return key or None

    def quit_requested(self) -> bool:
        """True if the pending keystroke is Enter."""
        return self.read_key() in QUIT_KEYS
