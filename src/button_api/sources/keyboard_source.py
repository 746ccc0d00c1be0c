"""
Keyboard signal source for testing without controller or GPIO hardware
"""

import select
import sys
import termios
import tty
from typing import Dict, List

from ..interfaces import ISignalSource

# Top keyboard row, left to right, mapped to button indices 1..12
KEY_TO_INDEX: Dict[str, int] = {
    "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9, "0": 10, "-": 11, "=": 12,
}


class KeyboardSource(ISignalSource):
    """
    Keyboard toggle source for development without hardware.

    Each key on the top row toggles one virtual button on/off:
    1-9 are buttons 1-9, 0 is button 10, '-' is 11 and '=' is 12.
    'r' releases every button, space logs the current state,
    'q' or Ctrl+C stops the control loop.

    Works over SSH: keys are read from stdin in raw mode with a
    non-blocking select, once per control cycle in pump().

    Example:
        source = KeyboardSource(logger)
        source.setup()
        try:
            while True:
                source.pump()
                if detector.is_fired():
                    ...
        finally:
            source.cleanup()
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for logging
        """
        self._logger = logger
        self._button_count = len(KEY_TO_INDEX)
        self._toggles: List[bool] = [False] * self._button_count
        self._stdin_available = False
        self._original_terminal_settings = None
        self._raw_mode_enabled = False

    def _check_stdin_available(self) -> bool:
        """Check that stdin is an interactive terminal"""
        try:
            if not sys.stdin.isatty():
                return False
            select.select([sys.stdin], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def _enable_raw_mode(self) -> bool:
        """Switch the terminal to raw mode for immediate key capture"""
        try:
            self._original_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setraw(sys.stdin.fileno())
            self._raw_mode_enabled = True
            return True
        except (OSError, termios.error) as e:
            self._logger.warning(f"Could not enable raw terminal mode: {e}")
            return False

    def _disable_raw_mode(self) -> None:
        """Restore original terminal settings"""
        if self._raw_mode_enabled and self._original_terminal_settings:
            termios.tcsetattr(
                sys.stdin.fileno(),
                termios.TCSADRAIN,
                self._original_terminal_settings
            )
            self._raw_mode_enabled = False

    def get_button_count(self) -> int:
        return self._button_count

    def setup(self) -> None:
        """
        Prepare the terminal for key capture.

        Raises:
            RuntimeError: if stdin is not an interactive terminal
        """
        self._stdin_available = self._check_stdin_available()
        if not self._stdin_available:
            self._logger.error("❌ Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        if not self._enable_raw_mode():
            raise RuntimeError("Failed to enable raw terminal mode")

        self._logger.info("🎮 Keyboard source initialized (NO HARDWARE)")
        self._logger.info("   Keys 1-9, 0, -, = toggle buttons 1-12; 'r' resets, space shows state, q or Ctrl+C quits")

    def pump(self) -> None:
        """Consume pending keypresses and update toggles (non-blocking)"""
        if not self._stdin_available:
            return

        while select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], []):
            self.handle_key(sys.stdin.read(1))

    def handle_key(self, key: str) -> None:
        """
        Apply one keypress.

        Raw mode disables terminal signals, so Ctrl+C arrives as a
        character and is re-raised here, as is the q quit key.

        Raises:
            KeyboardInterrupt: on Ctrl+C, q or Q
        """
        if key in ("\x03", "q", "Q"):
            self._logger.info("Keyboard: quit key pressed")
            raise KeyboardInterrupt
        if key in ("r", "R"):
            self.reset()
        elif key == " ":
            self._logger.info(f"Current state: {self.describe()}")
        elif key in KEY_TO_INDEX:
            self.toggle(KEY_TO_INDEX[key])

    def toggle(self, index: int) -> None:
        """Flip one virtual button between pressed and released"""
        if index < 1 or index > self._button_count:
            self._logger.warning(f"Invalid button {index} (only 1-{self._button_count} available)")
            return
        self._toggles[index - 1] = not self._toggles[index - 1]
        state_name = "ON" if self._toggles[index - 1] else "OFF"
        self._logger.info(f"🎮 Button {index} → {state_name}")

    def reset(self) -> None:
        """Release every virtual button"""
        self._toggles = [False] * self._button_count
        self._logger.info("All buttons reset to OFF")

    def describe(self) -> str:
        return " ".join(
            f"{i}:{'ON' if pressed else 'OFF'}"
            for i, pressed in enumerate(self._toggles, start=1)
        )

    def read(self, index: int) -> bool:
        """
        Read a virtual button.

        Args:
            index: Button number (1-based)

        Returns:
            True if the button's toggle is ON
        """
        if index < 1 or index > self._button_count:
            return False
        return self._toggles[index - 1]

    def cleanup(self) -> None:
        """Restore the terminal"""
        self._disable_raw_mode()
        self._toggles = [False] * self._button_count
        self._logger.info("Keyboard source cleaned up")
