"""
GPIO signal source using RPi.GPIO
"""

from typing import List

try:
    import RPi.GPIO as GPIO
except (ImportError, RuntimeError):
    # Not a Raspberry Pi; GPIOSource refuses to construct
    GPIO = None

from ..config import PULL_MODES
from ..edge_detector import MAX_INDEX as MAX_PINS
from ..interfaces import ISignalSource


class GPIOSource(ISignalSource):
    """
    Reads raw button states from Raspberry Pi GPIO pins.

    Button index n reads the n-th configured pin (BCM numbering).
    A pin reading HIGH counts as pressed.
    """

    def __init__(self,
                 pins: List[int],
                 pull_mode: str,
                 logger):
        """
        Args:
            pins: GPIO pin numbers (BCM mode), at most 12
            pull_mode: Pull resistor mode, "off", "up" or "down"
            logger: ClassLogger instance for logging
        """
        if GPIO is None:
            raise ImportError("RPi.GPIO is required but not available")
        if not pins or len(pins) > MAX_PINS:
            raise ValueError(f"GPIOSource needs 1 to {MAX_PINS} pins, got {len(pins)}")
        if pull_mode not in PULL_MODES:
            raise ValueError(f"Unknown pull mode '{pull_mode}' (expected one of: {', '.join(PULL_MODES)})")

        self._pins = list(pins)
        self._pull_mode = pull_mode
        self._logger = logger
        self._initialized = False

    def get_button_count(self) -> int:
        return len(self._pins)

    def setup(self) -> None:
        """Initialize GPIO pins for input"""
        try:
            pull = {
                "off": GPIO.PUD_OFF,
                "up": GPIO.PUD_UP,
                "down": GPIO.PUD_DOWN,
            }[self._pull_mode]

            GPIO.setmode(GPIO.BCM)
            for pin in self._pins:
                GPIO.setup(pin, GPIO.IN, pull_up_down=pull)
            self._initialized = True

            pin_mapping = ", ".join(f"Btn{i}=GPIO{pin}" for i, pin in enumerate(self._pins, start=1))
            self._logger.info(f"GPIO source initialized: {len(self._pins)} pins (pull {self._pull_mode})")
            self._logger.info(f"Pin mapping: {pin_mapping}")
        except Exception as e:
            self._logger.error("GPIO source setup failed", e)
            raise

    def read(self, index: int) -> bool:
        """
        Read GPIO state of a single button.

        Args:
            index: Button number (1-based)

        Returns:
            True if the pin is HIGH, False if LOW or not configured
        """
        if index < 1 or index > len(self._pins):
            return False
        return GPIO.input(self._pins[index - 1]) == GPIO.HIGH

    def cleanup(self) -> None:
        """Release the configured pins"""
        if self._initialized:
            GPIO.cleanup(self._pins)
            self._initialized = False
            self._logger.info("GPIO source cleaned up")
