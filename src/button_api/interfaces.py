"""
Abstract interface for raw button signal sources
"""

from abc import ABC, abstractmethod


class ISignalSource(ABC):
    """
    Abstract interface for reading raw button states from a device.

    Separates the concern of reading hardware state from edge detection.
    Allows different implementations: joystick, GPIO, keyboard, mock, etc.
    Buttons are addressed with 1-based indices.
    """

    @abstractmethod
    def read(self, index: int) -> bool:
        """
        Read the current raw state of a single button.

        Must not consume input or change the source's state; event-driven
        backends refresh their state in pump().

        Args:
            index: Button number (1-based)

        Returns:
            True if the button is currently pressed, False otherwise
        """
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        """
        Get the number of buttons this source can report.

        Returns:
            int: Number of buttons (1-based indexing)
        """
        pass

    def setup(self) -> None:
        """Initialize the source hardware/resources"""
        pass

    def pump(self) -> None:
        """Refresh device state, called once per control cycle before polling"""
        pass

    def cleanup(self) -> None:
        """Cleanup source resources"""
        pass
