"""
Joystick signal source using pygame
"""

import os

import pygame

from ..interfaces import ISignalSource


class JoystickSource(ISignalSource):
    """
    Reads raw button states from a game controller via pygame.

    Button index n maps to pygame button n - 1. Indices beyond the
    controller's button count read as not pressed.

    pygame only refreshes joystick state while events are pumped, so the
    control loop must call pump() once per cycle before polling detectors.

    Example:
        source = JoystickSource.open(0, logger)
        source.setup()
        trigger = EdgeDetector(source, 1, DetectionPolicy.PRESS_EDGE)
    """

    def __init__(self, joystick, logger):
        """
        Args:
            joystick: pygame.joystick.Joystick (or compatible) instance
            logger: ClassLogger instance for logging
        """
        self._joystick = joystick
        self._logger = logger
        self._initialized = False

    @classmethod
    def open(cls, device_index: int, logger) -> "JoystickSource":
        """
        Open a connected controller by pygame device index.

        Raises:
            RuntimeError: if no controller exists at device_index
        """
        pygame.joystick.init()
        count = pygame.joystick.get_count()
        if device_index < 0 or device_index >= count:
            pygame.joystick.quit()
            raise RuntimeError(f"No joystick at index {device_index} ({count} connected)")

        joystick = pygame.joystick.Joystick(device_index)
        logger.info(f"Opened joystick {device_index}: {joystick.get_name()}")
        return cls(joystick, logger)

    def get_button_count(self) -> int:
        return self._joystick.get_numbuttons()

    def setup(self) -> None:
        """Initialize pygame so that events can be pumped without a display"""
        try:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
            pygame.init()
            pygame.display.init()
            self._initialized = True
            self._logger.info(
                f"Joystick source initialized: {self._joystick.get_name()} "
                f"({self.get_button_count()} buttons)"
            )
        except pygame.error as e:
            self._logger.error("Joystick source setup failed", e)
            raise

    def pump(self) -> None:
        pygame.event.pump()

    def read(self, index: int) -> bool:
        """
        Read a controller button.

        Args:
            index: Button number (1-based)

        Returns:
            True if the button is pressed, False if pressed-not or absent
        """
        if index < 1 or index > self.get_button_count():
            return False
        return bool(self._joystick.get_button(index - 1))

    def cleanup(self) -> None:
        """Release pygame resources"""
        if self._initialized:
            pygame.quit()
            self._initialized = False
            self._logger.info("Joystick source cleaned up")
