"""
Signal sources - concrete devices that report raw button states
"""

from .joystick_source import JoystickSource
from .gpio_source import GPIOSource
from .keyboard_source import KeyboardSource, KEY_TO_INDEX
from .mock_source import MockSource

__all__ = [
    "JoystickSource",
    "GPIOSource",
    "KeyboardSource",
    "KEY_TO_INDEX",
    "MockSource"
]
