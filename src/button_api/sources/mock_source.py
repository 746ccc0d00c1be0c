"""
Mock signal source - settable in-memory buttons for tests and demos
"""

from typing import Dict

from ..interfaces import ISignalSource


class MockSource(ISignalSource):
    """
    Signal source whose button states are set directly by the caller.

    Every button starts released. read_count records how many times
    the source has been read, to check that callers poll only when expected.
    """

    def __init__(self, button_count: int = 12):
        self._button_count = button_count
        self._states: Dict[int, bool] = {}
        self.read_count = 0

    def get_button_count(self) -> int:
        return self._button_count

    def set(self, index: int, pressed: bool) -> None:
        self._states[index] = pressed

    def press(self, index: int) -> None:
        self.set(index, True)

    def release(self, index: int) -> None:
        self.set(index, False)

    def reset(self) -> None:
        """Release every button"""
        self._states.clear()

    def read(self, index: int) -> bool:
        self.read_count += 1
        return self._states.get(index, False)
