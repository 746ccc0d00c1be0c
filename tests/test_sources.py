from __future__ import annotations

from typing import List

import pygame
import pytest

from button_api import DetectionPolicy, EdgeDetector
from button_api.sources import JoystickSource, KeyboardSource, KEY_TO_INDEX, MockSource
from button_api.sources import gpio_source
from button_api.sources.gpio_source import GPIOSource


class FakeJoystick:
    def __init__(self, buttons: int = 4) -> None:
        self.pressed: List[bool] = [False] * buttons

    def get_name(self) -> str:
        return "Fake Pad"

    def get_numbuttons(self) -> int:
        return len(self.pressed)

    def get_button(self, button: int) -> int:
        return int(self.pressed[button])


class FakeGPIO:
    BCM = 11
    IN = 1
    HIGH = 1
    LOW = 0
    PUD_OFF = 20
    PUD_UP = 22
    PUD_DOWN = 21

    def __init__(self) -> None:
        self.levels = {}
        self.setup_calls = []
        self.cleaned = None
        self.mode = None

    def setmode(self, mode) -> None:
        self.mode = mode

    def setup(self, pin, direction, pull_up_down) -> None:
        self.setup_calls.append((pin, direction, pull_up_down))

    def input(self, pin) -> int:
        return self.levels.get(pin, self.LOW)

    def cleanup(self, pins=None) -> None:
        self.cleaned = pins


def test_mock_source_set_press_release_reset() -> None:
    source = MockSource(button_count=4)
    assert source.get_button_count() == 4
    assert source.read(1) is False

    source.press(1)
    source.set(2, True)
    assert source.read(1) is True
    assert source.read(2) is True

    source.release(1)
    assert source.read(1) is False

    source.reset()
    assert source.read(2) is False
    assert source.read_count == 5


def test_joystick_indices_are_one_based(logger) -> None:
    joystick = FakeJoystick(buttons=4)
    source = JoystickSource(joystick, logger)
    joystick.pressed[0] = True

    assert source.read(1) is True
    assert source.read(2) is False
    assert source.get_button_count() == 4


def test_joystick_missing_buttons_read_released(logger) -> None:
    source = JoystickSource(FakeJoystick(buttons=2), logger)
    assert source.read(3) is False
    assert source.read(12) is False


def test_joystick_drives_edge_detector(logger) -> None:
    joystick = FakeJoystick()
    source = JoystickSource(joystick, logger)
    detector = EdgeDetector(source, 2, DetectionPolicy.PRESS_EDGE)

    fired = []
    for pressed in [False, True, True, False, True]:
        joystick.pressed[1] = pressed
        fired.append(detector.is_fired())
    assert fired == [False, True, False, False, True]


def test_joystick_pump_pumps_pygame_events(logger, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(pygame.event, "pump", lambda: calls.append(True))
    source = JoystickSource(FakeJoystick(), logger)

    source.pump()
    assert calls == [True]


def test_joystick_open_without_device_fails(logger, monkeypatch) -> None:
    monkeypatch.setattr(pygame.joystick, "init", lambda: None)
    monkeypatch.setattr(pygame.joystick, "get_count", lambda: 0)

    quits = []
    monkeypatch.setattr(pygame.joystick, "quit", lambda: quits.append(True))

    with pytest.raises(RuntimeError, match="No joystick at index 0"):
        JoystickSource.open(0, logger)
    assert quits == [True]


def test_joystick_open_wraps_device(logger, monkeypatch) -> None:
    joystick = FakeJoystick(buttons=12)
    monkeypatch.setattr(pygame.joystick, "init", lambda: None)
    monkeypatch.setattr(pygame.joystick, "get_count", lambda: 1)
    monkeypatch.setattr(pygame.joystick, "Joystick", lambda device_index: joystick)

    source = JoystickSource.open(0, logger)
    joystick.pressed[11] = True
    assert source.read(12) is True


def test_joystick_cleanup_without_setup_is_noop(logger, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(pygame, "quit", lambda: calls.append(True))
    JoystickSource(FakeJoystick(), logger).cleanup()
    assert calls == []


def test_keyboard_toggle_and_read(logger) -> None:
    source = KeyboardSource(logger)
    assert source.get_button_count() == 12

    source.toggle(3)
    assert source.read(3) is True
    source.toggle(3)
    assert source.read(3) is False


def test_keyboard_key_map_covers_top_row(logger) -> None:
    source = KeyboardSource(logger)
    for key in "1234567890-=":
        source.handle_key(key)
    assert all(source.read(index) for index in range(1, 13))
    assert sorted(KEY_TO_INDEX.values()) == list(range(1, 13))


def test_keyboard_reset_and_ignored_keys(logger) -> None:
    source = KeyboardSource(logger)
    source.handle_key("0")
    source.handle_key("x")
    assert source.read(10) is True
    assert source.describe().startswith("1:OFF")

    source.handle_key("r")
    assert source.read(10) is False


def test_keyboard_out_of_range_reads_released(logger) -> None:
    source = KeyboardSource(logger)
    source.toggle(13)
    assert source.read(13) is False
    assert source.read(0) is False


@pytest.mark.parametrize("key", ["\x03", "q", "Q"])
def test_keyboard_ctrl_c_interrupts(logger, key) -> None:
    source = KeyboardSource(logger)
    source.toggle(1)
    with pytest.raises(KeyboardInterrupt):
        source.handle_key(key)
    assert source.read(1) is True


def test_keyboard_pump_without_setup_is_noop(logger) -> None:
    source = KeyboardSource(logger)
    source.pump()
    assert source.read(1) is False


def test_gpio_requires_rpi_gpio(logger, monkeypatch) -> None:
    monkeypatch.setattr(gpio_source, "GPIO", None)
    with pytest.raises(ImportError):
        GPIOSource([4], "off", logger)


def test_gpio_validates_pins_and_pull_mode(logger, monkeypatch) -> None:
    monkeypatch.setattr(gpio_source, "GPIO", FakeGPIO())
    with pytest.raises(ValueError):
        GPIOSource([], "off", logger)
    with pytest.raises(ValueError):
        GPIOSource(list(range(2, 15)), "off", logger)
    with pytest.raises(ValueError, match="Unknown pull mode"):
        GPIOSource([4], "sideways", logger)


def test_gpio_reads_configured_pins(logger, monkeypatch) -> None:
    fake = FakeGPIO()
    monkeypatch.setattr(gpio_source, "GPIO", fake)
    source = GPIOSource([4, 17], "up", logger)
    source.setup()

    assert fake.mode == FakeGPIO.BCM
    assert fake.setup_calls == [(4, FakeGPIO.IN, FakeGPIO.PUD_UP), (17, FakeGPIO.IN, FakeGPIO.PUD_UP)]

    fake.levels[17] = FakeGPIO.HIGH
    assert source.read(2) is True
    assert source.read(1) is False
    assert source.read(3) is False

    source.cleanup()
    assert fake.cleaned == [4, 17]
