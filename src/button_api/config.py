"""
Button monitor configuration
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .detection_policy import DetectionPolicy
from .edge_detector import MIN_INDEX, MAX_INDEX
from .errors import IndexOutOfRangeError

SOURCE_KINDS = ("joystick", "gpio", "keyboard", "mock")
PULL_MODES = ("off", "up", "down")


@dataclass
class ButtonBinding:
    """One named button to watch"""
    name: str
    index: int
    policy: DetectionPolicy = DetectionPolicy.PRESS_EDGE


@dataclass
class MonitorConfig:
    """Signal source and polling loop configuration"""

    bindings: List[ButtonBinding]

    # Source configuration
    source: str = "joystick"
    joystick_id: int = 0
    gpio_pins: List[int] = field(default_factory=list)
    pull_mode: str = "off"

    # Timing configuration
    sample_rate_hz: int = 50
    status_interval_ms: int = 10000

    # Logging configuration
    log_level: int = logging.INFO
    log_dir: Optional[str] = "logs"

    @property
    def sample_interval(self) -> float:
        """Seconds between polls"""
        return 1.0 / self.sample_rate_hz

    @property
    def binding_names(self) -> List[str]:
        return [binding.name for binding in self.bindings]

    def validate(self) -> None:
        """Basic validation of configuration"""
        if not self.bindings:
            raise ValueError("At least one button binding must be configured")

        names = self.binding_names
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate binding names: {', '.join(duplicates)}")

        for binding in self.bindings:
            if binding.index < MIN_INDEX or binding.index > MAX_INDEX:
                raise IndexOutOfRangeError(
                    f"Binding '{binding.name}' index must be {MIN_INDEX} through {MAX_INDEX}. "
                    f"Given: {binding.index}"
                )

        if self.source not in SOURCE_KINDS:
            raise ValueError(f"Unknown source '{self.source}' (expected one of: {', '.join(SOURCE_KINDS)})")

        if self.pull_mode not in PULL_MODES:
            raise ValueError(f"Unknown pull mode '{self.pull_mode}' (expected one of: {', '.join(PULL_MODES)})")

        if self.source == "gpio":
            if not self.gpio_pins:
                raise ValueError("GPIO source needs at least one pin")
            if len(self.gpio_pins) > MAX_INDEX:
                raise ValueError(f"GPIO source supports at most {MAX_INDEX} pins, got {len(self.gpio_pins)}")

        if self.sample_rate_hz <= 0:
            raise ValueError("Sample rate must be positive")

        if self.status_interval_ms < 0:
            raise ValueError("Status interval must be non-negative")
