#!/usr/bin/env python3
"""
Button monitor - polls configured buttons and logs every fired event

Useful for checking controller wiring and trying out detection policies.

CLI Usage:
    python -m button_api.monitor --bind shoot:1:press_edge --bind aim:2:hold
    python -m button_api.monitor --source keyboard --bind reload:3:release_edge
    python -m button_api.monitor --source gpio --pins 4,5,6 --pull up
"""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional, Tuple

from .config import ButtonBinding, MonitorConfig, PULL_MODES, SOURCE_KINDS
from .detection_policy import DetectionPolicy
from .edge_detector import EdgeDetector, MAX_INDEX
from .errors import ButtonApiError
from .interfaces import ISignalSource
from .sources import GPIOSource, JoystickSource, KeyboardSource, MockSource
from .utils import HybridLogger, OnceInMs


def build_source(config: MonitorConfig, main_logger: HybridLogger) -> ISignalSource:
    """Create the signal source named by config.source (not yet set up)"""
    logger = main_logger.get_class_logger("Source", config.log_level)

    if config.source == "joystick":
        return JoystickSource.open(config.joystick_id, logger)
    if config.source == "gpio":
        return GPIOSource(config.gpio_pins, config.pull_mode, logger)
    if config.source == "keyboard":
        return KeyboardSource(logger)
    if config.source == "mock":
        return MockSource()
    raise ValueError(f"Unknown source '{config.source}'")


class ButtonMonitor:
    """
    Polls one EdgeDetector per binding against a shared source.

    Example:
        monitor = ButtonMonitor(source, config.bindings, logger)
        while True:
            for name in monitor.poll_once():
                handle(name)
    """

    def __init__(self,
                 source: ISignalSource,
                 bindings: List[ButtonBinding],
                 logger,
                 detector_logger=None):
        """
        Args:
            source: Signal source shared by all detectors
            bindings: Buttons to watch, polled in this order
            logger: ClassLogger for fired events and status
            detector_logger: Optional ClassLogger passed to every EdgeDetector
        """
        self._source = source
        self._logger = logger
        self._detectors: List[Tuple[ButtonBinding, EdgeDetector]] = [
            (binding, EdgeDetector(source, binding.index, binding.policy, detector_logger))
            for binding in bindings
        ]
        self._fire_counts: Dict[str, int] = {binding.name: 0 for binding in bindings}
        self.cycle_count = 0

        self._logger.info(f"ButtonMonitor watching {len(bindings)} buttons")
        for binding in bindings:
            self._logger.info(f"   {binding.name} → button {binding.index} ({binding.policy.name})")

    def get_detector(self, name: str) -> EdgeDetector:
        for binding, detector in self._detectors:
            if binding.name == name:
                return detector
        raise KeyError(name)

    def get_fire_counts(self) -> Dict[str, int]:
        return dict(self._fire_counts)

    def poll_once(self) -> List[str]:
        """
        Run one control cycle: pump the source, then poll each detector once.

        Returns:
            Names of the bindings that fired, in binding order
        """
        self._source.pump()
        fired: List[str] = []
        for binding, detector in self._detectors:
            if detector.is_fired():
                fired.append(binding.name)
                self._fire_counts[binding.name] += 1
                self._logger.info(
                    f"{binding.name} fired (button {detector.get_index()}, "
                    f"{detector.get_policy().name}) - #{self._fire_counts[binding.name]}"
                )
        self.cycle_count += 1
        return fired

    def log_status(self) -> None:
        """Log fire counts for every binding"""
        counts = ", ".join(f"{name}:{count}" for name, count in self._fire_counts.items())
        self._logger.info(f"Status after {self.cycle_count} cycles | Fired: {counts}")

    def run(self,
            sample_interval: float,
            status_interval_ms: int,
            max_cycles: Optional[int] = None) -> int:
        """
        Poll until Ctrl+C (or max_cycles), logging status periodically.

        Returns:
            Number of cycles run
        """
        status_timer = OnceInMs(status_interval_ms)
        start_cycle = self.cycle_count
        try:
            while max_cycles is None or self.cycle_count - start_cycle < max_cycles:
                self.poll_once()
                if status_timer.should_execute():
                    self.log_status()
                time.sleep(sample_interval)
        except KeyboardInterrupt:
            self._logger.info("Received shutdown signal (Ctrl+C)")
        return self.cycle_count - start_cycle


def parse_binding(text: str) -> ButtonBinding:
    """
    Parse NAME:INDEX[:POLICY], e.g. "shoot:1" or "aim:2:hold".

    Raises:
        ValueError: if text is malformed
    """
    parts = text.split(":")
    if len(parts) not in (2, 3) or not parts[0]:
        raise ValueError(f"Binding must be NAME:INDEX[:POLICY], got '{text}'")

    name = parts[0]
    try:
        index = int(parts[1])
    except ValueError:
        raise ValueError(f"Binding '{name}' index must be an integer, got '{parts[1]}'") from None

    policy = DetectionPolicy.parse(parts[2]) if len(parts) == 3 else DetectionPolicy.PRESS_EDGE
    return ButtonBinding(name, index, policy)


def _binding_arg(text: str) -> ButtonBinding:
    try:
        return parse_binding(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _pins_arg(text: str) -> List[int]:
    try:
        return [int(pin) for pin in text.split(",") if pin.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Pins must be comma-separated integers, got '{text}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="button-monitor",
        description="Poll controller buttons and log every fired event"
    )
    parser.add_argument("--source", choices=SOURCE_KINDS, default="joystick",
                        help="Where raw button states come from (default: joystick)")
    parser.add_argument("--joystick-id", type=int, default=0,
                        help="pygame joystick device index (default: 0)")
    parser.add_argument("--pins", type=_pins_arg, default=[],
                        help="Comma-separated BCM pins for --source gpio")
    parser.add_argument("--pull", choices=PULL_MODES, default="off",
                        help="GPIO pull resistor mode (default: off)")
    parser.add_argument("--bind", type=_binding_arg, action="append", dest="bindings",
                        metavar="NAME:INDEX[:POLICY]",
                        help="Button to watch; repeatable. Default: every button with press_edge")
    parser.add_argument("--rate", type=int, default=50,
                        help="Polls per second (default: 50)")
    parser.add_argument("--status-ms", type=int, default=10000,
                        help="Milliseconds between status summaries (default: 10000)")
    parser.add_argument("--log-dir", default="logs",
                        help="Directory for the log file (default: logs)")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console only")
    parser.add_argument("--debug", action="store_true",
                        help="Also log detector configuration changes and every fired poll")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> MonitorConfig:
    args = build_parser().parse_args(argv)
    bindings = args.bindings or [
        ButtonBinding(f"button{index}", index) for index in range(1, MAX_INDEX + 1)
    ]
    return MonitorConfig(
        bindings=bindings,
        source=args.source,
        joystick_id=args.joystick_id,
        gpio_pins=args.pins,
        pull_mode=args.pull,
        sample_rate_hz=args.rate,
        status_interval_ms=args.status_ms,
        log_level=logging.DEBUG if args.debug else logging.INFO,
        log_dir=None if args.no_log_file else args.log_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    main_logger = HybridLogger("ButtonMonitor", log_dir=config.log_dir)
    logger = main_logger.get_main_logger(config.log_level)

    source: Optional[ISignalSource] = None
    try:
        config.validate()
        logger.info(f"Button monitor starting ({config.source}, {config.sample_rate_hz}Hz)")

        source = build_source(config, main_logger)
        source.setup()

        monitor = ButtonMonitor(
            source,
            config.bindings,
            main_logger.get_class_logger("ButtonMonitor", config.log_level),
            main_logger.get_class_logger("EdgeDetector", config.log_level),
        )
        cycles = monitor.run(config.sample_interval, config.status_interval_ms)
        monitor.log_status()
        logger.info(f"Button monitor stopped after {cycles} cycles")
        return 0

    except (ButtonApiError, ValueError, ImportError, RuntimeError) as e:
        logger.error(f"Button monitor failed: {e}", e)
        return 1

    finally:
        if source is not None:
            source.cleanup()
        main_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
