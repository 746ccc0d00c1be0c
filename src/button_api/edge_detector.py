"""
Edge detector - turns raw samples of one button into fired events
"""

from typing import Optional, TYPE_CHECKING

from .detection_policy import DetectionPolicy, evaluate
from .errors import IndexOutOfRangeError, InvalidArgumentError
from .interfaces import ISignalSource

if TYPE_CHECKING:
    from .utils.hybrid_logger import ClassLogger

MIN_INDEX = 1
MAX_INDEX = 12


def _validate_index(index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"The button index must be an int. Given: {index!r}")
    if index < MIN_INDEX or index > MAX_INDEX:
        raise IndexOutOfRangeError(
            f"The button must be a value {MIN_INDEX} through {MAX_INDEX}. Given: {index}"
        )


def _validate_policy(policy: DetectionPolicy) -> None:
    if policy is None:
        raise InvalidArgumentError("The detection policy cannot be None")
    if not isinstance(policy, DetectionPolicy):
        raise InvalidArgumentError(f"The detection policy must be a DetectionPolicy. Given: {policy!r}")


class EdgeDetector:
    """
    Tracks one button on a signal source and reports when it fires.

    Create one detector per button of interest and call is_fired() exactly
    once per control cycle. The source is borrowed, never owned: several
    detectors may share it, each reading its own index.

    Example:
        source = JoystickSource.open(0, logger)
        shoot = EdgeDetector(source, 1, DetectionPolicy.PRESS_EDGE)

        while True:
            source.pump()
            if shoot.is_fired():
                fire()
    """

    def __init__(self,
                 source: ISignalSource,
                 index: int,
                 policy: DetectionPolicy,
                 logger: Optional["ClassLogger"] = None):
        """
        Initialize detector for one button.

        Args:
            source: Signal source the button is attached to
            index: Button on the source to track, 1 through 12
            policy: DetectionPolicy deciding when the button fires
            logger: Optional ClassLogger for configuration changes

        Raises:
            InvalidArgumentError: if source or policy is None
            IndexOutOfRangeError: if index is not 1 through 12
        """
        if source is None:
            raise InvalidArgumentError("The signal source cannot be None")
        if not callable(getattr(source, "read", None)):
            raise InvalidArgumentError(f"The signal source must provide read(index). Given: {source!r}")
        _validate_policy(policy)
        _validate_index(index)

        self._source = source
        self._index = index
        self._policy = policy
        self._logger = logger
        self._previous = False

        if self._logger:
            self._logger.debug(f"Tracking button {index} with {policy.name}")

    def is_fired(self) -> bool:
        """
        Poll the button once and apply the active policy.

        Returns:
            True if the policy's condition is satisfied on this sample
        """
        current = bool(self._source.read(self._index))
        fired, self._previous = evaluate(self._policy, self._previous, current)

        if fired and self._logger:
            self._logger.debug(f"Button {self._index} fired ({self._policy.name})")
        return fired

    def get_policy(self) -> DetectionPolicy:
        """Get the detection policy currently in use"""
        return self._policy

    def set_policy(self, policy: DetectionPolicy) -> None:
        """
        Switch to a new detection policy, effective on the next poll.

        Raises:
            InvalidArgumentError: if policy is None
        """
        _validate_policy(policy)
        if self._logger and policy is not self._policy:
            self._logger.debug(f"Button {self._index} policy {self._policy.name} -> {policy.name}")
        self._policy = policy

    def get_index(self) -> int:
        """Get the button index being tracked"""
        return self._index

    def set_index(self, index: int) -> None:
        """
        Track a different button on the same source.

        The latched sample is kept, so the first poll of the new button
        is compared against the last sample of the old one.

        Raises:
            IndexOutOfRangeError: if index is not 1 through 12
        """
        _validate_index(index)
        if self._logger and index != self._index:
            self._logger.debug(f"Button index {self._index} -> {index}")
        self._index = index

    def get_source(self) -> ISignalSource:
        """Get the signal source being read"""
        return self._source

    @property
    def policy(self) -> DetectionPolicy:
        return self._policy

    @property
    def index(self) -> int:
        return self._index

    @property
    def source(self) -> ISignalSource:
        return self._source

    def __repr__(self) -> str:
        return (
            f"EdgeDetector("
            f"index={self._index}, "
            f"policy={self._policy.name}, "
            f"source={type(self._source).__name__}"
            f")"
        )
