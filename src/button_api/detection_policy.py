"""
DetectionPolicy - how raw button samples are turned into fired events
"""

from enum import Enum
from typing import Tuple


class DetectionPolicy(Enum):
    """
    Detection policies for deciding when a button has "fired".

    PRESS_EDGE:   fires once when the button goes down
    RELEASE_EDGE: fires once when the button comes back up after being down
    HOLD:         fires on every poll while the button is down
    EITHER_EDGE:  fires on both the press and the release
    """
    PRESS_EDGE = "press_edge"
    RELEASE_EDGE = "release_edge"
    HOLD = "hold"
    EITHER_EDGE = "either_edge"

    @classmethod
    def parse(cls, text: str) -> "DetectionPolicy":
        """
        Parse a policy from its name, case-insensitive.

        Accepts "press_edge", "PRESS-EDGE", "hold", etc.

        Raises:
            ValueError: if text does not name a policy
        """
        key = text.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            names = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown detection policy '{text}' (expected one of: {names})") from None


def evaluate(policy: DetectionPolicy, previous: bool, current: bool) -> Tuple[bool, bool]:
    """
    Apply one policy to a (previous, current) sample pair.

    Args:
        policy: Active detection policy
        previous: Latched sample from the last poll
        current: Raw sample from this poll

    Returns:
        (fired, new_previous)
    """
    if policy is DetectionPolicy.PRESS_EDGE:
        if current:
            return (not previous, True)
        return (False, False)

    if policy is DetectionPolicy.RELEASE_EDGE:
        if current:
            return (False, True)
        if previous:
            return (True, False)
        # Not pressed and no release reported yet: latch as pressed
        return (False, True)

    if policy is DetectionPolicy.HOLD:
        return (current, current)

    if policy is DetectionPolicy.EITHER_EDGE:
        return (previous != current, current)

    raise ValueError(f"Unhandled detection policy: {policy!r}")
