"""
Button API

Turns the raw state of a controller button into debounced, typed events:
press edge, release edge, hold, or either edge. Poll one EdgeDetector per
button once per control cycle.
"""

from .detection_policy import DetectionPolicy, evaluate
from .edge_detector import EdgeDetector, MIN_INDEX, MAX_INDEX
from .errors import ButtonApiError, InvalidArgumentError, IndexOutOfRangeError
from .interfaces import ISignalSource

__version__ = "1.0.0"

__all__ = [
    "DetectionPolicy",
    "evaluate",
    "EdgeDetector",
    "MIN_INDEX",
    "MAX_INDEX",
    "ButtonApiError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "ISignalSource"
]
