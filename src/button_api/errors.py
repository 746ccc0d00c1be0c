"""
Exceptions raised by the button API
"""


class ButtonApiError(Exception):
    """Base class for all button API errors"""


class InvalidArgumentError(ButtonApiError, ValueError):
    """A required argument (source, policy, index) is missing or has the wrong type"""


class IndexOutOfRangeError(ButtonApiError, IndexError):
    """A button index outside the supported range was supplied"""
