"""Error taxonomy shared by every sequence in the package."""


class SequenceError(Exception):
    """Base class for all lazywindow errors"""


class InvalidArgumentError(SequenceError, ValueError):
    """A constructor or operator received an argument it cannot accept"""


class NoMoreElementsError(SequenceError, LookupError):
    """take_next() was called on an exhausted sequence"""


class UnsupportedOperationError(SequenceError, NotImplementedError):
    """The underlying source does not provide the requested capability"""


class IllegalStateError(SequenceError, RuntimeError):
    """The operation is valid in general but not in the current state"""
