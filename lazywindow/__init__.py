"""
lazywindow
==========

Lazy, single-pass sequence wrappers: map elements on demand with
AdaptingSequence and cut a bounded window out of any source with
WindowedSequence, without materializing the source.
"""

__version__ = "0.1.0"

from .errors import (
    IllegalStateError,
    InvalidArgumentError,
    NoMoreElementsError,
    SequenceError,
    UnsupportedOperationError,
)
from .lazy import LazyCollection
from .models import LazyWindowConfig, PageRequest, PageResult, WindowBounds, load_config
from .sequences import (
    AdaptingSequence,
    EmptySource,
    IteratorSource,
    ListSource,
    Source,
    WindowedSequence,
    WindowState,
    as_source,
    supports_removal,
)
from .utils import process_pagination, setup_logging

__all__ = [
    "__version__",
    "AdaptingSequence",
    "EmptySource",
    "IllegalStateError",
    "InvalidArgumentError",
    "IteratorSource",
    "LazyCollection",
    "LazyWindowConfig",
    "ListSource",
    "NoMoreElementsError",
    "PageRequest",
    "PageResult",
    "SequenceError",
    "Source",
    "UnsupportedOperationError",
    "WindowBounds",
    "WindowState",
    "WindowedSequence",
    "as_source",
    "load_config",
    "process_pagination",
    "setup_logging",
    "supports_removal",
]
