"""
Lazy sequences with an explicit has_more / take_next protocol.

A *source* is anything exposing ``has_more()`` and ``take_next()``; removal of
the current element (``remove_current()``) is an optional capability. Every
class in this module is itself a source and a plain Python iterator, so they
nest freely:

    WindowedSequence(AdaptingSequence(raw, fn), first, count)
"""

import logging
from collections.abc import MutableSequence
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Protocol, TypeVar, Union

from . import assertion
from .errors import (
    IllegalStateError,
    InvalidArgumentError,
    NoMoreElementsError,
    UnsupportedOperationError,
)
from .models import WindowBounds, build_model

logger = logging.getLogger(__name__)

T = TypeVar("T")
In = TypeVar("In")
Out = TypeVar("Out")


class Source(Protocol[T]):
    """Minimal capability set every wrapped sequence must provide"""

    def has_more(self) -> bool:
        ...

    def take_next(self) -> T:
        ...


SourceLike = Union[Source, Iterable[Any]]


def supports_removal(source: Any) -> bool:
    """True if the source offers remove_current()"""
    return callable(getattr(source, "remove_current", None))


def _remove_from(source: Any) -> None:
    if not supports_removal(source):
        raise UnsupportedOperationError(
            f"{type(source).__name__} does not support removing the current element"
        )
    source.remove_current()


class _SequenceBase(Generic[T]):
    """Python iterator protocol on top of has_more / take_next"""

    def has_more(self) -> bool:
        raise NotImplementedError

    def take_next(self) -> T:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_more():
            raise StopIteration
        return self.take_next()


class EmptySource(_SequenceBase[Any]):
    """A source that is exhausted from the start"""

    def has_more(self) -> bool:
        return False

    def take_next(self):
        raise NoMoreElementsError("Empty source has no elements")

    def __repr__(self) -> str:
        return "EmptySource()"


class IteratorSource(_SequenceBase[T]):
    """
    Adapts a Python iterable to the source protocol.

    ``has_more()`` pulls at most one element ahead into a peek buffer; the
    underlying iterator is never advanced twice for the same element.
    Removal is not supported.
    """

    _MISSING = object()

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self._peeked: Any = self._MISSING

    def has_more(self) -> bool:
        if self._peeked is not self._MISSING:
            return True
        try:
            self._peeked = next(self._iterator)
        except StopIteration:
            return False
        return True

    def take_next(self) -> T:
        if not self.has_more():
            raise NoMoreElementsError("Iterator is exhausted")
        item, self._peeked = self._peeked, self._MISSING
        return item


class ListSource(_SequenceBase[T]):
    """Forward cursor over a mutable list that can remove the current element"""

    def __init__(self, items: MutableSequence):
        self._items = items
        self._position = 0
        self._current = -1

    def has_more(self) -> bool:
        return self._position < len(self._items)

    def take_next(self) -> T:
        if not self.has_more():
            raise NoMoreElementsError(f"No element at position {self._position}")
        self._current = self._position
        self._position += 1
        return self._items[self._current]

    def remove_current(self) -> None:
        if self._current < 0:
            raise IllegalStateError("No current element: call take_next() first")
        del self._items[self._current]
        self._position = self._current
        self._current = -1


def as_source(obj: Optional[SourceLike]) -> Source:
    """
    Normalize obj into something with has_more / take_next.

    None becomes an EmptySource, existing sources are returned unchanged,
    mutable lists get a removable ListSource and any other iterable an
    IteratorSource.
    """
    if obj is None:
        return EmptySource()
    if callable(getattr(obj, "has_more", None)) and callable(getattr(obj, "take_next", None)):
        return obj
    if isinstance(obj, MutableSequence):
        return ListSource(obj)
    return IteratorSource(obj)


class AdaptingSequence(_SequenceBase[Out], Generic[In, Out]):
    """Lazily converts every element of the source with a transform"""

    def __init__(self, source: Optional[SourceLike], transform: Callable[[In], Out]):
        if not callable(transform):
            raise InvalidArgumentError(
                f"Argument [transform] must be callable (was {type(transform).__name__})"
            )
        self._source: Source = as_source(source)
        self._transform = transform

    @property
    def source(self):
        return self._source

    def has_more(self) -> bool:
        return self._source.has_more()

    def take_next(self) -> Out:
        if not self._source.has_more():
            raise NoMoreElementsError("Source is exhausted")
        return self._transform(self._source.take_next())

    def remove_current(self) -> None:
        _remove_from(self._source)


class WindowState(str, Enum):
    """Logical states of a WindowedSequence"""
    SKIPPING = "skipping"
    ACTIVE = "active"
    DONE = "done"


class WindowedSequence(_SequenceBase[T]):
    """
    Exposes only the window [first, first + count) of a source.

    The first ``first`` source elements are consumed and discarded, then at
    most ``count`` elements are yielded (``count=None`` means unbounded).
    One element of lookahead answers ``has_more()``; it is delivered exactly
    once by the following ``take_next()``. Once exhausted the sequence stays
    exhausted and no longer queries the source.
    """

    def __init__(self, source: SourceLike, first: int = 0, count: Optional[int] = None):
        assertion.not_null(source, "source")
        bounds = build_model(WindowBounds, first=first, count=count)
        self._source: Source = as_source(source)
        self._first = bounds.first
        self._count = bounds.count

        self._cursor_index = 0
        self._pending_element: Any = None
        self._has_pending_element = False
        self._done = False
        self._removable = False

    @classmethod
    def from_bounds(cls, source: SourceLike, bounds: WindowBounds) -> "WindowedSequence":
        """Build from a validated WindowBounds model"""
        return cls(source, bounds.first, bounds.count)

    @property
    def source(self):
        return self._source

    @property
    def first(self) -> int:
        return self._first

    @property
    def count(self) -> Optional[int]:
        return self._count

    @property
    def cursor_index(self) -> int:
        return self._cursor_index

    @property
    def has_pending_element(self) -> bool:
        return self._has_pending_element

    @property
    def returned_count(self) -> int:
        """Elements fetched from inside the window so far (yielded or pending)"""
        return max(0, self._cursor_index - self._first)

    @property
    def state(self) -> WindowState:
        if self._done:
            return WindowState.DONE
        if self._cursor_index < self._first:
            return WindowState.SKIPPING
        return WindowState.ACTIVE

    def _window_full(self) -> bool:
        return self._count is not None and self.returned_count >= self._count

    def _finish(self, reason: str) -> bool:
        self._has_pending_element = False
        self._pending_element = None
        if not self._done:
            logger.debug(f"Window [{self._first}, +{self._count}) done after "
                         f"{self._cursor_index} source elements: {reason}")
        self._done = True
        return False

    def has_more(self) -> bool:
        if self._has_pending_element:
            return True
        if self._done:
            return False

        while self._cursor_index < self._first:
            if not self._source.has_more():
                return self._finish("source exhausted while skipping")
            self._source.take_next()
            self._cursor_index += 1
            self._removable = False
            if self._cursor_index == self._first:
                logger.debug(f"Skipped {self._first} source elements")

        # the count check must come first so a full window never touches the source
        if not self._window_full() and self._source.has_more():
            self._pending_element = self._source.take_next()
            self._has_pending_element = True
            self._cursor_index += 1
            self._removable = False
            return True

        return self._finish("window full" if self._window_full() else "source exhausted")

    def take_next(self) -> T:
        if self._has_pending_element or self.has_more():
            item = self._pending_element
            self._pending_element = None
            self._has_pending_element = False
            self._removable = True
            return item
        raise NoMoreElementsError(
            f"Window [{self._first}, +{self._count}) has no more elements"
        )

    def remove_current(self) -> None:
        if self._has_pending_element:
            raise IllegalStateError(
                "Cannot remove the yielded element after has_more() buffered the next one"
            )
        if not self._removable:
            raise IllegalStateError("No yielded element to remove: call take_next() first")
        _remove_from(self._source)
        self._removable = False

    def __repr__(self) -> str:
        return (f"WindowedSequence(first={self._first}, count={self._count}, "
                f"cursor_index={self._cursor_index}, state={self.state.value})")
