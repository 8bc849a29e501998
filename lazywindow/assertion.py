"""
Fail-fast argument checks.

Every check returns the value it was given so it can be used inline::

    self._first = greater_or_equal(0, first, "first")

and raises InvalidArgumentError with a message naming the argument otherwise.
"""

from typing import Any, Optional, Sized, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def _escalate(message: str, *args) -> InvalidArgumentError:
    return InvalidArgumentError(message % args)


def _require_name(name: Optional[str]) -> None:
    if name is None or not str(name).strip():
        raise InvalidArgumentError("'name' must not be null or empty")


def not_null(value: T, name: str) -> T:
    """Ensure value is not None"""
    if value is None:
        raise _escalate("Argument [%s] must not be null", name)
    return value


def has_text(value: Optional[str], name: str) -> str:
    """Ensure value contains at least one non-whitespace character"""
    _require_name(name)
    if value is None or not str(value).strip():
        raise _escalate("Argument [%s] must not be null or empty", name)
    return value


def not_empty(collection: Optional[Sized], name: str) -> Sized:
    """Ensure a collection is neither None nor empty"""
    _require_name(name)
    if collection is None or len(collection) == 0:
        raise _escalate("Argument [%s] must not be null or empty", name)
    return collection


def greater(boundary: int, value: int, name: str) -> int:
    if value <= boundary:
        raise _escalate("Argument [%s] must be greater than %d (was %d)", name, boundary, value)
    return value


def greater_or_equal(boundary: int, value: int, name: str) -> int:
    if value < boundary:
        raise _escalate(
            "Argument [%s] must be greater or equal to %d (was %d)", name, boundary, value
        )
    return value


def less(value: int, boundary: int, name: str) -> int:
    if value >= boundary:
        raise _escalate("Argument [%s] must be less than %d (was %d)", name, boundary, value)
    return value


def less_or_equal(value: int, boundary: int, name: str) -> int:
    if value > boundary:
        raise _escalate(
            "Argument [%s] must be less or equal to %d (was %d)", name, boundary, value
        )
    return value


def between(value: int, minimum: int, maximum: int, name: str, inclusive: bool = True) -> int:
    """Ensure minimum <= value <= maximum (or strictly between when inclusive is False)"""
    if inclusive:
        outside = value < minimum or value > maximum
    else:
        outside = value <= minimum or value >= maximum
    if outside:
        raise _escalate(
            "Argument [%s] must be between %d and %d (%s) - was: %d",
            name, minimum, maximum, "inclusive" if inclusive else "exclusive", value,
        )
    return value


def equal_types_or_null(*objects: Any) -> None:
    """Ensure all non-None objects share exactly the same type"""
    previous_type = None
    for obj in objects:
        if obj is None:
            continue
        if previous_type is not None and type(obj) is not previous_type:
            types = [type(o).__name__ for o in objects if o is not None]
            raise InvalidArgumentError(
                f"The given objects should be either null or of the same type "
                f"('{previous_type.__name__}') = {types}"
            )
        previous_type = type(obj)
