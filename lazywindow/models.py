"""
Pydantic models for window bounds, paging and configuration.
"""

import logging
import os
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArgumentError

M = TypeVar("M", bound=BaseModel)

LOG_LEVEL_ENV = "LAZYWINDOW_LOG_LEVEL"
LOG_FORMAT_ENV = "LAZYWINDOW_LOG_FORMAT"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"


def build_model(model_cls: Type[M], **values: Any) -> M:
    """Instantiate a model, reporting validation failures as InvalidArgumentError"""
    try:
        return model_cls(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidArgumentError(f"Invalid {model_cls.__name__}: {problems}") from e


class WindowBounds(BaseModel):
    """The window [first, first + count) of a sequence"""
    first: int = Field(0, description="Inclusive start offset", ge=0, strict=True)
    count: Optional[int] = Field(
        None,
        description="Maximum number of elements to yield; None means unbounded",
        ge=0,
        strict=True
    )

    model_config = ConfigDict(frozen=True)

    @property
    def last(self) -> Optional[int]:
        """Exclusive end offset, or None for an unbounded window"""
        if self.count is None:
            return None
        return self.first + self.count


class PageRequest(BaseModel):
    """A 1-indexed page of fixed size"""
    page_number: int = Field(..., description="Page number, starting at 1", ge=1)
    page_size: int = Field(..., description="Elements per page", ge=1)

    model_config = ConfigDict(frozen=True)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    def to_bounds(self) -> WindowBounds:
        return WindowBounds(first=self.offset, count=self.page_size)


class PageResult(BaseModel):
    """One page of results plus navigation hints"""
    page_data: List[Any] = Field(default_factory=list, description="Elements on this page")
    current_page: int = Field(..., description="Page number that was requested", ge=1)
    page_size: int = Field(..., description="Requested page size", ge=1)
    has_next_page: bool = Field(..., description="Whether the source holds at least one more element")
    has_previous_page: bool = Field(..., description="Whether a page precedes this one")
    consumed: int = Field(
        ...,
        description="Source elements consumed to build the page, skipped ones included",
        ge=0
    )


class LazyWindowConfig(BaseModel):
    """Logging configuration for applications using the package"""
    log_level: str = Field("INFO", description="Name of the root log level")
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="logging format string")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and check the level name"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_config(environ=None) -> LazyWindowConfig:
    """Read LazyWindowConfig from the environment"""
    environ = os.environ if environ is None else environ
    values = {}
    if environ.get(LOG_LEVEL_ENV):
        values["log_level"] = environ[LOG_LEVEL_ENV]
    if environ.get(LOG_FORMAT_ENV):
        values["log_format"] = environ[LOG_FORMAT_ENV]
    return build_model(LazyWindowConfig, **values)
