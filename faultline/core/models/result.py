"""Explicit success-or-error value returned by recoverable operations."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from faultline.core.errors import FatalRequestError

__all__: list[str] = ["ProcessResult"]

T = TypeVar("T")


class ProcessResult(BaseModel, Generic[T]):
    """Either a value or an error message, never both."""

    value: Optional[T] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls, value: T) -> "ProcessResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: str) -> "ProcessResult[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising FatalRequestError when this is an error."""
        if self.error is not None:
            raise FatalRequestError(f"called unwrap on an error value: {self.error}")
        return self.value
