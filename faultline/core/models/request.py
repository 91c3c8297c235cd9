"""Request unit model fed through the simulation harness."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = ["RequestUnit"]


class RequestUnit(BaseModel):
    """A single request: a payload, or nothing at all when the request is missing."""

    payload: Optional[str] = Field(default=None, description="Request payload, None when missing")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def present(cls, payload: str) -> "RequestUnit":
        return cls(payload=payload)

    @classmethod
    def missing(cls) -> "RequestUnit":
        return cls(payload=None)

    @property
    def is_present(self) -> bool:
        # An empty string is still a payload; only absence counts as a fault.
        return self.payload is not None

    def __str__(self) -> str:
        return self.payload if self.payload is not None else "<missing>"
