"""Response shapes shared by several resources."""

from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class CountResponse(BaseModel):
    count: int


class StatBucket(BaseModel):
    """One group of an aggregate count, e.g. contacts per country."""

    key: Any
    count: int
