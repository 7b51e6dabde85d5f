"""
Typed outcomes returned by the store and the service.

Expected conditions (a missing id, a rejected payload) are values, not
exceptions, so the router can map each one to a status code with a plain
``isinstance`` check.  Only infrastructure failures are raised.
"""
from dataclasses import dataclass, field

from app.schemas import CommentResponse


@dataclass(frozen=True)
class NotFound:
    comment_id: int


@dataclass(frozen=True)
class Deleted:
    comment_id: int


@dataclass(frozen=True)
class Invalid:
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Created:
    comment: CommentResponse


@dataclass(frozen=True)
class Updated:
    comment: CommentResponse
