"""Comment store interface."""
from __future__ import annotations

from abc import ABC, abstractmethod

from app.outcomes import Deleted, NotFound
from app.schemas import CommentResponse


class CommentStore(ABC):
    """Durable keyed collection of comments.

    Implementations assign ids, never reuse them, and make each operation
    atomic for the single record it touches.  Missing ids are reported as
    ``NotFound`` values rather than raised.
    """

    @abstractmethod
    async def create(self, username: str, text: str) -> CommentResponse:
        """Persist a new comment under a freshly assigned id.

        Raises:
            ValidationError: if ``username`` or ``text`` is empty.
        """

    @abstractmethod
    async def get(self, comment_id: int) -> CommentResponse | NotFound:
        """Return the comment, or ``NotFound`` if the id is absent."""

    @abstractmethod
    async def list(self) -> list[CommentResponse]:
        """Return a snapshot of every stored comment in insertion order."""

    @abstractmethod
    async def update(self, comment_id: int, username: str, text: str) -> CommentResponse | NotFound:
        """Replace username/text of an existing comment.  Never an upsert."""

    @abstractmethod
    async def delete(self, comment_id: int) -> Deleted | NotFound:
        """Remove the comment permanently."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored comments."""
