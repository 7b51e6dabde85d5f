"""
Process-local comment store.

Mutations are serialised behind an ``asyncio.Lock``; readers get copies,
so a record handed out can never be changed underneath its holder.  Ids
come from a monotonically increasing counter and are never reused.
"""
from __future__ import annotations

import asyncio
import itertools

from app.outcomes import Deleted, NotFound
from app.schemas import CommentResponse
from app.stores.base import CommentStore
from app.validators import ensure_valid_comment


class InMemoryCommentStore(CommentStore):
    def __init__(self) -> None:
        # dicts keep insertion order, which doubles as id order here
        self._comments: dict[int, CommentResponse] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def create(self, username: str, text: str) -> CommentResponse:
        ensure_valid_comment(username, text)
        async with self._lock:
            comment = CommentResponse(id=next(self._ids), username=username, text=text)
            self._comments[comment.id] = comment
        return comment.model_copy()

    async def get(self, comment_id: int) -> CommentResponse | NotFound:
        comment = self._comments.get(comment_id)
        if comment is None:
            return NotFound(comment_id)
        return comment.model_copy()

    async def list(self) -> list[CommentResponse]:
        return [c.model_copy() for c in list(self._comments.values())]

    async def update(self, comment_id: int, username: str, text: str) -> CommentResponse | NotFound:
        ensure_valid_comment(username, text)
        async with self._lock:
            if comment_id not in self._comments:
                return NotFound(comment_id)
            # Replace rather than mutate so earlier copies stay intact.
            comment = CommentResponse(id=comment_id, username=username, text=text)
            self._comments[comment_id] = comment
        return comment.model_copy()

    async def delete(self, comment_id: int) -> Deleted | NotFound:
        async with self._lock:
            if self._comments.pop(comment_id, None) is None:
                return NotFound(comment_id)
        return Deleted(comment_id)

    async def count(self) -> int:
        return len(self._comments)
