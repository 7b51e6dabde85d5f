"""
Relational comment store — SQLAlchemy async adapter.

Design notes
------------
- ``update`` and ``delete`` are single ``... RETURNING`` statements, so a
  concurrent update and delete on the same row resolve inside the database:
  one wins, the other sees the new row or no row at all.
- Each write commits before returning.  The ``get_db`` dependency still
  owns the session and rolls back on error; its trailing commit is a no-op.
- Connectivity failures (``OperationalError``, ``InterfaceError``, raw
  ``OSError`` from the driver, invalidated connections) are re-raised as
  ``StoreUnavailable``; other database errors propagate as-is.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import StoreUnavailable
from app.models import Comment
from app.outcomes import Deleted, NotFound
from app.schemas import CommentResponse
from app.stores.base import CommentStore
from app.validators import ensure_valid_comment

logger = logging.getLogger(__name__)


@contextmanager
def _translate_outages():
    try:
        yield
    except (OperationalError, InterfaceError, OSError) as exc:
        # asyncpg reports a refused or dropped socket as a bare OSError,
        # which SQLAlchemy does not wrap.
        logger.error("Comment store unreachable: %s", exc)
        raise StoreUnavailable() from exc
    except DBAPIError as exc:
        if not exc.connection_invalidated:
            raise
        logger.error("Comment store connection lost: %s", exc)
        raise StoreUnavailable() from exc


def _to_response(comment: Comment) -> CommentResponse:
    return CommentResponse.model_validate(comment)


class SqlCommentStore(CommentStore):
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, username: str, text: str) -> CommentResponse:
        ensure_valid_comment(username, text)
        comment = Comment(username=username, text=text)
        with _translate_outages():
            self.db.add(comment)
            await self.db.flush()
            response = _to_response(comment)
            await self.db.commit()
        return response

    async def get(self, comment_id: int) -> CommentResponse | NotFound:
        with _translate_outages():
            result = await self.db.execute(
                select(Comment).where(Comment.id == comment_id).execution_options(populate_existing=True)
            )
        comment = result.scalar_one_or_none()
        if comment is None:
            return NotFound(comment_id)
        return _to_response(comment)

    async def list(self) -> list[CommentResponse]:
        with _translate_outages():
            result = await self.db.execute(
                select(Comment).order_by(Comment.id).execution_options(populate_existing=True)
            )
        return [_to_response(c) for c in result.scalars().all()]

    async def update(self, comment_id: int, username: str, text: str) -> CommentResponse | NotFound:
        ensure_valid_comment(username, text)
        stmt = (
            update(Comment)
            .where(Comment.id == comment_id)
            .values(username=username, text=text)
            .returning(Comment)
        )
        with _translate_outages():
            result = await self.db.execute(stmt)
            comment = result.scalar_one_or_none()
            response = _to_response(comment) if comment is not None else None
            await self.db.commit()
        if response is None:
            return NotFound(comment_id)
        return response

    async def delete(self, comment_id: int) -> Deleted | NotFound:
        stmt = delete(Comment).where(Comment.id == comment_id).returning(Comment.id)
        with _translate_outages():
            result = await self.db.execute(stmt)
            deleted_id = result.scalar_one_or_none()
            await self.db.commit()
        if deleted_id is None:
            return NotFound(comment_id)
        return Deleted(deleted_id)

    async def count(self) -> int:
        with _translate_outages():
            result = await self.db.execute(select(func.count()).select_from(Comment))
        return result.scalar_one()
