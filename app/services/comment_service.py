"""
Comment service — validation and orchestration for the Comment resource.

The service is stateless: it validates the payload, calls the store it
was given, and returns a typed outcome (see ``app.outcomes``).  Expected
conditions never raise; ``StoreUnavailable`` from the store propagates
unchanged.

Single-comment and list reads go through the Redis cache-aside layer.
Every successful write drops the list entry and the affected detail entry
after the store has committed.
"""
import logging

from app.cache import LIST_KEY, cache, detail_key
from app.config import settings
from app.outcomes import Created, Deleted, Invalid, NotFound, Updated
from app.schemas import CommentCreate, CommentResponse, CommentUpdate
from app.stores.base import CommentStore
from app.validators import comment_field_errors

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, store: CommentStore) -> None:
        self.store = store

    async def create_comment(self, data: CommentCreate) -> Created | Invalid:
        """Create a comment; any ``id`` in *data* is ignored."""
        errors = comment_field_errors(data.username, data.text)
        if errors:
            return Invalid(errors)

        comment = await self.store.create(data.username, data.text)
        await cache.invalidate_comment()
        logger.info("Created comment id=%s", comment.id)
        return Created(comment)

    async def get_comment(self, comment_id: int) -> CommentResponse | NotFound:
        key = detail_key(comment_id)
        cached = await cache.get(key)
        if cached:
            return CommentResponse(**cached)

        result = await self.store.get(comment_id)
        if isinstance(result, NotFound):
            logger.debug("Comment id=%s not found", comment_id)
            return result

        # A read that raced a write can re-cache the old row after the write
        # invalidated it; the TTL bounds how long that copy survives.
        await cache.set(key, result.model_dump(), ttl=settings.CACHE_TTL_DETAIL)
        return result

    async def list_comments(self) -> list[CommentResponse]:
        cached = await cache.get(LIST_KEY)
        # An empty list is a legitimate cached value.
        if cached is not None:
            return [CommentResponse(**c) for c in cached]

        comments = await self.store.list()
        await cache.set(LIST_KEY, [c.model_dump() for c in comments], ttl=settings.CACHE_TTL_LIST)
        return comments

    async def update_comment(
        self, comment_id: int, data: CommentUpdate
    ) -> Updated | NotFound | Invalid:
        """
        Replace username and text of comment *comment_id*.

        ``data.id`` must equal *comment_id*; it is checked, never written.
        """
        errors = comment_field_errors(data.username, data.text)
        if data.id != comment_id:
            errors.append(f"id in body ({data.id}) does not match id in path ({comment_id})")
        if errors:
            return Invalid(errors)

        result = await self.store.update(comment_id, data.username, data.text)
        if isinstance(result, NotFound):
            logger.debug("Update skipped, comment id=%s not found", comment_id)
            return result

        await cache.invalidate_comment(comment_id)
        logger.info("Updated comment id=%s", comment_id)
        return Updated(result)

    async def delete_comment(self, comment_id: int) -> Deleted | NotFound:
        result = await self.store.delete(comment_id)
        if isinstance(result, NotFound):
            logger.debug("Delete skipped, comment id=%s not found", comment_id)
            return result

        await cache.invalidate_comment(comment_id)
        logger.info("Deleted comment id=%s", comment_id)
        return result

    async def count_comments(self) -> int:
        return await self.store.count()
