from fastapi import Depends, FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.comment_service import CommentService
from app.stores import CommentStore, SqlCommentStore


async def get_comment_store(db: AsyncSession = Depends(get_db)) -> CommentStore:
    """Return a ``SqlCommentStore`` bound to the request's own session."""
    return SqlCommentStore(db)


def use_comment_store(app: FastAPI, store: CommentStore) -> None:
    """
    Serve every request of *app* from one long-lived *store*.

    Used for ``STORE_BACKEND=memory``.  The override replaces
    ``get_comment_store`` together with its ``get_db`` sub-dependency, so no
    SQL session is opened per request.
    """
    app.state.memory_store = store
    app.dependency_overrides[get_comment_store] = lambda: store


async def get_comment_service(
    store: CommentStore = Depends(get_comment_store),
) -> CommentService:
    return CommentService(store)
