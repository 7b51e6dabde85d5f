# Stores package.
#
# A store owns comment persistence and id assignment behind the
# ``CommentStore`` interface:
#
#   base    — abstract interface shared by all backends
#   sql     — SQLAlchemy async adapter (Postgres in production, SQLite in tests)
#   memory  — process-local adapter, selected with STORE_BACKEND=memory
#
# Every store operation is a single atomic unit and is committed when it
# returns; the service layer never manages transactions itself.
from app.stores.base import CommentStore
from app.stores.memory import InMemoryCommentStore
from app.stores.sql import SqlCommentStore

__all__ = ["CommentStore", "InMemoryCommentStore", "SqlCommentStore"]
