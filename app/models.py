from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

USERNAME_MAX_LENGTH = 100
# Largest value a BIGINT primary key can hold.
MAX_COMMENT_ID = 2**63 - 1


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------

class Comment(Base):
    __tablename__ = "comments"
    # SQLite only guarantees never-reused rowids with AUTOINCREMENT; Postgres
    # sequences never hand out a value twice.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    username: Mapped[str] = mapped_column(String(USERNAME_MAX_LENGTH), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Comment id={self.id} username={self.username!r}>"
