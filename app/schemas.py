from pydantic import BaseModel, ConfigDict, Field

from app.models import USERNAME_MAX_LENGTH


# --- Comment ---

class CommentBase(BaseModel):
    # Emptiness is checked by the service so it can be reported as a 400.
    username: str = Field(max_length=USERNAME_MAX_LENGTH)
    text: str


class CommentCreate(CommentBase):
    # Server-assigned; accepted for symmetry with the response shape and ignored.
    id: int | None = None


class CommentUpdate(CommentBase):
    # Must match the id in the path; never overwrites the stored id.
    id: int


class CommentResponse(CommentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


# --- Metrics ---

class MetricsResponse(BaseModel):
    total_comments: int
    cache_info: dict = {}
