from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from app.models import MAX_COMMENT_ID
from app.outcomes import Invalid, NotFound
from app.schemas import CommentCreate, CommentResponse, CommentUpdate
from app.dependencies import get_comment_service
from app.services.comment_service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"])

_NOT_FOUND = {404: {"description": "Comment not found"}}
_INVALID = {400: {"description": "Invalid comment payload"}}


# Ids outside the BIGINT range can never exist; reject them as bad input
# before they reach the database driver.
CommentId = Annotated[int, Path(ge=1, le=MAX_COMMENT_ID, description="Comment id")]


def _raise_for(outcome) -> None:
    if isinstance(outcome, Invalid):
        raise HTTPException(status_code=400, detail=outcome.errors)
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=404, detail="Comment not found")


@router.get("", response_model=list[CommentResponse])
async def list_comments(service: CommentService = Depends(get_comment_service)):
    return await service.list_comments()


@router.get("/{comment_id}", response_model=CommentResponse, responses=_NOT_FOUND)
async def get_comment(comment_id: CommentId, service: CommentService = Depends(get_comment_service)):
    outcome = await service.get_comment(comment_id)
    _raise_for(outcome)
    return outcome


@router.post("", status_code=201, response_model=CommentResponse, responses=_INVALID)
async def create_comment(data: CommentCreate, service: CommentService = Depends(get_comment_service)):
    outcome = await service.create_comment(data)
    _raise_for(outcome)
    return outcome.comment


@router.put("/{comment_id}", response_model=CommentResponse, responses={**_INVALID, **_NOT_FOUND})
async def update_comment(
    comment_id: CommentId, data: CommentUpdate, service: CommentService = Depends(get_comment_service)
):
    outcome = await service.update_comment(comment_id, data)
    _raise_for(outcome)
    return outcome.comment


@router.delete("/{comment_id}", status_code=204, response_class=Response, responses=_NOT_FOUND)
async def delete_comment(comment_id: CommentId, service: CommentService = Depends(get_comment_service)):
    outcome = await service.delete_comment(comment_id)
    _raise_for(outcome)
    return Response(status_code=204)
