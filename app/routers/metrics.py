from fastapi import APIRouter, Depends

from app.cache import cache
from app.dependencies import get_comment_service
from app.schemas import MetricsResponse
from app.services.comment_service import CommentService

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("", response_model=MetricsResponse)
async def get_metrics(service: CommentService = Depends(get_comment_service)):
    return MetricsResponse(
        total_comments=await service.count_comments(),
        cache_info=cache.stats,
    )
