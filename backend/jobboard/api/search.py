"""Search-as-you-type suggestions."""

from fastapi import APIRouter, Depends, Query, Request

from jobboard.core.config import settings
from jobboard.core.ratelimit import limiter
from jobboard.dependencies import get_suggestion_service
from jobboard.schemas.search import SuggestionsResponse
from jobboard.services.suggestion_service import SuggestionService

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/suggestions", response_model=SuggestionsResponse)
@limiter.limit(settings.search_rate_limit)
def suggestions(
    request: Request,
    q: str = Query(""),
    type: str = Query("all"),
    limit: int = Query(10, ge=1, le=50),
    service: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionsResponse:
    return service.suggest(q, type, limit)
