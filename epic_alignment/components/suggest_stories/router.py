from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from .service import SuggestStoriesService
from .models import SuggestStoriesRequest, SuggestStoriesResponse
from epic_alignment.components.base.config import Settings, get_settings
from epic_alignment.components.base.exceptions import ComponentError

router = APIRouter(tags=["Stories"])


def get_service(settings: Settings = Depends(get_settings)) -> SuggestStoriesService:
    return SuggestStoriesService(settings)


@router.post("/suggest_stories", response_model=SuggestStoriesResponse)
async def suggest_stories(
    request: SuggestStoriesRequest,
    service: SuggestStoriesService = Depends(get_service),
):
    """Propose up to three stories that raise alignment for the selected intents."""
    try:
        return await service(request)
    except ComponentError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
