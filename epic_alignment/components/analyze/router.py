from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from .service import AnalyzeService
from .models import AnalyzeRequest, AnalyzeResponse
from epic_alignment.components.base.config import Settings, get_settings
from epic_alignment.components.base.exceptions import ComponentError

router = APIRouter(tags=["Alignment"])


def get_service(settings: Settings = Depends(get_settings)) -> AnalyzeService:
    return AnalyzeService(settings)


@router.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze(request: AnalyzeRequest, service: AnalyzeService = Depends(get_service)):
    """Score how well the epic's stories address the selected intents."""
    try:
        return await service(request)
    except ComponentError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
