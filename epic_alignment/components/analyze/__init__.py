from .service import AnalyzeService
from .models import AnalyzeRequest, AnalyzeResponse
from .router import router

__all__ = ["AnalyzeService", "AnalyzeRequest", "AnalyzeResponse", "router"]
