from .service import SuggestStoriesService
from .models import SuggestStoriesRequest, SuggestStoriesResponse
from .router import router

__all__ = ["SuggestStoriesService", "SuggestStoriesRequest", "SuggestStoriesResponse", "router"]
