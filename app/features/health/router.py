# app/features/health/router.py
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.lib.story_cache import StoryCache
from app.features.story.router import get_story_cache

router = APIRouter(tags=["health"])

class HealthResponse(BaseModel):
    status: str
    cache_size: int

@router.get("/health", response_model=HealthResponse)
async def health(cache: StoryCache = Depends(get_story_cache)) -> HealthResponse:
    return HealthResponse(status="ok", cache_size=len(cache))
