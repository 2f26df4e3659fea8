# app/features/story/router.py
import random
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.logger import get_logger
from app.lib.errors import StoryApiError
from app.lib.openai_client import StoryGenerator
from app.lib.story_cache import StoryCache
from .schemas import ErrorResponse, StoryRequest, StoryResponse
from .service import generate_story

router = APIRouter(tags=["story"])
log = get_logger(__name__)


def get_story_cache(request: Request) -> StoryCache:
    return request.app.state.story_cache


def get_story_generator(request: Request) -> StoryGenerator:
    return request.app.state.story_generator


def get_rng(request: Request) -> Optional[random.Random]:
    return getattr(request.app.state, "rng", None)


@router.post(
    "/generate-story",
    response_model=StoryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_story_endpoint(
    req: StoryRequest,
    cache: StoryCache = Depends(get_story_cache),
    generator: StoryGenerator = Depends(get_story_generator),
    rng: Optional[random.Random] = Depends(get_rng),
):
    try:
        return await generate_story(req, cache=cache, generator=generator, rng=rng)
    except StoryApiError as e:
        if e.status_code < 500:
            log.info(f"rejected story request: {e.error}")
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
