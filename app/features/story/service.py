# app/features/story/service.py
import random
from typing import Optional

from app.config import config
from app.logger import get_logger
from app.lib.errors import StoryGenerationError
from app.lib.openai_client import GenerationParams, StoryGenerator
from app.lib.story_cache import StoryCache, generate_cache_key
from app.features.keywords.catalog import generate_random_keywords
from .prompt import build_story_prompt
from .schemas import StoryRequest, StoryResponse
from .validation import ensure_valid_keywords, sanitize_name, validate_age

log = get_logger(__name__)

async def generate_story(
    req: StoryRequest,
    *,
    cache: StoryCache,
    generator: StoryGenerator,
    rng: Optional[random.Random] = None,
    params: Optional[GenerationParams] = None,
    random_keyword_count: int = config.random_keyword_count,
) -> StoryResponse:
    """
    Validate the request (name, then age, then keywords), then serve the story
    for its keyword set from the cache or from the generator.

    Raises StoryValidationError subclasses for bad input and
    StoryGenerationError when the generator fails; nothing is cached then.
    """
    name = sanitize_name(req.name) if req.name is not None else None
    age = validate_age(req.age) if req.age is not None else None
    if req.keywords is not None:
        ensure_valid_keywords(req.keywords)
        keywords = list(req.keywords)
    else:
        keywords = generate_random_keywords(random_keyword_count, rng=rng)
        log.debug(f"no keywords given; picked {keywords}")

    cache_key = generate_cache_key(keywords)
    if cache.has(cache_key):
        log.debug(f"cache hit for '{cache_key}'")
        return StoryResponse(story=cache.get(cache_key), keywords_used=keywords, cached=True)

    log.info(f"generating story for '{cache_key}'")
    prompt = build_story_prompt(keywords, name=name, age=age)
    try:
        story = await generator.generate(prompt, params or GenerationParams())
    except Exception as e:
        log.exception(f"story generation failed for '{cache_key}'")
        raise StoryGenerationError(str(e) or None) from e
    if not story:
        log.error(f"model returned an empty story for '{cache_key}'")
        raise StoryGenerationError("Model returned an empty story")

    cache.put(cache_key, story)
    return StoryResponse(story=story, keywords_used=keywords, cached=False)
