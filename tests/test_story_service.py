# tests/test_story_service.py
import asyncio
import random

import pytest

from app.features.keywords.catalog import KEYWORD_CATALOG
from app.features.story.schemas import StoryRequest
from app.features.story.service import generate_story
from app.lib.errors import InvalidAgeError, InvalidKeywordsError, InvalidNameError, StoryGenerationError
from app.lib.openai_client import GenerationParams
from tests.fakes import FAKE_STORY, FakeStoryGenerator

@pytest.mark.asyncio
async def test_generate_then_serve_from_cache(story_cache, fake_generator):
    first = await generate_story(StoryRequest(keywords=["Minecraft", "magic"]), cache=story_cache, generator=fake_generator)
    second = await generate_story(StoryRequest(keywords=["MAGIC", "minecraft"]), cache=story_cache, generator=fake_generator)

    assert first.cached is False
    assert second.cached is True
    assert first.story == second.story == FAKE_STORY
    assert second.keywords_used == ["MAGIC", "minecraft"]
    assert len(fake_generator.calls) == 1
    assert len(story_cache) == 1

@pytest.mark.asyncio
async def test_fixed_generation_params_are_sent(story_cache, fake_generator):
    await generate_story(StoryRequest(keywords=["castle"]), cache=story_cache, generator=fake_generator)
    _, params = fake_generator.calls[0]
    assert params == GenerationParams()
    assert (params.max_tokens, params.temperature, params.top_p) == (300, 0.7, 0.9)
    assert (params.frequency_penalty, params.presence_penalty) == (0.5, 0.5)

@pytest.mark.asyncio
async def test_name_and_age_reach_the_prompt(story_cache, fake_generator):
    await generate_story(
        StoryRequest(keywords=["wizard"], name=" Alex!", age="10"),
        cache=story_cache, generator=fake_generator,
    )
    prompt, _ = fake_generator.calls[0]
    assert "The main character's name is Alex." in prompt
    assert "The main character is 10 years old." in prompt

@pytest.mark.asyncio
async def test_random_keywords_when_none_given(story_cache, fake_generator):
    res = await generate_story(
        StoryRequest(), cache=story_cache, generator=fake_generator, rng=random.Random(7),
    )
    assert len(res.keywords_used) == 3
    all_words = {w for words in KEYWORD_CATALOG.values() for w in words}
    assert set(res.keywords_used) <= all_words
    assert res.cached is False

@pytest.mark.asyncio
async def test_empty_keyword_list_is_used_as_given(story_cache, fake_generator):
    res = await generate_story(
        StoryRequest(keywords=[]), cache=story_cache, generator=fake_generator, rng=random.Random(7),
    )
    assert res.keywords_used == []
    assert res.cached is False
    assert story_cache.has("")
    prompt, _ = fake_generator.calls[0]
    assert prompt.startswith("Write a short story using the following keywords: .")

    again = await generate_story(StoryRequest(keywords=[]), cache=story_cache, generator=fake_generator)
    assert again.cached is True

@pytest.mark.asyncio
async def test_validation_order_name_then_age_then_keywords(story_cache, fake_generator):
    with pytest.raises(InvalidNameError):
        await generate_story(StoryRequest(keywords=["Nope"], name="123", age=99), cache=story_cache, generator=fake_generator)
    with pytest.raises(InvalidAgeError):
        await generate_story(StoryRequest(keywords=["Nope"], name="Alex", age=99), cache=story_cache, generator=fake_generator)
    with pytest.raises(InvalidKeywordsError):
        await generate_story(StoryRequest(keywords=["Nope"], name="Alex", age=9), cache=story_cache, generator=fake_generator)
    assert fake_generator.calls == []

@pytest.mark.asyncio
async def test_generation_failure_is_wrapped_and_not_cached(story_cache):
    generator = FakeStoryGenerator(error=TimeoutError("upstream timed out"))
    with pytest.raises(StoryGenerationError) as ei:
        await generate_story(StoryRequest(keywords=["space"]), cache=story_cache, generator=generator)
    assert ei.value.to_payload() == {"error": "Failed to generate story", "message": "upstream timed out"}
    assert len(story_cache) == 0

@pytest.mark.asyncio
async def test_generation_failure_without_message(story_cache):
    generator = FakeStoryGenerator(error=RuntimeError())
    with pytest.raises(StoryGenerationError) as ei:
        await generate_story(StoryRequest(keywords=["space"]), cache=story_cache, generator=generator)
    assert ei.value.message == "Unknown error occurred"

@pytest.mark.asyncio
async def test_empty_story_is_a_failure(story_cache):
    generator = FakeStoryGenerator(story="")
    with pytest.raises(StoryGenerationError):
        await generate_story(StoryRequest(keywords=["space"]), cache=story_cache, generator=generator)
    assert len(story_cache) == 0

class _SlowGenerator(FakeStoryGenerator):
    async def generate(self, prompt, params):
        self.calls.append((prompt, params))
        n = len(self.calls)
        # the first caller finishes last
        await asyncio.sleep(0.02 / n)
        return f"story #{n}"

@pytest.mark.asyncio
async def test_concurrent_misses_both_generate_last_write_wins(story_cache):
    generator = _SlowGenerator()
    req = StoryRequest(keywords=["forest", "girl"])
    a, b = await asyncio.gather(
        generate_story(req, cache=story_cache, generator=generator),
        generate_story(req, cache=story_cache, generator=generator),
    )
    assert len(generator.calls) == 2
    assert a.cached is False and b.cached is False
    assert len(story_cache) == 1
    assert (a.story, b.story) == ("story #1", "story #2")
    assert story_cache.get("forest|girl") == "story #1"
