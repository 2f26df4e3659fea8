# app/__init__.py
from .config import config, ConfigError
from .logger import get_logger
from .lib.story_cache import InMemoryStoryCache, StoryCache, generate_cache_key
from .lib.openai_client import GenerationParams, OpenAIStoryGenerator, StoryGenerator
from .features.story.schemas import StoryRequest, StoryResponse
from .features.story.service import generate_story
from .main import app


__all__ = ["app",
           "config",
           "ConfigError",
           "get_logger",
           "InMemoryStoryCache",
           "StoryCache",
           "generate_cache_key",
           "GenerationParams",
           "OpenAIStoryGenerator",
           "StoryGenerator",
           "StoryRequest",
           "StoryResponse",
           "generate_story",
           ]
