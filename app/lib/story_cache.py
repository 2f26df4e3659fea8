# app/lib/story_cache.py
# In-memory story cache keyed by the normalized keyword set.
# No eviction, no expiry, no persistence: entries live as long as the process.
from typing import Dict, Iterable, Optional, Protocol, runtime_checkable


def generate_cache_key(keywords: Iterable[str]) -> str:
    """Lowercase, sort and pipe-join, so order and case don't matter."""
    return "|".join(sorted(k.lower() for k in keywords))


@runtime_checkable
class StoryCache(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def has(self, key: str) -> bool: ...

    def put(self, key: str, story: str) -> None: ...

    def __len__(self) -> int: ...


class InMemoryStoryCache:
    def __init__(self):
        self._stories: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._stories.get(key)

    def has(self, key: str) -> bool:
        return key in self._stories

    def put(self, key: str, story: str) -> None:
        # concurrent misses on the same key both land here; last write wins
        self._stories[key] = story

    def clear(self) -> None:
        self._stories = {}

    def __len__(self) -> int:
        return len(self._stories)
