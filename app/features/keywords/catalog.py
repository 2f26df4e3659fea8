# app/features/keywords/catalog.py
import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

# Theme categories used for validation and random keyword generation
KEYWORD_CATALOG: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "games":      ("Minecraft", "Roblox", "Fortnite", "Among Us"),
    "characters": ("boy", "girl", "wizard", "warrior"),
    "elements":   ("magic", "adventure", "mystery", "friendship"),
    "settings":   ("castle", "forest", "space", "underwater"),
})

ALL_KEYWORDS: Tuple[str, ...] = tuple(k for words in KEYWORD_CATALOG.values() for k in words)
_ALL_KEYWORDS_LOWER = frozenset(k.lower() for k in ALL_KEYWORDS)


def catalog_as_dict() -> Dict[str, List[str]]:
    return {category: list(words) for category, words in KEYWORD_CATALOG.items()}


def total_keywords() -> int:
    return sum(len(words) for words in KEYWORD_CATALOG.values())


def is_known_keyword(keyword: str) -> bool:
    return keyword.lower() in _ALL_KEYWORDS_LOWER


def generate_random_keywords(n: int = 3, rng: Optional[random.Random] = None) -> List[str]:
    """
    Pick one keyword from each of `n` randomly chosen categories.
    Order follows the category shuffle. `rng` makes the selection reproducible.
    """
    categories: List[str] = list(KEYWORD_CATALOG.keys())
    if not 0 <= n <= len(categories):
        raise ValueError(f"n must be between 0 and {len(categories)}, got {n}")

    rand = rng or random
    rand.shuffle(categories)
    selected: List[str] = []
    for category in categories[:n]:
        options: Sequence[str] = KEYWORD_CATALOG[category]
        selected.append(rand.choice(options))
    return selected
