# scrapers/recipe.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

from config import UNTITLED


@dataclass(frozen=True)
class Recipe:
    """Normalized recipe returned by every scraper.

    ``source_url`` is the URL exactly as the caller passed it in; storage
    layers use it as a natural dedup key.
    """

    title: str
    source_url: str
    image_url: Optional[str] = None
    ingredients: Tuple[str, ...] = field(default_factory=tuple)
    instructions: Tuple[str, ...] = field(default_factory=tuple)
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None
    servings: Optional[str] = None

    def __post_init__(self):
        # Accept lists from the extractors but keep the value immutable
        object.__setattr__(self, 'ingredients', tuple(self.ingredients))
        object.__setattr__(self, 'instructions', tuple(self.instructions))
        if not self.title:
            object.__setattr__(self, 'title', UNTITLED)

    def to_dict(self):
        """Plain dict form, with lists, ready for json.dump or a database row"""
        return {
            'title': self.title,
            'image_url': self.image_url,
            'ingredients': list(self.ingredients),
            'instructions': list(self.instructions),
            'prep_time': self.prep_time,
            'cook_time': self.cook_time,
            'total_time': self.total_time,
            'servings': self.servings,
            'source_url': self.source_url,
        }
