"""Exercise catalog entry: immutable for the engine's purposes."""

from __future__ import annotations

from dataclasses import dataclass, field

from recommendation_engine.models.enums import Category


@dataclass(frozen=True)
class Exercise:
    """A single exercise from the catalog.

    ``tags`` are free-form labels; only the recognised muscle tags take
    part in recovery logic (see ``math.muscles``). ``sets`` is a
    human-readable prescription such as "4 sets of 8-12 reps".
    """

    id: int
    name: str
    category: Category
    tags: tuple[str, ...] = field(default_factory=tuple)
    sets: str = ""
    steps: tuple[str, ...] = field(default_factory=tuple)
    image_url: str | None = None

    def __post_init__(self) -> None:
        # Accept plain strings and lists from callers; store enum + tuples
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def is_gym(self) -> bool:
        return self.category == Category.GYM
