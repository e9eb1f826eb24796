from enum import Enum
from typing import List


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    COMEDY = "Comedy"
    DOCUMENTARY = "Documentary"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    ROMANCE = "Romance"
    SCIFI = "SciFi"
    THRILLER = "Thriller"

    @classmethod
    def names(cls) -> List[str]:
        return [genre.value for genre in cls]

    @classmethod
    def parse(cls, value: str) -> "Genre":
        """Resolve a tag case-insensitively, raising ValueError for unknown tags."""
        cleaned = value.strip().lower()
        for genre in cls:
            if genre.value.lower() == cleaned or genre.name.lower() == cleaned:
                return genre
        raise ValueError(f"Unknown genre: {value!r}")
