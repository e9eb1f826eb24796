from datetime import datetime

from sqlalchemy import Enum, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, registry

from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import TITLE_MAX_LENGTH

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"
    __table_args__ = (UniqueConstraint("title", "year", name="uq_movies_title_year"),)

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH))
    director: Mapped[str] = mapped_column(String(255))
    year: Mapped[int] = mapped_column(index=True)
    duration_minutes: Mapped[int]
    genre: Mapped[Genre] = mapped_column(
        Enum(Genre, native_enum=False, values_callable=lambda enum: [g.value for g in enum], length=32),
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())
