"""
db/models/actor.py

Actor model: one ranked catalog entry, created by the API or by scraping.
"""

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin


class Actor(Base, TimestampMixin):
    """
    Persisted actor row.

    Ids are assigned by the catalog, not by the database. Rank is not
    constrained unique at the table level: scraped rows may carry rank 0
    ("unranked"), and positive-rank uniqueness is enforced by the catalog.
    Text columns carry scraped values of any length.
    """

    __tablename__ = "actors"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    rank: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    details: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    type: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Primary credit, e.g. Actor or Actress",
    )

    __table_args__ = (
        Index("ix_actors_rank", "rank"),
    )

    def __repr__(self) -> str:
        return f"<Actor id={self.id} name={self.name!r} rank={self.rank}>"
