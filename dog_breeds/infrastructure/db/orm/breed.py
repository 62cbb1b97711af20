from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dog_breeds.infrastructure.db.base import Base
from dog_breeds.utils.datetime_tz import utcnow


class BreedORM(Base):
    __tablename__ = "dog_breeds"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    breed_group: Mapped[str] = mapped_column(String(50), nullable=False)
    temperament: Mapped[str] = mapped_column(String(200), nullable=False)
    life_span: Mapped[str] = mapped_column(String(50), nullable=False)
    height_min_cm: Mapped[int] = mapped_column(Integer, nullable=False)
    height_max_cm: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_min_kg: Mapped[float] = mapped_column(Float, nullable=False)
    weight_max_kg: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
