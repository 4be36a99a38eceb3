"""SQLAlchemy database models.

The engine only reads these tables; writes belong to the surrounding service.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from grocerylist.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Cuisine(Base):
    """Cuisine label (Italian, Mexican, ...)."""

    __tablename__ = "cuisines"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class MealType(Base):
    """Meal type label (Breakfast, Dinner, ...)."""

    __tablename__ = "meal_types"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class DietaryLabel(Base):
    """Dietary label (Vegetarian, Gluten-Free, ...)."""

    __tablename__ = "dietary_labels"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class IngredientCategoryOverride(Base):
    """User-learned grocery category for an ingredient name."""

    __tablename__ = "ingredient_category_overrides"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ingredient_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    override_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("idx_category_overrides_category", "category"),)
