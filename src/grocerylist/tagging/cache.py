"""Label name to id lookup for auto-tagging, loaded once and shared."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from grocerylist.logging_config import get_logger
from grocerylist.models import Cuisine, DietaryLabel, MealType

logger = get_logger(__name__)


@dataclass(frozen=True)
class CategoryIds:
    """Name to id maps for the three recipe label tables."""

    cuisines: dict[str, str] = field(default_factory=dict)
    meal_types: dict[str, str] = field(default_factory=dict)
    dietary_labels: dict[str, str] = field(default_factory=dict)


LabelLoader = Callable[[], CategoryIds]


class CategoryIdCache:
    """
    Lazily loaded, process-wide label id maps.

    The loader runs at most once until ``invalidate()`` is called, even when
    several threads ask for the ids at the same time. A failed load leaves
    the cache empty so the next call retries.
    """

    def __init__(self, loader: LabelLoader):
        self._loader = loader
        self._ids: CategoryIds | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._ids is not None

    def get(self) -> CategoryIds:
        ids = self._ids
        if ids is not None:
            return ids

        with self._lock:
            if self._ids is None:
                loaded = self._loader()
                logger.info(
                    f"Loaded label ids: {len(loaded.cuisines)} cuisines, "
                    f"{len(loaded.meal_types)} meal types, "
                    f"{len(loaded.dietary_labels)} dietary labels"
                )
                self._ids = loaded
            return self._ids

    def invalidate(self) -> None:
        """Drop the loaded ids; the next ``get()`` reloads them."""
        with self._lock:
            self._ids = None


class SqlLabelLookup:
    """Loads label ids from the cuisines, meal_types and dietary_labels tables."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def __call__(self) -> CategoryIds:
        with self.session_factory() as session:
            return CategoryIds(
                cuisines=self._load(session, Cuisine),
                meal_types=self._load(session, MealType),
                dietary_labels=self._load(session, DietaryLabel),
            )

    @staticmethod
    def _load(session: Session, model: type[Cuisine] | type[MealType] | type[DietaryLabel]) -> dict[str, str]:
        stmt = select(model.id, model.name).order_by(model.sort_order)
        return {name: str(label_id) for label_id, name in session.execute(stmt)}
