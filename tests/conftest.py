"""Pytest configuration and shared fixtures."""

import pytest

from grocerylist.config import get_settings
from grocerylist.database import Base, create_session_factory
from grocerylist.models import Cuisine, DietaryLabel, MealType

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that touch a database")
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the host environment and cached settings."""
    monkeypatch.delenv("FUZZY_MATCHING_ENABLED", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def multi_recipe_lines():
    """Ingredient lines from three recipes with overlapping ingredients."""
    return [
        # Recipe 1: stir fry
        {"recipeId": "recipe-1", "originalText": "1 red bell pepper, sliced"},
        {"recipeId": "recipe-1", "originalText": "1 onion, diced"},
        {"recipeId": "recipe-1", "originalText": "2 tbsp olive oil"},
        {"recipeId": "recipe-1", "originalText": "salt and pepper to taste"},
        # Recipe 2: fajitas
        {"recipeId": "recipe-2", "originalText": "1 green bell pepper"},
        {"recipeId": "recipe-2", "originalText": "1/2 onion, sliced"},
        {"recipeId": "recipe-2", "originalText": "3 tbsp olive oil"},
        {"recipeId": "recipe-2", "originalText": "Salt & Pepper"},
        # Recipe 3: bread
        {"recipeId": "recipe-3", "originalText": "2 cups flour"},
        {"recipeId": "recipe-3", "originalText": "1 tsp black pepper"},
    ]


@pytest.fixture
def ingredient_rows():
    """Ingredient rows joined with recipe servings, as read from storage."""
    return [
        {
            "recipe_id": "r1",
            "raw_text": "2 cups all-purpose flour",
            "quantity": "2",
            "unit": "cups",
            "ingredient_name": "all-purpose flour",
            "recipe_servings": "4 servings",
        },
        {
            "recipe_id": "r1",
            "raw_text": "2 large eggs",
            "quantity": "2",
            "unit": None,
            "ingredient_name": "eggs",
            "recipe_servings": "4 servings",
        },
        {
            "recipe_id": "r2",
            "raw_text": "1 cup flour",
            "quantity": "1",
            "unit": "cup",
            "ingredient_name": "flour",
            "recipe_servings": "Serves 2",
        },
        {
            "recipe_id": "r2",
            "raw_text": "1 lb chicken breast",
            "quantity": "1",
            "unit": "lb",
            "ingredient_name": "chicken breast",
            "recipe_servings": "Serves 2",
        },
    ]


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def session_factory():
    """In-memory SQLite session factory with all tables created."""
    factory = create_session_factory("sqlite://")
    engine = factory.kw["bind"]
    Base.metadata.create_all(engine)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def seeded_labels(session_factory):
    """Label tables populated in a known sort order."""
    with session_factory() as session:
        session.add_all(
            [
                Cuisine(id="c-mex", name="Mexican", sort_order=2),
                Cuisine(id="c-ita", name="Italian", sort_order=1),
                MealType(id="m-din", name="Dinner", sort_order=1),
                MealType(id="m-bre", name="Breakfast", sort_order=0),
                DietaryLabel(id="d-veg", name="Vegetarian", sort_order=0),
                DietaryLabel(id="d-gf", name="Gluten-Free", sort_order=1),
            ]
        )
        session.commit()
    return session_factory
