"""Grocery store categories for shopping list items."""

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from grocerylist.logging_config import get_logger
from grocerylist.models import IngredientCategoryOverride

logger = get_logger(__name__)


PRODUCE = "Produce"
DAIRY = "Dairy & Eggs"
MEAT = "Meat & Seafood"
BAKERY = "Bakery"
PANTRY = "Pantry"
SPICES = "Spices & Seasonings"
FROZEN = "Frozen"
BEVERAGES = "Beverages"
CANNED = "Canned & Jarred"
CONDIMENTS = "Condiments & Sauces"
SNACKS = "Snacks"
OTHER = "Other"

CATEGORIES: tuple[str, ...] = (
    PRODUCE,
    DAIRY,
    MEAT,
    BAKERY,
    PANTRY,
    SPICES,
    FROZEN,
    BEVERAGES,
    CANNED,
    CONDIMENTS,
    SNACKS,
    OTHER,
)


# =============================================================================
# Ingredient -> Category Table
# =============================================================================

# fmt: off
INGREDIENT_CATEGORY_MAP: dict[str, str] = {
    # Produce - vegetables
    "tomato": PRODUCE, "tomatoes": PRODUCE, "cherry tomatoes": PRODUCE,
    "onion": PRODUCE, "onions": PRODUCE, "red onion": PRODUCE,
    "garlic": PRODUCE, "potato": PRODUCE, "potatoes": PRODUCE,
    "carrot": PRODUCE, "carrots": PRODUCE, "celery": PRODUCE,
    "bell pepper": PRODUCE, "pepper": PRODUCE, "peppers": PRODUCE,
    "lettuce": PRODUCE, "romaine lettuce": PRODUCE, "spinach": PRODUCE,
    "kale": PRODUCE, "broccoli": PRODUCE, "cauliflower": PRODUCE,
    "cucumber": PRODUCE, "zucchini": PRODUCE, "squash": PRODUCE,
    "mushroom": PRODUCE, "mushrooms": PRODUCE, "cabbage": PRODUCE,
    "corn": PRODUCE, "green beans": PRODUCE, "peas": PRODUCE,
    "asparagus": PRODUCE, "eggplant": PRODUCE, "radish": PRODUCE,
    "beet": PRODUCE, "beets": PRODUCE, "sweet potato": PRODUCE, "yam": PRODUCE,
    "ginger": PRODUCE, "jalapeno": PRODUCE, "jalapeño": PRODUCE,
    "cilantro": PRODUCE, "parsley": PRODUCE, "basil": PRODUCE,
    "arugula": PRODUCE, "chard": PRODUCE, "leek": PRODUCE, "shallot": PRODUCE,
    "scallion": PRODUCE, "green onion": PRODUCE, "bok choy": PRODUCE,
    "brussels sprouts": PRODUCE, "mixed greens": PRODUCE, "bean sprouts": PRODUCE,
    "lemongrass": PRODUCE,
    # Produce - fruits
    "apple": PRODUCE, "apples": PRODUCE, "banana": PRODUCE, "bananas": PRODUCE,
    "orange": PRODUCE, "oranges": PRODUCE, "lemon": PRODUCE, "lemons": PRODUCE,
    "lime": PRODUCE, "limes": PRODUCE, "strawberry": PRODUCE,
    "strawberries": PRODUCE, "blueberry": PRODUCE, "blueberries": PRODUCE,
    "raspberry": PRODUCE, "raspberries": PRODUCE, "blackberry": PRODUCE,
    "blackberries": PRODUCE, "grape": PRODUCE, "grapes": PRODUCE,
    "mango": PRODUCE, "pineapple": PRODUCE, "watermelon": PRODUCE,
    "cantaloupe": PRODUCE, "honeydew": PRODUCE, "peach": PRODUCE,
    "peaches": PRODUCE, "pear": PRODUCE, "pears": PRODUCE, "plum": PRODUCE,
    "plums": PRODUCE, "cherry": PRODUCE, "cherries": PRODUCE,
    "avocado": PRODUCE, "avocados": PRODUCE, "lemon zest": PRODUCE,
    "lime zest": PRODUCE, "orange zest": PRODUCE,
    # Dairy & eggs
    "milk": DAIRY, "cream": DAIRY, "heavy cream": DAIRY, "half and half": DAIRY,
    "sour cream": DAIRY, "butter": DAIRY, "buttermilk": DAIRY, "ghee": DAIRY,
    "cheese": DAIRY, "cheddar": DAIRY, "mozzarella": DAIRY, "parmesan": DAIRY,
    "feta": DAIRY, "goat cheese": DAIRY, "cream cheese": DAIRY,
    "ricotta": DAIRY, "cottage cheese": DAIRY, "yogurt": DAIRY,
    "greek yogurt": DAIRY, "egg": DAIRY, "eggs": DAIRY, "egg white": DAIRY,
    "egg yolk": DAIRY, "egg whites": DAIRY, "egg yolks": DAIRY,
    # Meat & seafood
    "chicken": MEAT, "chicken breast": MEAT, "chicken thigh": MEAT,
    "turkey": MEAT, "beef": MEAT, "ground beef": MEAT, "steak": MEAT,
    "pork": MEAT, "pork chop": MEAT, "bacon": MEAT, "sausage": MEAT,
    "ham": MEAT, "lamb": MEAT, "fish": MEAT, "salmon": MEAT, "tuna": MEAT,
    "cod": MEAT, "tilapia": MEAT, "shrimp": MEAT, "prawns": MEAT,
    "scallops": MEAT, "crab": MEAT, "lobster": MEAT, "mussels": MEAT,
    "clams": MEAT, "chorizo": MEAT, "prosciutto": MEAT, "pancetta": MEAT,
    "anchovies": MEAT,
    # Bakery
    "bread": BAKERY, "baguette": BAKERY, "roll": BAKERY, "rolls": BAKERY,
    "bun": BAKERY, "buns": BAKERY, "tortilla": BAKERY, "tortillas": BAKERY,
    "pita": BAKERY, "naan": BAKERY, "bagel": BAKERY, "bagels": BAKERY,
    "croissant": BAKERY, "muffin": BAKERY,
    # Pantry
    "flour": PANTRY, "all-purpose flour": PANTRY, "bread flour": PANTRY,
    "whole wheat flour": PANTRY, "sugar": PANTRY, "brown sugar": PANTRY,
    "powdered sugar": PANTRY, "granulated sugar": PANTRY, "honey": PANTRY,
    "maple syrup": PANTRY, "oil": PANTRY, "olive oil": PANTRY,
    "vegetable oil": PANTRY, "canola oil": PANTRY, "coconut oil": PANTRY,
    "sesame oil": PANTRY, "vinegar": PANTRY, "balsamic vinegar": PANTRY,
    "apple cider vinegar": PANTRY, "white vinegar": PANTRY,
    "rice vinegar": PANTRY, "rice": PANTRY, "white rice": PANTRY,
    "brown rice": PANTRY, "pasta": PANTRY, "spaghetti": PANTRY,
    "penne": PANTRY, "fettuccine": PANTRY, "noodles": PANTRY,
    "quinoa": PANTRY, "couscous": PANTRY, "oats": PANTRY, "oatmeal": PANTRY,
    "cereal": PANTRY, "breadcrumbs": PANTRY, "panko": PANTRY,
    "cornstarch": PANTRY, "baking powder": PANTRY, "baking soda": PANTRY,
    "yeast": PANTRY, "vanilla extract": PANTRY, "almond extract": PANTRY,
    "cocoa powder": PANTRY, "chocolate chips": PANTRY, "nuts": PANTRY,
    "almonds": PANTRY, "walnuts": PANTRY, "pecans": PANTRY, "cashews": PANTRY,
    "peanuts": PANTRY, "peanut butter": PANTRY, "almond butter": PANTRY,
    "sesame seeds": PANTRY, "lentils": PANTRY,
    # Spices & seasonings
    "salt": SPICES, "salt & pepper": SPICES, "black pepper": SPICES,
    "paprika": SPICES, "smoked paprika": SPICES, "cumin": SPICES,
    "chili powder": SPICES, "cayenne": SPICES, "oregano": SPICES,
    "thyme": SPICES, "rosemary": SPICES, "sage": SPICES, "bay leaf": SPICES,
    "bay leaves": SPICES, "cinnamon": SPICES, "nutmeg": SPICES,
    "cloves": SPICES, "allspice": SPICES, "cardamom": SPICES,
    "coriander": SPICES, "turmeric": SPICES, "curry powder": SPICES,
    "garam masala": SPICES, "red pepper flakes": SPICES,
    "garlic powder": SPICES, "onion powder": SPICES,
    "italian seasoning": SPICES, "herbs": SPICES, "dill": SPICES,
    "tarragon": SPICES, "mint": SPICES, "chives": SPICES,
    # Frozen
    "frozen peas": FROZEN, "frozen corn": FROZEN, "frozen vegetables": FROZEN,
    "frozen berries": FROZEN, "ice cream": FROZEN, "frozen pizza": FROZEN,
    # Beverages
    "water": BEVERAGES, "coffee": BEVERAGES, "tea": BEVERAGES,
    "juice": BEVERAGES, "orange juice": BEVERAGES, "apple juice": BEVERAGES,
    "soda": BEVERAGES, "beer": BEVERAGES, "wine": BEVERAGES,
    "red wine": BEVERAGES, "white wine": BEVERAGES, "broth": BEVERAGES,
    "chicken broth": BEVERAGES, "beef broth": BEVERAGES,
    "vegetable broth": BEVERAGES, "stock": BEVERAGES,
    # Canned & jarred
    "canned tomatoes": CANNED, "tomato paste": CANNED, "tomato sauce": CANNED,
    "beans": CANNED, "black beans": CANNED, "kidney beans": CANNED,
    "chickpeas": CANNED, "garbanzo beans": CANNED, "coconut milk": CANNED,
    "olives": CANNED, "pickles": CANNED, "capers": CANNED,
    "artichoke": CANNED, "artichokes": CANNED,
    # Condiments & sauces
    "ketchup": CONDIMENTS, "mustard": CONDIMENTS, "mayonnaise": CONDIMENTS,
    "mayo": CONDIMENTS, "hot sauce": CONDIMENTS, "sriracha": CONDIMENTS,
    "soy sauce": CONDIMENTS, "worcestershire sauce": CONDIMENTS,
    "fish sauce": CONDIMENTS, "barbecue sauce": CONDIMENTS,
    "bbq sauce": CONDIMENTS, "salsa": CONDIMENTS, "pesto": CONDIMENTS,
    "hummus": CONDIMENTS, "tahini": CONDIMENTS, "ranch": CONDIMENTS,
    "salad dressing": CONDIMENTS, "oyster sauce": CONDIMENTS,
    "hoisin sauce": CONDIMENTS,
    # Snacks
    "chips": SNACKS, "crackers": SNACKS, "popcorn": SNACKS,
    "pretzels": SNACKS, "cookies": SNACKS, "candy": SNACKS,
    "chocolate": SNACKS,
}
# fmt: on

# Longest keys first so "cheddar cheese" hits a specific key before "cheese"
_KEYS_BY_LENGTH: list[str] = sorted(INGREDIENT_CATEGORY_MAP, key=len, reverse=True)


def categorize_ingredient(name: str | None) -> str:
    """
    Categorize an ingredient using the static table only.

    Examples:
        "cheddar cheese" -> "Dairy & Eggs"
        "chicken broth" -> "Beverages"
        "dragon fruit extract" -> "Other"
    """
    if not name:
        return OTHER

    normalized = name.lower().strip()
    if normalized in INGREDIENT_CATEGORY_MAP:
        return INGREDIENT_CATEGORY_MAP[normalized]

    for keyword in _KEYS_BY_LENGTH:
        if keyword in normalized:
            return INGREDIENT_CATEGORY_MAP[keyword]

    return OTHER


# =============================================================================
# Overrides
# =============================================================================


class CategoryOverrideLookup(Protocol):
    """Source of user-learned categories that take precedence over the table."""

    def get_category(self, name: str) -> str | None: ...


class SqlCategoryOverrideLookup:
    """Reads learned categories from the ingredient_category_overrides table."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def get_category(self, name: str) -> str | None:
        stmt = select(IngredientCategoryOverride.category).where(
            IngredientCategoryOverride.ingredient_name == name
        )
        with self.session_factory() as session:
            return session.scalar(stmt)


class Categorizer:
    """
    Assigns a grocery category to ingredient names.

    An override lookup, when configured, is consulted first. Override
    results outside the known categories and lookup failures are logged
    and ignored so categorization always falls back to the static table.
    """

    def __init__(self, overrides: CategoryOverrideLookup | None = None):
        self.overrides = overrides

    def categorize(self, name: str | None) -> str:
        if not name:
            return OTHER

        normalized = name.lower().strip()

        if self.overrides is not None:
            override = self._lookup_override(normalized)
            if override is not None:
                return override

        return categorize_ingredient(normalized)

    def _lookup_override(self, name: str) -> str | None:
        try:
            category = self.overrides.get_category(name)
        except Exception as e:
            logger.warning(f"Category override lookup failed for {name!r}: {e}")
            return None

        if category is None:
            return None
        if category not in CATEGORIES:
            logger.warning(f"Ignoring unknown override category {category!r} for {name!r}")
            return None

        logger.debug(f"Using override category {category!r} for {name!r}")
        return category
