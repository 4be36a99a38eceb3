"""Keyword tables for recipe auto-tagging.

Cuisine and meal type names must match the label names stored in the
database. Keywords match as whole words with an optional plural suffix,
so singular forms cover their plurals.
"""

# fmt: off

# =============================================================================
# Cuisines: title keywords (+3) and ingredient keywords (+1)
# =============================================================================

CUISINE_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "Italian": {
        "title": (
            "italian", "pasta", "pizza", "risotto", "lasagna", "lasagne",
            "carbonara", "marinara", "parmigiana", "bolognese", "alfredo",
            "caprese", "bruschetta", "focaccia", "gnocchi", "tiramisu",
            "panzanella", "osso buco", "saltimbocca", "penne", "fettuccine",
            "spaghetti", "linguine", "ravioli", "tortellini", "minestrone",
            "antipasto", "primavera", "piccata", "marsala", "puttanesca",
            "arrabiata", "cioppino", "calzone", "stromboli", "cannoli",
        ),
        "ingredients": (
            "parmesan", "parmigiano", "mozzarella", "prosciutto", "pancetta",
            "balsamic", "arborio", "mascarpone", "pecorino", "ricotta",
            "provolone", "basil pesto", "marinara", "italian sausage",
            "sun-dried tomato",
        ),
    },
    "Mexican": {
        "title": (
            "mexican", "taco", "burrito", "enchilada", "quesadilla", "fajita",
            "tamale", "chimichanga", "tostada", "pozole", "mole", "carnitas",
            "barbacoa", "salsa verde", "pico de gallo", "guacamole",
            "chile relleno", "elote", "churro", "huevos rancheros",
            "chilaquiles", "tex-mex", "nachos", "torta", "sopes", "taquito",
        ),
        "ingredients": (
            "tortilla", "cilantro", "jalapeño", "jalapeno", "chipotle",
            "cotija", "queso fresco", "queso", "poblano", "tomatillo",
            "mexican oregano", "masa", "adobo", "habanero", "serrano pepper",
            "ancho chili", "guajillo", "epazote", "tajin",
        ),
    },
    "Chinese": {
        "title": (
            "chinese", "stir-fry", "stir fry", "fried rice", "lo mein",
            "chow mein", "kung pao", "general tso", "orange chicken",
            "sweet and sour", "dim sum", "dumpling", "potsticker",
            "pot sticker", "mapo tofu", "hot pot", "wonton", "egg roll",
            "spring roll", "chow fun", "dan dan", "peking duck", "char siu",
            "szechuan", "sichuan", "hunan", "cantonese", "mongolian beef",
        ),
        "ingredients": (
            "soy sauce", "sesame oil", "rice vinegar", "hoisin",
            "oyster sauce", "bok choy", "water chestnut", "bamboo shoots",
            "five spice", "shaoxing wine", "chili oil", "black bean sauce",
            "plum sauce", "wonton wrapper", "star anise",
        ),
    },
    "Japanese": {
        "title": (
            "japanese", "sushi", "sashimi", "ramen", "udon", "soba",
            "teriyaki", "tempura", "katsu", "tonkatsu", "yakitori",
            "miso soup", "donburi", "gyoza", "okonomiyaki", "takoyaki",
            "hibachi", "teppanyaki", "onigiri", "edamame", "yakisoba",
            "karaage",
        ),
        "ingredients": (
            "miso", "mirin", "sake", "nori", "wasabi", "dashi", "ponzu",
            "panko", "shiso", "furikake", "kombu", "bonito", "togarashi",
            "yuzu", "matcha",
        ),
    },
    "Indian": {
        "title": (
            "indian", "curry", "tikka masala", "biryani", "vindaloo", "korma",
            "saag", "dal", "daal", "samosa", "pakora", "tandoori", "naan",
            "rogan josh", "butter chicken", "palak paneer", "chana masala",
            "aloo gobi", "tikka", "masala", "madras", "jalfrezi", "bhaji",
            "chapati", "paratha", "dosa", "idli", "raita", "chutney",
        ),
        "ingredients": (
            "turmeric", "garam masala", "cardamom", "paneer", "ghee",
            "curry leaves", "fenugreek", "mustard seeds", "tamarind",
            "asafoetida", "curry powder", "tandoori spice", "cumin seeds",
            "coriander seeds",
        ),
    },
    "Thai": {
        "title": (
            "thai", "pad thai", "tom yum", "tom kha", "green curry",
            "red curry", "yellow curry", "massaman", "panang",
            "drunken noodles", "pad see ew", "larb", "som tam", "satay",
            "khao soi", "basil chicken",
        ),
        "ingredients": (
            "fish sauce", "thai basil", "lemongrass", "galangal",
            "kaffir lime", "thai chili", "coconut milk", "palm sugar",
            "tamarind paste", "thai curry paste", "sriracha",
            "sweet chili sauce",
        ),
    },
    "Mediterranean": {
        "title": (
            "mediterranean", "falafel", "tabbouleh", "tabouleh", "shakshuka",
            "pita", "dolma", "dolmades", "fattoush",
        ),
        "ingredients": (
            "tahini", "za'atar", "zaatar", "sumac", "pomegranate molasses",
            "harissa", "preserved lemon", "dukkah",
        ),
    },
    "French": {
        "title": (
            "french", "coq au vin", "ratatouille", "bouillabaisse",
            "cassoulet", "quiche", "soufflé", "souffle", "crêpe", "crepe",
            "croissant", "béarnaise", "bearnaise", "hollandaise", "béchamel",
            "bechamel", "velouté", "veloute", "bourguignon", "provençal",
            "provencal", "gratin", "au gratin", "confit", "bourgogne",
            "lyonnaise", "niçoise", "nicoise", "croque monsieur",
            "croque madame", "baguette",
        ),
        "ingredients": (
            "shallot", "tarragon", "dijon mustard", "gruyere", "brie",
            "camembert", "herbes de provence", "crème fraîche",
            "creme fraiche",
        ),
    },
    "Greek": {
        "title": (
            "greek", "gyro", "souvlaki", "moussaka", "spanakopita",
            "pastitsio", "tzatziki", "greek salad", "baklava", "dolmades",
            "avgolemono", "horiatiki",
        ),
        "ingredients": (
            "feta", "kalamata", "phyllo", "filo", "ouzo", "oregano",
            "greek yogurt",
        ),
    },
    "Korean": {
        "title": (
            "korean", "kimchi", "bibimbap", "bulgogi", "bulgoki", "kalbi",
            "galbi", "japchae", "tteokbokki", "korean fried chicken",
            "sundubu", "samgyeopsal", "jjigae", "banchan", "kimbap",
            "dakgalbi",
        ),
        "ingredients": (
            "gochujang", "gochugaru", "doenjang", "korean chili",
            "korean pear", "kimchi", "sesame oil",
        ),
    },
    "Vietnamese": {
        "title": (
            "vietnamese", "pho", "banh mi", "bun", "goi cuon", "summer roll",
            "bun bo hue", "com tam", "cao lau", "banh xeo",
        ),
        "ingredients": (
            "fish sauce", "rice noodles", "bean sprouts", "vietnamese mint",
            "rice paper", "lemongrass", "hoisin",
        ),
    },
    "Middle Eastern": {
        "title": (
            "middle eastern", "hummus", "falafel", "shawarma", "kebab",
            "kofta", "tabouleh", "baba ganoush", "labneh", "fattoush",
            "manakeesh", "muhammara", "kibbeh", "baklava", "pita",
        ),
        "ingredients": (
            "tahini", "chickpea", "sumac", "za'atar", "zaatar",
            "pomegranate molasses", "bulgur", "harissa", "preserved lemon",
            "rose water", "orange blossom",
        ),
    },
    "Spanish": {
        "title": (
            "spanish", "paella", "tapas", "gazpacho", "tortilla española",
            "patatas bravas", "churro", "sangria", "albondigas", "empanada",
            "croquetas", "pimientos",
        ),
        "ingredients": (
            "saffron", "chorizo", "manchego", "paprika", "smoked paprika",
            "sherry", "serrano ham", "piquillo",
        ),
    },
    "American": {
        "title": (
            "burger", "hot dog", "bbq", "barbecue", "fried chicken",
            "mac and cheese", "mac & cheese", "meatloaf", "meat loaf",
            "pulled pork", "ribs", "cornbread", "coleslaw", "american",
            "southern", "cajun", "creole", "nashville hot", "buffalo wings",
            "buffalo chicken", "jambalaya", "gumbo", "po boy", "po' boy",
            "biscuits and gravy", "grilled cheese", "club sandwich",
            "sloppy joe", "pot roast", "chili", "clam chowder",
            "lobster roll", "cobb salad", "waldorf", "philly cheesesteak",
            "cheesesteak",
        ),
        "ingredients": (
            "ranch", "buttermilk", "cornmeal", "bourbon", "old bay",
            "liquid smoke", "bbq sauce", "barbecue sauce",
        ),
    },
}

# =============================================================================
# Meal types: title keywords (+5) and description keywords (+2)
# =============================================================================

MEAL_TYPE_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "Breakfast": {
        "title": (
            "breakfast", "brunch", "pancake", "waffle", "french toast",
            "omelet", "omelette", "frittata", "scrambled eggs", "fried eggs",
            "poached eggs", "eggs benedict", "granola", "oatmeal", "porridge",
            "smoothie bowl", "breakfast burrito", "breakfast sandwich",
            "hash browns", "home fries", "breakfast potatoes",
            "avocado toast", "egg bites", "quiche", "shakshuka",
            "huevos rancheros", "chilaquiles", "breakfast casserole",
            "egg muffin",
        ),
        "description": ("breakfast", "brunch", "morning"),
    },
    "Lunch": {
        "title": (
            "lunch", "sandwich", "panini", "wrap", "blt", "grilled cheese",
            "club sandwich", "tuna salad", "chicken salad", "egg salad",
            "soup and salad", "lunch bowl",
        ),
        "description": ("lunch", "midday", "lunchtime"),
    },
    "Dinner": {
        "title": (
            "dinner", "supper", "pot roast", "roast chicken", "roast beef",
            "braised", "weeknight dinner", "sunday dinner", "date night",
            "family dinner",
        ),
        "description": (
            "dinner", "supper", "main course", "entrée", "entree", "weeknight",
        ),
    },
    "Dessert": {
        "title": (
            "dessert", "cake", "pie", "cookie", "brownie", "cupcake",
            "cheesecake", "ice cream", "gelato", "sorbet", "pudding",
            "mousse", "tart", "pastry", "donut", "doughnut", "fudge", "candy",
            "frosting", "icing", "ganache", "meringue", "macaron", "macaroon",
            "éclair", "eclair", "cannoli", "panna cotta", "crème brûlée",
            "creme brulee", "flan", "cobbler", "crisp", "crumble", "parfait",
            "truffle", "tiramisu", "baklava", "churro", "blondie", "scone",
            "biscotti", "shortcake", "snickerdoodle",
        ),
        "description": ("dessert", "sweet treat"),
    },
    "Snack": {
        "title": (
            "snack", "trail mix", "popcorn", "energy balls", "energy bites",
            "protein balls", "protein bites", "granola bar", "energy bar",
            "bite-sized", "munchies", "party mix", "cheese ball",
        ),
        "description": ("snack", "after school", "game day", "movie night"),
    },
    "Appetizer": {
        "title": (
            "appetizer", "starter", "bruschetta", "crostini", "canapé",
            "canape", "small plate", "wings", "sliders", "nachos",
            "spring roll", "egg roll", "dumpling", "pot sticker",
            "potsticker", "deviled eggs", "stuffed mushrooms",
            "shrimp cocktail", "crab cakes", "spinach dip", "artichoke dip",
            "buffalo dip", "jalapeño poppers", "jalapeno poppers",
            "mozzarella sticks", "onion rings", "ceviche", "carpaccio",
            "tartare", "hummus", "guacamole", "salsa", "cheese board",
            "charcuterie",
        ),
        "description": (
            "appetizer", "starter", "hors d'oeuvre", "small plate",
            "finger food",
        ),
    },
    "Side Dish": {
        "title": (
            "side dish", "side", "slaw", "coleslaw", "potato salad",
            "macaroni salad", "pasta salad", "roasted vegetables",
            "roasted veggies", "grilled vegetables", "steamed vegetables",
            "sautéed vegetables", "sauteed vegetables", "mashed potatoes",
            "baked potato", "french fries", "fries", "rice pilaf",
            "garlic bread", "dinner rolls", "biscuits", "cornbread",
            "stuffing", "green beans", "roasted broccoli",
            "roasted cauliflower", "glazed carrots", "creamed spinach",
            "au gratin", "scalloped potatoes", "mac and cheese",
            "mac & cheese",
        ),
        "description": ("side dish", "side", "accompaniment"),
    },
    "Beverage": {
        "title": (
            "beverage", "drink", "cocktail", "mocktail", "smoothie", "shake",
            "milkshake", "juice", "lemonade", "iced tea", "hot chocolate",
            "cider", "punch", "sangria", "margarita", "mojito", "daiquiri",
            "martini", "old fashioned", "manhattan", "negroni",
            "whiskey sour", "bloody mary", "mimosa", "bellini", "spritzer",
            "latte", "cappuccino", "espresso", "frappe", "horchata",
            "agua fresca", "eggnog",
        ),
        "description": ("drink", "beverage", "cocktail", "sip"),
    },
}

# =============================================================================
# Dietary keyword classes (matched against ingredient names)
# =============================================================================

MEAT_KEYWORDS = (
    "chicken", "beef", "pork", "lamb", "turkey", "duck", "veal",
    "bacon", "sausage", "ham", "prosciutto", "salami", "pepperoni",
    "steak", "brisket", "carnitas", "pancetta", "guanciale", "lard",
    "tallow", "chorizo", "bratwurst", "hot dog", "meatball", "ribs",
    "tenderloin", "roast", "drumstick", "thigh", "breast", "wing",
)

FISH_KEYWORDS = (
    "fish", "salmon", "tuna", "shrimp", "prawn", "scallop", "lobster",
    "crab", "mussel", "clam", "oyster", "anchovies", "sardine", "trout",
    "cod", "tilapia", "halibut", "sea bass", "swordfish", "mahi mahi",
    "catfish", "snapper", "calamari", "squid", "octopus", "crawfish",
    "crayfish",
)

ANIMAL_BROTH_KEYWORDS = (
    "chicken broth", "beef broth", "bone broth", "chicken stock",
    "beef stock", "fish stock", "fish sauce", "oyster sauce",
    "worcestershire", "gelatin", "anchovy",
)

DAIRY_KEYWORDS = (
    "milk", "cream", "butter", "cheese", "yogurt", "ricotta", "mozzarella",
    "parmesan", "cheddar", "feta", "brie", "camembert", "gruyere",
    "provolone", "gorgonzola", "mascarpone", "pecorino", "whey", "casein",
    "lactose", "ghee", "buttermilk", "half and half", "half-and-half",
)

EGG_KEYWORDS = ("egg", "egg yolk", "egg white", "mayonnaise")

GLUTEN_KEYWORDS = (
    "flour", "wheat", "bread", "pasta", "noodles", "spaghetti",
    "fettuccine", "penne", "linguine", "couscous", "bulgur", "bagel",
    "croissant", "biscuit", "breadcrumbs", "panko", "soy sauce", "malt",
    "barley", "rye", "seitan", "farro", "semolina", "durum", "graham",
    "tortilla", "pita", "naan", "baguette", "roll", "bun", "cracker",
    "pretzel",
)

NUT_KEYWORDS = (
    "almond", "walnut", "cashew", "pecan", "pistachio", "hazelnut",
    "macadamia", "brazil nut", "pine nut", "chestnut", "peanut",
    "peanut butter", "almond butter", "cashew butter", "nutella",
    "marzipan", "almond extract", "almond flour", "almond milk", "nut",
    "mixed nuts", "trail mix",
)

HIGH_CARB_KEYWORDS = (
    "sugar", "flour", "bread", "pasta", "rice", "potato", "corn", "oats",
    "oatmeal", "quinoa", "couscous", "bulgur", "beans", "chickpea",
    "lentil", "honey", "maple syrup", "agave", "banana", "tortilla",
    "noodles", "cereal", "cornstarch", "brown sugar", "powdered sugar",
)

PROTEIN_KEYWORDS = (
    "chicken", "turkey", "beef", "pork", "lamb", "fish", "salmon", "tuna",
    "shrimp", "egg", "greek yogurt", "cottage cheese", "tofu", "tempeh",
    "protein powder", "beans", "lentil", "chickpea", "quinoa", "edamame",
    "steak",
)

# An ingredient containing one of these phrases is not tested against the class
MEAT_EXCLUSIONS = (
    "vegan", "vegetarian", "meatless", "plant-based", "plant based",
    "chicken of the woods",
)

FISH_EXCLUSIONS = MEAT_EXCLUSIONS + ("oyster mushroom", "king oyster")

DAIRY_EXCLUSIONS = (
    "vegan", "dairy-free", "dairy free", "non-dairy", "plant-based",
    "peanut butter", "almond butter", "cashew butter", "sunflower butter",
    "apple butter", "cocoa butter", "nut butter", "coconut milk",
    "coconut cream", "almond milk", "oat milk", "soy milk", "rice milk",
    "cashew milk", "cream of tartar",
)

EGG_EXCLUSIONS = ("vegan", "egg-free", "egg free", "eggless")

GLUTEN_EXCLUSIONS = (
    "gluten-free", "gluten free", "corn tortilla", "rice noodles",
    "rice flour", "almond flour", "coconut flour", "oat flour",
    "chickpea flour",
)

NUT_EXCLUSIONS = ("nut-free", "nut free", "water chestnut")

# fmt: on
