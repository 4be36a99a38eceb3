"""Ordered ingredient-family rules.

Each rule maps a set of name variants onto one canonical shopping key. Rules
are evaluated top to bottom and the first match wins, so a specific product
("peanut butter", "egg noodles", "garlic powder") always sits above the
generic word it contains ("butter", "egg", "garlic").
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class FamilyRule:
    """A compiled pattern and the canonical key/display it maps to."""

    pattern: re.Pattern
    canonical: str
    display: str


_VOWELS = "aeiou"


def _plural_pattern(term: str) -> str:
    """Regex for a term that also accepts the plural of its last word."""
    words = re.split(r"[\s-]+", term.strip().lower())
    last = words[-1]
    if last.endswith("y") and len(last) > 2 and last[-2] not in _VOWELS:
        last_pattern = f"(?:{re.escape(last)}|{re.escape(last[:-1])}ies)"
    elif last.endswith("f"):
        last_pattern = f"(?:{re.escape(last)}s?|{re.escape(last[:-1])}ves)"
    else:
        last_pattern = f"{re.escape(last)}(?:e?s)?"
    return r"[\s-]+".join([re.escape(word) for word in words[:-1]] + [last_pattern])


def family(canonical: str, display: str, *terms: str) -> FamilyRule:
    """Build a rule matching any of the terms as whole words."""
    alternatives = "|".join(_plural_pattern(term) for term in terms)
    return FamilyRule(re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE), canonical, display)


def pattern(canonical: str, display: str, regex: str) -> FamilyRule:
    """Build a rule from a raw regular expression."""
    return FamilyRule(re.compile(regex, re.IGNORECASE), canonical, display)


# =============================================================================
# Family Table
# =============================================================================

# fmt: off
FAMILY_RULES: list[FamilyRule] = [
    # -------------------------------------------------------------------------
    # Seasonings, pastes and baking products named after a generic ingredient
    # -------------------------------------------------------------------------
    family("gochugaru", "Gochugaru", "gochugaru", "korean chili flake", "korean red pepper flake"),
    family("gochujang", "Gochujang", "gochujang", "korean chili paste", "korean red pepper paste"),
    family("red pepper flakes", "Red pepper flakes", "red pepper flake", "crushed red pepper", "chili flake", "chile flake", "chilli flake", "pepper flake"),
    family("lemon pepper", "Lemon pepper seasoning", "lemon pepper seasoning", "lemon pepper"),
    family("garlic powder", "Garlic powder", "garlic powder", "granulated garlic"),
    family("garlic salt", "Garlic salt", "garlic salt"),
    family("onion powder", "Onion powder", "onion powder", "granulated onion"),
    family("onion salt", "Onion salt", "onion salt"),
    family("celery salt", "Celery salt", "celery salt"),
    family("celery seed", "Celery seed", "celery seed"),
    family("seasoned salt", "Seasoned salt", "seasoned salt", "seasoning salt"),
    family("chipotle powder", "Chipotle powder", "chipotle powder", "chipotle chili powder", "chipotle chile powder"),
    family("chili powder", "Chili powder", "chili powder", "chile powder", "chilli powder"),
    family("curry powder", "Curry powder", "curry powder"),
    family("curry paste", "Curry paste", "curry paste"),
    family("garam masala", "Garam masala", "garam masala"),
    family("italian seasoning", "Italian seasoning", "italian seasoning", "italian herb", "herbes de provence"),
    family("cajun seasoning", "Cajun seasoning", "cajun seasoning", "creole seasoning"),
    family("taco seasoning", "Taco seasoning", "taco seasoning", "fajita seasoning"),
    family("five spice powder", "Five spice powder", "five spice", "5 spice", "chinese five spice"),
    family("pumpkin pie spice", "Pumpkin pie spice", "pumpkin pie spice", "pumpkin spice"),
    family("poultry seasoning", "Poultry seasoning", "poultry seasoning"),
    family("old bay seasoning", "Old Bay seasoning", "old bay"),
    family("almond extract", "Almond extract", "almond extract"),
    family("peppermint extract", "Peppermint extract", "peppermint extract", "mint extract"),
    family("chocolate chips", "Chocolate chips", "chocolate chip", "chocolate morsel", "chocolate chunk"),
    family("chocolate", "Chocolate", "milk chocolate", "dark chocolate", "white chocolate", "baking chocolate", "semisweet chocolate", "semi sweet chocolate", "bittersweet chocolate", "unsweetened chocolate", "chocolate bar", "chocolate"),
    family("cocoa powder", "Cocoa powder", "cocoa powder", "cacao powder", "cocoa"),
    family("cream of tartar", "Cream of tartar", "cream of tartar"),
    family("cream of mushroom soup", "Cream of mushroom soup", "cream of mushroom"),
    family("cream of chicken soup", "Cream of chicken soup", "cream of chicken"),
    # -------------------------------------------------------------------------
    # Broths and stocks
    # -------------------------------------------------------------------------
    family("chicken broth", "Chicken broth", "chicken broth", "chicken stock", "chicken bouillon", "chicken bone broth"),
    family("beef broth", "Beef broth", "beef broth", "beef stock", "beef bouillon", "beef consomme"),
    family("vegetable broth", "Vegetable broth", "vegetable broth", "vegetable stock", "veggie broth", "veggie stock", "vegetable bouillon"),
    family("fish stock", "Fish stock", "fish stock", "fish broth", "seafood stock", "dashi"),
    family("bouillon cubes", "Bouillon cubes", "bouillon cube", "stock cube", "bouillon"),
    family("broth", "Broth", "bone broth", "broth"),
    # -------------------------------------------------------------------------
    # Vinegars
    # -------------------------------------------------------------------------
    family("apple cider vinegar", "Apple cider vinegar", "apple cider vinegar", "cider vinegar"),
    family("balsamic vinegar", "Balsamic vinegar", "balsamic vinegar", "balsamic glaze", "balsamic reduction", "balsamic"),
    family("red wine vinegar", "Red wine vinegar", "red wine vinegar"),
    family("white wine vinegar", "White wine vinegar", "white wine vinegar", "champagne vinegar"),
    family("sherry vinegar", "Sherry vinegar", "sherry vinegar"),
    family("rice vinegar", "Rice vinegar", "rice vinegar", "rice wine vinegar", "seasoned rice vinegar"),
    family("white vinegar", "White vinegar", "white vinegar", "distilled vinegar", "distilled white vinegar"),
    family("vinegar", "Vinegar", "vinegar"),
    # -------------------------------------------------------------------------
    # Sauces and condiments
    # -------------------------------------------------------------------------
    family("soy sauce", "Soy sauce", "soy sauce", "tamari", "shoyu"),
    family("coconut aminos", "Coconut aminos", "coconut amino"),
    family("fish sauce", "Fish sauce", "fish sauce", "nam pla"),
    family("oyster sauce", "Oyster sauce", "oyster sauce"),
    family("hoisin sauce", "Hoisin sauce", "hoisin"),
    family("sweet chili sauce", "Sweet chili sauce", "sweet chili sauce", "sweet chilli sauce", "sweet chile sauce"),
    family("chili garlic sauce", "Chili garlic sauce", "chili garlic sauce", "garlic chili sauce", "sambal oelek", "sambal"),
    family("sriracha", "Sriracha", "sriracha"),
    family("hot sauce", "Hot sauce", "hot sauce", "tabasco", "buffalo sauce", "frank's red hot"),
    family("worcestershire sauce", "Worcestershire sauce", "worcestershire", "worcester sauce"),
    family("bbq sauce", "BBQ sauce", "bbq sauce", "barbecue sauce", "barbeque sauce"),
    family("teriyaki sauce", "Teriyaki sauce", "teriyaki"),
    family("steak sauce", "Steak sauce", "steak sauce"),
    family("enchilada sauce", "Enchilada sauce", "enchilada sauce"),
    family("alfredo sauce", "Alfredo sauce", "alfredo"),
    family("peanut sauce", "Peanut sauce", "peanut sauce", "satay sauce"),
    family("ponzu", "Ponzu sauce", "ponzu"),
    family("ketchup", "Ketchup", "ketchup", "catsup"),
    family("mayonnaise", "Mayonnaise", "mayonnaise", "mayo", "aioli"),
    family("dijon mustard", "Dijon mustard", "dijon"),
    family("whole grain mustard", "Whole grain mustard", "whole grain mustard", "grainy mustard", "stone ground mustard", "stoneground mustard"),
    family("mustard seeds", "Mustard seeds", "mustard seed"),
    family("mustard powder", "Mustard powder", "mustard powder", "dry mustard", "ground mustard"),
    family("mustard greens", "Mustard greens", "mustard green"),
    family("yellow mustard", "Yellow mustard", "yellow mustard", "prepared mustard", "mustard"),
    family("salsa", "Salsa", "salsa", "pico de gallo"),
    family("pesto", "Pesto", "pesto"),
    family("tahini", "Tahini", "tahini", "sesame paste"),
    family("miso paste", "Miso paste", "miso"),
    family("harissa", "Harissa", "harissa"),
    family("mirin", "Mirin", "mirin"),
    family("shaoxing wine", "Shaoxing wine", "shaoxing", "chinese cooking wine", "rice wine"),
    family("hummus", "Hummus", "hummus", "houmous"),
    family("tzatziki", "Tzatziki", "tzatziki"),
    family("pomegranate molasses", "Pomegranate molasses", "pomegranate molasses"),
    family("pickles", "Pickles", "pickle", "dill pickle", "pickle relish", "relish", "gherkin", "cornichon"),
    family("jam", "Jam", "jam", "jelly", "preserves", "marmalade", "fruit spread"),
    # -------------------------------------------------------------------------
    # Oils and fats
    # -------------------------------------------------------------------------
    family("olive oil", "Olive oil", "olive oil", "evoo"),
    family("coconut oil", "Coconut oil", "coconut oil"),
    family("sesame oil", "Sesame oil", "sesame oil"),
    family("avocado oil", "Avocado oil", "avocado oil"),
    family("peanut oil", "Peanut oil", "peanut oil"),
    family("chili oil", "Chili oil", "chili oil", "chile oil", "chili crisp"),
    family("truffle oil", "Truffle oil", "truffle oil"),
    family("vegetable oil", "Vegetable oil", "vegetable oil", "canola oil", "neutral oil", "sunflower oil", "corn oil", "safflower oil", "grapeseed oil", "rapeseed oil", "cooking oil", "frying oil"),
    family("cooking spray", "Cooking spray", "cooking spray", "nonstick spray", "non stick spray", "nonstick cooking spray"),
    family("shortening", "Shortening", "shortening", "crisco"),
    family("lard", "Lard", "lard", "bacon fat", "bacon grease", "tallow"),
    pattern("oil", "Oil", r"^oils?$"),
    # -------------------------------------------------------------------------
    # Nut butters, plant milks and canned milks
    # -------------------------------------------------------------------------
    family("peanut butter", "Peanut butter", "peanut butter"),
    family("almond butter", "Almond butter", "almond butter"),
    family("cashew butter", "Cashew butter", "cashew butter"),
    family("sunflower seed butter", "Sunflower seed butter", "sunflower seed butter", "sunbutter"),
    family("apple butter", "Apple butter", "apple butter"),
    family("almond milk", "Almond milk", "almond milk"),
    family("oat milk", "Oat milk", "oat milk"),
    family("soy milk", "Soy milk", "soy milk", "soymilk"),
    family("rice milk", "Rice milk", "rice milk"),
    family("cashew milk", "Cashew milk", "cashew milk"),
    family("coconut milk", "Coconut milk", "coconut milk"),
    family("coconut cream", "Coconut cream", "coconut cream", "cream of coconut"),
    family("sweetened condensed milk", "Sweetened condensed milk", "condensed milk"),
    family("evaporated milk", "Evaporated milk", "evaporated milk"),
    family("powdered milk", "Powdered milk", "powdered milk", "milk powder", "dry milk"),
    family("lima beans", "Lima beans", "lima bean", "butter bean"),
    # -------------------------------------------------------------------------
    # Flours, starches and meals
    # -------------------------------------------------------------------------
    family("almond flour", "Almond flour", "almond flour", "almond meal", "ground almond"),
    family("coconut flour", "Coconut flour", "coconut flour"),
    family("rice flour", "Rice flour", "rice flour"),
    family("chickpea flour", "Chickpea flour", "chickpea flour", "gram flour", "besan"),
    family("oat flour", "Oat flour", "oat flour"),
    family("buckwheat flour", "Buckwheat flour", "buckwheat flour"),
    family("masa harina", "Masa harina", "masa harina", "masa"),
    family("cornmeal", "Cornmeal", "cornmeal", "corn meal", "polenta"),
    family("cornstarch", "Cornstarch", "cornstarch", "corn starch", "cornflour", "corn flour"),
    family("potato starch", "Potato starch", "potato starch"),
    family("tapioca starch", "Tapioca starch", "tapioca starch", "tapioca flour", "tapioca"),
    family("arrowroot", "Arrowroot", "arrowroot"),
    family("bread flour", "Bread flour", "bread flour", "strong flour"),
    family("cake flour", "Cake flour", "cake flour", "pastry flour"),
    family("whole wheat flour", "Whole wheat flour", "whole wheat flour", "wholemeal flour", "whole grain flour", "wheat flour"),
    family("self-rising flour", "Self-rising flour", "self rising flour", "self raising flour"),
    family("gluten-free flour", "Gluten-free flour", "gluten free flour", "gluten free flour blend", "gf flour"),
    family("all-purpose flour", "All-purpose flour", "all purpose flour", "plain flour", "white flour", "ap flour"),
    pattern("all-purpose flour", "All-purpose flour", r"^flours?$"),
    family("semolina", "Semolina", "semolina"),
    family("breadcrumbs", "Breadcrumbs", "breadcrumb", "bread crumb", "panko"),
    # -------------------------------------------------------------------------
    # Sugars and sweeteners
    # -------------------------------------------------------------------------
    family("powdered sugar", "Powdered sugar", "powdered sugar", "confectioners sugar", "confectioners' sugar", "confectioner's sugar", "icing sugar"),
    family("brown sugar", "Brown sugar", "brown sugar"),
    family("coconut sugar", "Coconut sugar", "coconut sugar", "palm sugar"),
    family("raw sugar", "Raw sugar", "raw sugar", "turbinado", "demerara"),
    family("sugar", "Sugar", "granulated sugar", "white sugar", "cane sugar", "caster sugar", "castor sugar", "superfine sugar"),
    pattern("sugar", "Sugar", r"^sugars?$"),
    family("honey", "Honey", "honey"),
    family("maple syrup", "Maple syrup", "maple syrup", "pancake syrup"),
    family("agave nectar", "Agave nectar", "agave"),
    family("molasses", "Molasses", "molasses", "treacle"),
    family("corn syrup", "Corn syrup", "corn syrup", "golden syrup"),
    family("sweetener", "Sweetener", "stevia", "monk fruit sweetener", "erythritol", "sugar substitute"),
    # -------------------------------------------------------------------------
    # Cheeses
    # -------------------------------------------------------------------------
    family("cream cheese", "Cream cheese", "cream cheese", "neufchatel", "neufchâtel"),
    family("cottage cheese", "Cottage cheese", "cottage cheese"),
    family("ricotta cheese", "Ricotta cheese", "ricotta"),
    family("mascarpone", "Mascarpone", "mascarpone"),
    family("parmesan cheese", "Parmesan cheese", "parmesan", "parmigiano reggiano", "parmigiano", "parm", "grana padano"),
    family("pecorino romano", "Pecorino Romano", "pecorino", "romano cheese"),
    family("mozzarella cheese", "Mozzarella cheese", "mozzarella", "burrata", "bocconcini"),
    family("cheddar cheese", "Cheddar cheese", "cheddar"),
    family("monterey jack cheese", "Monterey Jack cheese", "monterey jack", "pepper jack", "jack cheese", "colby"),
    family("swiss cheese", "Swiss cheese", "swiss cheese", "gruyere", "gruyère", "emmental", "emmentaler", "jarlsberg"),
    pattern("swiss cheese", "Swiss cheese", r"\bswiss\b(?!\s+chard)"),
    family("feta cheese", "Feta cheese", "feta"),
    family("goat cheese", "Goat cheese", "goat cheese", "chevre", "chèvre"),
    family("blue cheese", "Blue cheese", "blue cheese", "bleu cheese", "gorgonzola", "roquefort", "stilton"),
    family("brie", "Brie", "brie", "camembert"),
    family("provolone cheese", "Provolone cheese", "provolone"),
    family("american cheese", "American cheese", "american cheese", "american slice", "velveeta"),
    family("queso fresco", "Queso fresco", "queso fresco", "queso blanco"),
    family("cotija cheese", "Cotija cheese", "cotija"),
    family("paneer", "Paneer", "paneer"),
    family("halloumi", "Halloumi", "halloumi"),
    family("gouda cheese", "Gouda cheese", "gouda"),
    family("manchego cheese", "Manchego cheese", "manchego"),
    family("fontina cheese", "Fontina cheese", "fontina"),
    family("mexican cheese blend", "Mexican cheese blend", "mexican cheese", "mexican blend", "taco cheese"),
    family("italian cheese blend", "Italian cheese blend", "italian cheese blend", "italian blend cheese"),
    family("nutritional yeast", "Nutritional yeast", "nutritional yeast"),
    # -------------------------------------------------------------------------
    # Dairy
    # -------------------------------------------------------------------------
    family("romaine lettuce", "Romaine lettuce", "romaine"),
    family("lettuce", "Lettuce", "butter lettuce", "bibb lettuce", "boston lettuce", "iceberg", "lettuce"),
    family("buttermilk", "Buttermilk", "buttermilk"),
    family("ghee", "Ghee", "ghee", "clarified butter"),
    family("butter", "Butter", "butter", "margarine"),
    family("half and half", "Half and half", "half and half", "half & half"),
    family("sour cream", "Sour cream", "sour cream", "soured cream"),
    family("creme fraiche", "Crème fraîche", "creme fraiche", "crème fraîche"),
    family("whipped cream", "Whipped cream", "whipped cream", "whipped topping", "cool whip"),
    family("ice cream", "Ice cream", "ice cream", "gelato"),
    family("heavy cream", "Heavy cream", "heavy cream", "whipping cream", "double cream", "thickened cream", "light cream", "single cream", "cream"),
    family("greek yogurt", "Greek yogurt", "greek yogurt", "greek yoghurt", "skyr"),
    family("yogurt", "Yogurt", "yogurt", "yoghurt"),
    family("milk", "Milk", "milk"),
    family("kefir", "Kefir", "kefir"),
    # -------------------------------------------------------------------------
    # Tomatoes
    # -------------------------------------------------------------------------
    family("tomato paste", "Tomato paste", "tomato paste"),
    family("tomato sauce", "Tomato sauce", "tomato sauce", "marinara", "pasta sauce", "spaghetti sauce", "pizza sauce", "passata", "tomato puree", "tomato purée"),
    family("sun-dried tomatoes", "Sun-dried tomatoes", "sun dried tomato", "sundried tomato"),
    family("canned tomatoes", "Canned tomatoes", "canned tomato", "tinned tomato", "crushed tomato", "diced tomato", "whole peeled tomato", "peeled tomato", "stewed tomato", "san marzano", "fire roasted tomato"),
    family("cherry tomatoes", "Cherry tomatoes", "cherry tomato", "grape tomato"),
    family("tomatillos", "Tomatillos", "tomatillo"),
    family("tomato", "Tomatoes", "tomato"),
    # -------------------------------------------------------------------------
    # Breads and wraps
    # -------------------------------------------------------------------------
    family("tortilla chips", "Tortilla chips", "tortilla chip", "corn chip", "nacho chip"),
    family("tortillas", "Tortillas", "tortilla", "burrito wrap", "wrap"),
    family("wonton wrappers", "Wonton wrappers", "wonton wrapper", "wonton skin", "dumpling wrapper", "gyoza wrapper", "potsticker wrapper"),
    family("egg roll wrappers", "Egg roll wrappers", "egg roll wrapper", "spring roll wrapper", "egg roll skin"),
    family("rice paper", "Rice paper", "rice paper"),
    family("pita bread", "Pita bread", "pita", "pitta"),
    family("naan", "Naan", "naan", "flatbread"),
    family("hamburger buns", "Hamburger buns", "hamburger bun", "burger bun", "brioche bun", "slider bun"),
    family("hot dog buns", "Hot dog buns", "hot dog bun", "hoagie roll", "sub roll"),
    family("bagels", "Bagels", "bagel"),
    family("english muffins", "English muffins", "english muffin"),
    family("dinner rolls", "Dinner rolls", "dinner roll", "bread roll", "crusty roll"),
    family("baguette", "Baguette", "baguette", "french bread", "ciabatta"),
    family("pizza dough", "Pizza dough", "pizza dough", "pizza crust"),
    family("puff pastry", "Puff pastry", "puff pastry"),
    family("pie crust", "Pie crust", "pie crust", "pie shell", "pie dough", "graham cracker crust"),
    family("phyllo dough", "Phyllo dough", "phyllo", "filo", "fillo"),
    family("croutons", "Croutons", "crouton"),
    family("bread", "Bread", "bread", "sourdough", "brioche"),
    # -------------------------------------------------------------------------
    # Noodles
    # -------------------------------------------------------------------------
    family("zucchini noodles", "Zucchini noodles", "zucchini noodle", "zoodle", "spiralized zucchini"),
    family("rice noodles", "Rice noodles", "rice noodle", "rice stick", "pad thai noodle", "rice vermicelli"),
    family("glass noodles", "Glass noodles", "glass noodle", "cellophane noodle", "bean thread noodle", "mung bean noodle"),
    family("egg noodles", "Egg noodles", "egg noodle"),
    family("ramen noodles", "Ramen noodles", "ramen", "instant noodle"),
    family("udon noodles", "Udon noodles", "udon"),
    family("soba noodles", "Soba noodles", "soba"),
    family("lo mein noodles", "Lo mein noodles", "lo mein", "chow mein"),
    family("lasagna noodles", "Lasagna noodles", "lasagna", "lasagne"),
    family("noodles", "Noodles", "noodle"),
    # -------------------------------------------------------------------------
    # Pasta
    # -------------------------------------------------------------------------
    family("spaghetti squash", "Spaghetti squash", "spaghetti squash"),
    family("spaghetti", "Spaghetti", "spaghetti", "spaghettini", "angel hair", "capellini", "bucatini"),
    family("linguine", "Linguine", "linguine", "linguini"),
    family("fettuccine", "Fettuccine", "fettuccine", "fettucine", "tagliatelle", "pappardelle"),
    family("penne", "Penne", "penne", "ziti", "rigatoni", "mostaccioli"),
    family("macaroni", "Macaroni", "macaroni", "elbow pasta", "elbow"),
    family("orzo", "Orzo", "orzo", "risoni"),
    family("farfalle", "Farfalle", "farfalle", "bow tie pasta", "bowtie pasta"),
    family("fusilli", "Fusilli", "fusilli", "rotini", "rotelle", "cavatappi"),
    family("pasta shells", "Pasta shells", "pasta shell", "shell pasta", "conchiglie", "jumbo shell"),
    family("tortellini", "Tortellini", "tortellini"),
    family("ravioli", "Ravioli", "ravioli"),
    family("gnocchi", "Gnocchi", "gnocchi"),
    family("couscous", "Couscous", "couscous"),
    family("pasta", "Pasta", "pasta"),
    # -------------------------------------------------------------------------
    # Eggs
    # -------------------------------------------------------------------------
    family("egg whites", "Egg whites", "egg white", "egg substitute"),
    family("egg yolks", "Egg yolks", "egg yolk", "yolk"),
    family("egg", "Eggs", "egg"),
    # -------------------------------------------------------------------------
    # Plant proteins
    # -------------------------------------------------------------------------
    family("tofu", "Tofu", "tofu", "bean curd"),
    family("tempeh", "Tempeh", "tempeh"),
    family("seitan", "Seitan", "seitan", "vital wheat gluten"),
    family("plant-based meat", "Plant-based meat", "textured vegetable protein", "tvp", "soy crumble", "plant based ground", "beyond beef", "impossible burger", "veggie crumble"),
    # -------------------------------------------------------------------------
    # Seafood
    # -------------------------------------------------------------------------
    family("smoked salmon", "Smoked salmon", "smoked salmon", "lox"),
    family("salmon", "Salmon", "salmon"),
    family("tuna", "Tuna", "tuna", "ahi"),
    family("shrimp", "Shrimp", "shrimp", "prawn"),
    family("cod", "Cod", "cod", "haddock", "pollock"),
    family("tilapia", "Tilapia", "tilapia"),
    family("halibut", "Halibut", "halibut"),
    family("mahi mahi", "Mahi mahi", "mahi mahi"),
    family("trout", "Trout", "trout"),
    family("catfish", "Catfish", "catfish"),
    family("sea bass", "Sea bass", "sea bass", "branzino"),
    family("scallops", "Scallops", "scallop"),
    family("crab", "Crab meat", "crab", "crabmeat"),
    family("lobster", "Lobster", "lobster"),
    family("mussels", "Mussels", "mussel"),
    family("clams", "Clams", "clam"),
    family("anchovies", "Anchovies", "anchovy", "anchovy paste"),
    family("sardines", "Sardines", "sardine"),
    family("white fish", "White fish", "white fish", "whitefish", "fish fillet", "fish"),
    # -------------------------------------------------------------------------
    # Cured meats and sausages
    # -------------------------------------------------------------------------
    family("bacon", "Bacon", "bacon"),
    family("pancetta", "Pancetta", "pancetta"),
    family("prosciutto", "Prosciutto", "prosciutto", "parma ham", "serrano ham", "jamon"),
    family("chorizo", "Chorizo", "chorizo"),
    family("italian sausage", "Italian sausage", "italian sausage"),
    family("sausage", "Sausage", "sausage", "kielbasa", "andouille", "bratwurst"),
    family("hot dogs", "Hot dogs", "hot dog", "frankfurter", "wiener"),
    family("pepperoni", "Pepperoni", "pepperoni"),
    family("salami", "Salami", "salami", "soppressata"),
    family("ham", "Ham", "ham"),
    # -------------------------------------------------------------------------
    # Poultry
    # -------------------------------------------------------------------------
    family("chicken breast", "Chicken breast", "chicken breast", "chicken cutlet", "chicken tender", "chicken tenderloin", "chicken fillet"),
    family("chicken thighs", "Chicken thighs", "chicken thigh", "chicken leg quarter"),
    family("chicken drumsticks", "Chicken drumsticks", "chicken drumstick", "drumstick", "chicken leg"),
    family("chicken wings", "Chicken wings", "chicken wing", "wingette", "party wing"),
    family("ground chicken", "Ground chicken", "ground chicken", "minced chicken", "chicken mince"),
    family("whole chicken", "Whole chicken", "whole chicken", "roasting chicken", "rotisserie chicken"),
    family("chicken", "Chicken", "chicken"),
    family("ground turkey", "Ground turkey", "ground turkey", "minced turkey", "turkey mince"),
    family("turkey breast", "Turkey breast", "turkey breast", "turkey cutlet", "deli turkey"),
    family("turkey", "Turkey", "turkey"),
    family("duck", "Duck", "duck"),
    # -------------------------------------------------------------------------
    # Beef, pork and lamb
    # -------------------------------------------------------------------------
    family("ground beef", "Ground beef", "ground beef", "minced beef", "beef mince", "hamburger meat", "hamburger", "ground chuck", "ground sirloin"),
    family("stew meat", "Beef stew meat", "stew meat", "stewing beef", "beef stew meat", "stewing steak", "beef chuck"),
    family("short ribs", "Short ribs", "short rib"),
    family("beef roast", "Beef roast", "chuck roast", "pot roast", "beef roast", "rump roast", "brisket", "prime rib", "rib roast", "eye of round"),
    family("beef steak", "Beef steak", "steak", "sirloin", "ribeye", "rib eye", "new york strip", "flank", "skirt steak", "flat iron", "t bone", "porterhouse", "filet mignon", "beef tenderloin", "tri tip", "hanger steak"),
    family("beef", "Beef", "beef"),
    family("ground pork", "Ground pork", "ground pork", "minced pork", "pork mince"),
    family("pork chops", "Pork chops", "pork chop", "pork loin chop"),
    family("pork tenderloin", "Pork tenderloin", "pork tenderloin"),
    family("pork loin", "Pork loin", "pork loin", "pork roast"),
    family("pork shoulder", "Pork shoulder", "pork shoulder", "pork butt", "boston butt", "pulled pork"),
    family("pork belly", "Pork belly", "pork belly"),
    family("ribs", "Ribs", "baby back rib", "spare rib", "sparerib", "pork rib", "beef rib", "bbq rib"),
    family("pork", "Pork", "pork"),
    family("ground lamb", "Ground lamb", "ground lamb", "minced lamb", "lamb mince"),
    family("lamb chops", "Lamb chops", "lamb chop", "lamb rack", "rack of lamb", "lamb cutlet"),
    family("lamb", "Lamb", "lamb"),
    family("veal", "Veal", "veal"),
    # -------------------------------------------------------------------------
    # Citrus
    # -------------------------------------------------------------------------
    family("lemongrass", "Lemongrass", "lemongrass", "lemon grass"),
    family("kaffir lime leaves", "Kaffir lime leaves", "kaffir lime leaf", "makrut lime leaf", "lime leaf"),
    family("lemon juice", "Lemon juice", "lemon juice", "juice of lemon", "juice of a lemon", "juice of half a lemon"),
    family("lemon zest", "Lemon zest", "lemon zest", "lemon peel", "lemon rind", "zest of lemon", "zest of a lemon"),
    family("lemon", "Lemons", "lemon"),
    family("lime juice", "Lime juice", "lime juice", "juice of lime", "juice of a lime", "juice of half a lime"),
    family("lime zest", "Lime zest", "lime zest", "lime peel", "lime rind", "zest of lime", "zest of a lime"),
    family("lime", "Limes", "lime"),
    family("orange juice", "Orange juice", "orange juice", "juice of orange", "juice of an orange"),
    family("orange zest", "Orange zest", "orange zest", "orange peel", "orange rind", "zest of orange", "zest of an orange"),
    family("mandarin oranges", "Mandarin oranges", "mandarin", "clementine", "tangerine", "satsuma"),
    family("orange", "Oranges", "orange"),
    family("grapefruit", "Grapefruit", "grapefruit"),
    # -------------------------------------------------------------------------
    # Alliums, garlic and ginger
    # -------------------------------------------------------------------------
    family("red onion", "Red onions", "red onion", "purple onion"),
    family("green onion", "Green onions", "green onion", "scallion", "spring onion", "salad onion"),
    family("shallot", "Shallots", "shallot"),
    family("leek", "Leeks", "leek"),
    family("chives", "Chives", "chive"),
    family("onion", "Onions", "onion", "cipollini"),
    family("garlic", "Garlic", "garlic"),
    family("ginger", "Ginger", "ginger", "gingerroot"),
    # -------------------------------------------------------------------------
    # Herbs (dried before fresh)
    # -------------------------------------------------------------------------
    family("dried parsley", "Dried parsley", "dried parsley", "parsley flake"),
    family("dried basil", "Dried basil", "dried basil"),
    family("dried oregano", "Dried oregano", "dried oregano"),
    family("dried thyme", "Dried thyme", "dried thyme"),
    family("dried rosemary", "Dried rosemary", "dried rosemary"),
    family("dried dill", "Dried dill", "dried dill", "dill weed"),
    family("dried mint", "Dried mint", "dried mint"),
    family("dried sage", "Dried sage", "dried sage", "rubbed sage", "ground sage"),
    family("dried cilantro", "Dried cilantro", "dried cilantro"),
    family("parsley", "Parsley", "parsley"),
    family("cilantro", "Cilantro", "cilantro", "coriander leaf", "fresh coriander"),
    family("basil", "Basil", "basil"),
    family("oregano", "Oregano", "oregano"),
    family("thyme", "Thyme", "thyme"),
    family("rosemary", "Rosemary", "rosemary"),
    family("sage", "Sage", "sage"),
    family("mint", "Mint", "mint", "spearmint", "peppermint"),
    family("dill", "Dill", "dill"),
    family("tarragon", "Tarragon", "tarragon"),
    family("marjoram", "Marjoram", "marjoram"),
    family("bay leaves", "Bay leaves", "bay leaf", "bay laurel"),
    family("curry leaves", "Curry leaves", "curry leaf"),
    # -------------------------------------------------------------------------
    # Salt, pepper and spices
    # -------------------------------------------------------------------------
    family("salt", "Salt", "kosher salt", "sea salt", "table salt", "fine salt", "flaky salt", "coarse salt", "iodized salt", "pink salt", "himalayan salt", "maldon salt", "fleur de sel", "rock salt"),
    pattern("salt", "Salt", r"^salts?$"),
    family("white pepper", "White pepper", "white pepper", "white peppercorn"),
    family("sichuan peppercorns", "Sichuan peppercorns", "sichuan peppercorn", "szechuan peppercorn"),
    family("black pepper", "Black pepper", "black pepper", "peppercorn", "cracked pepper", "ground pepper"),
    family("cayenne pepper", "Cayenne pepper", "cayenne"),
    family("smoked paprika", "Smoked paprika", "smoked paprika", "pimenton", "pimentón"),
    family("paprika", "Paprika", "paprika"),
    family("cumin", "Cumin", "cumin", "jeera"),
    family("coriander", "Ground coriander", "coriander"),
    family("turmeric", "Turmeric", "turmeric"),
    family("cinnamon", "Cinnamon", "cinnamon"),
    family("nutmeg", "Nutmeg", "nutmeg"),
    family("allspice", "Allspice", "allspice"),
    family("cloves", "Cloves", "clove"),
    family("cardamom", "Cardamom", "cardamom", "cardamon"),
    family("fennel seeds", "Fennel seeds", "fennel seed"),
    family("star anise", "Star anise", "star anise"),
    family("caraway seeds", "Caraway seeds", "caraway"),
    family("za'atar", "Za'atar", "za'atar", "zaatar", "zatar"),
    family("sumac", "Sumac", "sumac"),
    family("saffron", "Saffron", "saffron"),
    # -------------------------------------------------------------------------
    # Grains
    # -------------------------------------------------------------------------
    family("brown rice", "Brown rice", "brown rice"),
    family("arborio rice", "Arborio rice", "arborio", "risotto rice", "carnaroli"),
    family("wild rice", "Wild rice", "wild rice"),
    family("white rice", "White rice", "white rice", "long grain rice", "basmati", "jasmine rice", "medium grain rice", "short grain rice", "sushi rice", "cooked rice", "steamed rice"),
    pattern("white rice", "White rice", r"^rices?$"),
    family("quinoa", "Quinoa", "quinoa"),
    family("oats", "Oats", "oat", "oatmeal"),
    family("barley", "Barley", "barley"),
    family("farro", "Farro", "farro"),
    family("bulgur", "Bulgur", "bulgur", "bulghur", "cracked wheat"),
    family("millet", "Millet", "millet"),
    family("buckwheat", "Buckwheat groats", "buckwheat", "kasha"),
    family("grits", "Grits", "grits"),
    # -------------------------------------------------------------------------
    # Legumes
    # -------------------------------------------------------------------------
    family("green beans", "Green beans", "green bean", "string bean", "haricot vert", "haricots vert", "french bean", "snap bean"),
    family("black beans", "Black beans", "black bean"),
    family("kidney beans", "Kidney beans", "kidney bean", "red bean"),
    family("pinto beans", "Pinto beans", "pinto bean"),
    family("white beans", "White beans", "white bean", "cannellini", "great northern bean", "navy bean"),
    family("chickpeas", "Chickpeas", "chickpea", "garbanzo", "chick pea"),
    family("refried beans", "Refried beans", "refried bean"),
    family("baked beans", "Baked beans", "baked bean"),
    family("black-eyed peas", "Black-eyed peas", "black eyed pea", "blackeyed pea"),
    family("edamame", "Edamame", "edamame", "soybean", "soy bean"),
    family("lentils", "Lentils", "lentil", "dal", "dhal"),
    family("split peas", "Split peas", "split pea"),
    family("bean sprouts", "Bean sprouts", "bean sprout"),
    family("beans", "Beans", "bean"),
    # -------------------------------------------------------------------------
    # Nuts and seeds
    # -------------------------------------------------------------------------
    family("almonds", "Almonds", "almond"),
    family("walnuts", "Walnuts", "walnut"),
    family("pecans", "Pecans", "pecan"),
    family("cashews", "Cashews", "cashew"),
    family("peanuts", "Peanuts", "peanut"),
    family("pistachios", "Pistachios", "pistachio"),
    family("hazelnuts", "Hazelnuts", "hazelnut", "filbert"),
    family("macadamia nuts", "Macadamia nuts", "macadamia"),
    family("pine nuts", "Pine nuts", "pine nut", "pignoli"),
    family("mixed nuts", "Mixed nuts", "mixed nut"),
    pattern("mixed nuts", "Mixed nuts", r"^nuts?$"),
    family("sesame seeds", "Sesame seeds", "sesame seed"),
    family("sunflower seeds", "Sunflower seeds", "sunflower seed", "sunflower kernel"),
    family("pumpkin seeds", "Pumpkin seeds", "pumpkin seed", "pepita"),
    family("chia seeds", "Chia seeds", "chia"),
    family("flaxseed", "Flaxseed", "flaxseed", "flax seed", "flax meal", "linseed"),
    family("hemp seeds", "Hemp seeds", "hemp seed", "hemp heart"),
    family("coconut", "Shredded coconut", "shredded coconut", "desiccated coconut", "coconut flake", "flaked coconut", "coconut"),
    # -------------------------------------------------------------------------
    # Vegetables
    # -------------------------------------------------------------------------
    family("celeriac", "Celeriac", "celeriac", "celery root"),
    family("celery", "Celery", "celery"),
    family("carrot", "Carrots", "carrot"),
    family("sweet potato", "Sweet potatoes", "sweet potato", "yam"),
    family("potato chips", "Potato chips", "potato chip"),
    family("red potatoes", "Red potatoes", "red potato", "new potato", "baby potato", "fingerling"),
    family("potato", "Potatoes", "potato", "russet", "yukon gold"),
    family("spinach", "Spinach", "spinach"),
    family("kale", "Kale", "kale", "cavolo nero"),
    family("arugula", "Arugula", "arugula", "rocket"),
    family("collard greens", "Collard greens", "collard"),
    family("swiss chard", "Swiss chard", "chard"),
    family("mixed greens", "Mixed greens", "mixed green", "salad green", "spring mix", "mesclun", "salad mix", "baby green"),
    family("bok choy", "Bok choy", "bok choy", "pak choi", "bok choi"),
    family("napa cabbage", "Napa cabbage", "napa cabbage", "chinese cabbage", "napa"),
    family("red cabbage", "Red cabbage", "red cabbage", "purple cabbage"),
    family("coleslaw mix", "Coleslaw mix", "coleslaw", "slaw mix"),
    family("cabbage", "Cabbage", "cabbage"),
    family("brussels sprouts", "Brussels sprouts", "brussels sprout", "brussel sprout"),
    family("broccoli", "Broccoli", "broccoli", "broccolini"),
    family("cauliflower", "Cauliflower", "cauliflower"),
    family("asparagus", "Asparagus", "asparagus"),
    family("snow peas", "Snow peas", "snow pea", "sugar snap pea", "snap pea", "sugar snap", "mangetout"),
    family("peas", "Peas", "pea"),
    family("corn", "Corn", "corn"),
    family("portobello mushrooms", "Portobello mushrooms", "portobello", "portabella", "portobella"),
    family("shiitake mushrooms", "Shiitake mushrooms", "shiitake", "shitake"),
    family("oyster mushrooms", "Oyster mushrooms", "oyster mushroom"),
    family("mushrooms", "Mushrooms", "mushroom", "cremini", "crimini", "baby bella"),
    family("cucumber", "Cucumbers", "cucumber"),
    family("avocado", "Avocados", "avocado"),
    family("zucchini", "Zucchini", "zucchini", "courgette"),
    family("yellow squash", "Yellow squash", "yellow squash", "summer squash", "crookneck squash"),
    family("butternut squash", "Butternut squash", "butternut"),
    family("acorn squash", "Acorn squash", "acorn squash"),
    family("pumpkin", "Pumpkin", "pumpkin"),
    family("eggplant", "Eggplant", "eggplant", "aubergine"),
    family("beets", "Beets", "beet", "beetroot"),
    family("radishes", "Radishes", "radish", "daikon"),
    family("turnips", "Turnips", "turnip"),
    family("parsnips", "Parsnips", "parsnip"),
    family("fennel", "Fennel", "fennel"),
    family("artichoke hearts", "Artichoke hearts", "artichoke"),
    family("okra", "Okra", "okra"),
    family("water chestnuts", "Water chestnuts", "water chestnut"),
    family("mixed vegetables", "Mixed vegetables", "mixed vegetable", "frozen vegetable", "stir fry vegetable", "vegetable medley"),
    # -------------------------------------------------------------------------
    # Hot peppers (never merged with bell peppers)
    # -------------------------------------------------------------------------
    family("jalapeño", "Jalapeños", "jalapeño", "jalapeno"),
    family("serrano pepper", "Serrano peppers", "serrano"),
    family("habanero pepper", "Habanero peppers", "habanero", "scotch bonnet"),
    family("poblano pepper", "Poblano peppers", "poblano", "ancho chile"),
    family("chipotle peppers", "Chipotle peppers", "chipotle", "adobo sauce"),
    family("green chiles", "Green chiles", "green chile", "green chili", "hatch chile", "anaheim pepper"),
    family("banana peppers", "Banana peppers", "banana pepper", "pepperoncini"),
    family("chili peppers", "Chili peppers", "thai chili", "thai chile", "bird's eye chili", "birds eye chili", "red chili", "red chile", "chili pepper", "chile pepper", "hot pepper", "chilli"),
    # -------------------------------------------------------------------------
    # Fruits
    # -------------------------------------------------------------------------
    family("apple juice", "Apple juice", "apple juice", "apple cider"),
    family("applesauce", "Applesauce", "applesauce", "apple sauce"),
    family("apple", "Apples", "apple", "granny smith"),
    family("banana", "Bananas", "banana"),
    family("strawberries", "Strawberries", "strawberry"),
    family("blueberries", "Blueberries", "blueberry"),
    family("raspberries", "Raspberries", "raspberry"),
    family("blackberries", "Blackberries", "blackberry"),
    family("cranberries", "Cranberries", "cranberry", "craisin"),
    family("mixed berries", "Mixed berries", "mixed berry", "frozen berry", "berry medley"),
    family("cherries", "Cherries", "cherry"),
    family("grapes", "Grapes", "grape"),
    family("mango", "Mangoes", "mango"),
    family("pineapple", "Pineapple", "pineapple"),
    family("peach", "Peaches", "peach", "nectarine"),
    family("pear", "Pears", "pear"),
    family("plum", "Plums", "plum"),
    family("watermelon", "Watermelon", "watermelon"),
    family("melon", "Melon", "cantaloupe", "honeydew", "melon"),
    family("kiwi", "Kiwi", "kiwi", "kiwifruit"),
    family("pomegranate", "Pomegranate", "pomegranate"),
    family("figs", "Figs", "fig"),
    family("dates", "Dates", "date", "medjool"),
    family("raisins", "Raisins", "raisin", "sultana", "currant"),
    family("apricots", "Apricots", "apricot"),
    family("papaya", "Papaya", "papaya"),
    family("rhubarb", "Rhubarb", "rhubarb"),
    # -------------------------------------------------------------------------
    # Pantry and baking staples
    # -------------------------------------------------------------------------
    family("vanilla extract", "Vanilla extract", "vanilla"),
    family("baking soda", "Baking soda", "baking soda", "bicarbonate of soda", "bicarb soda", "sodium bicarbonate"),
    family("baking powder", "Baking powder", "baking powder"),
    family("yeast", "Yeast", "yeast"),
    family("gelatin", "Gelatin", "gelatin", "gelatine"),
    family("olives", "Olives", "olive", "kalamata"),
    family("capers", "Capers", "caper"),
    family("graham crackers", "Graham crackers", "graham cracker"),
    family("marshmallows", "Marshmallows", "marshmallow"),
    family("coffee", "Coffee", "coffee", "espresso"),
    # -------------------------------------------------------------------------
    # Wine and beer
    # -------------------------------------------------------------------------
    family("white wine", "White wine", "white wine", "sauvignon blanc", "pinot grigio", "chardonnay"),
    family("red wine", "Red wine", "red wine", "cabernet sauvignon", "merlot", "pinot noir"),
    family("sherry", "Sherry", "sherry"),
    family("beer", "Beer", "beer", "lager", "stout"),
]
# fmt: on


def match_ingredient_family(text: str) -> FamilyRule | None:
    """Return the first family rule whose pattern occurs in the text."""
    if not text:
        return None
    for rule in FAMILY_RULES:
        if rule.pattern.search(text):
            return rule
    return None
