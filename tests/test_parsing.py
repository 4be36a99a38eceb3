"""Tests for free-text ingredient line parsing."""

from grocerylist.normalize.parsing import parse_ingredient_line


class TestParseIngredientLine:
    """Tests for splitting ingredient lines into fields."""

    def test_quantity_unit_name_and_preparation(self):
        """Test a full line with a trailing preparation clause."""
        parsed = parse_ingredient_line("2 cups all-purpose flour, sifted")
        assert parsed.quantity == 2.0
        assert parsed.unit == "cup"
        assert parsed.name == "all-purpose flour"
        assert parsed.preparation == "sifted"

    def test_fractions_and_ranges(self):
        """Test fractional and ranged quantities."""
        assert parse_ingredient_line("1 1/2 cups sugar").quantity == 1.5
        assert parse_ingredient_line("½ cup butter").quantity == 0.5

        ranged = parse_ingredient_line("2-3 cloves garlic")
        assert ranged.quantity == 2.5
        assert ranged.unit == "clove"
        assert ranged.name == "garlic"

    def test_countable_ingredient_gets_piece_unit(self):
        """Test a bare count of a countable ingredient."""
        parsed = parse_ingredient_line("3 eggs")
        assert parsed.quantity == 3.0
        assert parsed.unit == "piece"
        assert parsed.name == "eggs"

    def test_vague_quantity_and_of(self):
        """Test vague amounts and a leading 'of' in the name."""
        parsed = parse_ingredient_line("a few cloves of garlic")
        assert parsed.quantity == 3.0
        assert parsed.unit == "clove"
        assert parsed.name == "garlic"

    def test_article_as_quantity(self):
        """Test 'a cup of' reads as one cup."""
        parsed = parse_ingredient_line("a cup of milk")
        assert parsed.quantity == 1.0
        assert parsed.unit == "cup"
        assert parsed.name == "milk"

    def test_parenthetical_goes_to_preparation(self):
        """Test parenthetical sizes are moved out of the name."""
        parsed = parse_ingredient_line("1 (14 oz) can diced tomatoes")
        assert parsed.quantity == 1.0
        assert parsed.unit == "can"
        assert parsed.name == "diced tomatoes"
        assert parsed.preparation == "14 oz"

    def test_to_taste(self):
        """Test 'to taste' lines keep the name and record a note."""
        parsed = parse_ingredient_line("salt, to taste")
        assert parsed.quantity is None
        assert parsed.unit is None
        assert parsed.name == "salt"
        assert parsed.notes == "to taste"

        compound = parse_ingredient_line("salt and pepper to taste")
        assert compound.name == "salt and pepper"

    def test_size_word_needs_quantity(self):
        """Test size words are units only after a number."""
        assert parse_ingredient_line("1 large onion").unit == "large"

        bare = parse_ingredient_line("large onion")
        assert bare.unit is None
        assert bare.name == "large onion"

    def test_abbreviated_unit_with_period(self):
        """Test unit abbreviations ending in a period."""
        parsed = parse_ingredient_line("1 tbsp. olive oil")
        assert parsed.unit == "tbsp"
        assert parsed.name == "olive oil"

    def test_name_only(self):
        """Test a line without quantity or unit."""
        parsed = parse_ingredient_line("fresh parsley")
        assert parsed.quantity is None
        assert parsed.unit is None
        assert parsed.name == "fresh parsley"

    def test_empty_input(self):
        """Test empty and non-string input return an empty result."""
        assert parse_ingredient_line("").name == ""
        assert parse_ingredient_line(None).original_text == ""
        assert parse_ingredient_line("   ").quantity is None

    def test_recipe_id_and_group_are_kept(self):
        """Test provenance fields pass through."""
        parsed = parse_ingredient_line("1 lemon", recipe_id="r1", group="Dressing")
        assert parsed.recipe_id == "r1"
        assert parsed.group == "Dressing"
        assert parsed.unit == "piece"
