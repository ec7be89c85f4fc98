# tests/test_server/test_validation.py
import pytest
from pydantic_core import PydanticCustomError

from api import rules
from api.sanitizer import sanitize, strip_tags
from api.validation import Rules, parse_bool


def _message(chain: Rules, value) -> str:
    with pytest.raises(PydanticCustomError) as info:
        chain.run(value)
    return info.value.message()


class TestRules:
    """Цепочки правил"""

    def test_first_failure_stops_chain(self):
        chain = Rules().trim().not_empty("required").length(3, 5, "length").matches(r"^\d+$", "digits")

        assert _message(chain, "  ") == "required"
        assert _message(chain, "ab") == "length"
        assert _message(chain, "abc") == "digits"
        assert chain.run(" 123 ") == "123"

    def test_optional_skips_blank_values(self):
        chain = Rules().optional().trim().length(3, 3, "exactly three")

        assert chain.run(None) is None
        assert chain.run("") is None
        assert _message(chain, "  ") == "exactly three"
        assert chain.run(" USD ") == "USD"

    def test_trim_converts_to_string(self):
        assert Rules().trim().run(None) == ""
        assert Rules().trim().run(42) == "42"

    def test_uuid_is_case_insensitive(self):
        assert rules.CATEGORY_ID.run("3F2B8C1E-9D4A-4E6B-8F0A-1C2D3E4F5A6B")
        assert _message(rules.CATEGORY_ID, "3f2b8c1e9d4a4e6b8f0a1c2d3e4f5a6b") == "Invalid category ID format"
        assert _message(rules.PRODUCT_ID, " ") == "Product ID is required"

    @pytest.mark.parametrize("value", ["9.99", "0.01", 5, 1.5, "1e2", ".5"])
    def test_price_accepts(self, value):
        assert rules.price().run(value) == value

    @pytest.mark.parametrize("value", ["0", 0, "-1", "abc", "1,5", True, float("inf"), "nan"])
    def test_price_rejects(self, value):
        assert _message(rules.price(), value) == "Price should be a positive number"

    @pytest.mark.parametrize("value", [0, "0", 7, "12"])
    def test_quantity_accepts(self, value):
        assert rules.QUANTITY.run(value) == value

    @pytest.mark.parametrize("value", [-1, "-3", "1.5", 2.5, "ten", False])
    def test_quantity_rejects(self, value):
        assert _message(rules.QUANTITY, value) == "Quantity should be a positive number"

    def test_product_name_allows_apostrophe(self):
        assert rules.product_name().run("Tom's Lamp") == "Tom's Lamp"
        assert _message(rules.category_name(), "Tom's Lamp") == (
            "Name should contain only letters, numbers, and spaces"
        )

    def test_optional_product_name_still_checks_blank_after_trim(self):
        chain = rules.product_name(optional=True)

        assert chain.run(None) is None
        assert _message(chain, "   ") == "Name is required"

    @pytest.mark.parametrize("chain, value, message", [
        (Rules().is_uuid("bad id"), "3f2b8c1e-9d4a-4e6b-8f0a-1c2d3e4f5a6b\n", "bad id"),
        (Rules().is_float("bad float"), "9.99\n", "bad float"),
        (Rules().is_int("bad int"), "7\n", "bad int"),
        (Rules().matches(r"^[a-z]+$", "bad text"), "abc\n", "bad text"),
    ])
    def test_trailing_newline_never_matches(self, chain, value, message):
        assert _message(chain, value) == message

    def test_category_ref_is_trimmed(self):
        value = "3f2b8c1e-9d4a-4e6b-8f0a-1c2d3e4f5a6b"

        assert rules.category_ref().run(f" {value}\n") == value
        assert rules.category_ref(optional=True).run(f"{value}\n") == value
        assert _message(rules.category_ref(), "\n") == "Category ID is required"

    def test_length_is_measured_without_tags(self):
        assert rules.CURRENCY.run(" <b>EUR</b> ") == "EUR"
        assert _message(rules.CURRENCY, "<a>") == "Currency should be exactly 3 characters"
        assert _message(rules.DESCRIPTION, "<b></b>") == "Description should be between 3 and 120 characters"
        assert rules.DESCRIPTION.run("Salt & <i>Pepper</i>") == "Salt & Pepper"


class TestParseBool:
    @pytest.mark.parametrize("value, expected", [
        (True, True), (False, False), (1, True), (0, False),
        ("true", True), ("false", False), ("1", True), ("0", False),
    ])
    def test_literals(self, value, expected):
        assert parse_bool(value) is expected

    @pytest.mark.parametrize("value", ["yes", "TRUE", 2, None, 1.0, ""])
    def test_rejects_other_values(self, value):
        with pytest.raises(ValueError):
            parse_bool(value)

    def test_exists_rule_message(self):
        assert _message(rules.EXISTS, "yes") == "Exists should be a boolean"
        assert rules.EXISTS.run(False) is False


class TestSanitize:
    def test_strips_tags(self):
        assert sanitize("<b>Bold</b> text") == "Bold text"
        assert sanitize("<script>alert(1)</script>") == "alert(1)"

    def test_escapes_leftover_markup(self):
        assert sanitize("Salt & Pepper") == "Salt &amp; Pepper"
        assert sanitize("1 > 0") == "1 &gt; 0"

    def test_keeps_quotes(self):
        assert sanitize("Tom's \"Lamp\"") == "Tom's \"Lamp\""

    def test_strip_tags_does_not_escape(self):
        assert strip_tags("<b>Salt</b> & Pepper") == "Salt & Pepper"
        assert strip_tags(None) == ""

    def test_none_and_non_strings(self):
        assert sanitize(None) == ""
        assert sanitize(12) == "12"
