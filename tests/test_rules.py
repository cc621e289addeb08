from spendlite.core.models import Rule
from spendlite.core.rules import matches_keyword, parse_rules


def test_parse_rules_skips_comments_blanks_and_bad_lines():
    text = "coffee shop => DINING\n# note\n\nnetflix=>ENTERTAINMENT\nbadline"
    assert parse_rules(text) == [
        Rule(keyword="coffee shop", category="DINING"),
        Rule(keyword="netflix", category="ENTERTAINMENT"),
    ]


def test_parse_rules_normalises_case_and_line_endings():
    rules = parse_rules("  Woolworths  =>  groceries \r\nUBER eats => eating_out\r\n")
    assert rules == [
        Rule(keyword="woolworths", category="GROCERIES"),
        Rule(keyword="uber eats", category="EATING_OUT"),
    ]


def test_parse_rules_drops_empty_sides():
    assert parse_rules(" => FOO\nbar =>\n=>") == []
    assert parse_rules(None) == []


def test_parse_rules_keeps_order_and_duplicates():
    rules = parse_rules("shell => FUEL\nshell => CAR\n")
    assert [r.category for r in rules] == ["FUEL", "CAR"]


def test_parse_rules_uses_text_between_first_separators():
    assert parse_rules("a => B => C") == [Rule(keyword="a", category="B")]


def test_matches_keyword_is_order_sensitive():
    assert matches_keyword("paypal pypl inc", "paypal pypl")
    assert matches_keyword("paypal *pypl inc", "paypal pypl")
    assert not matches_keyword("pypl paypal", "paypal pypl")


def test_matches_keyword_cursor_advances_past_each_token():
    assert matches_keyword("aa", "a a")
    assert not matches_keyword("a", "a a")


def test_matches_keyword_empty_never_matches():
    assert not matches_keyword("anything", "")
    assert not matches_keyword("anything", "   ")
