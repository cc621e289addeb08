from spendlite.utils import for_filename, title_case


def test_title_case():
    assert title_case("EATING_OUT") == "Eating Out"
    assert title_case("bills-and  utilities") == "Bills And Utilities"
    assert title_case(None) == ""


def test_for_filename():
    assert for_filename("March 2024 - FUEL") == "March_2024_-_FUEL"
