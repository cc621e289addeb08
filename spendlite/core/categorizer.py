# spendlite/core/categorizer.py
from spendlite.core.models import UNCATEGORISED
from spendlite.core.rules import matches_keyword


def categorize_description(description, rules):
    desc = (description or "").lower()
    for rule in rules:
        if matches_keyword(desc, rule.keyword):
            return rule.category
    return UNCATEGORISED


def categorize(transactions, rules):
    """Set tx.category on every transaction from the first matching rule."""
    for tx in transactions:
        tx.category = categorize_description(tx.description, rules)
    return transactions
