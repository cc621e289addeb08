# spendlite/utils.py
import re


def title_case(value):
    """
    Turn a stored category into a display label: 'EATING_OUT' -> 'Eating Out'.
    """
    text = str(value or "").lower()
    text = re.sub(r"[_-]+", " ", text)
    text = re.sub(r"\s+", " ", text).strip()
    return re.sub(r"\b([a-z])", lambda m: m.group(1).upper(), text)


def for_filename(label):
    return re.sub(r"\s+", "_", str(label))
