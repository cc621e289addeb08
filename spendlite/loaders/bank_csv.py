# spendlite/loaders/bank_csv.py
import csv
import io
import logging

from spendlite.core.amounts import parse_amount, try_parse_amount
from spendlite.core.columns import detect_columns
from spendlite.core.models import Transaction
from spendlite.loaders.base import BaseLoader, LoadError, LoadResult

logger = logging.getLogger(__name__)

_SNIFF_CHARS = 2000


def detect_delimiter(text):
    """
    Pick ';' only when it clearly outnumbers ',' in the start of the file.
    """
    head = str(text)[:_SNIFF_CHARS]
    commas = head.count(',')
    semis = head.count(';')
    return ';' if semis > commas * 1.2 else ','


def tokenize(text, delimiter=','):
    """Split CSV text into rows of cells, honouring quotes; blank lines dropped."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    return [row for row in reader if row]


def _cell(row, idx):
    return row[idx] if idx < len(row) else None


class BankCSVLoader(BaseLoader):
    """
    Loader for bank CSV exports with an unknown layout.

    The date, amount and description columns are found from the header row
    (see spendlite.core.columns). If the amount cell of the first row is not
    a number that row is taken as the header, otherwise every row is data.
    Rows too short to hold all three columns, or with neither a date nor a
    description, are skipped.
    """
    def load_text(self, text):
        text = str(text or '')
        delimiter = detect_delimiter(text)
        rows = tokenize(text.strip(), delimiter)
        if not rows:
            raise LoadError("No rows found")

        columns = detect_columns(rows[0])
        first_amount = _cell(rows[0], columns.amount)
        # a blank amount is a real row (e.g. a credit with no debit)
        has_header = first_amount is None or (
            first_amount.strip() != '' and try_parse_amount(first_amount) is None
        )
        start = 1 if has_header else 0
        logger.debug(
            "delimiter=%r columns=%s header=%s", delimiter, columns.as_dict(), has_header
        )

        txs = []
        skipped = 0
        for row in rows[start:]:
            if len(row) < columns.min_row_length:
                skipped += 1
                continue
            raw_date = row[columns.date] or ''
            desc = (row[columns.description] or '').strip()
            if not raw_date and not desc:
                skipped += 1
                continue
            raw_amount = row[columns.amount]
            txs.append(Transaction(
                date=raw_date,
                amount=parse_amount(raw_amount),
                description=desc,
                amount_parsed=try_parse_amount(raw_amount) is not None,
            ))

        if skipped:
            logger.info("Skipped %d malformed row(s)", skipped)
        return LoadResult(transactions=txs, delimiter=delimiter, columns=columns, skipped=skipped)
