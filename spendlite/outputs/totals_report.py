# spendlite/outputs/totals_report.py

import logging
import os

from spendlite.core.totals import percentage
from spendlite.outputs.base import BaseOutput
from spendlite.utils import for_filename, title_case

logger = logging.getLogger(__name__)

AMOUNT_WIDTH = 12
PERCENT_WIDTH = 6
REPORT_TITLE = "SpendLite Category Totals"


def format_totals_report(totals, label):
    """
    Render category totals as a fixed-width plain text table: a titled
    header, one row per category with its amount and share of the grand
    total, then a TOTAL footer.
    """
    header = f"{REPORT_TITLE} ({label})"
    labels = [(title_case(cat), total) for cat, total in totals.rows]
    cat_width = max([8, len("Category")] + [len(name) for name, _ in labels])

    def line(name, amount, pct):
        return f"{name.ljust(cat_width)} {amount.rjust(AMOUNT_WIDTH)} {pct.rjust(PERCENT_WIDTH)}"

    lines = [header, "=" * len(header), line("Category", "Amount", "%")]
    for name, total in labels:
        pct = percentage(total, totals.grand_total)
        lines.append(line(name, f"{total:.2f}", f"{pct:.1f}%"))
    lines.append("")
    lines.append(line("TOTAL", f"{totals.grand_total:.2f}", "100%"))
    return "\n".join(lines)


def report_filename(label):
    return f"category_totals_{for_filename(label)}.txt"


class TotalsReportOutput(BaseOutput):
    """Writes exported text payloads (totals report, rules) into output_dir."""

    def __init__(self, config):
        self.config = config
        self.output_dir = config.get('output_dir', 'data')

    def write(self, text, filename):
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, filename)
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            f.write(text)
        logger.info("Wrote %s", out_path)
        return out_path
