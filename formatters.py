from decimal import Decimal

import pandas as pd

from constants import CURRENCY
from summary import OrderSummary


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY}{amount:,.2f}"


def summary_frame(summary: OrderSummary) -> pd.DataFrame:
    """Order summary as a table: one row per line item plus a total row."""
    rows = [{"Item": line.label, "Total": format_money(line.line_total)} for line in summary.lines]
    rows.append({"Item": "Total", "Total": format_money(summary.total)})
    return pd.DataFrame(rows, columns=["Item", "Total"])


def format_summary_text(summary: OrderSummary) -> str:
    lines = [f"{line.label} — {format_money(line.line_total)}" for line in summary.lines]
    lines.append(f"Total — {format_money(summary.total)}")
    return "\n".join(lines)
