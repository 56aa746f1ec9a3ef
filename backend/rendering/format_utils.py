"""Consistent formatting for site text: figures, dates and escaped markup."""
from __future__ import annotations

import html
from datetime import date, datetime
from typing import Any


def esc(value: Any) -> str:
    return html.escape(str(value if value is not None else ""), quote=True)


def format_compact_currency(value: float) -> str:
    """1_250_000_000 -> "$1.3B"; small values keep whole dollars."""
    magnitude = abs(value)
    for threshold, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")):
        # Promote when the next unit down would display as 1,000.
        lower = threshold / 1e3
        if magnitude >= threshold or round(magnitude / lower, 1 if lower > 1 else 0) >= 1e3:
            return f"${value / threshold:,.1f}{suffix}"
    return f"${value:,.0f}"


def format_number(value: float, precision: int = 0) -> str:
    return f"{value:,.{precision}f}"


def format_date(d: Any) -> str:
    if d is None:
        return ""
    if isinstance(d, date):
        return d.strftime("%B %d, %Y")
    text = str(d).strip()
    if not text:
        return ""
    for fmt in ("%Y-%m-%d", "%m/%d/%Y", "%d.%m.%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(text[:10], fmt).date().strftime("%B %d, %Y")
        except ValueError:
            continue
    return text
