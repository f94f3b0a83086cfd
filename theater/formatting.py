"""Text rendering of computed statements.

Currency formatting lives in usd() only; nothing else formats money.
"""

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from theater.domain.models import Statement

CENT_DIVISOR = 100


def usd(amount_in_cents: int) -> str:
    """Format cents as US dollars, e.g. 173000 -> "$1,730.00".

    Cents are truncated to whole dollars before formatting.
    """
    return f"${amount_in_cents // CENT_DIVISOR:,.2f}"


def render_text(statement: "Statement", newline: str = os.linesep) -> str:
    """Render a statement as text, one terminated line per entry."""
    lines = [f"Statement for {statement.customer}"]
    lines.extend(
        f"  {line.play_name}: {line.amount} ({line.audience} seats)"
        for line in statement.lines
    )
    lines.append(f"Amount owed is {statement.total_amount}")
    lines.append(f"You earned {statement.total_credits} credits")
    return "".join(f"{line}{newline}" for line in lines)
