"""
Trade Analysis Prompt Templates

The model only comments on trades. All numbers are computed locally and
passed in as text.
"""

from decimal import Decimal

from tradejournal.schemas.analysis import AnalysisTrade

ANALYSIS_SYSTEM_PROMPT = (
    "You are an expert crypto trading advisor. Analyze trades and provide "
    "actionable feedback on risk management, entry/exit strategies, and overall "
    "trading patterns. Be concise and practical."
)

ANALYSIS_USER_PROMPT_TEMPLATE = """Analyze these trades and provide feedback:

{trades_text}

Provide specific recommendations to improve risk management and trading strategy."""


def format_price(value: float) -> str:
    """
    Render a price the way the trade form shows it.

    50000 not 50000.0, 0.00001234 not 1.234e-05. Exponent form is kept
    only below 1e-6 and from 1e21 up, written as 1e-7 / 1e+21.
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")

    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_trade_line(position: int, trade: AnalysisTrade) -> str:
    return (
        f"Trade {position}: {trade.crypto_pair} - "
        f"Entry: ${format_price(trade.entry_price)}, "
        f"Stop Loss: ${format_price(trade.stop_loss)}, "
        f"Risk: {trade.risk_percent:.2f}%"
    )


def format_trades_text(trades: list[AnalysisTrade]) -> str:
    """One line per trade, newline separated, no trailing newline."""
    return "\n".join(
        format_trade_line(i, trade) for i, trade in enumerate(trades, start=1)
    )


def format_analysis_prompt(trades: list[AnalysisTrade]) -> str:
    return ANALYSIS_USER_PROMPT_TEMPLATE.format(trades_text=format_trades_text(trades))
