"""
Value encoder - renders resolved values as CSV cell text.

Coercion table:
- None → ""
- str → unchanged
- bool → "true" / "false"
- int → decimal digits
- float → "2" for 2.0, "NaN" / "Infinity" / "-Infinity", otherwise repr
- dict / list / tuple → compact JSON
- anything else → str(value)

Quoting wraps the text in the quote marker and doubles every marker inside it.
An empty marker disables both quoting and escaping.
"""
import json
import math
from typing import Any


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def to_text(value: Any) -> str:
    """Coerce any resolved value to its textual form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)


def encode_value(value: Any, quote: str = '"') -> str:
    """
    Encode a value as one CSV cell.

    Args:
        value: Resolved value (default already substituted)
        quote: Quote marker; "" disables quoting

    Returns:
        Cell text

    Examples:
        encode_value('a "quoted" string') → '"a ""quoted"" string"'
        encode_value(15000, quote="") → '15000'
    """
    text = to_text(value)
    if not quote:
        return text
    return f"{quote}{text.replace(quote, quote + quote)}{quote}"
