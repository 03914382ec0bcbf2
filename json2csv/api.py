"""
Conversion entry point.

convert(options) returns CSV text or raises.
convert(options, callback) runs the same conversion and reports through
callback(error) or callback(None, csv), synchronously, before returning.

Both modes share run_conversion(), which captures errors in a
ConversionResult instead of raising them, so the two modes always agree on
what failed and why.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from json2csv.export.csv_emitter import CSVEmitter
from json2csv.schemas.options import ConversionOptions

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]
OptionsInput = Union[ConversionOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ConversionResult:
    """Result of one conversion: either csv text or the error that stopped it."""

    csv: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the csv text, raising the captured error if there is one."""
        if self.error is not None:
            raise self.error
        return self.csv


def run_conversion(options: OptionsInput = None, **overrides: Any) -> ConversionResult:
    """
    Convert a document to CSV, capturing any failure in the result.

    Args:
        options: Option mapping or ConversionOptions (data included)
        **overrides: Extra options merged over `options`

    Returns:
        ConversionResult holding csv text or the error
    """
    try:
        opts = ConversionOptions.parse(options, **overrides)
        csv_text = CSVEmitter(opts).emit()
    except Exception as e:
        logger.debug("Conversion failed: %s", e)
        return ConversionResult(error=e)

    return ConversionResult(csv=csv_text)


def convert(
    options: OptionsInput = None, callback: Optional[Callback] = None, **overrides: Any
) -> Optional[str]:
    """
    Convert a document to CSV text.

    Args:
        options: Option mapping or ConversionOptions
        callback: Optional callable; when given, receives (error) on failure
            or (None, csv) on success and convert() returns None
        **overrides: Extra options merged over `options`

    Returns:
        CSV text (direct mode) or None (callback mode)

    Raises:
        ValidationError: fieldNames / fields length mismatch (direct mode only)
        OptionsError: Malformed option values (direct mode only)

    Examples:
        convert({"data": [{"a": 1}]}) → '"a"\\n"1"'
        convert(data={"a": 1}, quotes="") → 'a\\n1'
    """
    result = run_conversion(options, **overrides)

    if callback is None:
        return result.unwrap()

    # Callback errors are the caller's; they propagate as-is.
    if result.error is not None:
        callback(result.error)
    else:
        callback(None, result.csv)
    return None
