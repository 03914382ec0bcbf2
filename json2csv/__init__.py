"""
json2csv - convert JSON-style records to CSV text.

    >>> from json2csv import convert
    >>> convert({"data": [{"carModel": "Audi", "price": 0}]})
    '"carModel","price"\\n"Audi","0"'
"""
from json2csv.api import ConversionResult, convert, run_conversion
from json2csv.schemas.options import ConversionOptions, OptionsError
from json2csv.validate.validator import ValidationError

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "OptionsError",
    "ValidationError",
    "convert",
    "run_conversion",
    "__version__",
]
