"""
Pydantic schemas for conversion options.
"""
from json2csv.schemas.options import ConversionOptions, OptionsError

__all__ = ["ConversionOptions", "OptionsError"]
