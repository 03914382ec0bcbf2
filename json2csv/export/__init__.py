"""
Export module for CSV generation.
"""
from json2csv.export.encoder import encode_value, to_text
from json2csv.export.csv_emitter import CSVEmitter, assemble, build_row, normalize_document

__all__ = [
    "encode_value",
    "to_text",
    "CSVEmitter",
    "assemble",
    "build_row",
    "normalize_document",
]
