"""
CSV emitter - assembles a document of records into CSV text.

Pipeline:
- Normalize the document into a list of records
- Settle the column list once (explicit fields, else first record's keys)
- Check header labels line up with the columns
- Header row (optional) + one row per record, cells quoted like the header
- Join rows with the terminator, no trailing terminator

Byte-identical output for identical input (no state kept between calls).
"""
import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from json2csv.export.encoder import encode_value
from json2csv.schemas.options import ConversionOptions
from json2csv.transform.resolver import derive_fields, resolve_field
from json2csv.validate.validator import validate_field_names

logger = logging.getLogger(__name__)


def build_row(cells: Sequence[str], delimiter: str = ",") -> str:
    """Join encoded cells into one row (no leading/trailing delimiter)."""
    return delimiter.join(cells)


def normalize_document(data: Any) -> List[Any]:
    """
    Promote any accepted document shape to a list of records.

    - None / "" → []
    - Mapping → [mapping]
    - list / tuple / other non-string sequence → list(data)
    - any other value → [value] (renders as an all-default row)
    """
    if data is None or (isinstance(data, str) and data == ""):
        return []
    if isinstance(data, Mapping):
        return [data]
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return list(data)
    return [data]


def _is_blank(record: Any) -> bool:
    return record is None or (isinstance(record, Mapping) and len(record) == 0)


class CSVEmitter:
    """
    Emits CSV text for one set of conversion options.

    The emitter holds only its options; every emit() call derives its own
    columns, so one instance may be reused across documents.
    """

    def __init__(self, options: ConversionOptions):
        """
        Initialize CSV emitter.

        Args:
            options: Parsed conversion options
        """
        self.options = options

    def emit(self, data: Any = None) -> str:
        """
        Render a document as CSV text.

        Args:
            data: Document (record, list of records, or None).
                Defaults to options.data.

        Returns:
            CSV text without a trailing terminator

        Raises:
            ValidationError: If fieldNames and the effective fields differ in length
        """
        opts = self.options
        records = normalize_document(opts.data if data is None else data)

        fields = self.resolve_columns(records)
        validate_field_names(fields, opts.field_names)

        # Null and empty records carry nothing to render
        data_rows = [
            self._data_row(record, fields) for record in records if not _is_blank(record)
        ]
        logger.debug("Emitted %d data rows over %d columns", len(data_rows), len(fields))

        if opts.has_csv_column_title:
            return opts.terminator.join([self._header_row(fields)] + data_rows)
        return opts.terminator.join(data_rows)

    def resolve_columns(self, records: List[Any]) -> List[str]:
        """Explicit fields when given, else the first record's key order."""
        if self.options.fields is not None:
            return list(self.options.fields)

        fields = derive_fields(records)
        logger.debug("Derived fields from first record: %s", fields)
        return fields

    def _header_row(self, fields: List[str]) -> str:
        labels = self.options.field_names if self.options.field_names is not None else fields
        return build_row(
            [encode_value(label, self.options.quotes) for label in labels],
            self.options.delimiter,
        )

    def _data_row(self, record: Any, fields: List[str]) -> str:
        opts = self.options
        cells = [
            encode_value(
                resolve_field(record, path, opts.nested, opts.default_value),
                opts.quotes,
            )
            for path in fields
        ]
        return build_row(cells, opts.delimiter)


def assemble(
    data: Any,
    fields: Optional[Sequence[str]] = None,
    field_names: Optional[Sequence[str]] = None,
    options: Optional[ConversionOptions] = None,
) -> str:
    """
    Assemble CSV text from a document and explicit column settings.

    `fields` and `field_names` override the matching entries in `options`.
    """
    base = options if options is not None else ConversionOptions()
    overrides = {}
    if fields is not None:
        overrides["fields"] = list(fields)
    if field_names is not None:
        overrides["fieldNames"] = list(field_names)
    opts = ConversionOptions.parse(base, **overrides) if overrides else base
    return CSVEmitter(opts).emit(data)
