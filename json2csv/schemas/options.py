"""
Pydantic schema for conversion options.

Accepts the camelCase option keys (fieldNames, hasCSVColumnTitle, del,
newLine, defaultValue) as well as the snake_case attribute names.
Unknown keys are ignored.
"""
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError


DEFAULT_QUOTE = '"'
DEFAULT_DELIMITER = ","
DEFAULT_EOL = "\n"


class OptionsError(ValueError):
    """Raised when an option has the wrong type."""

    pass


class ConversionOptions(BaseModel):
    """Options for a single conversion call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    data: Any = None
    fields: Optional[List[str]] = None
    field_names: Optional[List[str]] = Field(default=None, alias="fieldNames")
    has_csv_column_title: bool = Field(default=True, alias="hasCSVColumnTitle")
    quotes: str = DEFAULT_QUOTE
    delimiter: str = Field(default=DEFAULT_DELIMITER, alias="del")
    eol: Optional[str] = None
    new_line: Optional[str] = Field(default=None, alias="newLine")
    nested: bool = False
    default_value: Any = Field(default="", alias="defaultValue")

    @field_validator("has_csv_column_title", "quotes", "delimiter", "nested", mode="before")
    @classmethod
    def none_means_default(cls, v: Any, info: ValidationInfo) -> Any:
        # An explicit None counts as unset
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @property
    def terminator(self) -> str:
        """Row terminator: newLine wins over eol, falling back to "\\n"."""
        if self.new_line is not None:
            return self.new_line
        if self.eol is not None:
            return self.eol
        return DEFAULT_EOL

    @classmethod
    def parse(
        cls, options: Union["ConversionOptions", Mapping[str, Any], None] = None, **overrides: Any
    ) -> "ConversionOptions":
        """
        Build options from a mapping, an existing instance, or keyword arguments.

        Raises:
            OptionsError: If any option has the wrong type
        """
        if isinstance(options, cls) and not overrides:
            return options

        if isinstance(options, cls):
            raw = options.model_dump(by_alias=True)
        elif options is None:
            raw = {}
        elif isinstance(options, Mapping):
            raw = dict(options)
        else:
            raise OptionsError(
                f"options must be a mapping, got {type(options).__name__}"
            )
        raw.update(overrides)

        # Attribute names and aliases may be mixed; settle on the alias.
        aliases = {name: f.alias for name, f in cls.model_fields.items() if f.alias}
        raw = {aliases.get(key, key): value for key, value in raw.items()}

        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            raise OptionsError(f"Invalid conversion options: {e}") from e
