"""
JSON Schema Contract Validators

Validates serialized Roman numeral records against the formal JSON Schema
contract shipped with the package. Uses jsonschema (Draft 2020-12).

Schemas:
- roman_numeral.json: {"value": int, "numeral": str}
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from numerals.core.math.roman_encoder import encode_roman


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas live in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'roman_numeral')

        Returns:
            Parsed schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True if data validates, False otherwise. Never raises."""
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over all schema errors for data."""
        return self.validator.iter_errors(data)


class RomanNumeralValidator(ContractValidator):
    """
    Validator for the roman_numeral contract.

    On top of the schema, the numeral text must be the canonical encoding
    of the value.
    """

    def __init__(self):
        super().__init__("roman_numeral")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        error = self._consistency_error(data)
        if error is not None:
            raise error

    def iter_errors(self, data: Dict[str, Any]):
        """Schema errors first; the consistency error only for schema-valid data."""
        schema_errors = list(super().iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        error = self._consistency_error(data)
        if error is not None:
            yield error

    def _consistency_error(self, data: Dict[str, Any]) -> ValidationError | None:
        value = data["value"]
        # Draft 2020-12 treats 5.0 as an integer
        if isinstance(value, bool) or not isinstance(value, int):
            return ValidationError(f"value {value!r} is not an int")

        expected = encode_roman(value)
        if data["numeral"] != expected:
            return ValidationError(
                f"numeral {data['numeral']!r} does not encode value {value} "
                f"(expected {expected!r})"
            )
        return None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_roman_numeral(data: Dict[str, Any]) -> None:
    """
    Validate a roman_numeral record.

    Args:
        data: Record to validate

    Raises:
        ValidationError: If the record does not match the schema or the
            numeral is not the encoding of the value
    """
    RomanNumeralValidator().validate(data)
