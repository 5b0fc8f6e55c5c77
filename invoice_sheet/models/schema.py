from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from jsonschema import Draft202012Validator

"""Mandatory field schema for invoice rows.

Each mandatory column has a JSON Schema fragment. Draft 2020-12 treats an
integral float (12345.0, as decoded from a spreadsheet) as an integer, which
matches how spreadsheet numbers behave.

Validation never raises: check_field() returns a FieldCheck carrying the value
and the reasons it failed (an immutable tuple).
"""

__all__ = [
    "FieldCheck",
    "MANDATORY_FIELDS",
    "VALIDATION_SCHEMA",
    "check_field",
    "validate_field",
]

REQUIRED_MESSAGE = "Required"

VALIDATION_SCHEMA: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    "Customer": {"type": "string"},
    # 5 桁の整数
    "Cust No'": {"type": "integer", "minimum": 10000, "maximum": 99999},
    "Project Type": {"type": "string", "maxLength": 20},
    "Quantity": {"type": "number"},
    "Price Per Item": {"type": "number"},
    "Item Price Currency": {"type": "string", "minLength": 3, "maxLength": 3},
    "Total Price": {"type": "number"},
    "Invoice Currency": {"type": "string", "minLength": 3, "maxLength": 3},
    "Status": {"enum": ["Ready", "Done"]},
})

MANDATORY_FIELDS: tuple[str, ...] = tuple(VALIDATION_SCHEMA)

_VALIDATORS = {name: Draft202012Validator(rule) for name, rule in VALIDATION_SCHEMA.items()}


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of validating one cell value."""
    field: str
    value: Any
    reasons: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.reasons

    @property
    def messages(self) -> list[str]:
        """Formatted "<field>: <reason>" messages."""
        return [f"{self.field}: {r}" for r in self.reasons]


def _validator_for(name: str, schema: Mapping[str, Mapping[str, Any]]) -> Draft202012Validator:
    if schema is VALIDATION_SCHEMA:
        return _VALIDATORS[name]
    return Draft202012Validator(schema[name])


def check_field(
    name: str, value: Any, schema: Mapping[str, Mapping[str, Any]] = VALIDATION_SCHEMA
) -> FieldCheck:
    """Validate ``value`` against the rule for ``name``.

    Fields without a rule always pass. ``None`` (empty cell) fails with
    "Required".
    """
    if name not in schema:
        return FieldCheck(name, value)
    if value is None:
        return FieldCheck(name, value, (REQUIRED_MESSAGE,))
    validator = _validator_for(name, schema)
    errors = sorted(validator.iter_errors(value), key=lambda e: list(e.schema_path))
    return FieldCheck(name, value, tuple(e.message for e in errors))


def validate_field(
    name: str, value: Any, schema: Mapping[str, Mapping[str, Any]] = VALIDATION_SCHEMA
) -> list[str]:
    """Shortcut returning formatted messages only (empty when valid)."""
    return check_field(name, value, schema).messages
