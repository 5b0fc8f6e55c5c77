from __future__ import annotations

import pytest

from invoice_sheet.models.schema import MANDATORY_FIELDS, check_field, validate_field


def test_mandatory_fields():
    assert set(MANDATORY_FIELDS) == {
        "Customer", "Cust No'", "Project Type",
        "Quantity", "Price Per Item", "Item Price Currency",
        "Total Price", "Invoice Currency", "Status",
    }


@pytest.mark.parametrize(
    "field,value",
    [
        ("Customer", "Acme"),
        ("Cust No'", 12345),
        ("Cust No'", 12345.0),  # スプレッドシート由来の整数値 float
        ("Cust No'", 99999),
        ("Project Type", "x" * 20),
        ("Quantity", 2.5),
        ("Price Per Item", 0),
        ("Item Price Currency", "USD"),
        ("Total Price", 100),
        ("Invoice Currency", "EUR"),
        ("Status", "Ready"),
        ("Status", "Done"),
    ],
)
def test_valid_values(field, value):
    result = check_field(field, value)
    assert result.ok, result.reasons
    assert result.value == value


@pytest.mark.parametrize(
    "field,value",
    [
        ("Customer", 42),
        ("Cust No'", 123),
        ("Cust No'", 100000),
        ("Cust No'", 12345.5),
        ("Cust No'", "12345"),
        ("Project Type", "x" * 21),
        ("Quantity", "two"),
        ("Quantity", True),
        ("Item Price Currency", "US"),
        ("Invoice Currency", "EURO"),
        ("Status", "Pending"),
        ("Status", "ready"),
    ],
)
def test_invalid_values(field, value):
    messages = validate_field(field, value)
    assert messages
    assert all(m.startswith(f"{field}: ") for m in messages)


def test_missing_value_is_required():
    assert validate_field("Customer", None) == ["Customer: Required"]


def test_unknown_field_always_passes():
    assert check_field("Comment", object()).ok


def test_custom_schema():
    schema = {"Code": {"type": "string", "maxLength": 2}}
    assert validate_field("Code", "ABC", schema)
    assert validate_field("Code", "AB", schema) == []


def test_field_check_is_immutable_and_hashable():
    result = check_field("Cust No'", 123)
    assert isinstance(result.reasons, tuple)
    assert hash(result) == hash(check_field("Cust No'", 123))
