from __future__ import annotations

import pytest

from invoice_sheet.models.invoice_record import InvoiceRecord


def test_values_are_read_only():
    record = InvoiceRecord(6, {"Customer": "Acme"})
    with pytest.raises(TypeError):
        record.values["Customer"] = "Globex"  # type: ignore[index]


def test_values_are_copied_from_caller():
    source = {"Customer": "Acme"}
    record = InvoiceRecord(6, source)
    source["Customer"] = "Globex"
    assert record.values["Customer"] == "Acme"


def test_with_total_does_not_share_values():
    before = InvoiceRecord(6, {"Customer": "Acme"})
    after = before.with_total("110")
    assert before.invoice_total is None
    assert after.invoice_total == "110"
    assert after.values == before.values
    assert after.values is not before.values


def test_records_are_hashable():
    a = InvoiceRecord(6, {"Customer": "Acme", "Total Price": 100}, ["Status: Required"], "110")
    b = InvoiceRecord(6, {"Total Price": 100, "Customer": "Acme"}, ("Status: Required",), "110")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, a.with_total("No such currency defined")}) == 2


def test_to_dict_shape():
    record = InvoiceRecord(6, {"Customer": "Acme"}, ("Status: Required",), "110")
    assert record.to_dict() == {
        "validationErrors": ["Status: Required"],
        "Customer": "Acme",
        "Invoice Total": "110",
    }
