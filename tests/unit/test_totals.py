from __future__ import annotations

from decimal import Decimal

import pytest

from invoice_sheet.models.invoice_record import InvoiceRecord
from invoice_sheet.services.totals import calculate_totals, compute_total, format_total

RATES = {"USD": 1.1, "EUR": "0.9", "JPY": "No value", "GBP": "abc"}


def _record(row: int = 6, **values) -> InvoiceRecord:
    base = {"Invoice Currency": "USD", "Total Price": 100}
    base.update(values)
    return InvoiceRecord(row_number=row, values=base)


@pytest.mark.parametrize(
    "price,rate,expected",
    [
        (100, 1.1, "110"),
        (100.9, 1.1, "110"),  # 小数部は切り捨て
        ("100.9", "1.1", "110"),
        (3, 1.5, "4.5"),
        (-7.8, 2, "-14"),
        (0, 1.1, "0"),
        (1000000, 1, "1000000"),
    ],
)
def test_compute_total(price, rate, expected):
    assert compute_total(price, rate) == expected


@pytest.mark.parametrize("price,rate", [("abc", 1.1), (100, "No value"), (None, 1), (True, 1), (100, float("nan"))])
def test_compute_total_not_numeric(price, rate):
    assert compute_total(price, rate) is None


def test_format_total():
    assert format_total(Decimal("110.00")) == "110"
    assert format_total(Decimal("1E+3")) == "1000"
    assert format_total(Decimal("-0.0")) == "0"


def test_calculate_totals_known_currency():
    [record] = calculate_totals([_record()], RATES)
    assert record.invoice_total == "110"
    assert record.values["Total Price"] == 100


def test_unknown_currency_sentinel():
    records = calculate_totals([_record(**{"Invoice Currency": "CHF"})], RATES)
    assert records[0].invoice_total == "No such currency defined"


def test_unknown_currency_sentinel_can_be_null():
    records = calculate_totals([_record(**{"Invoice Currency": "CHF"})], RATES, unknown_currency=None)
    assert records[0].invoice_total is None


def test_missing_currency_value_uses_sentinel():
    record = InvoiceRecord(row_number=6, values={"Total Price": 100})
    [out] = calculate_totals([record], RATES)
    assert out.invoice_total == "No such currency defined"


@pytest.mark.parametrize(
    "values",
    [{"Invoice Currency": "JPY"}, {"Invoice Currency": "GBP"}, {"Total Price": "n/a"}],
)
def test_uncomputable_total(values):
    [record] = calculate_totals([_record(**values)], RATES)
    assert record.invoice_total == "Cannot calculate total"


def test_same_length_and_order():
    records = [_record(row=r, **{"Invoice Currency": c}) for r, c in [(6, "USD"), (7, "XXX"), (8, "EUR")]]
    out = calculate_totals(records, RATES)
    assert [r.row_number for r in out] == [6, 7, 8]
    assert [r.invoice_total for r in out] == ["110", "No such currency defined", "90"]


def test_calculate_totals_is_idempotent():
    records = [_record(row=6), _record(row=7, **{"Invoice Currency": "XXX"})]
    once = calculate_totals(records, RATES)
    twice = calculate_totals(once, RATES)
    assert once == twice
    # 入力は変更されない
    assert records[0].invoice_total is None
