from __future__ import annotations

import pytest

from invoice_sheet.errors import MissingMandatoryField, StructuralError
from invoice_sheet.services.structure import find_anchor, validate_sheet_structure
from tests.sheet_factory import build_sheet, invoice_cells


def test_valid_sheet_passes(invoice_sheet):
    assert validate_sheet_structure(invoice_sheet) is None


@pytest.mark.parametrize("cell,anchor", [("E5", "Status"), ("F5", "Invoice #")])
def test_missing_anchor_names_it(cell, anchor):
    sheet = build_sheet(invoice_cells(**{cell: None}))
    with pytest.raises(StructuralError) as e:
        validate_sheet_structure(sheet)
    assert e.value.element == anchor
    assert anchor in str(e.value)


def test_duplicate_anchor_is_structural_error():
    sheet = build_sheet(invoice_cells(Z20="Invoice #"))
    with pytest.raises(StructuralError) as e:
        find_anchor(sheet, "Invoice #")
    assert "Ambiguous" in str(e.value)


@pytest.mark.parametrize("value", [None, 202309])
def test_date_cell_must_be_text(value):
    sheet = build_sheet(invoice_cells(A1=value))
    with pytest.raises(StructuralError) as e:
        validate_sheet_structure(sheet)
    assert e.value.element == "A1"


def test_custom_date_cell():
    sheet = build_sheet(invoice_cells(A1=None, C1="Sep 2023"))
    validate_sheet_structure(sheet, date_cell="C1")


def test_missing_mandatory_field():
    sheet = build_sheet(invoice_cells(C5=None))
    with pytest.raises(MissingMandatoryField) as e:
        validate_sheet_structure(sheet)
    assert e.value.element == "Project Type"
    assert "Project Type" in str(e.value)


def test_mandatory_label_anywhere_in_sheet_is_accepted():
    # ラベルはヘッダ行以外にあっても構造チェックは通る
    sheet = build_sheet(invoice_cells(C5=None, X40="Project Type"))
    validate_sheet_structure(sheet)
