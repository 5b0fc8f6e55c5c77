# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from invoice_sheet.logging.init import reset_logging
from invoice_sheet.models.sheet import SparseSheet
from tests.sheet_factory import build_sheet, invoice_cells, write_workbook


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """sheet_name: Sheet1
date_cell: A1
missing_rate_value: No value
unknown_currency_value: No such currency defined
error_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "invoice_sheet.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def invoice_sheet() -> SparseSheet:
    return build_sheet(invoice_cells())


@pytest.fixture()
def invoice_workbook(temp_workdir: Path) -> Path:
    return write_workbook(temp_workdir / "data" / "invoices.xlsx", invoice_cells())


@pytest.fixture(autouse=True)
def _reset_logger_state():
    # setup_logging() はグローバルにキャッシュされるため毎テストでリセット
    reset_logging()
    yield
    reset_logging()
