from __future__ import annotations

from dataclasses import dataclass

"""Configuration dataclass for the invoice sheet extractor.

Separate from the YAML loader in config/loader.py; every field has a default
so the pipeline can run without a configuration file.
"""

__all__ = [
    "CANNOT_CALCULATE_TOTAL",
    "DEFAULT_MISSING_RATE_VALUE",
    "DEFAULT_UNKNOWN_CURRENCY_VALUE",
    "ExtractorConfig",
]

DEFAULT_MISSING_RATE_VALUE = "No value"
DEFAULT_UNKNOWN_CURRENCY_VALUE = "No such currency defined"
CANNOT_CALCULATE_TOTAL = "Cannot calculate total"


@dataclass(frozen=True)
class ExtractorConfig:
    """Runtime settings for one extraction run.

    Sentinel fields accept None, in which case lookups that miss produce a
    JSON null instead of a text placeholder.
    """
    sheet_name: str | None = None  # None -> first worksheet
    date_cell: str = "A1"  # 請求月セル
    missing_rate_value: str | None = DEFAULT_MISSING_RATE_VALUE
    unknown_currency_value: str | None = DEFAULT_UNKNOWN_CURRENCY_VALUE
    error_log_dir: str = "./logs"
