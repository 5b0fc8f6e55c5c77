"""Domain models for the invoice sheet extractor."""

from .config_models import ExtractorConfig
from .extraction_result import ExtractionResult
from .invoice_record import InvoiceRecord
from .schema import MANDATORY_FIELDS, VALIDATION_SCHEMA, FieldCheck
from .sheet import COLUMN_LETTERS, CellCoordinate, SparseSheet

__all__ = [
    # Configuration models
    "ExtractorConfig",
    # Sheet model
    "COLUMN_LETTERS",
    "CellCoordinate",
    "SparseSheet",
    # Validation schema
    "FieldCheck",
    "MANDATORY_FIELDS",
    "VALIDATION_SCHEMA",
    # Processing models
    "ExtractionResult",
    "InvoiceRecord",
]
