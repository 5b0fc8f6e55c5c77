"""Invoice sheet extractor.

Reconstructs invoice records from a sparsely populated spreadsheet, validates
mandatory fields and computes invoice totals from rate annotations found in
the same sheet.
"""

__version__ = "0.1.0"
