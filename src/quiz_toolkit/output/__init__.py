"""Export formats for question collections."""

from .csv_export import CSV_HEADER, to_csv

__all__ = ["CSV_HEADER", "to_csv"]
