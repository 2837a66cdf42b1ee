from .csv_out import csv_rows, write_csv
from .text_out import format_rounds

__all__ = ["csv_rows", "format_rounds", "write_csv"]
