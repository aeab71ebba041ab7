"""Mini README: Export utilities for the Expense Tracker.

Serialises the full transaction list either as CSV text or as a printable
HTML report.
"""

from .csv_exporter import CSV_FILENAME, CSV_HEADER, CsvExporter
from .report_exporter import REPORT_FILENAME, ReportExporter

__all__ = ["CSV_FILENAME", "CSV_HEADER", "CsvExporter", "REPORT_FILENAME", "ReportExporter"]
