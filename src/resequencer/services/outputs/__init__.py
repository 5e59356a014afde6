"""Result serialization helpers."""

from .formatter import result_summary_rows, result_to_csv, result_to_json, summary_to_csv

__all__ = [
    "result_to_json",
    "result_to_csv",
    "result_summary_rows",
    "summary_to_csv",
]
