from fnloc.reporting.formatters import format_csv, format_json, format_results, format_table
from fnloc.reporting.selection import select_results, sort_results

__all__ = [
    "format_csv",
    "format_json",
    "format_results",
    "format_table",
    "select_results",
    "sort_results",
]
