from __future__ import annotations

import csv
import io
import json
import sys
from typing import Any, Dict, Iterable, Optional

from fnloc.analysis.aggregate import FunctionAnalysisResult


CSV_HEADER = [
    "Function",
    "Total Lines",
    "Code Lines",
    "Comment Lines",
    "Empty Lines",
    "Cyclomatic Complexity",
    "Nesting Depth",
]


class Colors:
    RESET = "\033[0m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


def supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def format_table(
    results: Iterable[FunctionAnalysisResult],
    file_count: int,
    use_color: bool = False,
    thresholds: Optional[Dict[str, Any]] = None,
) -> str:
    thresholds = thresholds or {}
    lines = [f"Analyzing {file_count} Rust files...", ""]
    for result in results:
        complexity = _colored(result.cyclomatic_complexity, thresholds.get("complexity"), use_color)
        nesting = _colored(result.nesting_depth, thresholds.get("nesting"), use_color)
        lines.append(
            f"  - fn {result.name}: total={result.total} lines, code={result.code}, "
            f"comment={result.comment}, empty={result.empty}, "
            f"complexity={complexity}, nesting={nesting}"
        )
    return "\n".join(lines) + "\n"


def format_json(results: Iterable[FunctionAnalysisResult]) -> str:
    data = [
        {
            "name": result.name,
            "total": result.total,
            "code": result.code,
            "comment": result.comment,
            "empty": result.empty,
            "complexity": result.cyclomatic_complexity,
            "nesting": result.nesting_depth,
        }
        for result in results
    ]
    return json.dumps(data, indent=2) + "\n"


def format_csv(results: Iterable[FunctionAnalysisResult]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for result in results:
        writer.writerow(
            [
                result.name,
                result.total,
                result.code,
                result.comment,
                result.empty,
                result.cyclomatic_complexity,
                result.nesting_depth,
            ]
        )
    return buffer.getvalue()


def format_results(
    fmt: str,
    results: Iterable[FunctionAnalysisResult],
    file_count: int = 0,
    use_color: bool = False,
    thresholds: Optional[Dict[str, Any]] = None,
) -> str:
    if fmt == "table":
        return format_table(results, file_count, use_color=use_color, thresholds=thresholds)
    if fmt == "json":
        return format_json(results)
    if fmt == "csv":
        return format_csv(results)
    raise ValueError(f"Unknown format: {fmt}")


def _colored(value: int, levels: Optional[Dict[str, int]], use_color: bool) -> str:
    if not use_color or not levels:
        return str(value)
    if value >= levels.get("high", sys.maxsize):
        color = Colors.RED
    elif value >= levels.get("moderate", sys.maxsize):
        color = Colors.YELLOW
    else:
        color = Colors.GREEN
    return f"{color}{value}{Colors.RESET}"
