"""
Function metrics: line composition, cyclomatic complexity and nesting depth.
"""

from fnloc.analysis.aggregate import (
    FunctionAnalysisResult,
    analyze_all_files,
    analyze_file_functions,
    analyze_function,
    analyze_function_lines,
    calculate_cyclomatic_complexity_from_source,
    calculate_nesting_depth_from_source,
)
from fnloc.analysis.complexity import calculate_cyclomatic_complexity
from fnloc.analysis.functions import FunctionSpan, extract_function_spans, extract_functions
from fnloc.analysis.lines import LineCounts, count_function_lines
from fnloc.analysis.nesting import calculate_nesting_depth

__all__ = [
    "FunctionAnalysisResult",
    "FunctionSpan",
    "LineCounts",
    "analyze_all_files",
    "analyze_file_functions",
    "analyze_function",
    "analyze_function_lines",
    "calculate_cyclomatic_complexity",
    "calculate_cyclomatic_complexity_from_source",
    "calculate_nesting_depth",
    "calculate_nesting_depth_from_source",
    "count_function_lines",
    "extract_function_spans",
    "extract_functions",
]
