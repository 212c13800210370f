"""
fnloc - function metrics for Rust source trees

Counts code, comment and empty lines per function and measures each
function's cyclomatic complexity and maximum nesting depth.
"""

__version__ = "0.1.0"

from fnloc.analysis import FunctionAnalysisResult, analyze_all_files
from fnloc.config import Config
from fnloc.core.engine import AnalysisEngine, AnalysisReport

__all__ = [
    "AnalysisEngine",
    "AnalysisReport",
    "Config",
    "FunctionAnalysisResult",
    "analyze_all_files",
]
