"""
Per-function result records.

Each record combines the line composition of a function's span with the
two structural metrics of its body. Records are collected into a flat
list in discovery order; sorting and filtering belong to the reporting
layer.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from fnloc.analysis.complexity import calculate_cyclomatic_complexity
from fnloc.analysis.functions import FunctionSpan, extract_functions, find_function, span_for
from fnloc.analysis.lines import count_function_lines
from fnloc.analysis.nesting import calculate_nesting_depth
from fnloc.errors import FnlocError, RustParseError
from fnloc.parsing import syntax as ast
from fnloc.parsing.treesitter import parse_source
from fnloc.utils.files import read_rust_file


logger = logging.getLogger(__name__)

DEFAULT_COMPLEXITY = 1
DEFAULT_NESTING = 0


@dataclass(frozen=True)
class FunctionAnalysisResult:
    name: str
    total: int
    code: int
    comment: int
    empty: int
    cyclomatic_complexity: int
    nesting_depth: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def analyze_function(span: FunctionSpan, body: ast.Block) -> FunctionAnalysisResult:
    """Build the record for a function whose body is already parsed."""
    counts = count_function_lines(span)
    return FunctionAnalysisResult(
        name=span.name,
        total=counts.total,
        code=counts.code,
        comment=counts.comment,
        empty=counts.empty,
        cyclomatic_complexity=calculate_cyclomatic_complexity(body),
        nesting_depth=calculate_nesting_depth(body),
    )


def analyze_function_lines(span: FunctionSpan, source: str) -> FunctionAnalysisResult:
    """Build the record for ``span``, looking its body up by name in ``source``.

    When ``source`` does not parse or does not contain the function, the
    structural metrics fall back to complexity 1 and nesting 0.
    """
    counts = count_function_lines(span)
    complexity, nesting = calculate_function_metrics(source, span.name, span.start_line)
    return FunctionAnalysisResult(
        name=span.name,
        total=counts.total,
        code=counts.code,
        comment=counts.comment,
        empty=counts.empty,
        cyclomatic_complexity=complexity,
        nesting_depth=nesting,
    )


def calculate_function_metrics(source: str, function_name: str, start_line: int = 0) -> Tuple[int, int]:
    """Return ``(complexity, nesting)`` for the named function in ``source``."""
    try:
        parsed = parse_source(source)
    except RustParseError:
        return DEFAULT_COMPLEXITY, DEFAULT_NESTING
    item = find_function(parsed, function_name, start_line)
    if item is None:
        return DEFAULT_COMPLEXITY, DEFAULT_NESTING
    return calculate_cyclomatic_complexity(item.body), calculate_nesting_depth(item.body)


def calculate_cyclomatic_complexity_from_source(source: str, function_name: str) -> int:
    return calculate_function_metrics(source, function_name)[0]


def calculate_nesting_depth_from_source(source: str, function_name: str) -> int:
    return calculate_function_metrics(source, function_name)[1]


def analyze_file_functions(path: str) -> List[FunctionAnalysisResult]:
    """Analyze every function in one Rust file.

    Raises ``SourceReadError`` or ``RustParseError`` when the file cannot
    be used; ``analyze_all_files`` turns those into skipped files.
    """
    parsed = parse_source(read_rust_file(path), path)
    lines = parsed.lines
    return [analyze_function(span_for(item, lines), item.body) for item in extract_functions(parsed)]


def analyze_all_files(
    file_paths: Iterable[str],
    qualify_names: bool = True,
    errors: Optional[List[str]] = None,
) -> List[FunctionAnalysisResult]:
    """Analyze all functions across ``file_paths``, in file then source order.

    With ``qualify_names`` each name is prefixed with its file path
    (``src/lib.rs::parse``). Files that fail to read or parse are skipped
    and their error message is appended to ``errors`` when given.
    """
    all_results: List[FunctionAnalysisResult] = []
    for path in file_paths:
        try:
            file_results = analyze_file_functions(path)
        except FnlocError as e:
            logger.warning("Skipping %s: %s", path, e)
            if errors is not None:
                errors.append(str(e))
            continue
        logger.debug("Analyzed %d functions in %s", len(file_results), path)
        all_results.extend(qualify(result, path) if qualify_names else result for result in file_results)
    return all_results


def qualify(result: FunctionAnalysisResult, path: str) -> FunctionAnalysisResult:
    return replace(result, name=f"{path}::{result.name}")
