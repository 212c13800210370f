from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from fnloc.analysis.aggregate import FunctionAnalysisResult


# (key, descending)
SORT_ORDERS: Dict[str, Tuple[Callable[[FunctionAnalysisResult], object], bool]] = {
    "total": (lambda r: r.total, True),
    "code": (lambda r: r.code, True),
    "comments": (lambda r: r.comment, True),
    "name": (lambda r: r.name, False),
    "complexity": (lambda r: r.cyclomatic_complexity, True),
    "nesting": (lambda r: r.nesting_depth, True),
}


def sort_results(results: Iterable[FunctionAnalysisResult], sort: str = "code") -> List[FunctionAnalysisResult]:
    if sort not in SORT_ORDERS:
        raise ValueError(f"Unknown sort key: {sort}")
    key, descending = SORT_ORDERS[sort]
    # sorted() is stable, so ties keep discovery order.
    return sorted(results, key=key, reverse=descending)


def select_results(
    results: Iterable[FunctionAnalysisResult],
    min_lines: int = 0,
    sort: str = "code",
    limit: Optional[int] = None,
) -> List[FunctionAnalysisResult]:
    """Filter by ``total >= min_lines``, sort, then keep the first ``limit``."""
    kept = [result for result in results if result.total >= min_lines]
    ordered = sort_results(kept, sort)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered
