from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from fnloc.analysis.aggregate import FunctionAnalysisResult, analyze_all_files
from fnloc.config import Config
from fnloc.utils.files import find_rust_files


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    results: List[FunctionAnalysisResult]
    files_analyzed: int
    errors: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def files_skipped(self) -> int:
        return len(self.errors)


class AnalysisEngine:
    """
    Runs the analysis over a directory tree.

    Files are discovered, analyzed one by one (or on a thread pool when
    ``scan.jobs`` is above 1) and their records concatenated in discovery
    order. A file that cannot be read or parsed is skipped and reported in
    ``AnalysisReport.errors``.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config.default()
        self.qualify_names = bool(self.config.report().get("qualify_names", True))

    def discover(self, target: Optional[str] = None) -> List[str]:
        return find_rust_files(target or self.config.directory(), self.config.ignored_dirs())

    def analyze(self, target: Optional[str] = None) -> AnalysisReport:
        start_time = time.time()
        files = self.discover(target)
        logger.debug("Found %d Rust files", len(files))
        return self.analyze_files(files, start_time=start_time)

    def analyze_files(self, files: Iterable[str], start_time: Optional[float] = None) -> AnalysisReport:
        start_time = time.time() if start_time is None else start_time
        files = list(files)
        jobs = self.config.jobs()
        if jobs > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=jobs) as executor:
                outcomes = list(executor.map(self._analyze_file, files))
        else:
            outcomes = [self._analyze_file(path) for path in files]

        results: List[FunctionAnalysisResult] = []
        errors: List[str] = []
        for file_results, file_errors in outcomes:
            results.extend(file_results)
            errors.extend(file_errors)

        return AnalysisReport(
            results=results,
            files_analyzed=len(files) - len(errors),
            errors=errors,
            elapsed_seconds=round(time.time() - start_time, 3),
        )

    def _analyze_file(self, path: str) -> Tuple[List[FunctionAnalysisResult], List[str]]:
        errors: List[str] = []
        results = analyze_all_files([path], qualify_names=self.qualify_names, errors=errors)
        return results, errors
