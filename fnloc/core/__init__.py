from fnloc.core.engine import AnalysisEngine, AnalysisReport

__all__ = ["AnalysisEngine", "AnalysisReport"]
