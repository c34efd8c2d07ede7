"""Batch comparison of solver configurations."""

from .analyzer import DEFAULT_CONFIGS, AlgorithmConfig, AnalysisReport, run_analysis, run_single
from .summary import AlgorithmSummary, summarize

__all__ = [
    "AlgorithmConfig",
    "AlgorithmSummary",
    "AnalysisReport",
    "DEFAULT_CONFIGS",
    "run_analysis",
    "run_single",
    "summarize",
]
