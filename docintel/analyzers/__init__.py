"""
Analyzers Module.
Model-backed summaries, keywords, insights and questions.
"""

from .insight import InsightAnalyzer
from .summary import SummaryAnalyzer, SummaryOptions

__all__ = [
    "InsightAnalyzer",
    "SummaryAnalyzer",
    "SummaryOptions",
]
