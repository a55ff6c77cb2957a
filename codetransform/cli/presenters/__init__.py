"""Presenters for CLI output formatting.

Presenters format compile results, the cipher reference and batch summaries
for display on a rich console.
"""

from .batch_summary import BatchSummaryPresenter
from .reference import ReferencePresenter
from .result import ResultPresenter

__all__ = ["BatchSummaryPresenter", "ReferencePresenter", "ResultPresenter"]
