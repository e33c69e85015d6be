"""
Domain models and value objects.

Contains share entities (EncodedShare, SharePoint, ShareSet) and the
reconstruction report.
"""

from src.core.domain.report import ReconstructionReport
from src.core.domain.shares import (
    EncodedShare,
    SharePoint,
    ShareKeys,
    ShareSet,
)

__all__ = [
    # Shares
    "EncodedShare",
    "SharePoint",
    "ShareKeys",
    "ShareSet",
    # Report
    "ReconstructionReport",
]
