"""
Analytics package exports.
"""

from srs_trainer.analytics.service import build_dashboard
from srs_trainer.analytics.types import DashboardData

__all__ = [
    "build_dashboard",
    "DashboardData",
]
