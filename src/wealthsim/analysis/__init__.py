"""
Analysis layer: derived quantities for reporting.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
"""

from wealthsim.analysis.inequality import (
    DistributionSummary,
    wealth_variance,
    gini_coefficient,
    top_share,
    summarize_distribution,
)

__all__ = [
    "DistributionSummary",
    "wealth_variance",
    "gini_coefficient",
    "top_share",
    "summarize_distribution",
]
