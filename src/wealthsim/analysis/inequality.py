"""
Inequality measures over a wealth vector.

Agents start equal, so every measure here starts at zero and grows as
trading concentrates wealth:
- variance: spread around the mean
- Gini coefficient: 0 = perfect equality, → 1 = one agent owns everything
- top share: fraction of the total held by the richest agents
- skewness: long right tail of a few rich agents
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
import math

import numpy as np
from scipy import stats


@dataclass
class DistributionSummary:
    """Snapshot statistics of a wealth distribution."""

    n_agents: int
    total: float
    mean: float
    min: float
    max: float
    variance: float
    gini: float
    top_share: float  # Share held by the richest decile (at least one agent)
    skewness: float

    def to_dict(self) -> dict:
        return asdict(self)


def wealth_variance(wealth) -> float:
    """Population variance (ddof=0)."""
    w = np.asarray(wealth, dtype=np.float64)
    if w.size == 0:
        return 0.0
    return float(w.var())


def gini_coefficient(wealth) -> float:
    """
    Gini coefficient of a wealth vector.

    Uses the sorted-rank formula:
        G = (2 Σ i·w_(i) - (n + 1) Σ w) / (n Σ w),  i = 1..n

    Returns 0 for empty vectors and vectors with zero total.
    """
    w = np.sort(np.asarray(wealth, dtype=np.float64))
    n = w.size
    if n == 0:
        return 0.0
    total = w.sum()
    if total == 0:
        return 0.0
    ranks = np.arange(1, n + 1)
    return float((2.0 * np.sum(ranks * w) - (n + 1) * total) / (n * total))


def top_share(wealth, fraction: float = 0.1) -> float:
    """
    Share of total wealth held by the richest `fraction` of agents.

    At least one agent is always counted.
    """
    if not 0.0 < fraction <= 1.0:
        raise ValueError(f"fraction must be in (0, 1], got {fraction}")
    w = np.sort(np.asarray(wealth, dtype=np.float64))[::-1]
    if w.size == 0:
        return 0.0
    total = w.sum()
    if total == 0:
        return 0.0
    k = max(1, math.ceil(fraction * w.size))
    return float(w[:k].sum() / total)


def summarize_distribution(wealth, top_fraction: float = 0.1) -> DistributionSummary:
    """Compute all inequality measures at once."""
    w = np.asarray(wealth, dtype=np.float64)
    if w.size == 0:
        raise ValueError("cannot summarize an empty wealth vector")

    variance = wealth_variance(w)
    # skew is undefined (nan) for a constant vector; equal wealth has no tail
    skewness = float(stats.skew(w)) if variance > 0 else 0.0

    return DistributionSummary(
        n_agents=int(w.size),
        total=float(w.sum()),
        mean=float(w.mean()),
        min=float(w.min()),
        max=float(w.max()),
        variance=variance,
        gini=gini_coefficient(w),
        top_share=top_share(w, top_fraction),
        skewness=skewness,
    )
