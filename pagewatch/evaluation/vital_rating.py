from enum import Enum
from typing import Dict, Tuple
from ..config import DEFAULT_RATING_BOUNDS


class VitalRating(Enum):
    """Page-experience band of a single vital"""
    GOOD = 'good'
    NEEDS_IMPROVEMENT = 'needs-improvement'
    POOR = 'poor'


def rate_vital(name: str, value: float,
               bounds: Dict[str, Tuple[float, float]] = None) -> VitalRating:
    """Classify ``value`` of vital ``name`` (lcp, fid, cls, fcp, ttfb)"""
    bounds = bounds or DEFAULT_RATING_BOUNDS
    if name not in bounds:
        raise KeyError(f"No rating bounds for vital: {name}")

    good, poor = bounds[name]
    if value <= good:
        return VitalRating.GOOD
    if value <= poor:
        return VitalRating.NEEDS_IMPROVEMENT
    return VitalRating.POOR
