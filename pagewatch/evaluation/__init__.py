"""
Threshold evaluation and vital ratings
"""

from .threshold_evaluator import ThresholdEvaluator
from .vital_rating import VitalRating, rate_vital

__all__ = [
    'ThresholdEvaluator',
    'VitalRating',
    'rate_vital'
]
