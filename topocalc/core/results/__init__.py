"""
Result classes for topographic computations.

This module provides the output data structures:
- DistanceResult: Length of one polygon edge
- TraverseResult: Compensated traverse with closing errors
- HelmertResult: Fitted parameters, residuals and RMSE
"""

from .computation_result import (
    DistanceResult,
    ClosingError,
    AngularError,
    TraverseResult,
    HelmertParameters,
    HelmertResidual,
    HelmertResult,
)

__all__ = [
    "DistanceResult",
    "ClosingError",
    "AngularError",
    "TraverseResult",
    "HelmertParameters",
    "HelmertResidual",
    "HelmertResult",
]
