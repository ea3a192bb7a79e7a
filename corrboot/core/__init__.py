"""
Core infrastructure for corrboot.

This module provides shared abstractions and utilities used by the
domain-specific submodules (descriptive, montecarlo).

Key components:
    datasource: DataSource, the in-memory named-column dataset handle
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from corrboot.core.datasource import DataSource
from corrboot.core.result import Result
from corrboot.core.exceptions import (
    CorrbootError,
    ValidationError,
    InvalidInputError,
    DimensionError,
    UnknownColumnError,
    NumericalError,
    DegenerateInputError,
)

__all__ = [
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "CorrbootError",
    "ValidationError",
    "InvalidInputError",
    "DimensionError",
    "UnknownColumnError",
    "NumericalError",
    "DegenerateInputError",
]
