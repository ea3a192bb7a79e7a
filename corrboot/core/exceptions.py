"""
Exception hierarchy for corrboot.

All exceptions inherit from CorrbootError so callers can catch any
library-specific error in one place. Input problems derive from
ValidationError and are raised before any computation starts; numerical
problems derive from NumericalError and are raised where they occur.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class CorrbootError(Exception):
    """Base exception for all corrboot errors."""
    pass


class ValidationError(CorrbootError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidInputError(ValidationError):
    """
    Inputs are structurally unusable.

    Raised for too few observations, non-finite values, a non-positive
    replicate count, or an alpha outside (0, 1).
    """
    pass


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the two analysed variables have different lengths or
    when an input is not one-dimensional.
    """
    pass


class UnknownColumnError(ValidationError):
    """
    A requested column is not present in the dataset.

    Attributes:
        column: The column name that was requested
        available: Column names the dataset does provide
    """

    def __init__(
        self,
        message: str,
        column: str | None = None,
        available: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.column = column
        self.available = tuple(available)


class NumericalError(CorrbootError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    A variable has zero variance, so the correlation is undefined.

    Raised instead of returning NaN. During bootstrap resampling the
    replicate index is attached so the failing draw can be identified.

    Attributes:
        variable: Which variable is constant ('x', 'y', or 'x and y')
        n: Number of observations in the offending sample
        replicate: Bootstrap replicate index, or None for the original data
    """

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        n: int | None = None,
        replicate: int | None = None,
    ):
        super().__init__(message)
        self.variable = variable
        self.n = n
        self.replicate = replicate
