"""
Tests for the corrboot exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via CorrbootError)
    - Diagnostic attributes on UnknownColumnError, DegenerateInputError
    - Default attribute values (None for optional attributes)
"""

import pytest

from corrboot.core.exceptions import (
    CorrbootError,
    DegenerateInputError,
    DimensionError,
    InvalidInputError,
    NumericalError,
    UnknownColumnError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via CorrbootError."""

    @pytest.mark.parametrize("exc", [
        ValidationError, InvalidInputError, DimensionError,
        NumericalError, DegenerateInputError,
    ])
    def test_is_corrboot_error(self, exc):
        with pytest.raises(CorrbootError):
            raise exc("boom")

    def test_unknown_column_is_corrboot_error(self):
        with pytest.raises(CorrbootError):
            raise UnknownColumnError("no column 'z'", column='z')

    def test_dimension_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            raise DimensionError("length mismatch")

    def test_unknown_column_is_validation_not_invalid_input(self):
        err = UnknownColumnError("missing", column='z')
        assert isinstance(err, ValidationError)
        assert not isinstance(err, InvalidInputError)

    def test_degenerate_is_numerical_not_validation(self):
        err = DegenerateInputError("zero variance")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestUnknownColumnError:

    def test_attributes(self):
        err = UnknownColumnError(
            "DataSource has no column 'income'",
            column='income',
            available=['age', 'localism'],
        )
        assert err.column == 'income'
        assert err.available == ('age', 'localism')
        assert "income" in str(err)

    def test_defaults(self):
        err = UnknownColumnError("missing")
        assert err.column is None
        assert err.available == ()


class TestDegenerateInputError:

    def test_all_attributes(self):
        err = DegenerateInputError(
            "x has zero variance", variable='x', n=12, replicate=7,
        )
        assert str(err) == "x has zero variance"
        assert err.variable == 'x'
        assert err.n == 12
        assert err.replicate == 7

    def test_defaults_are_none(self):
        err = DegenerateInputError("degenerate")
        assert err.variable is None
        assert err.n is None
        assert err.replicate is None
