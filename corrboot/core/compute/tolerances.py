"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing corrboot output against a
reference:
- CPU FP64: the hand-rolled correlation against numpy.corrcoef / R cor()
- Reference correlation: the agreement callers may rely on for real data
- Monte Carlo: agreement between bootstrap summaries from different seeds

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Same formula, same precision: differences are summation-order noise
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches numpy/R to rounding',
)

# Guaranteed agreement with a platform correlation primitive on real data
REFERENCE_CORRELATION = ToleranceTier(
    rtol=0.0,
    atol=1e-4,
    name='reference_correlation',
    description='Manual Pearson vs library correlation, absolute 1e-4',
)

# Bootstrap summaries under different seeds: sampling noise, not rounding
MONTE_CARLO = ToleranceTier(
    rtol=0.15,
    atol=0.01,
    name='monte_carlo',
    description='Seed-to-seed variation of bootstrap summaries',
)
