"""
Shared compute infrastructure for corrboot.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from corrboot.core.compute.timing import Timer

__all__ = [
    "Timer",
]
