"""
Generic result container for corrboot computations.

The Result class is the envelope every computation returns. It keeps the
domain payload separate from timing, metadata and provenance so that shared
tooling can inspect any result the same way.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (n, n_sim, seed, rng algorithm)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions that determine the exact numeric output of a run."""
    from corrboot import __version__

    return {
        'corrboot_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (point estimate, replicates, ...)
        info: Structured metadata (n, n_sim, columns, seed)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library and interpreter versions used

    Examples:
        >>> Result(
        ...     params=BootParams(...),
        ...     info={'n': 2421, 'n_sim': 1000, 'seed': 314159},
        ...     timing={'total_seconds': 0.4, 'bootstrap_replicates': 0.39},
        ...     backend_name='cpu_bootstrap'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
