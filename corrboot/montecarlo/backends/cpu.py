"""
CPU backend for paired-variable bootstrap.

CPUBootstrapBackend: ordinary nonparametric bootstrap, one sequential loop
driven by a single seeded generator.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from corrboot.core.result import Result
from corrboot.core.compute.timing import Timer
from corrboot.core.exceptions import DegenerateInputError
from corrboot.montecarlo._common import BootParams
from corrboot.montecarlo.design import BootstrapDesign


class CPUBootstrapBackend:
    """
    CPU backend for bootstrap resampling.

    Stateless: every call to solve() builds its own generator from the
    design's seed, so repeated or interleaved runs never interfere.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        estimator = design.estimator
        n_sim = design.n_sim
        n = design.n

        # Statistic on original data. A degenerate column fails here,
        # before any resampling.
        with timer.section('point_estimate'):
            t0 = float(estimator(x, y))

        rng = np.random.default_rng(design.seed)
        samples = np.empty(n_sim, dtype=np.float64)

        with timer.section('bootstrap_replicates'):
            self._ordinary_bootstrap(x, y, estimator, n_sim, n, rng, samples)

        samples.flags.writeable = False

        with timer.section('summary_statistics'):
            bias = float(np.mean(samples) - t0)
            se = float(np.std(samples, ddof=1)) if n_sim > 1 else float('nan')

        warns = []
        if n_sim == 1:
            msg = "Single bootstrap replicate: standard error is undefined (NaN)"
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            warns.append(msg)

        timer.stop()

        params = BootParams(
            point_estimate=t0,
            samples=samples,
            n_sim=n_sim,
            bias=bias,
            se=se,
        )

        return Result(
            params=params,
            info={
                'sim': 'ordinary',
                'n': n,
                'n_sim': n_sim,
                'col_x': design.col_x,
                'col_y': design.col_y,
                'seed': design.seed,
                'rng': type(rng.bit_generator).__name__,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warns),
        )

    def _ordinary_bootstrap(
        self,
        x: NDArray,
        y: NDArray,
        estimator,
        n_sim: int,
        n: int,
        rng: np.random.Generator,
        samples: NDArray,
    ) -> None:
        """Ordinary nonparametric bootstrap (rows sampled with replacement)."""
        for b in range(n_sim):
            indices = rng.choice(n, size=n, replace=True)
            try:
                samples[b] = estimator(x[indices], y[indices])
            except DegenerateInputError as e:
                raise DegenerateInputError(
                    f"Bootstrap replicate {b} of {n_sim} is degenerate: {e}",
                    variable=e.variable,
                    n=e.n,
                    replicate=b,
                ) from e
