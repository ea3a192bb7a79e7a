"""Compute backends for bootstrap resampling."""

from corrboot.montecarlo.backends.cpu import CPUBootstrapBackend

__all__ = ["CPUBootstrapBackend"]
