"""
Spectral transform provider.

A planner hands out forward FFT plans of a fixed length. A plan transforms a
complex buffer of exactly that length in place. The detector only depends on
`FftPlanner.plan_forward` and `FftPlan.process`, so any FFT backend with the
same two operations can be substituted.
"""

from typing import Protocol

import numpy as np
import scipy.fft


class FftPlan(Protocol):
    """Forward complex-to-complex transform of a fixed length."""

    length: int

    def process(self, buffer: np.ndarray) -> None: ...


class FftPlanner(Protocol):
    """Factory for forward transform plans."""

    def plan_forward(self, length: int) -> FftPlan: ...


def _check_buffer(buffer: np.ndarray, length: int):
    if not isinstance(buffer, np.ndarray) or not np.iscomplexobj(buffer):
        raise ValueError("FFT buffer must be a complex numpy array")
    if buffer.shape != (length,):
        raise ValueError(
            f"FFT buffer has shape {buffer.shape}, plan expects ({length},)"
        )


class NumpyFftPlan:
    """Forward FFT of a fixed length backed by numpy.fft."""

    def __init__(self, length: int):
        self.length = length

    def process(self, buffer: np.ndarray) -> None:
        _check_buffer(buffer, self.length)
        buffer[:] = np.fft.fft(buffer)

    def __repr__(self) -> str:
        return f"NumpyFftPlan(length={self.length})"


class ScipyFftPlan:
    """Forward FFT of a fixed length backed by scipy.fft."""

    def __init__(self, length: int, workers: int | None = None):
        self.length = length
        self.workers = workers

    def process(self, buffer: np.ndarray) -> None:
        _check_buffer(buffer, self.length)
        # scipy keeps single precision, so complex64 buffers stay complex64
        buffer[:] = scipy.fft.fft(buffer, workers=self.workers)

    def __repr__(self) -> str:
        return f"ScipyFftPlan(length={self.length}, workers={self.workers})"


class _CachingPlanner:
    """Planner that reuses one plan per transform length."""

    def __init__(self):
        self._plans: dict[int, FftPlan] = {}

    def _make_plan(self, length: int) -> FftPlan:
        raise NotImplementedError

    def plan_forward(self, length: int) -> FftPlan:
        """
        Get a forward transform plan for `length` samples.

        Args:
            length: Transform length (number of complex samples)

        Returns:
            Plan whose `process` transforms buffers of that length in place
        """
        if length < 1:
            raise ValueError(f"FFT length must be positive, got {length}")
        plan = self._plans.get(length)
        if plan is None:
            plan = self._make_plan(length)
            self._plans[length] = plan
        return plan


class NumpyFftPlanner(_CachingPlanner):
    def _make_plan(self, length: int) -> FftPlan:
        return NumpyFftPlan(length)


class ScipyFftPlanner(_CachingPlanner):
    """
    Planner for scipy.fft plans.

    Args:
        workers: Number of threads scipy may use per transform (None = 1)
    """

    def __init__(self, workers: int | None = None):
        super().__init__()
        self.workers = workers

    def _make_plan(self, length: int) -> FftPlan:
        return ScipyFftPlan(length, workers=self.workers)


_DEFAULT_PLANNER = NumpyFftPlanner()


def default_planner() -> FftPlanner:
    """Shared planner used when a detector is created without one."""
    return _DEFAULT_PLANNER
