"""
Single-tone frequency detector.

The detector transforms one window of samples with a forward FFT, finds the
strongest pair of adjacent bins in the positive-frequency half and returns the
magnitude-weighted average of their frequencies. The weighting moves the
estimate towards the stronger bin, which gives sub-bin resolution without a
window function or zero-padding.
"""

import math
from enum import Enum

import numpy as np

from .constants import MIN_SAMPLE_COUNT, MIN_SAMPLE_RATE, NOISE_FLOOR
from .errors import NansFound, SampleCountMismatch, SampleRateTooLow, TooFewSamples
from .transform import FftPlan, FftPlanner, default_planner


class InterpolationMode(Enum):
    """How the two bins used for interpolation are chosen."""

    SLIDING_WINDOW = "sliding_window"  # Strongest adjacent pair (default)
    STRONGEST_NEIGHBORS = "strongest_neighbors"  # Peak bin + its stronger neighbor


class FreqDetector:
    """
    Frequency detector for fixed-size sample buffers.

    A detector is created once for a (sample_rate, sample_count) pair and then
    fed buffers of exactly `sample_count` samples. Calls to `detect` share only
    the immutable FFT plan, so one detector can serve several threads.

    Example:
        >>> detector = FreqDetector(44100, 4096)
        >>> t = np.arange(4096) / 44100
        >>> round(detector.detect(np.sin(2 * np.pi * 440 * t)))
        440
    """

    def __init__(
        self,
        sample_rate: int,
        sample_count: int,
        planner: FftPlanner | None = None,
        mode: InterpolationMode = InterpolationMode.SLIDING_WINDOW,
    ):
        """
        Initialize detector.

        Args:
            sample_rate: Audio sample rate in Hz (44100 for most applications)
            sample_count: Samples per detection call, also the FFT length.
                2048-8192 work well; more samples give better accuracy at
                the cost of latency.
            planner: FFT planner to take the plan from (numpy by default)
            mode: Bin selection used for interpolation

        Raises:
            SampleRateTooLow: if sample_rate < 1
            TooFewSamples: if sample_count < 4
        """
        if sample_rate < MIN_SAMPLE_RATE:
            raise SampleRateTooLow(sample_rate)
        if sample_count < MIN_SAMPLE_COUNT:
            raise TooFewSamples(sample_count)

        if planner is None:
            planner = default_planner()

        self._sample_rate = int(sample_rate)
        self._sample_count = int(sample_count)
        self._mode = InterpolationMode(mode)
        self._plan = planner.plan_forward(self._sample_count)

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def sample_count(self) -> int:
        return self._sample_count

    @property
    def mode(self) -> InterpolationMode:
        return self._mode

    @property
    def plan(self) -> FftPlan:
        return self._plan

    @property
    def frequency_resolution(self) -> float:
        """Width of one FFT bin in Hz."""
        return self._sample_rate / self._sample_count

    def bin_to_frequency(self, bin_index: int) -> float:
        """Center frequency of an FFT bin in Hz."""
        return bin_index * self._sample_rate / self._sample_count

    def detect(self, samples) -> float:
        """
        Detect the dominant frequency in a buffer of samples.

        Args:
            samples: 1-D sequence of exactly `sample_count` samples

        Returns:
            Detected frequency in Hz, or 0.0 if the buffer holds no
            significant energy

        Raises:
            SampleCountMismatch: if the buffer length is not `sample_count`
            NansFound: if the samples produce a non-finite estimate
        """
        samples = np.asarray(samples, dtype=np.float32)
        if samples.ndim != 1:
            raise ValueError(f"Expected 1-D samples, got shape {samples.shape}")
        if len(samples) != self._sample_count:
            raise SampleCountMismatch(self._sample_count, len(samples))

        spectrum = samples.astype(np.complex64)
        self._plan.process(spectrum)

        # Upper half mirrors the lower one for real input
        mags = np.abs(spectrum[: self._sample_count // 2])

        if self._mode is InterpolationMode.SLIDING_WINDOW:
            low, high = self._peak_window(mags)
        else:
            low, high = self._strongest_neighbors(mags)

        mag_low = float(mags[low])
        mag_high = float(mags[high])
        combined = mag_low + mag_high
        if combined < NOISE_FLOOR:
            return 0.0

        freq = (
            self.bin_to_frequency(low) * mag_low
            + self.bin_to_frequency(high) * mag_high
        ) / combined
        if not math.isfinite(freq):
            raise NansFound()
        return freq

    def _peak_window(self, mags: np.ndarray) -> tuple[int, int]:
        """Adjacent bin pair with the largest summed magnitude, first one wins."""
        scores = mags[:-1] + mags[1:]
        k = int(np.argmax(scores))
        return k, k + 1

    def _strongest_neighbors(self, mags: np.ndarray) -> tuple[int, int]:
        """Strongest bin and whichever of its neighbors is stronger."""
        peak = int(np.argmax(mags))
        candidates = [peak]
        if peak > 0:
            candidates.append(peak - 1)
        if peak < len(mags) - 1:
            candidates.append(peak + 1)

        # Stable sort keeps the peak first on equal magnitudes
        candidates.sort(key=lambda i: mags[i], reverse=True)
        first, second = candidates[:2]
        return min(first, second), max(first, second)

    def __repr__(self) -> str:
        return (
            f"FreqDetector(sample_rate={self._sample_rate}, "
            f"sample_count={self._sample_count}, mode={self._mode.name})"
        )
