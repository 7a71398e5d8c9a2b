"""
freq_detector - Dominant frequency detection for fixed-size sample buffers
"""

from .constants import BUFFER_SIZE, NOISE_FLOOR, SAMPLE_RATE
from .detector import FreqDetector, InterpolationMode
from .errors import (
    ConstructionError,
    DetectError,
    FreqDetectorError,
    NansFound,
    SampleCountMismatch,
    SampleRateTooLow,
    TooFewSamples,
)
from .transform import FftPlan, FftPlanner, NumpyFftPlanner, ScipyFftPlanner

__version__ = "0.1.0"
__all__ = [
    "FreqDetector",
    "InterpolationMode",
    "FftPlan",
    "FftPlanner",
    "NumpyFftPlanner",
    "ScipyFftPlanner",
    "FreqDetectorError",
    "ConstructionError",
    "SampleRateTooLow",
    "TooFewSamples",
    "DetectError",
    "SampleCountMismatch",
    "NansFound",
    "SAMPLE_RATE",
    "BUFFER_SIZE",
    "NOISE_FLOOR",
]
