"""
Exceptions raised by the frequency detector.

Construction errors mean the detector was misconfigured and must be rebuilt
with different parameters. Detect errors are per call and leave the detector
usable.
"""


class FreqDetectorError(Exception):
    """Base class for all detector errors."""


class ConstructionError(FreqDetectorError, ValueError):
    """Detector could not be created from the given parameters."""


class SampleRateTooLow(ConstructionError):
    def __init__(self, sample_rate: int):
        self.sample_rate = sample_rate
        super().__init__("Detector does not support sample rate < 1 sample per second")


class TooFewSamples(ConstructionError):
    def __init__(self, sample_count: int):
        self.sample_count = sample_count
        super().__init__("Needs at least 4 samples for detection")


class DetectError(FreqDetectorError):
    """A single detection call failed."""


class SampleCountMismatch(DetectError, ValueError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid sample count passed (expected {expected}, passed {actual})"
        )


class NansFound(DetectError):
    def __init__(self):
        super().__init__("NaNs in the samples")
