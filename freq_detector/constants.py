"""
Constants for frequency detection.
"""

# Audio settings
SAMPLE_RATE = 44100  # Hz
BUFFER_SIZE = 4096  # Samples per detection window (2048-8192 work well)

# Construction limits
MIN_SAMPLE_RATE = 1
MIN_SAMPLE_COUNT = 4  # One bin on each side of a peak in the positive half

# Combined magnitude of the peak window below which nothing is detected.
# Calibrated for 32-bit float samples in [-1.0, 1.0].
NOISE_FLOOR = 0.0001
