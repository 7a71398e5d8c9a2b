"""
Debug script: plot the spectrum the detector sees and what it picks.

Either synthesizes a test tone or loads a recording saved with np.save, runs
FreqDetector on the first BUFFER_SIZE samples and saves a plot of the
positive-frequency magnitudes with the peak window and the interpolated
frequency marked.

Usage:
    python scripts/plot_spectrum.py                # 440 Hz test tone
    python scripts/plot_spectrum.py recording.npy  # first window of a recording
"""

import sys

import matplotlib
import numpy as np

matplotlib.use('Agg')
import matplotlib.pyplot as plt

from freq_detector import BUFFER_SIZE, SAMPLE_RATE, FreqDetector


def make_test_tone(frequency: float = 440.0, sample_count: int = BUFFER_SIZE) -> np.ndarray:
    """Tone with two weaker low-frequency interferers."""
    t = np.arange(sample_count) / SAMPLE_RATE
    return (
        np.sin(2 * np.pi * frequency * t)
        + 0.5 * np.sin(2 * np.pi * 100.0 * t)
        + 0.5 * np.sin(2 * np.pi * 120.0 * t)
    ).astype(np.float32)


def plot_spectrum(samples: np.ndarray, output_file: str, sample_rate: int = SAMPLE_RATE):
    """Plot positive-half magnitudes around the detected frequency."""
    detector = FreqDetector(sample_rate, len(samples))
    detected = detector.detect(samples)

    # Same transform the detector runs
    spectrum = samples.astype(np.complex64)
    detector.plan.process(spectrum)
    half = len(samples) // 2
    mags = np.abs(spectrum[:half])
    freqs = np.array([detector.bin_to_frequency(k) for k in range(half)])

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8))

    ax1.semilogy(freqs, mags + 1e-12, 'b-', linewidth=0.5, alpha=0.8)
    ax1.axvline(detected, color='red', linestyle='-', linewidth=1.5, label=f'Detected: {detected:.2f} Hz')
    ax1.set_title(f'Full spectrum ({len(samples)} samples at {sample_rate} Hz)')
    ax1.set_xlabel('Frequency (Hz)')
    ax1.set_ylabel('Magnitude (log)')
    ax1.legend(loc='upper right')
    ax1.grid(True, alpha=0.3)

    # Zoom on a few bins either side of the estimate
    width = detector.frequency_resolution * 8
    valid = (freqs >= detected - width) & (freqs <= detected + width)
    ax2.stem(freqs[valid], mags[valid])
    ax2.axvline(detected, color='red', linestyle='-', linewidth=1.5)
    ax2.set_title(f'Bins around {detected:.2f} Hz (bin width {detector.frequency_resolution:.2f} Hz)')
    ax2.set_xlabel('Frequency (Hz)')
    ax2.set_ylabel('Magnitude')
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_file, dpi=100)
    plt.close()
    print(f'Saved: {output_file}')


if __name__ == '__main__':
    if len(sys.argv) > 1:
        audio = np.load(sys.argv[1]).astype(np.float32)
        if audio.ndim > 1:
            audio = audio[:, 0]
        samples = audio[:BUFFER_SIZE]
    else:
        samples = make_test_tone()
    plot_spectrum(samples, 'spectrum.png')
    print('Done!')
