"""
Print the dominant frequency heard by the default microphone.

Reads blocks of BUFFER_SIZE samples from the default input device, keeps the
first channel (usually left) and prints one detected frequency per block.
Stop with Ctrl+C.

Usage:
    python scripts/from_mic.py
"""

import sounddevice as sd

from freq_detector import BUFFER_SIZE, FreqDetector


def main() -> None:
    device = sd.query_devices(kind="input")
    sample_rate = int(device["default_samplerate"])
    channels = device["max_input_channels"]

    detector = FreqDetector(sample_rate, BUFFER_SIZE)
    print(f"Listening on {device['name']} at {sample_rate}Hz ({BUFFER_SIZE} samples per block)")

    with sd.InputStream(samplerate=sample_rate, channels=channels, dtype="float32") as stream:
        while True:
            data, overflowed = stream.read(BUFFER_SIZE)
            if overflowed:
                print("Warning: input overflow, samples were dropped")
            print(f"{detector.detect(data[:, 0]):.2f}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nDone!")
