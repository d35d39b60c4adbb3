from typing import NamedTuple, Tuple

import numpy as np


class SineComponent(NamedTuple):
    """One sampled sine wave: `amplitude * sin(2*pi*x/period + phase)`."""
    period: float
    amplitude: float = 1.0
    phase: float = 0.0

    def sample(self, x):
        return self.amplitude * np.sin(2 * np.pi * (x / self.period) + self.phase)


class Waveforms(NamedTuple):
    a: np.ndarray
    b: np.ndarray
    total: np.ndarray


def components(period_a, period_b) -> Tuple[SineComponent, SineComponent]:
    # B runs at a quarter of the amplitude, a quarter turn ahead
    return SineComponent(period_a), SineComponent(period_b, 0.25, np.pi / 2)


def generate(n, period_a, period_b) -> Waveforms:
    if n < 0:
        raise ValueError(f"sample count must not be negative, got {n}")

    wave_a, wave_b = components(period_a, period_b)
    x = np.arange(n)

    signal_a = wave_a.sample(x)
    signal_b = wave_b.sample(x)

    total = np.zeros(n, dtype=np.float64)
    np.add(signal_a, signal_b, out=total)

    return Waveforms(signal_a, signal_b, total)

