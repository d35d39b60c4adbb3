"""
Spectral analysis of the summed signal.

`analyze` is the fast path used by the pipeline; `direct_dft` evaluates the
transform straight from its definition and serves as the reference the fast
result is checked against.
"""
import logging

import numpy as np
from scipy import fft as sp_fft

from sine_spectrum.exceptions import AnalysisError

logger = logging.getLogger(__name__)


def _as_samples(samples) -> np.ndarray:
    # Always a fresh buffer, the transform never sees the caller's array
    buffer = np.array(samples, dtype=np.float64, copy=True)
    if buffer.ndim != 1:
        raise AnalysisError(f"expected a 1-D sample buffer, got shape {buffer.shape}")
    if not np.all(np.isfinite(buffer)):
        raise AnalysisError("sample buffer contains NaN or infinite values")
    return buffer


def analyze(samples) -> np.ndarray:
    """
    Full N-bin DFT of a real sample buffer.

    Bin k equals sum(samples[x] * exp(-2j*pi*k*x/N)). Bins past N/2 are the
    conjugate mirror of the lower half and are returned as well.
    """
    buffer = _as_samples(samples)
    if buffer.size == 0:
        return np.zeros(0, dtype=np.complex128)

    try:
        spectrum = sp_fft.fft(buffer)
    except (ValueError, MemoryError) as err:
        raise AnalysisError(f"transform of {buffer.size} samples failed: {err}") from err

    logger.debug("Transformed %d samples", buffer.size)
    return spectrum.astype(np.complex128, copy=False)


def magnitudes(spectrum) -> np.ndarray:
    spectrum = np.asarray(spectrum, dtype=np.complex128)
    return np.sqrt(spectrum.real ** 2 + spectrum.imag ** 2)


def half_spectrum(values) -> np.ndarray:
    """Bins 0 .. N/2-1, the part of a real signal's spectrum that is not mirrored."""
    values = np.asarray(values)
    return values[:len(values) // 2]


def direct_dft(samples) -> np.ndarray:
    buffer = _as_samples(samples)
    N = buffer.size
    if N == 0:
        return np.zeros(0, dtype=np.complex128)

    n = np.arange(N)
    k = n.reshape((N, 1))
    e = np.exp(-2j * np.pi * k * n / N)
    return e @ buffer


def relative_error(reference, result) -> float:
    """Relative L2 distance of `result` from `reference`."""
    reference = np.asarray(reference, dtype=np.complex128)
    result = np.asarray(result, dtype=np.complex128)
    if reference.shape != result.shape:
        raise AnalysisError(f"cannot compare spectra of shapes {reference.shape} and {result.shape}")

    norm = np.linalg.norm(reference)
    diff = np.linalg.norm(result - reference)
    if norm == 0:
        return float(diff)
    return float(diff / norm)
