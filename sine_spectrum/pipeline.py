"""
Composite sine signal to PNG.

Two sine components and their sum are drawn in three bands, the spectrum of
the sum as bars along the bottom of the plot.
"""
from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional

import numpy as np

from sine_spectrum import gen_signal, mapping, spectrum
from sine_spectrum.canvas import Canvas
from sine_spectrum.config import BLACK, BLUE, PlotConfig

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    waveforms: gen_signal.Waveforms
    spectrum: np.ndarray
    magnitudes: np.ndarray
    output_path: str


def draw_decorations(canvas, config):
    canvas.draw_frame(config.left, config.top, config.right, config.bottom, BLUE)
    for baseline in config.baselines:
        canvas.draw_line(config.left, baseline, config.right, baseline, BLACK)


def draw_waveforms(canvas, config, waveforms, bands):
    traces = [
        mapping.trace(band, (band.offset(value) for value in series), config.left)
        for band, series in zip(bands, waveforms)
    ]
    # Column by column, A then B then the sum
    for segments in zip(*traces):
        for band, segment in zip(bands, segments):
            canvas.draw_segment(segment, band.color)


def draw_spectrum(canvas, config, magnitudes, band):
    shown = spectrum.half_spectrum(magnitudes)
    offsets = []
    for x, mag in enumerate(shown):
        print(f"{x:2d} {mag:11.7f}")
        offsets.append(band.offset(mag, config.n_points))

    for segment in mapping.bars(band, offsets, config.left):
        canvas.draw_segment(segment, band.color)


def run(config: Optional[PlotConfig] = None, canvas: Optional[Canvas] = None) -> PipelineResult:
    config = (config or PlotConfig()).validate()
    n = config.n_points
    logger.debug("Running with %s", config)

    print(f"Creating {config.width} by {config.height} image.")
    # A canvas passed in stays open for the caller
    owned = Canvas(config.width, config.height) if canvas is None else nullcontext(canvas)

    with owned as canvas:
        draw_decorations(canvas, config)
        *time_bands, spectrum_band = mapping.bands(config)

        waveforms = gen_signal.generate(n, config.wave_period_a, config.wave_period_b)
        draw_waveforms(canvas, config, waveforms, time_bands)
        logger.info("Generated %d samples (periods %s and %s)", n, config.wave_period_a, config.wave_period_b)

        bins = spectrum.analyze(waveforms.total)
        mags = spectrum.magnitudes(bins)
        draw_spectrum(canvas, config, mags, spectrum_band)

        print(f"Creating output file '{config.output_path}'.")
        path = canvas.save(config.output_path)

    return PipelineResult(waveforms, bins, mags, path)
