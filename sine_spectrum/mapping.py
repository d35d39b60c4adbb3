"""
Pixel mapping for the plot bands.

Offsets are measured upward from a band's baseline row; image rows grow
downward, so a row is `baseline - offset`. Offsets are not clamped to the
band: a large amplitude draws into the neighbouring band.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple

from sine_spectrum.config import BLUE, GREEN, RED, PlotConfig


class Segment(NamedTuple):
    x: int
    from_y: int
    to_y: int


@dataclass(frozen=True)
class Band:
    name: str
    baseline: int
    scale: float
    color: str
    single_sided: bool = False

    def row(self, offset: int) -> int:
        return self.baseline - offset

    def offset(self, value: float, n_points: int = 0) -> int:
        if self.single_sided:
            return magnitude_offset(value, n_points, self.scale)
        return time_offset(value, self.scale)


def time_offset(value: float, scale: float) -> int:
    # int() truncates toward zero, so the sign is kept
    return int(value * scale)


def magnitude_offset(magnitude: float, n_points: int, scale: float) -> int:
    if n_points <= 0:
        return 0
    return max(int((magnitude / n_points) * scale), 0)


def trace(band: Band, offsets: Iterable[int], left: int = 0) -> Iterator[Segment]:
    """
    Connected waveform: segment x joins the previous offset to offset x.

    The fold starts from the baseline (previous offset 0).
    """
    previous = 0
    for x, offset in enumerate(offsets):
        yield Segment(left + x, band.row(previous), band.row(offset))
        previous = offset


def bars(band: Band, offsets: Iterable[int], left: int = 0) -> Iterator[Segment]:
    for x, offset in enumerate(offsets):
        yield Segment(left + x, band.baseline, band.row(offset))


def bands(config: PlotConfig) -> List[Band]:
    """The three time-domain bands followed by the spectrum band."""
    base_a, base_b, base_sum = config.baselines
    return [
        Band("a", base_a, config.time_scale, BLUE),
        Band("b", base_b, config.time_scale, GREEN),
        Band("sum", base_sum, config.time_scale, RED),
        Band("spectrum", config.spectrum_floor, config.spectrum_scale, RED, single_sided=True),
    ]
